"""Use case: add a player to the leaderboard roster."""
from __future__ import annotations

import logging
from enum import Enum

from application.services.player_fetch_service import PlayerFetchService
from domain.entities import PlayerIdentity
from domain.interfaces import IRosterStore

logger = logging.getLogger(__name__)


class AddPlayerOutcome(Enum):
    ADDED = "added"
    ALREADY_PRESENT = "already_present"


class AddPlayerUseCase:
    """
    Validates locally, checks the roster, confirms the account exists, persists.

    Raises InvalidRiotIdError before any remote call, ResolutionError when the
    account cannot be confirmed, PersistenceError when the roster cannot be
    read or written.
    """

    def __init__(self, roster: IRosterStore, fetch_service: PlayerFetchService):
        self.roster = roster
        self.fetch_service = fetch_service

    async def execute(self, raw: str) -> tuple[AddPlayerOutcome, PlayerIdentity]:
        identity = PlayerIdentity.parse(raw)

        if identity in self.roster.load():
            return AddPlayerOutcome.ALREADY_PRESENT, identity

        await self.fetch_service.resolve_account(identity)

        if not self.roster.upsert(identity):
            # Added by someone else while we were talking to Riot.
            return AddPlayerOutcome.ALREADY_PRESENT, identity
        logger.info(f"roster-add {identity}")
        return AddPlayerOutcome.ADDED, identity
