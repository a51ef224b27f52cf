"""Use case: show the current ranked-solo standing of arbitrary players."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from application.services.player_fetch_service import PlayerFetchService
from core.logging.context import log_context
from domain.entities import LeagueEntry, PlayerIdentity
from domain.errors import InvalidRiotIdError, ResolutionError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RankLookup:
    """Outcome for one requested Riot ID; exactly one of entry/error explains it."""

    raw: str
    identity: Optional[PlayerIdentity] = None
    entry: Optional[LeagueEntry] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class LookupRanksUseCase:
    """Looks players up one by one; each one's failure is reported, not raised."""

    def __init__(self, fetch_service: PlayerFetchService):
        self.fetch_service = fetch_service

    async def execute(self, raw_ids: List[str]) -> List[RankLookup]:
        results: List[RankLookup] = []
        for raw in raw_ids:
            try:
                identity = PlayerIdentity.parse(raw)
            except InvalidRiotIdError as e:
                logger.info(f"Rejected Riot ID {raw!r}")
                results.append(RankLookup(raw=raw, error=e))
                continue

            with log_context(riot_id=identity.riot_id):
                try:
                    entry = await self.fetch_service.fetch_solo_entry(identity)
                except ResolutionError as e:
                    logger.warning(f"Rank lookup failed: {e}")
                    results.append(RankLookup(raw=raw, identity=identity, error=e))
                    continue
            results.append(RankLookup(raw=raw, identity=identity, entry=entry))
        return results
