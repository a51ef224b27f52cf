"""Use case: rank every roster player against each other."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Tuple

from application.services.player_fetch_service import PlayerFetchService
from core.logging.context import log_context
from domain.entities import PlayerIdentity, PlayerStanding
from domain.errors import ResolutionError
from domain.interfaces import IRosterStore
from domain.ranking import sort_standings

logger = logging.getLogger(__name__)


@dataclass
class LeaderboardResult:
    standings: List[PlayerStanding] = field(default_factory=list)
    failures: List[Tuple[PlayerIdentity, ResolutionError]] = field(default_factory=list)
    roster_size: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.standings


class BuildLeaderboardUseCase:
    """
    Fetches every roster player's ranked-solo standing and sorts them.

    Partial failure never aborts the batch:
    - no ranked-solo entry    → kept, as UNRANKED (sorts last)
    - any ResolutionError     → player left out of the board, logged
    """

    def __init__(self, roster: IRosterStore, fetch_service: PlayerFetchService):
        self.roster = roster
        self.fetch_service = fetch_service

    async def execute(self) -> LeaderboardResult:
        players = self.roster.load()
        result = LeaderboardResult(roster_size=len(players))
        if not players:
            logger.info("Roster is empty, nothing to rank")
            return result

        collected: List[PlayerStanding] = []
        for identity in players:
            with log_context(riot_id=identity.riot_id):
                try:
                    collected.append(await self.fetch_service.fetch_standing(identity))
                except ResolutionError as e:
                    logger.warning(f"Leaving {identity} off the leaderboard: {e}")
                    result.failures.append((identity, e))

        result.standings = sort_standings(collected)
        logger.info(
            f"leaderboard-built ranked={sum(s.is_ranked for s in collected)} "
            f"unranked={sum(not s.is_ranked for s in collected)} failed={len(result.failures)}"
        )
        return result
