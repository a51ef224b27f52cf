"""Use case: a player's ranked solo/duo wins and losses over one day window."""
from __future__ import annotations

import logging
from datetime import datetime, tzinfo
from typing import Callable, Optional

from application.services.player_fetch_service import PlayerFetchService
from core.logging.context import log_context
from domain.entities import DayStats, DayWindow, PlayerIdentity
from domain.entities.day_window import DEFAULT_BOUNDARY_HOUR
from domain.enums import QueueType
from domain.errors import ResolutionError

logger = logging.getLogger(__name__)


class DayStatsUseCase:
    """
    Tallies one day of ranked solo/duo games.

    1. account (failure raises)
    2. one match-id query filtered by queue and [start, end) (failure raises)
    3. per match: details, re-check window + queue, find the player, count
       (failure skips that match)
    """

    def __init__(
        self,
        fetch_service: PlayerFetchService,
        tz: tzinfo,
        *,
        boundary_hour: int = DEFAULT_BOUNDARY_HOUR,
        match_count: int = 100,
        queue_type: QueueType = QueueType.RANKED_SOLO_5x5,
        now: Optional[Callable[[], datetime]] = None,
    ):
        self.fetch_service = fetch_service
        self.tz = tz
        self.boundary_hour = boundary_hour
        self.match_count = match_count
        self.queue_type = queue_type
        self._now = now or (lambda: datetime.now(self.tz))

    def resolve_window(self, date_arg: Optional[str] = None) -> DayWindow:
        """Window for ``YYYYMMDD``, or the current one. Raises InvalidDateError."""
        if date_arg:
            return DayWindow.parse(date_arg, self.tz, self.boundary_hour)
        return DayWindow.current(self.tz, self.boundary_hour, now=self._now())

    async def execute(self, identity: PlayerIdentity, window: DayWindow) -> DayStats:
        with log_context(riot_id=identity.riot_id):
            account = await self.fetch_service.resolve_account(identity)
            match_ids = await self.fetch_service.fetch_match_ids(
                account, window, count=self.match_count, queue_type=self.queue_type
            )
            if not match_ids:
                logger.info(f"No {self.queue_type.label} games for {identity} in {window.label()}")
                return DayStats(identity=identity, window=window)

            wins = losses = skipped = 0
            for match_id in match_ids:
                try:
                    match = await self.fetch_service.fetch_match(match_id)
                except ResolutionError as e:
                    logger.warning(f"Skipping match {match_id}: {e}")
                    skipped += 1
                    continue

                if not window.contains_epoch(match.created_at_epoch):
                    logger.debug(f"{match_id} created at {match.created_at_epoch}, outside {window.label()}")
                    continue
                if match.queue_id != self.queue_type.queue_id:
                    logger.debug(f"{match_id} is queue {match.queue_id}, not {self.queue_type.queue_id}")
                    continue

                participant = match.find_participant(account.puuid)
                if participant is None:
                    logger.warning(f"{identity} not found among participants of {match_id}")
                    continue
                if participant.win:
                    wins += 1
                else:
                    losses += 1

            logger.info(f"day-stats {identity} {window.label()} wins={wins} losses={losses} skipped={skipped}")
            return DayStats(
                identity=identity,
                window=window,
                wins=wins,
                losses=losses,
                match_ids_found=len(match_ids),
                skipped_matches=skipped,
            )
