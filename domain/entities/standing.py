"""Per-player outcomes produced by the aggregators."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .day_window import DayWindow
from .identity import PlayerIdentity
from .league_entry import LeagueEntry
from .rank_position import RankPosition


@dataclass(frozen=True, slots=True)
class PlayerStanding:
    """A player's ranked-solo standing, or the UNRANKED sentinel when ``entry`` is None."""

    identity: PlayerIdentity
    entry: Optional[LeagueEntry] = None

    @property
    def is_ranked(self) -> bool:
        return self.entry is not None

    @property
    def position(self) -> RankPosition:
        if self.entry is None:
            return RankPosition.unranked()
        return self.entry.position


@dataclass(frozen=True, slots=True)
class DayStats:
    """Win/loss tally for one player over one day window."""

    identity: PlayerIdentity
    window: DayWindow
    wins: int = 0
    losses: int = 0
    match_ids_found: int = 0
    skipped_matches: int = 0

    @property
    def games(self) -> int:
        return self.wins + self.losses

    @property
    def has_games(self) -> bool:
        return self.match_ids_found > 0
