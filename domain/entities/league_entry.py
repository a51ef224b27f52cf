"""League entry entity (one player's standing in one ranked queue)."""
from dataclasses import dataclass
from typing import List

from ..enums import Division, QueueType, Tier
from .rank_position import RankPosition


@dataclass(frozen=True, slots=True)
class LeagueEntry:
    """Represents a league-v4 entry."""

    queue_type: str
    tier: str
    division: str
    league_points: int = 0
    wins: int = 0
    losses: int = 0

    # Flags
    hot_streak: bool = False
    veteran: bool = False
    fresh_blood: bool = False
    inactive: bool = False

    @property
    def is_solo(self) -> bool:
        return self.queue_type == QueueType.RANKED_SOLO_5x5.api_queue_name

    @property
    def tier_enum(self) -> Tier:
        return Tier.from_string(self.tier)

    @property
    def division_enum(self) -> Division:
        return Division.from_string(self.division)

    @property
    def position(self) -> RankPosition:
        return RankPosition.from_labels(self.tier, self.division, self.league_points)

    @property
    def flags(self) -> List[str]:
        """Human-readable names of the flags that are set."""
        names = [
            (self.hot_streak, "hot streak"),
            (self.veteran, "veteran"),
            (self.fresh_blood, "fresh blood"),
            (self.inactive, "inactive"),
        ]
        return [name for is_set, name in names if is_set]
