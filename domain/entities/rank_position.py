"""Sortable rank position."""
from __future__ import annotations

from dataclasses import dataclass

from ..enums import Division, Tier


@dataclass(frozen=True, slots=True, order=True)
class RankPosition:
    """(tier ordinal, division ordinal, league points), compared field by field.

    UNRANKED is (0, 0, 0), strictly below Iron IV 0LP = (1, 1, 0).
    """

    tier: int
    division: int
    league_points: int

    @classmethod
    def from_labels(cls, tier: str | None, division: str | None, league_points: int = 0) -> RankPosition:
        """Build from API labels; unknown labels map to ordinal 0."""
        return cls(
            tier=Tier.from_string(tier).ordinal,
            division=Division.from_string(division).ordinal,
            league_points=int(league_points or 0),
        )

    @classmethod
    def unranked(cls) -> RankPosition:
        return cls(Tier.UNRANKED.ordinal, Division.NONE.ordinal, 0)

    @property
    def is_unranked(self) -> bool:
        return self.tier == Tier.UNRANKED.ordinal


def rank_values(tier: str | None, division: str | None) -> tuple[int, int]:
    """Map tier/division labels (case-insensitive) to their ordinal pair."""
    return Tier.from_string(tier).ordinal, Division.from_string(division).ordinal
