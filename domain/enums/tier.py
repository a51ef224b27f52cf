"""Rank tier and division enumerations."""
from enum import Enum


class Tier(Enum):
    """League of Legends ranked tiers, valued by their ordinal (higher is better)."""

    UNRANKED = 0
    IRON = 1
    BRONZE = 2
    SILVER = 3
    GOLD = 4
    PLATINUM = 5
    EMERALD = 6
    DIAMOND = 7
    MASTER = 8
    GRANDMASTER = 9
    CHALLENGER = 10

    @property
    def ordinal(self) -> int:
        """Get the sort ordinal."""
        return self.value

    @property
    def is_apex(self) -> bool:
        """Apex tiers have no divisions."""
        return self in (Tier.MASTER, Tier.GRANDMASTER, Tier.CHALLENGER)

    @property
    def display_name(self) -> str:
        """Get title-cased name, e.g. 'Grandmaster'."""
        return self.name.title()

    @classmethod
    def from_string(cls, tier_str: str | None) -> 'Tier':
        """Create Tier from a label; unknown labels fall back to UNRANKED."""
        try:
            return cls[(tier_str or "").strip().upper()]
        except KeyError:
            return cls.UNRANKED


class Division(Enum):
    """Divisions inside a tier. NONE covers apex tiers and unranked players."""

    NONE = 0
    IV = 1
    III = 2
    II = 3
    I = 4  # noqa: E741

    @property
    def ordinal(self) -> int:
        """Get the sort ordinal."""
        return self.value

    @property
    def label(self) -> str:
        """Get the roman numeral as the API spells it ('' for NONE)."""
        return "" if self is Division.NONE else self.name

    @classmethod
    def from_string(cls, division_str: str | None) -> 'Division':
        """Create Division from a roman numeral; unknown labels fall back to NONE."""
        name = (division_str or "").strip().upper()
        if not name or name == "NONE":
            return cls.NONE
        try:
            return cls[name]
        except KeyError:
            return cls.NONE
