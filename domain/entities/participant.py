"""Participant entity representing a player in a match."""
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Participant:
    """The slice of a match-v5 participant needed to tally results."""

    puuid: str
    win: bool
