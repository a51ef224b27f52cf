"""Summoner entity representing a player's League profile."""
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Summoner:
    """Represents a League of Legends summoner, as returned by summoner-v4."""

    summoner_id: str
    puuid: str
