"""Riot account entity."""
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Account:
    """A Riot account as resolved by account-v1."""

    puuid: str
    game_name: str
    tag_line: str
