"""Riot-backed repositories: accounts, summoners, league entries and matches."""
from .summoner_repository import SummonerRepository
from .match_repository import MatchRepository

__all__ = [
    'SummonerRepository',
    'MatchRepository',
]
