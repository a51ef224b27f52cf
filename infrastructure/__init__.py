"""Infrastructure layer - API client, repositories and roster storage."""
from .api import RiotAPIClient, RequestGate
from .repositories import MatchRepository, SummonerRepository
from .roster import EnvRosterStore

__all__ = [
    'RiotAPIClient',
    'RequestGate',
    'MatchRepository',
    'SummonerRepository',
    'EnvRosterStore',
]
