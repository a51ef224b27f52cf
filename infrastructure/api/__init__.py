"""Infrastructure API module."""
from .riot_client import RiotAPIClient
from .rate_limiter import RequestGate

__all__ = [
    'RiotAPIClient',
    'RequestGate',
]
