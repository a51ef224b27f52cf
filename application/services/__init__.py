"""Application services root exports."""
from .player_fetch_service import PlayerFetchService

__all__ = [
    "PlayerFetchService",
]
