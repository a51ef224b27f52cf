"""Application layer - Services and use cases."""
from .services import PlayerFetchService
from .use_cases import (
    BuildLeaderboardUseCase,
    LookupRanksUseCase,
    AddPlayerUseCase,
    DayStatsUseCase,
)

__all__ = [
    'PlayerFetchService',
    'BuildLeaderboardUseCase',
    'LookupRanksUseCase',
    'AddPlayerUseCase',
    'DayStatsUseCase',
]
