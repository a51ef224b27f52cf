"""Application use cases, one per chat command."""
from .build_leaderboard import BuildLeaderboardUseCase, LeaderboardResult
from .lookup_ranks import LookupRanksUseCase, RankLookup
from .add_player import AddPlayerUseCase, AddPlayerOutcome
from .day_stats import DayStatsUseCase

__all__ = [
    'BuildLeaderboardUseCase',
    'LeaderboardResult',
    'LookupRanksUseCase',
    'RankLookup',
    'AddPlayerUseCase',
    'AddPlayerOutcome',
    'DayStatsUseCase',
]
