"""Domain entities."""
from .identity import PlayerIdentity
from .account import Account
from .summoner import Summoner
from .rank_position import RankPosition, rank_values
from .league_entry import LeagueEntry
from .participant import Participant
from .match import MatchSummary
from .day_window import DayWindow
from .standing import PlayerStanding, DayStats

__all__ = [
    'PlayerIdentity',
    'Account',
    'Summoner',
    'RankPosition',
    'rank_values',
    'LeagueEntry',
    'Participant',
    'MatchSummary',
    'DayWindow',
    'PlayerStanding',
    'DayStats',
]
