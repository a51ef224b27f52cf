"""Domain layer - Business entities, enums, errors and interfaces."""
from .entities import (
    PlayerIdentity, Account, Summoner, RankPosition, LeagueEntry,
    Participant, MatchSummary, DayWindow, PlayerStanding, DayStats,
)
from .enums import Region, QueueType, Tier, Division
from .errors import (
    RankBotError, ValidationError, InvalidRiotIdError, InvalidDateError,
    ResolutionError, PersistenceError, MessageDeliveryError,
)
from .interfaces import IMatchRepository, ISummonerRepository, IRosterStore, IMessenger, IncomingMessage
from .ranking import sort_standings

__all__ = [
    # Entities
    'PlayerIdentity',
    'Account',
    'Summoner',
    'RankPosition',
    'LeagueEntry',
    'Participant',
    'MatchSummary',
    'DayWindow',
    'PlayerStanding',
    'DayStats',
    # Enums
    'Region',
    'QueueType',
    'Tier',
    'Division',
    # Errors
    'RankBotError',
    'ValidationError',
    'InvalidRiotIdError',
    'InvalidDateError',
    'ResolutionError',
    'PersistenceError',
    'MessageDeliveryError',
    # Interfaces
    'IMatchRepository',
    'ISummonerRepository',
    'IRosterStore',
    'IMessenger',
    'IncomingMessage',
    # Ordering
    'sort_standings',
]
