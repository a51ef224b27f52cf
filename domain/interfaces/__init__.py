"""Domain interfaces."""
from .repository import IMatchRepository, ISummonerRepository, IRosterStore
from .messenger import IMessenger, IncomingMessage

__all__ = [
    'IMatchRepository',
    'ISummonerRepository',
    'IRosterStore',
    'IMessenger',
    'IncomingMessage',
]
