"""Repository interfaces for remote data access and roster storage."""
from abc import ABC, abstractmethod
from typing import List

from ..entities import Account, DayWindow, LeagueEntry, MatchSummary, PlayerIdentity, Summoner
from ..enums import QueueType


class ISummonerRepository(ABC):
    """Account, summoner and league lookups. Failures raise ResolutionError."""

    @abstractmethod
    async def get_account(self, identity: PlayerIdentity) -> Account:
        """Resolve a Riot ID to its account (PUUID)."""

    @abstractmethod
    async def get_summoner_by_puuid(self, puuid: str) -> Summoner:
        """Get summoner by PUUID."""

    @abstractmethod
    async def get_league_entries(self, summoner_id: str) -> List[LeagueEntry]:
        """Get every league entry of a summoner, one per queue."""


class IMatchRepository(ABC):
    """Match history lookups. Failures raise ResolutionError."""

    @abstractmethod
    async def get_match_ids_in_window(
        self,
        puuid: str,
        window: DayWindow,
        queue_type: QueueType,
        count: int = 100,
    ) -> List[str]:
        """Get ranked match IDs created inside ``window``."""

    @abstractmethod
    async def get_match_by_id(self, match_id: str) -> MatchSummary:
        """Get a single match by ID."""


class IRosterStore(ABC):
    """The tracked player list. Failures raise PersistenceError."""

    @abstractmethod
    def load(self) -> List[PlayerIdentity]:
        """Return the roster in stored order, without duplicates.

        Malformed stored entries are skipped.
        """

    @abstractmethod
    def upsert(self, identity: PlayerIdentity) -> bool:
        """Add ``identity`` if absent. Returns True when it was added."""
