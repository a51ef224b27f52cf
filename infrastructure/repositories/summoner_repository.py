"""Summoner repository implementation."""
import logging
from typing import List

from domain.entities import Account, LeagueEntry, PlayerIdentity, Summoner
from domain.errors import ResolutionError
from domain.interfaces import ISummonerRepository
from infrastructure.api import RiotAPIClient

logger = logging.getLogger(__name__)


class SummonerRepository(ISummonerRepository):
    """Repository for account, summoner and league data using Riot API."""

    def __init__(self, api_client: RiotAPIClient):
        """
        Initialize summoner repository.

        Args:
            api_client: Riot API client instance
        """
        self.api_client = api_client

    async def get_account(self, identity: PlayerIdentity) -> Account:
        """
        Resolve a Riot ID to its account.

        Args:
            identity: Riot ID to resolve

        Returns:
            Account with the player's PUUID

        Raises:
            ResolutionError: request failed or payload lacks a PUUID
        """
        data = await self.api_client.get_account_by_riot_id(identity.game_name, identity.tag_line)
        try:
            return Account(
                puuid=self._required(data, 'puuid'),
                game_name=data.get('gameName') or identity.game_name,
                tag_line=data.get('tagLine') or identity.tag_line,
            )
        except (KeyError, TypeError, AttributeError) as e:
            raise ResolutionError('account', identity.riot_id, f"malformed payload: {e!r}") from e

    async def get_summoner_by_puuid(self, puuid: str) -> Summoner:
        """
        Get summoner by PUUID.

        Args:
            puuid: Player UUID

        Returns:
            Summoner entity
        """
        data = await self.api_client.get_summoner_by_puuid(puuid)
        try:
            return Summoner(
                summoner_id=self._required(data, 'id'),
                puuid=data.get('puuid') or puuid,
            )
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise ResolutionError('summoner', puuid, f"malformed payload: {e!r}") from e

    async def get_league_entries(self, summoner_id: str) -> List[LeagueEntry]:
        """
        Get summoner ranked information.

        Args:
            summoner_id: Summoner ID (encrypted)

        Returns:
            One LeagueEntry per queue the summoner is placed in
        """
        data = await self.api_client.get_league_entries_by_summoner(summoner_id)
        if not isinstance(data, list):
            raise ResolutionError('league', summoner_id, f"expected a list, got {type(data).__name__}")
        try:
            return [self._parse_entry(entry) for entry in data]
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise ResolutionError('league', summoner_id, f"malformed payload: {e!r}") from e

    @staticmethod
    def _parse_entry(entry: dict) -> LeagueEntry:
        return LeagueEntry(
            queue_type=entry['queueType'],
            tier=entry.get('tier', ''),
            division=entry.get('rank', ''),
            league_points=int(entry.get('leaguePoints', 0)),
            wins=int(entry.get('wins', 0)),
            losses=int(entry.get('losses', 0)),
            hot_streak=bool(entry.get('hotStreak', False)),
            veteran=bool(entry.get('veteran', False)),
            fresh_blood=bool(entry.get('freshBlood', False)),
            inactive=bool(entry.get('inactive', False)),
        )

    @staticmethod
    def _required(data: dict, key: str) -> str:
        value = data[key]
        if not value:
            raise KeyError(key)
        return value
