"""Match repository implementation."""
import logging
from typing import List

from domain.entities import DayWindow, MatchSummary, Participant
from domain.enums import QueueType
from domain.errors import ResolutionError
from domain.interfaces import IMatchRepository
from infrastructure.api import RiotAPIClient

logger = logging.getLogger(__name__)


class MatchRepository(IMatchRepository):
    """Repository for match data using Riot API."""

    def __init__(self, api_client: RiotAPIClient):
        self.api_client = api_client

    async def get_match_ids_in_window(
        self,
        puuid: str,
        window: DayWindow,
        queue_type: QueueType,
        count: int = 100,
    ) -> List[str]:
        """Get ranked match IDs for a summoner, filtered server-side to ``window``.

        Riot treats ``endTime`` as exclusive, matching the window.
        """
        ids = await self.api_client.get_match_ids_by_puuid(
            puuid=puuid,
            queue=queue_type,
            start_time=window.start_epoch,
            end_time=window.end_epoch,
            count=count,
        )
        if not isinstance(ids, list) or not all(isinstance(i, str) for i in ids):
            raise ResolutionError('match_ids', puuid, "expected a list of match id strings")
        return ids

    async def get_match_by_id(self, match_id: str) -> MatchSummary:
        """
        Get a single match by ID.

        Args:
            match_id: Match identifier, e.g. ``JP1_123456789``

        Returns:
            MatchSummary entity

        Raises:
            ResolutionError: request failed or the payload is not a match
        """
        match_data = await self.api_client.get_match_by_id(match_id)
        try:
            return self._parse_match_data(match_data, match_id)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            logger.error(f"Error parsing match {match_id}: {e!r}")
            raise ResolutionError('match', match_id, f"malformed payload: {e!r}") from e

    def _parse_match_data(self, data: dict, match_id: str) -> MatchSummary:
        """Parse raw API match data into a MatchSummary."""
        metadata = data.get('metadata', {})
        info = data['info']

        participants = tuple(
            Participant(
                puuid=p['puuid'],
                win=bool(p.get('win', False)),
            )
            for p in info.get('participants', [])
        )

        return MatchSummary(
            match_id=metadata.get('matchId') or match_id,
            game_creation=int(info['gameCreation']),
            game_duration=int(info.get('gameDuration', 0)),
            queue_id=int(info.get('queueId', 0)),
            participants=participants,
        )
