"""Player fetch pipeline: Riot ID → account → summoner → league entries / matches."""
from __future__ import annotations

import logging
from typing import List, Optional

from domain.entities import Account, DayWindow, LeagueEntry, MatchSummary, PlayerIdentity, PlayerStanding
from domain.enums import QueueType
from domain.interfaces import IMatchRepository, ISummonerRepository
from core.logging.logger import traceable

logger = logging.getLogger(__name__)


class PlayerFetchService:
    """
    Resolves one player at a time, strictly sequentially.

    Every method issues its calls one after another through the repositories,
    whose client spaces them through the shared RequestGate. Nothing is retried:
    a failed step raises ResolutionError (tagged with the step) and it is up to
    the caller whether that player/match is skipped or reported.
    """

    def __init__(self, summoner_repo: ISummonerRepository, match_repo: IMatchRepository):
        self.summoner_repo = summoner_repo
        self.match_repo    = match_repo

    async def resolve_account(self, identity: PlayerIdentity) -> Account:
        return await self.summoner_repo.get_account(identity)

    async def fetch_solo_entry(self, identity: PlayerIdentity) -> Optional[LeagueEntry]:
        """Account → summoner → league entries; the ranked-solo entry or None."""
        account = await self.summoner_repo.get_account(identity)
        summoner = await self.summoner_repo.get_summoner_by_puuid(account.puuid)
        entries = await self.summoner_repo.get_league_entries(summoner.summoner_id)
        return next((e for e in entries if e.is_solo), None)

    @traceable
    async def fetch_standing(self, identity: PlayerIdentity) -> PlayerStanding:
        """Standing for the leaderboard; no ranked-solo entry gives the UNRANKED sentinel."""
        entry = await self.fetch_solo_entry(identity)
        if entry is None:
            logger.info(f"{identity} has no {QueueType.RANKED_SOLO_5x5.api_queue_name} entry, treating as unranked")
        return PlayerStanding(identity=identity, entry=entry)

    async def fetch_match_ids(
        self,
        account: Account,
        window: DayWindow,
        count: int = 100,
        queue_type: QueueType = QueueType.RANKED_SOLO_5x5,
    ) -> List[str]:
        return await self.match_repo.get_match_ids_in_window(account.puuid, window, queue_type, count)

    async def fetch_match(self, match_id: str) -> MatchSummary:
        return await self.match_repo.get_match_by_id(match_id)
