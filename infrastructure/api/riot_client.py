"""Riot Games API client."""
import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx

from config import settings
from domain.enums import Region, QueueType
from domain.errors import ResolutionError
from .rate_limiter import RequestGate

logger = logging.getLogger(__name__)


class RiotAPIClient:
    """Asynchronous Riot API client.

    Every call goes through one shared RequestGate and is a single attempt:
    timeouts, network errors, non-200 answers and undecodable bodies raise
    ResolutionError straight away, and the caller decides what to skip.
    """

    def __init__(
        self,
        api_key: str,
        region: Region = Region.JP1,
        *,
        gate: Optional[RequestGate] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key  = api_key
        self.region   = region
        self.session: Optional[httpx.AsyncClient] = None
        self.timeout  = timeout if timeout is not None else settings.REQUEST_TIMEOUT
        self.gate     = gate or RequestGate(settings.REQUEST_DELAY_S)
        self._transport = transport

    async def __aenter__(self):
        self.session = httpx.AsyncClient(
            timeout=self.timeout,
            headers={"X-Riot-Token": self.api_key},
            transport=self._transport,
        )
        return self

    async def __aexit__(self, *_):
        if self.session:
            await self.session.aclose()
            self.session = None

    async def _make_request(
        self,
        url: str,
        step: str,
        target: str,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        if self.session is None:
            raise RuntimeError("RiotAPIClient must be used as an async context manager")

        async with self.gate:
            logger.debug(f"GET {url} params={params or {}}")
            try:
                response = await self.session.get(url, params=params)
            except httpx.TimeoutException as exc:
                raise ResolutionError(step, target, f"timed out after {self.timeout}s") from exc
            except httpx.HTTPError as exc:
                raise ResolutionError(step, target, f"network error: {exc}") from exc

        if response.status_code == 429:
            logger.warning(f"429 rate-limited on {step} (Retry-After={response.headers.get('Retry-After', '?')})")
        elif response.status_code == 401 or response.status_code == 403:
            logger.error(f"{response.status_code} from Riot API, check RIOT_API_KEY")

        if response.status_code != 200:
            raise ResolutionError(
                step, target, "unexpected status",
                status_code=response.status_code, body=response.text,
            )

        try:
            return response.json()
        except ValueError as exc:
            raise ResolutionError(
                step, target, "undecodable JSON body",
                status_code=response.status_code, body=response.text,
            ) from exc

    # ── Account API ────────────────────────────────────────────────────

    async def get_account_by_riot_id(self, game_name: str, tag_line: str) -> Dict:
        name = quote(game_name, safe="")
        tag  = quote(tag_line, safe="")
        url  = f"{self.region.regional_url}/riot/account/v1/accounts/by-riot-id/{name}/{tag}"
        return await self._make_request(url, "account", f"{game_name}#{tag_line}")

    # ── Summoner API ───────────────────────────────────────────────────

    async def get_summoner_by_puuid(self, puuid: str) -> Dict:
        url = f"{self.region.platform_url}/lol/summoner/v4/summoners/by-puuid/{puuid}"
        return await self._make_request(url, "summoner", puuid)

    # ── League API ─────────────────────────────────────────────────────

    async def get_league_entries_by_summoner(self, summoner_id: str) -> List[Dict]:
        url = f"{self.region.platform_url}/lol/league/v4/entries/by-summoner/{summoner_id}"
        return await self._make_request(url, "league", summoner_id)

    # ── Match API ──────────────────────────────────────────────────────

    async def get_match_ids_by_puuid(
        self,
        puuid: str,
        queue: QueueType,
        start_time: int,
        end_time: int,
        count: int = 100,
        match_type: str = "ranked",
    ) -> List[str]:
        url    = f"{self.region.regional_url}/lol/match/v5/matches/by-puuid/{puuid}/ids"
        params = {
            "startTime": start_time,
            "endTime":   end_time,
            "queue":     queue.queue_id,
            "type":      match_type,
            "count":     min(count, 100),
        }
        return await self._make_request(url, "match_ids", puuid, params=params)

    async def get_match_by_id(self, match_id: str) -> Dict:
        url = f"{self.region.regional_url}/lol/match/v5/matches/{match_id}"
        return await self._make_request(url, "match", match_id)
