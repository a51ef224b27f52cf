"""Shared fakes: an in-memory Riot API behind httpx.MockTransport and a chat messenger."""
from __future__ import annotations

import json
from datetime import timedelta, timezone
from typing import Dict, List, Optional, Tuple
from urllib.parse import unquote

import httpx
import pytest

from application.services import PlayerFetchService
from domain.enums import Region
from domain.errors import MessageDeliveryError
from domain.interfaces import IMessenger, IRosterStore
from infrastructure import MatchRepository, RequestGate, RiotAPIClient, SummonerRepository

JST = timezone(timedelta(hours=9))


class FakeRiotAPI:
    """Routes Riot API paths to canned data; every request is recorded."""

    def __init__(self) -> None:
        self.accounts: Dict[Tuple[str, str], str] = {}
        self.summoners: Dict[str, str] = {}
        self.entries: Dict[str, List[dict]] = {}
        self.match_ids: Dict[str, List[str]] = {}
        self.matches: Dict[str, dict] = {}
        self.failures: Dict[str, Tuple[int, str]] = {}
        self.requests: List[httpx.Request] = []

    # ── Seeding ────────────────────────────────────────────────────────

    def add_player(self, name: str, tag: str, *, tier: Optional[str] = None, rank: str = "",
                   lp: int = 0, wins: int = 0, losses: int = 0, **flags) -> str:
        puuid = f"puuid-{name}-{tag}"
        sid = f"sid-{name}-{tag}"
        self.accounts[(name, tag)] = puuid
        self.summoners[puuid] = sid
        self.entries[sid] = []
        if tier is not None:
            self.entries[sid].append({
                "queueType": "RANKED_SOLO_5x5",
                "tier": tier,
                "rank": rank,
                "leaguePoints": lp,
                "wins": wins,
                "losses": losses,
                **flags,
            })
        return puuid

    def add_match(self, match_id: str, *, created_s: int, queue_id: int = 420,
                  results: Optional[Dict[str, bool]] = None) -> None:
        self.matches[match_id] = {
            "metadata": {"matchId": match_id},
            "info": {
                "gameCreation": created_s * 1000,
                "gameDuration": 1800,
                "queueId": queue_id,
                "participants": [
                    {"puuid": puuid, "win": win, "teamId": 100 if win else 200}
                    for puuid, win in (results or {}).items()
                ],
            },
        }

    def fail(self, path_fragment: str, status: int = 500, body: str = '{"status": "boom"}') -> None:
        self.failures[path_fragment] = (status, body)

    # ── Transport ──────────────────────────────────────────────────────

    @property
    def paths(self) -> List[str]:
        return [self._path(r) for r in self.requests]

    @staticmethod
    def _path(request: httpx.Request) -> str:
        return request.url.raw_path.decode().split("?", 1)[0]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = self._path(request)
        for fragment, (status, body) in self.failures.items():
            if fragment in path:
                return httpx.Response(status, text=body)

        segments = [unquote(s) for s in path.strip("/").split("/")]
        if path.startswith("/riot/account/v1/accounts/by-riot-id/"):
            name, tag = segments[-2], segments[-1]
            puuid = self.accounts.get((name, tag))
            if puuid is None:
                return httpx.Response(404, json={"status": {"message": "Data not found"}})
            return httpx.Response(200, json={"puuid": puuid, "gameName": name, "tagLine": tag})
        if path.startswith("/lol/summoner/v4/summoners/by-puuid/"):
            sid = self.summoners.get(segments[-1])
            if sid is None:
                return httpx.Response(404, json={})
            return httpx.Response(200, json={"id": sid, "puuid": segments[-1], "summonerLevel": 30})
        if path.startswith("/lol/league/v4/entries/by-summoner/"):
            return httpx.Response(200, json=self.entries.get(segments[-1], []))
        if path.startswith("/lol/match/v5/matches/by-puuid/"):
            return httpx.Response(200, json=self.match_ids.get(segments[-2], []))
        if path.startswith("/lol/match/v5/matches/"):
            match = self.matches.get(segments[-1])
            if match is None:
                return httpx.Response(404, json={})
            return httpx.Response(200, text=json.dumps(match))
        return httpx.Response(404, json={})


def make_client(fake: FakeRiotAPI, region: Region = Region.JP1) -> RiotAPIClient:
    return RiotAPIClient(
        "test-key",
        region,
        gate=RequestGate(0),
        timeout=5,
        transport=httpx.MockTransport(fake.handler),
    )


def make_service(client: RiotAPIClient) -> PlayerFetchService:
    return PlayerFetchService(SummonerRepository(client), MatchRepository(client))


class MemoryRoster(IRosterStore):
    def __init__(self, players=None) -> None:
        self.players = list(players or [])
        self.upserts = 0

    def load(self):
        return list(self.players)

    def upsert(self, identity) -> bool:
        self.upserts += 1
        if identity in self.players:
            return False
        self.players.append(identity)
        return True


class FakeMessenger(IMessenger):
    def __init__(self, *, fail_edit: bool = False) -> None:
        self.sent: List[Tuple[str, str, str]] = []
        self.edits: List[Tuple[str, str, str]] = []
        self.fail_edit = fail_edit

    async def send(self, channel_id: str, content: str) -> str:
        message_id = str(len(self.sent) + 1)
        self.sent.append((channel_id, message_id, content))
        return message_id

    async def edit(self, channel_id: str, message_id: str, content: str) -> None:
        if self.fail_edit:
            raise MessageDeliveryError("message was deleted")
        self.edits.append((channel_id, message_id, content))


@pytest.fixture
def fake_riot() -> FakeRiotAPI:
    return FakeRiotAPI()
