"""Tests for command parsing, message rendering and the chat handler."""
import asyncio
from datetime import datetime

import pytest

from application.use_cases import (
    AddPlayerUseCase,
    BuildLeaderboardUseCase,
    DayStatsUseCase,
    LeaderboardResult,
    LookupRanksUseCase,
)
from conftest import JST, FakeMessenger, FakeRiotAPI, MemoryRoster, make_client, make_service
from domain.entities import LeagueEntry, PlayerIdentity, PlayerStanding
from domain.enums import Region
from domain.interfaces import IncomingMessage
from infrastructure import EnvRosterStore
from presentation.chat import CommandName, MessageHandler, UsageError, parse_command
from presentation.chat import messages

BASE_URL = "https://www.op.gg/summoners"
BOT_ID = "999"


class TestParseCommand:
    """First-token dispatch."""

    def test_matches_known_commands(self):
        command = parse_command("!rank A#JP1 B#JP1")
        assert command.name is CommandName.RANK
        assert command.args == ["A#JP1", "B#JP1"]

    @pytest.mark.parametrize("content", ["hello", "!rankings", "!RANK A#1", "?rank A#1", ""])
    def test_ignores_everything_else(self, content):
        assert parse_command(content) is None

    def test_custom_prefix(self):
        assert parse_command("$help", prefix="$").name is CommandName.HELP

    def test_add_keeps_spaces_in_name(self):
        assert parse_command("!add Hide on bush#KR1").single_riot_id() == "Hide on bush#KR1"

    def test_add_without_argument(self):
        with pytest.raises(UsageError):
            parse_command("!add").single_riot_id()

    @pytest.mark.parametrize(
        "content, expected",
        [
            ("!daystats A#JP1", ("A#JP1", None)),
            ("!daystats A#JP1 20240101", ("A#JP1", "20240101")),
            ("!daystats Hide on bush#KR1 20240101", ("Hide on bush#KR1", "20240101")),
            ("!daystats NoTag", ("NoTag", None)),
        ],
    )
    def test_daystats_arguments(self, content, expected):
        assert parse_command(content).riot_id_and_date() == expected

    def test_daystats_too_many_arguments(self):
        with pytest.raises(UsageError):
            parse_command("!daystats A#JP1 20240101 extra").riot_id_and_date()


class TestMessages:
    """Rendering."""

    def test_profile_url_escapes_name_and_tag(self):
        url = messages.profile_url(PlayerIdentity("Hide on bush", "KR/1"), Region.JP1, BASE_URL)
        assert url == "https://www.op.gg/summoners/jp/Hide%20on%20bush-KR%2F1"

    def test_leaderboard_lines(self):
        result = LeaderboardResult(
            standings=[
                PlayerStanding(PlayerIdentity("A", "JP1"), LeagueEntry("RANKED_SOLO_5x5", "GOLD", "II", 45)),
                PlayerStanding(PlayerIdentity("M", "JP1"), LeagueEntry("RANKED_SOLO_5x5", "MASTER", "I", 120)),
                PlayerStanding(PlayerIdentity("U", "JP1")),
            ],
            roster_size=3,
        )
        lines = messages.render_leaderboard_lines(result, Region.JP1, BASE_URL)
        assert lines[0] == f"**1.** [`A#JP1`](<{BASE_URL}/jp/A-JP1>) (**Gold II 45LP**)"
        assert lines[1].endswith("(**Master 120LP**)")
        assert lines[2].endswith("(UNRANKED)")

    def test_empty_leaderboard_messages(self):
        assert "No players registered" in messages.render_leaderboard(
            LeaderboardResult(roster_size=0), Region.JP1, BASE_URL
        )
        assert "Could not fetch" in messages.render_leaderboard(
            LeaderboardResult(roster_size=2), Region.JP1, BASE_URL
        )

    def test_help_lists_every_command(self):
        text = messages.render_help("!")
        for name in CommandName:
            assert f"!{name.value}" in text


def _handler(fake_riot, messenger, roster=None, now=None):
    client = make_client(fake_riot)
    service = make_service(client)
    roster = roster if roster is not None else MemoryRoster()
    handler = MessageHandler(
        messenger,
        leaderboard=BuildLeaderboardUseCase(roster, service),
        lookup=LookupRanksUseCase(service),
        add_player=AddPlayerUseCase(roster, service),
        day_stats=DayStatsUseCase(service, JST, now=now),
        region=Region.JP1,
        profile_base_url=BASE_URL,
        bot_user_id=BOT_ID,
    )
    return client, handler


def _say(fake_riot, messenger, *contents, author="1", **kwargs):
    async def go():
        client, handler = _handler(fake_riot, messenger, **kwargs)
        handled = []
        async with client:
            for content in contents:
                handled.append(await handler.handle(IncomingMessage("chan", author, content)))
        return handled

    return asyncio.run(go())


class TestMessageHandler:
    """End-to-end command handling over fakes."""

    def test_ignores_own_messages(self, fake_riot: FakeRiotAPI):
        messenger = FakeMessenger()
        assert _say(fake_riot, messenger, "!help", author=BOT_ID) == [False]
        assert messenger.sent == []

    def test_ignores_non_commands(self, fake_riot: FakeRiotAPI):
        messenger = FakeMessenger()
        assert _say(fake_riot, messenger, "gg wp") == [False]
        assert messenger.sent == []

    def test_ranking_edits_placeholder(self, fake_riot: FakeRiotAPI):
        fake_riot.add_player("A", "JP1", tier="GOLD", rank="II", lp=45)
        fake_riot.add_player("B", "JP1", tier="SILVER", rank="I", lp=10)
        roster = MemoryRoster([PlayerIdentity("B", "JP1"), PlayerIdentity("Gone", "JP1"), PlayerIdentity("A", "JP1")])
        messenger = FakeMessenger()

        _say(fake_riot, messenger, "!ranking", roster=roster)

        [(_, placeholder_id, placeholder)] = messenger.sent
        assert "⏳" in placeholder
        [(_, edited_id, text)] = messenger.edits
        assert edited_id == placeholder_id
        lines = text.splitlines()
        assert lines[0] == messages.LEADERBOARD_TITLE
        assert len(lines[1:]) == 2
        assert "A#JP1" in lines[1] and "B#JP1" in lines[2]

    def test_edit_failure_falls_back_to_new_message(self, fake_riot: FakeRiotAPI):
        fake_riot.add_player("A", "JP1", tier="GOLD", rank="II", lp=45)
        messenger = FakeMessenger(fail_edit=True)

        _say(fake_riot, messenger, "!ranking", roster=MemoryRoster([PlayerIdentity("A", "JP1")]))

        assert len(messenger.sent) == 2
        assert messenger.sent[1][2].startswith(messages.LEADERBOARD_TITLE)

    def test_rank_without_arguments_shows_usage(self, fake_riot: FakeRiotAPI):
        messenger = FakeMessenger()
        _say(fake_riot, messenger, "!rank")
        assert messenger.sent[0][2].startswith("Usage: `!rank")
        assert fake_riot.requests == []

    def test_rank_lines(self, fake_riot: FakeRiotAPI):
        fake_riot.add_player("A", "JP1", tier="GOLD", rank="II", lp=45, wins=10, losses=5, hotStreak=True)
        messenger = FakeMessenger()
        _say(fake_riot, messenger, "!rank A#JP1 bad")
        assert messenger.sent[0][2].splitlines() == [
            "A#JP1: GOLD II 45LP (10W/5L) [hot streak]",
            "bad: invalid Riot ID format (e.g. GameName#TagLine)",
        ]

    @pytest.mark.parametrize("content", ["!add NameOnly", "!add Name#"])
    def test_add_invalid_makes_no_remote_call(self, fake_riot: FakeRiotAPI, content):
        roster = MemoryRoster()
        messenger = FakeMessenger()
        _say(fake_riot, messenger, content, roster=roster)
        assert "Invalid Riot ID" in messenger.sent[0][2]
        assert fake_riot.requests == []
        assert roster.players == []

    def test_add_then_add_again(self, fake_riot: FakeRiotAPI):
        fake_riot.add_player("New", "JP1")
        roster = MemoryRoster()
        messenger = FakeMessenger()
        _say(fake_riot, messenger, "!add New#JP1", "!add New#JP1", roster=roster)
        assert "Added `New#JP1`" in messenger.sent[0][2]
        assert "already registered" in messenger.sent[1][2]
        assert roster.players == [PlayerIdentity("New", "JP1")]

    def test_daystats_bad_date_makes_no_remote_call(self, fake_riot: FakeRiotAPI):
        messenger = FakeMessenger()
        _say(fake_riot, messenger, "!daystats A#JP1 2024-01-01")
        assert "Invalid date" in messenger.sent[0][2]
        assert fake_riot.requests == []

    def test_daystats_result(self, fake_riot: FakeRiotAPI):
        puuid = fake_riot.add_player("Me", "JP1")
        fake_riot.match_ids[puuid] = ["M1"]
        fake_riot.add_match("M1", created_s=1704052800 + 60, results={puuid: True})
        messenger = FakeMessenger()

        _say(fake_riot, messenger, "!daystats Me#JP1 20240101")

        assert "2024/01/01 05:00 ~ 2024/01/02 05:00" in messenger.sent[0][2]
        assert "**1W 0L**" in messenger.edits[0][2]

    def test_daystats_without_games(self, fake_riot: FakeRiotAPI):
        fake_riot.add_player("Idle", "JP1")
        messenger = FakeMessenger()
        _say(
            fake_riot, messenger, "!daystats Idle#JP1",
            now=lambda: datetime(2024, 1, 2, 4, 0, tzinfo=JST),
        )
        assert "played no ranked" in messenger.edits[0][2]
        assert "2024/01/01 05:00" in messenger.edits[0][2]

    def test_daystats_account_failure_is_reported(self, fake_riot: FakeRiotAPI):
        messenger = FakeMessenger()
        _say(fake_riot, messenger, "!daystats Ghost#JP1 20240101")
        assert "could not fetch account info" in messenger.edits[0][2]
        assert "HTTP 404" in messenger.edits[0][2]

    def test_unreadable_roster_is_reported(self, fake_riot: FakeRiotAPI, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_bytes(b"TEST_CHAT_ROSTER='A#JP1'\nOTHER=\xff\xfe\n")
        roster = EnvRosterStore(env_file, "TEST_CHAT_ROSTER", env_fallback=False)
        messenger = FakeMessenger()

        _say(fake_riot, messenger, "!ranking", "!add A#JP1", roster=roster)

        assert messenger.edits[0][2] == "Could not read the player list."
        assert messenger.sent[-1][2] == "Could not update the player list."
        assert fake_riot.requests == []
