"""Tests for Riot ID parsing, rank ordering and leaderboard sorting."""
import pytest

from domain.entities import LeagueEntry, PlayerIdentity, PlayerStanding, RankPosition, rank_values
from domain.enums import Division, Region, Tier
from domain.errors import InvalidRiotIdError
from domain.ranking import sort_standings


def _entry(tier: str, rank: str = "", lp: int = 0) -> LeagueEntry:
    return LeagueEntry(queue_type="RANKED_SOLO_5x5", tier=tier, division=rank, league_points=lp)


def _standing(name: str, entry=None) -> PlayerStanding:
    return PlayerStanding(identity=PlayerIdentity(name, "JP1"), entry=entry)


class TestPlayerIdentity:
    """Riot ID parsing."""

    def test_parses_name_and_tag(self):
        identity = PlayerIdentity.parse("Hide on bush#KR1")
        assert identity.game_name == "Hide on bush"
        assert identity.tag_line == "KR1"
        assert identity.riot_id == "Hide on bush#KR1"

    def test_trims_surrounding_whitespace(self):
        assert PlayerIdentity.parse("  Foo#Bar ") == PlayerIdentity("Foo", "Bar")

    @pytest.mark.parametrize("raw", ["NameOnly", "Name#", "#Tag", "a#b#c", "", "  #  "])
    def test_rejects_malformed(self, raw):
        with pytest.raises(InvalidRiotIdError):
            PlayerIdentity.parse(raw)


class TestRankValues:
    """Tier and division ordinals."""

    def test_tier_ordinals_are_strictly_increasing(self):
        order = ["IRON", "BRONZE", "SILVER", "GOLD", "PLATINUM", "EMERALD",
                 "DIAMOND", "MASTER", "GRANDMASTER", "CHALLENGER"]
        ordinals = [Tier.from_string(t).ordinal for t in order]
        assert ordinals == sorted(ordinals)
        assert len(set(ordinals)) == len(ordinals)
        assert ordinals[0] > 0

    def test_division_ordinals_are_strictly_increasing(self):
        assert [Division.from_string(d).ordinal for d in ["IV", "III", "II", "I"]] == [1, 2, 3, 4]

    def test_labels_are_case_insensitive(self):
        assert rank_values("gold", "ii") == rank_values("GOLD", "II")

    def test_unknown_labels_map_to_zero(self):
        assert rank_values("WOOD", "V") == (0, 0)
        assert rank_values(None, None) == (0, 0)

    def test_unranked_sorts_below_iron_iv(self):
        assert RankPosition.unranked() < RankPosition.from_labels("IRON", "IV", 0)


class TestSortStandings:
    """Leaderboard ordering."""

    def test_orders_by_tier_then_division_then_lp(self):
        standings = [
            _standing("gold2_10", _entry("GOLD", "II", 10)),
            _standing("plat4", _entry("PLATINUM", "IV", 0)),
            _standing("gold2_80", _entry("GOLD", "II", 80)),
            _standing("gold1", _entry("GOLD", "I", 0)),
        ]
        names = [s.identity.game_name for s in sort_standings(standings)]
        assert names == ["plat4", "gold1", "gold2_80", "gold2_10"]

    def test_ties_keep_input_order(self):
        standings = [
            _standing("first", _entry("SILVER", "III", 50)),
            _standing("second", _entry("SILVER", "III", 50)),
            _standing("third", _entry("SILVER", "III", 50)),
        ]
        assert [s.identity.game_name for s in sort_standings(standings)] == ["first", "second", "third"]

    def test_unranked_players_go_last(self):
        standings = [
            _standing("unranked_a"),
            _standing("iron", _entry("IRON", "IV", 0)),
            _standing("unranked_b"),
        ]
        names = [s.identity.game_name for s in sort_standings(standings)]
        assert names == ["iron", "unranked_a", "unranked_b"]

    def test_apex_tiers_compare_on_lp(self):
        standings = [
            _standing("master", _entry("MASTER", "I", 300)),
            _standing("challenger", _entry("CHALLENGER", "I", 50)),
            _standing("grandmaster", _entry("GRANDMASTER", "I", 900)),
        ]
        names = [s.identity.game_name for s in sort_standings(standings)]
        assert names == ["challenger", "grandmaster", "master"]


class TestLeagueEntry:
    def test_flags_lists_set_flags_only(self):
        entry = LeagueEntry("RANKED_SOLO_5x5", "GOLD", "I", hot_streak=True, inactive=True)
        assert entry.flags == ["hot streak", "inactive"]

    def test_is_solo(self):
        assert _entry("GOLD", "I").is_solo
        assert not LeagueEntry("RANKED_FLEX_SR", "GOLD", "I").is_solo


class TestRegion:
    def test_from_platform_code(self):
        region = Region.from_string(" JP1 ")
        assert region is Region.JP1
        assert region.regional_url == "https://asia.api.riotgames.com"
        assert region.platform_url == "https://jp1.api.riotgames.com"
        assert region.profile_slug == "jp"

    def test_unknown_platform(self):
        with pytest.raises(ValueError):
            Region.from_string("moon1")
