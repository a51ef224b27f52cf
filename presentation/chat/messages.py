"""Chat message rendering (Discord markdown)."""
from __future__ import annotations

from typing import List, Optional
from urllib.parse import quote

from application.use_cases import LeaderboardResult, RankLookup
from domain.entities import DayStats, DayWindow, LeagueEntry, PlayerIdentity, PlayerStanding
from domain.enums import Region, Tier
from domain.errors import InvalidRiotIdError, ResolutionError

UNRANKED = "UNRANKED"
LEADERBOARD_TITLE = "**LoL Player Ranking** :trophy:"
RIOT_ID_EXAMPLE = "GameName#TagLine"

_STEP_FAILURES = {
    "account": "could not fetch account info",
    "summoner": "could not fetch summoner info",
    "league": "could not fetch rank info",
    "match_ids": "could not fetch match history",
    "match": "could not fetch match details",
}


def profile_url(identity: PlayerIdentity, region: Region, base_url: str) -> str:
    """op.gg-style deep link: ``{base}/{region}/{name}-{tag}``, both parts percent-escaped."""
    name = quote(identity.game_name, safe="")
    tag = quote(identity.tag_line, safe="")
    return f"{base_url.rstrip('/')}/{region.profile_slug}/{name}-{tag}"


def format_rank(entry: LeagueEntry) -> str:
    """``Gold II 45LP``; apex tiers have no division: ``Master 120LP``."""
    tier = entry.tier_enum
    parts = [tier.display_name if tier is not Tier.UNRANKED else entry.tier.title()]
    if entry.division_enum.label and not tier.is_apex:
        parts.append(entry.division_enum.label)
    return f"{' '.join(parts)} {entry.league_points}LP"


def render_standing(position: int, standing: PlayerStanding, region: Region, base_url: str) -> str:
    link = f"[`{standing.identity.riot_id}`](<{profile_url(standing.identity, region, base_url)}>)"
    if standing.entry is None:
        return f"**{position}.** {link} ({UNRANKED})"
    return f"**{position}.** {link} (**{format_rank(standing.entry)}**)"


def render_leaderboard_lines(result: LeaderboardResult, region: Region, base_url: str) -> List[str]:
    return [
        render_standing(i, standing, region, base_url)
        for i, standing in enumerate(result.standings, start=1)
    ]


def render_leaderboard(result: LeaderboardResult, region: Region, base_url: str, prefix: str = "!") -> str:
    if result.roster_size == 0:
        return f"No players registered yet. Add one with `{prefix}add {RIOT_ID_EXAMPLE}`."
    if result.is_empty:
        return "Could not fetch rank info for any registered player."
    return "\n".join([LEADERBOARD_TITLE, *render_leaderboard_lines(result, region, base_url)])


def render_rank_lookup(lookup: RankLookup) -> str:
    label = lookup.identity.riot_id if lookup.identity else lookup.raw
    if isinstance(lookup.error, InvalidRiotIdError):
        return f"{lookup.raw}: invalid Riot ID format (e.g. {RIOT_ID_EXAMPLE})"
    if isinstance(lookup.error, ResolutionError):
        return f"{label}: {_STEP_FAILURES.get(lookup.error.step, 'lookup failed')}."
    if lookup.error is not None:
        return f"{label}: lookup failed."
    if lookup.entry is None:
        return f"{label}: no solo/duo rank data"
    entry = lookup.entry
    division = f" {entry.division}" if entry.division and not entry.tier_enum.is_apex else ""
    line = f"{label}: {entry.tier}{division} {entry.league_points}LP ({entry.wins}W/{entry.losses}L)"
    if entry.flags:
        line += f" [{', '.join(entry.flags)}]"
    return line


def render_rank_lookups(lookups: List[RankLookup]) -> str:
    return "\n".join(render_rank_lookup(lookup) for lookup in lookups)


def render_day_stats_pending(identity: PlayerIdentity, window: DayWindow) -> str:
    return f"Tallying ranked results for `{identity.riot_id}` ({window.label()})... ⏳"


def render_day_stats(stats: DayStats) -> str:
    who, when = f"`{stats.identity.riot_id}`", stats.window.label()
    if not stats.has_games:
        return f"{who} played no ranked solo/duo games between {when}."
    text = f"Ranked solo/duo record for {who} ({when}):\n**{stats.wins}W {stats.losses}L**"
    if stats.skipped_matches:
        text += f"\n({stats.skipped_matches} match(es) could not be fetched and were not counted)"
    return text


def render_resolution_failure(identity: PlayerIdentity, error: ResolutionError, window: Optional[DayWindow] = None) -> str:
    what = _STEP_FAILURES.get(error.step, "lookup failed")
    span = f" ({window.label()})" if window else ""
    return f"`{identity.riot_id}`: {what}{span}: {error}"


def render_help(prefix: str = "!") -> str:
    rows = [
        (f"{prefix}ranking", "Show the leaderboard of registered players."),
        (f"{prefix}rank <RiotID> [RiotID2...]", "Show the current solo/duo rank of the given players."),
        (f"{prefix}add <RiotID>", "Register a player for the leaderboard."),
        (f"{prefix}daystats <RiotID> [YYYYMMDD]", "Ranked solo/duo W/L for one game day."),
        ("", "Without a date, the current day is used."),
        (f"{prefix}help", "Show this message."),
    ]
    width = max(len(cmd) for cmd, _ in rows)
    body = "\n".join(f"{cmd:<{width}} : {desc}" if cmd else f"{'':<{width}}   {desc}" for cmd, desc in rows)
    return f"Commands (RiotID is {RIOT_ID_EXAMPLE}):\n```\n{body}\n```"


def render_usage(command: str, prefix: str = "!") -> str:
    usages = {
        "rank": f"{prefix}rank <RiotID> [RiotID2...]",
        "add": f"{prefix}add <RiotID>",
        "daystats": f"{prefix}daystats <RiotID> [YYYYMMDD]",
    }
    return f"Usage: `{usages.get(command, prefix + command)}` (RiotID is {RIOT_ID_EXAMPLE})"
