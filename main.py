"""Bot entry-point."""
from __future__ import annotations

import asyncio
import sys
from datetime import timedelta, timezone

from core.logging import get_logger
from core.logging.config import bootstrap_logging, shutdown_logging
from config import settings


def _local_timezone() -> timezone:
    return timezone(timedelta(hours=settings.UTC_OFFSET_HOURS))


async def _run() -> None:
    # Lazy imports keep `config` loading (and load_dotenv) ahead of everything else
    from application.services import PlayerFetchService
    from application.use_cases import (
        AddPlayerUseCase,
        BuildLeaderboardUseCase,
        DayStatsUseCase,
        LookupRanksUseCase,
    )
    from domain.enums import Region
    from infrastructure import EnvRosterStore, MatchRepository, RequestGate, RiotAPIClient, SummonerRepository
    from presentation import MessageHandler, RankBot

    region = Region.from_string(settings.RIOT_PLATFORM)
    gate = RequestGate(settings.REQUEST_DELAY_S)
    roster = EnvRosterStore(settings.ROSTER_PATH, settings.ROSTER_KEY)

    async with RiotAPIClient(settings.RIOT_API_KEY, region, gate=gate, timeout=settings.REQUEST_TIMEOUT) as api:
        fetch_service = PlayerFetchService(SummonerRepository(api), MatchRepository(api))

        def _handler(messenger):
            return MessageHandler(
                messenger,
                leaderboard=BuildLeaderboardUseCase(roster, fetch_service),
                lookup=LookupRanksUseCase(fetch_service),
                add_player=AddPlayerUseCase(roster, fetch_service),
                day_stats=DayStatsUseCase(
                    fetch_service,
                    _local_timezone(),
                    boundary_hour=settings.DAY_BOUNDARY_HOUR,
                    match_count=settings.MATCH_ID_COUNT,
                ),
                region=region,
                profile_base_url=settings.PROFILE_BASE_URL,
                prefix=settings.COMMAND_PREFIX,
            )

        bot = RankBot(_handler)
        async with bot:
            await bot.start(settings.DISCORD_TOKEN)


def main(argv: list[str]) -> int:
    bootstrap_logging(
        service="bot",
        level=settings.LOG_LEVEL,
        log_dir=settings.LOG_DIR,
        log_file_name="bot.jsonl",
    )
    log = get_logger(__name__, service="bot")
    try:
        settings.validate()
        settings.create_directories()
        log.info(lambda: f"starting on {settings.RIOT_PLATFORM}, roster at {settings.ROSTER_PATH}")
        asyncio.run(_run())
        return 0
    except ValueError as e:
        log.error(f"configuration error: {e}")
        return 2
    except KeyboardInterrupt:
        log.info("interrupted, shutting down")
        return 0
    finally:
        shutdown_logging()


def _cli() -> int:
    return main(sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(_cli())
