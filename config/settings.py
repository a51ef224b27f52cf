"""Application settings and configuration."""
import os
from pathlib import Path
from dotenv import load_dotenv

ENV_PATH = Path(__file__).resolve().parent / '.env'
load_dotenv(dotenv_path=ENV_PATH)


class Settings:
    """
    ─── RATE BUDGET ──────────────────────────────────────────────────────
    A personal Riot key allows 100 requests / 120 seconds. Every outbound
    call goes through one shared gate spaced REQUEST_DELAY_S apart, so a
    single bot process stays at ~83 req / 120s no matter how many
    commands are running.
    ──────────────────────────────────────────────────────────────────────
    """

    RIOT_API_KEY:  str = os.getenv('RIOT_API_KEY', '')
    DISCORD_TOKEN: str = os.getenv('DISCORD_TOKEN', '')

    # ── Remote service ─────────────────────────────────────────────────────
    # Platform host (jp1, euw1, ...). The regional host for account/match
    # endpoints is derived from it via domain.enums.Region.
    RIOT_PLATFORM: str = os.getenv('RIOT_PLATFORM', 'jp1')

    # ── HTTP ───────────────────────────────────────────────────────────────
    REQUEST_DELAY_S: float = float(os.getenv('REQUEST_DELAY_S', '1.2'))
    REQUEST_TIMEOUT: float = float(os.getenv('REQUEST_TIMEOUT', '10'))

    # ── Match history ──────────────────────────────────────────────────────
    # Riot caps match-v5 id lists at 100 per call.
    MATCH_ID_COUNT:    int = min(int(os.getenv('MATCH_ID_COUNT', '100')), 100)
    DAY_BOUNDARY_HOUR: int = int(os.getenv('DAY_BOUNDARY_HOUR', '5'))
    UTC_OFFSET_HOURS:  int = int(os.getenv('UTC_OFFSET_HOURS', '9'))

    # ── Roster ─────────────────────────────────────────────────────────────
    ROSTER_PATH: Path = Path(os.getenv('ROSTER_PATH', str(ENV_PATH)))
    ROSTER_KEY:  str  = os.getenv('ROSTER_KEY', 'LOL_PLAYERS')

    # ── Chat ───────────────────────────────────────────────────────────────
    COMMAND_PREFIX:   str = os.getenv('COMMAND_PREFIX', '!')
    PROFILE_BASE_URL: str = os.getenv('PROFILE_BASE_URL', 'https://www.op.gg/summoners')

    # ── Paths ──────────────────────────────────────────────────────────────
    BASE_DIR: Path = Path(__file__).resolve().parent.parent
    DATA_DIR: Path = BASE_DIR / 'data'
    LOG_DIR:  Path = Path(os.getenv('LOG_DIR', str(DATA_DIR / 'logs')))

    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO')

    @classmethod
    def validate(cls) -> None:
        if not cls.RIOT_API_KEY:
            raise ValueError("RIOT_API_KEY must be set in config/.env")
        if not cls.DISCORD_TOKEN:
            raise ValueError("DISCORD_TOKEN must be set in config/.env")
        if not 0 <= cls.DAY_BOUNDARY_HOUR <= 23:
            raise ValueError("DAY_BOUNDARY_HOUR must be between 0 and 23")

    @classmethod
    def create_directories(cls) -> None:
        cls.LOG_DIR.mkdir(parents=True, exist_ok=True)
        cls.ROSTER_PATH.parent.mkdir(parents=True, exist_ok=True)


settings = Settings()
