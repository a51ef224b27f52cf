from __future__ import annotations

from typing import Awaitable, Callable, Dict, Optional

from application.use_cases import (
    AddPlayerOutcome,
    AddPlayerUseCase,
    BuildLeaderboardUseCase,
    DayStatsUseCase,
    LookupRanksUseCase,
)
from core.logging import get_logger, log_context
from domain.entities import PlayerIdentity
from domain.enums import Region
from domain.errors import (
    InvalidDateError,
    InvalidRiotIdError,
    MessageDeliveryError,
    PersistenceError,
    ResolutionError,
)
from domain.interfaces import IMessenger, IncomingMessage

from . import messages
from .commands import CommandName, ParsedCommand, UsageError, parse_command

LEADERBOARD_PENDING = "Fetching rank info... ⏳"


class MessageHandler:
    """
    Routes chat messages to the use cases and replies on the same channel.

    Slow commands (leaderboard, day stats) first post a placeholder and later
    replace it with the result. If that edit fails the result is posted as a
    new message. Messages authored by the bot itself are ignored.
    """

    def __init__(
        self,
        messenger: IMessenger,
        *,
        leaderboard: BuildLeaderboardUseCase,
        lookup: LookupRanksUseCase,
        add_player: AddPlayerUseCase,
        day_stats: DayStatsUseCase,
        region: Region,
        profile_base_url: str,
        prefix: str = "!",
        bot_user_id: Optional[str] = None,
    ) -> None:
        self.messenger = messenger
        self.leaderboard = leaderboard
        self.lookup = lookup
        self.add_player = add_player
        self.day_stats = day_stats
        self.region = region
        self.profile_base_url = profile_base_url
        self.prefix = prefix
        self.bot_user_id = bot_user_id
        self._log = get_logger(__name__, service="chat")
        self._routes: Dict[CommandName, Callable[[str, ParsedCommand], Awaitable[None]]] = {
            CommandName.RANKING: self._ranking,
            CommandName.RANK: self._rank,
            CommandName.ADD: self._add,
            CommandName.DAYSTATS: self._daystats,
            CommandName.HELP: self._help,
        }

    async def handle(self, message: IncomingMessage) -> bool:
        """Process one message; returns False when it was not a command for us."""
        if self.bot_user_id is not None and message.author_id == self.bot_user_id:
            return False
        command = parse_command(message.content, self.prefix)
        if command is None:
            return False

        with log_context(command=command.name.value, channel=message.channel_id):
            self._log.info(lambda: f"command {command.name.value} args={command.args}")
            try:
                await self._routes[command.name](message.channel_id, command)
            except UsageError as e:
                await self._send(message.channel_id, messages.render_usage(e.command.value, self.prefix))
        return True

    # ── Commands ───────────────────────────────────────────────────────────

    async def _ranking(self, channel_id: str, command: ParsedCommand) -> None:
        placeholder = await self._send(channel_id, LEADERBOARD_PENDING)
        try:
            result = await self.leaderboard.execute()
        except PersistenceError as e:
            self._log.error(f"roster unreadable: {e}")
            text = "Could not read the player list."
        else:
            text = messages.render_leaderboard(result, self.region, self.profile_base_url, self.prefix)
        await self._finish(channel_id, placeholder, text)

    async def _rank(self, channel_id: str, command: ParsedCommand) -> None:
        if not command.args:
            raise UsageError(command.name)
        lookups = await self.lookup.execute(command.args)
        await self._send(channel_id, messages.render_rank_lookups(lookups))

    async def _add(self, channel_id: str, command: ParsedCommand) -> None:
        raw = command.single_riot_id()
        try:
            outcome, identity = await self.add_player.execute(raw)
        except InvalidRiotIdError:
            text = f"Invalid Riot ID format. Use e.g. `{self.prefix}add {messages.RIOT_ID_EXAMPLE}`."
        except ResolutionError as e:
            self._log.warning(f"add rejected: {e}")
            text = f"Could not find the account `{raw}`."
        except PersistenceError as e:
            self._log.error(f"roster write failed: {e}")
            text = "Could not update the player list."
        else:
            if outcome is AddPlayerOutcome.ALREADY_PRESENT:
                text = f"`{identity.riot_id}` is already registered."
            else:
                self._log.success(lambda: f"added {identity.riot_id}")
                text = f"Added `{identity.riot_id}` to the ranking list."
        await self._send(channel_id, text)

    async def _daystats(self, channel_id: str, command: ParsedCommand) -> None:
        raw_id, raw_date = command.riot_id_and_date()
        try:
            identity = PlayerIdentity.parse(raw_id)
            window = self.day_stats.resolve_window(raw_date)
        except InvalidRiotIdError:
            await self._send(channel_id, f"Invalid Riot ID format. Use e.g. `{messages.RIOT_ID_EXAMPLE}`.")
            return
        except InvalidDateError:
            await self._send(channel_id, "Invalid date. Use the `YYYYMMDD` format (e.g. `20240101`).")
            return

        placeholder = await self._send(channel_id, messages.render_day_stats_pending(identity, window))
        try:
            stats = await self.day_stats.execute(identity, window)
        except ResolutionError as e:
            self._log.warning(f"day-stats failed: {e}")
            text = messages.render_resolution_failure(identity, e, window)
        else:
            text = messages.render_day_stats(stats)
        await self._finish(channel_id, placeholder, text)

    async def _help(self, channel_id: str, command: ParsedCommand) -> None:
        await self._send(channel_id, messages.render_help(self.prefix))

    # ── Delivery ───────────────────────────────────────────────────────────

    async def _send(self, channel_id: str, content: str) -> Optional[str]:
        try:
            return await self.messenger.send(channel_id, content)
        except MessageDeliveryError as e:
            self._log.error(f"send failed: {e}")
            return None

    async def _finish(self, channel_id: str, placeholder_id: Optional[str], content: str) -> None:
        """Replace the placeholder with the final text, or post it anew."""
        if placeholder_id is not None:
            try:
                await self.messenger.edit(channel_id, placeholder_id, content)
                return
            except MessageDeliveryError as e:
                self._log.warning(f"edit failed, sending a new message: {e}")
        await self._send(channel_id, content)
