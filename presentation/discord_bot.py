"""discord.py adapter: the gateway client and the IMessenger it backs."""
from __future__ import annotations

from typing import Callable, Optional

import discord

from core.logging import get_logger
from domain.errors import MessageDeliveryError
from domain.interfaces import IMessenger, IncomingMessage

from .chat.handler import MessageHandler


class DiscordMessenger(IMessenger):
    """Sends and edits channel messages through a discord.py client."""

    def __init__(self, client: discord.Client) -> None:
        self.client = client

    async def _channel(self, channel_id: str) -> discord.abc.Messageable:
        channel = self.client.get_channel(int(channel_id))
        if channel is None:
            channel = await self.client.fetch_channel(int(channel_id))
        return channel

    async def send(self, channel_id: str, content: str) -> str:
        try:
            channel = await self._channel(channel_id)
            message = await channel.send(content)
        except discord.DiscordException as e:
            raise MessageDeliveryError(f"send to channel {channel_id} failed: {e}") from e
        return str(message.id)

    async def edit(self, channel_id: str, message_id: str, content: str) -> None:
        try:
            channel = await self._channel(channel_id)
            await channel.get_partial_message(int(message_id)).edit(content=content)
        except (discord.DiscordException, AttributeError) as e:
            raise MessageDeliveryError(f"edit of message {message_id} failed: {e}") from e


class RankBot(discord.Client):
    """Gateway client that forwards text messages to a MessageHandler."""

    def __init__(
        self,
        handler_factory: Callable[[IMessenger], MessageHandler],
        *,
        intents: Optional[discord.Intents] = None,
    ) -> None:
        if intents is None:
            intents = discord.Intents.default()
            intents.message_content = True
        super().__init__(intents=intents)
        self.messenger = DiscordMessenger(self)
        self.handler = handler_factory(self.messenger)
        self._log = get_logger(__name__, service="discord")

    async def on_ready(self) -> None:
        if self.user is not None:
            self.handler.bot_user_id = str(self.user.id)
        self._log.success(lambda: f"logged in as {self.user} ({len(self.guilds)} guilds)")

    async def on_message(self, message: discord.Message) -> None:
        if self.user is not None and message.author.id == self.user.id:
            return
        await self.handler.handle(
            IncomingMessage(
                channel_id=str(message.channel.id),
                author_id=str(message.author.id),
                content=message.content,
            )
        )
