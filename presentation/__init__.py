"""Presentation layer - chat interface."""
from .chat import MessageHandler
from .discord_bot import DiscordMessenger, RankBot

__all__ = [
    "MessageHandler",
    "DiscordMessenger",
    "RankBot",
]
