from .commands import CommandName, ParsedCommand, UsageError, parse_command
from .handler import MessageHandler

__all__ = [
    "CommandName",
    "ParsedCommand",
    "UsageError",
    "parse_command",
    "MessageHandler",
]
