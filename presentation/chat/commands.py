"""Chat command parsing."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from domain.errors import ValidationError


class CommandName(Enum):
    RANKING = "ranking"
    RANK = "rank"
    ADD = "add"
    DAYSTATS = "daystats"
    HELP = "help"


class UsageError(ValidationError):
    """A command was called with the wrong number of arguments."""

    def __init__(self, command: CommandName):
        self.command = command
        super().__init__(f"wrong arguments for {command.value}")


@dataclass(frozen=True)
class ParsedCommand:
    name: CommandName
    args: List[str]
    remainder: str

    def single_riot_id(self) -> str:
        """The whole remainder; Riot game names may contain spaces."""
        if not self.remainder:
            raise UsageError(self.name)
        return self.remainder

    def riot_id_and_date(self) -> Tuple[str, Optional[str]]:
        """
        Split ``<RiotID> [YYYYMMDD]``.

        The Riot ID runs up to and including the first token holding a
        ``#``; at most one token may follow it. Without any ``#`` the whole
        remainder is returned as the Riot ID so that parsing rejects it.
        """
        if not self.args:
            raise UsageError(self.name)
        for i, token in enumerate(self.args):
            if "#" in token:
                rest = self.args[i + 1:]
                if len(rest) > 1:
                    raise UsageError(self.name)
                return " ".join(self.args[: i + 1]), (rest[0] if rest else None)
        return self.remainder, None


def parse_command(content: str, prefix: str = "!") -> Optional[ParsedCommand]:
    """Match on the first whitespace-separated token; anything else is not for us."""
    text = content.strip()
    if not text.startswith(prefix):
        return None
    head, *tail = text.split(None, 1)
    try:
        name = CommandName(head[len(prefix):])
    except ValueError:
        return None
    remainder = tail[0].strip() if tail else ""
    return ParsedCommand(name=name, args=remainder.split(), remainder=remainder)
