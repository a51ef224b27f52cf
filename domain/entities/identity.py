"""Player identity (Riot ID) value object."""
from __future__ import annotations

from dataclasses import dataclass

from ..errors import InvalidRiotIdError

RIOT_ID_SEPARATOR = "#"


@dataclass(frozen=True, slots=True)
class PlayerIdentity:
    """A Riot ID: display name plus tag, e.g. ``Faker#KR1``."""

    game_name: str
    tag_line: str

    @property
    def riot_id(self) -> str:
        return f"{self.game_name}{RIOT_ID_SEPARATOR}{self.tag_line}"

    def __str__(self) -> str:
        return self.riot_id

    @classmethod
    def parse(cls, raw: str) -> PlayerIdentity:
        """Parse ``GameName#TagLine``.

        Raises:
            InvalidRiotIdError: no separator, more than one separator,
                or an empty name or tag.
        """
        text = (raw or "").strip()
        parts = text.split(RIOT_ID_SEPARATOR)
        if len(parts) != 2:
            raise InvalidRiotIdError(raw)
        game_name, tag_line = parts[0].strip(), parts[1].strip()
        if not game_name or not tag_line:
            raise InvalidRiotIdError(raw)
        return cls(game_name=game_name, tag_line=tag_line)
