"""Domain error hierarchy."""
from __future__ import annotations

from typing import Optional

_BODY_EXCERPT = 200


class RankBotError(Exception):
    """Base error for the rank bot."""


class ValidationError(RankBotError):
    """Input rejected locally, before any remote call."""


class InvalidRiotIdError(ValidationError):
    """Raised when a Riot ID is not of the form ``GameName#TagLine``."""

    def __init__(self, raw: str) -> None:
        super().__init__(f"Invalid Riot ID '{raw}' (expected GameName#TagLine)")
        self.raw = raw


class InvalidDateError(ValidationError):
    """Raised when a date argument is not a valid ``YYYYMMDD`` date."""

    def __init__(self, raw: str, reason: str = "") -> None:
        detail = f": {reason}" if reason else ""
        super().__init__(f"Invalid date '{raw}' (expected YYYYMMDD){detail}")
        self.raw = raw


class ResolutionError(RankBotError):
    """A remote lookup failed: network, timeout, non-2xx or malformed payload.

    Attributes:
        step: pipeline step that failed (account, summoner, league, match_ids, match)
        target: what was being resolved (Riot ID, PUUID, match id, ...)
        status_code: HTTP status when the service answered, else None
        body: raw response body when available
    """

    def __init__(
        self,
        step: str,
        target: str,
        reason: str,
        *,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
    ) -> None:
        self.step = step
        self.target = target
        self.reason = reason
        self.status_code = status_code
        self.body = body
        super().__init__(self._describe())

    @property
    def body_excerpt(self) -> str:
        if not self.body:
            return ""
        text = self.body.strip()
        return text if len(text) <= _BODY_EXCERPT else text[:_BODY_EXCERPT] + "…"

    def with_step(self, step: str) -> "ResolutionError":
        """Return a copy attributed to a different pipeline step."""
        return ResolutionError(step, self.target, self.reason, status_code=self.status_code, body=self.body)

    def _describe(self) -> str:
        msg = f"{self.step} lookup failed for {self.target}: {self.reason}"
        if self.status_code is not None:
            msg += f" (HTTP {self.status_code})"
        excerpt = self.body_excerpt
        if excerpt:
            msg += f" response={excerpt}"
        return msg


class PersistenceError(RankBotError):
    """The roster store could not be read or written."""


class MessageDeliveryError(RankBotError):
    """The chat transport failed to send or edit a message."""
