"""Match entity representing a finished match."""
from dataclasses import dataclass, field
from typing import Optional

from .participant import Participant


@dataclass(frozen=True, slots=True)
class MatchSummary:
    """Represents a League of Legends match, reduced to what win/loss tallies need."""

    match_id: str
    game_creation: int  # Unix timestamp milliseconds
    game_duration: int  # Seconds
    queue_id: int
    participants: tuple[Participant, ...] = field(default_factory=tuple)

    @property
    def created_at_epoch(self) -> int:
        """Creation time in whole Unix seconds."""
        return self.game_creation // 1000

    def find_participant(self, puuid: str) -> Optional[Participant]:
        return next((p for p in self.participants if p.puuid == puuid), None)
