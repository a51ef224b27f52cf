"""Ranked queues."""
from enum import Enum


class QueueType(Enum):
    """Ranked queues, valued by their match-v5 queue id.

    The member name doubles as league-v4's ``queueType`` string.
    """

    RANKED_SOLO_5x5 = 420

    @property
    def queue_id(self) -> int:
        return self.value

    @property
    def api_queue_name(self) -> str:
        return self.name

    @property
    def label(self) -> str:
        return "Ranked Solo/Duo"
