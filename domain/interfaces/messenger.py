"""Chat transport interface."""
from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class IncomingMessage:
    """A chat message as seen by the command handler."""

    channel_id: str
    author_id: str
    content: str


class IMessenger(ABC):
    """Sends and edits chat messages. Failures raise MessageDeliveryError."""

    @abstractmethod
    async def send(self, channel_id: str, content: str) -> str:
        """Send a message and return its id."""

    @abstractmethod
    async def edit(self, channel_id: str, message_id: str, content: str) -> None:
        """Replace the content of a previously sent message."""
