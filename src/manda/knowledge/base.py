"""Abstract base class for responders."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from manda.knowledge.schemas import ChatMessage, Role


class Responder(ABC):
    """Interface for turning a user query into an assistant reply."""

    model: str = "unknown"

    @abstractmethod
    def respond(self, query: str) -> str:
        """Answer a single free-text query.

        Args:
            query: Raw user input, possibly empty.

        Returns:
            A non-empty response string.
        """

    def reply(self, messages: Sequence[ChatMessage]) -> str:
        """Answer the most recent user message in a conversation.

        Raises:
            ValueError: If the conversation has no user message.
        """
        query = last_user_message(messages)
        if query is None:
            raise ValueError("No user message found")
        return self.respond(query)

    @classmethod
    def provider_name(cls) -> str:
        """Return human-readable responder name."""
        return cls.__name__


def last_user_message(messages: Sequence[ChatMessage]) -> str | None:
    """Return the content of the last user message, if any."""
    for message in reversed(messages):
        if message.role is Role.USER:
            return message.content
    return None
