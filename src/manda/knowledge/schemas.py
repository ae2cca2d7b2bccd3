"""Data models for the knowledge responder and chat envelope."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class Role(StrEnum):
    """Chat message author."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class FAQEntry:
    """A canned question/answer pair. Identity is its index in the catalog."""

    question: str
    answer: str


@dataclass(frozen=True)
class KeywordRule:
    """Maps a disjunction of substrings to an answer.

    The answer is either a catalog entry (``target_index``) or text built by
    ``composer`` from the normalized query. ``predicate`` adds one more way to
    match, for rules that also fire on a conjunction of terms.
    """

    name: str
    triggers: frozenset[str]
    target_index: int | None = None
    composer: Callable[[str], str] | None = None
    predicate: Callable[[str], bool] | None = None

    def matches(self, query: str) -> bool:
        if any(trigger in query for trigger in self.triggers):
            return True
        return self.predicate is not None and self.predicate(query)

    def answer(self, query: str, faqs: tuple[FAQEntry, ...]) -> str:
        if self.composer is not None:
            return self.composer(query)
        if self.target_index is None:
            raise ValueError(f"Rule '{self.name}' has neither a target nor a composer")
        return faqs[self.target_index].answer


@dataclass(frozen=True)
class ChatMessage:
    """A single message in a conversation."""

    role: Role
    content: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ChatMessage:
        return cls(role=Role(data["role"]), content=str(data.get("content", "")))

    def to_dict(self) -> dict[str, str]:
        return {"role": self.role.value, "content": self.content}


@dataclass
class Usage:
    """Token accounting. The local responders never count tokens."""

    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


@dataclass
class Choice:
    index: int
    message: ChatMessage
    finish_reason: str = "stop"


@dataclass
class ChatCompletion:
    """Chat-completion shaped response envelope."""

    id: str
    model: str
    created: int
    choices: list[Choice] = field(default_factory=list)
    usage: Usage = field(default_factory=Usage)
    object: str = "chat.completion"

    @property
    def content(self) -> str:
        """Text of the first choice."""
        return self.choices[0].message.content if self.choices else ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "model": self.model,
            "object": self.object,
            "created": self.created,
            "choices": [
                {
                    "index": c.index,
                    "finish_reason": c.finish_reason,
                    "message": c.message.to_dict(),
                }
                for c in self.choices
            ],
            "usage": {
                "prompt_tokens": self.usage.prompt_tokens,
                "completion_tokens": self.usage.completion_tokens,
                "total_tokens": self.usage.total_tokens,
            },
        }
