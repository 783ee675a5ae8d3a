"""Data transfer objects for the credit assistant chat."""

from dataclasses import dataclass
from typing import List

from creditai.domain.entities import ChatMessage


@dataclass(frozen=True)
class ChatRequest:
    """A conversation to continue, oldest message first."""
    messages: List[ChatMessage]


@dataclass(frozen=True)
class ChatReply:
    """The assistant's reply, or the fixed failure message."""

    message: ChatMessage
    outcome: str

    @property
    def ok(self) -> bool:
        return self.outcome == "success"
