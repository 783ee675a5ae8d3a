"""External API client implementations."""

from .chat_client import HttpChatCompletionClient
from .sse import SSEDeltaParser

__all__ = [
    "HttpChatCompletionClient",
    "SSEDeltaParser",
]
