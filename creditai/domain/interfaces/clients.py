"""External client interfaces."""

from abc import ABC, abstractmethod
from typing import AsyncIterator, Sequence

from creditai.domain.entities import ChatMessage


class ChatCompletionClient(ABC):
    """
    Abstract client for the streaming chat completion endpoint.

    Answers borrower questions about credit scoring.
    """

    @abstractmethod
    def stream(self, messages: Sequence[ChatMessage]) -> AsyncIterator[str]:
        """
        Stream the assistant's reply to a conversation.

        Args:
            messages: The conversation so far, oldest first

        Yields:
            Text deltas of the assistant reply, in order

        Raises:
            ChatRateLimitedException: If the endpoint answers 429
            ChatQuotaExceededException: If the endpoint answers 402
            ChatAPIException: For any other error status
            ChatConnectionException: If the endpoint is unreachable or times out
        """
        ...
