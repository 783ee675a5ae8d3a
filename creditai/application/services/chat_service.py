"""Chat service - relays the credit assistant conversation."""

import json
from typing import AsyncIterator, List, Sequence, Tuple

import structlog

from creditai.core.metrics import record_chat_outcome, track_chat_latency
from creditai.domain.entities import ChatMessage, ChatRole
from creditai.domain.exceptions import (
    ChatAPIException,
    ChatConnectionException,
    ChatQuotaExceededException,
    ChatRateLimitedException,
)
from creditai.domain.interfaces import ChatCompletionClient
from creditai.application.dto import ChatReply

logger = structlog.get_logger(__name__)


RATE_LIMITED_MESSAGE = "Rate limited. Please try again later."
QUOTA_EXCEEDED_MESSAGE = "Usage limit reached."
ERROR_MESSAGE = "Something went wrong."
CONNECTION_ERROR_MESSAGE = "Connection error. Please try again."


def failure_for(exc: ChatAPIException) -> Tuple[str, str]:
    """Outcome label and user-facing message for a chat failure."""
    if isinstance(exc, ChatRateLimitedException):
        return "rate_limited", RATE_LIMITED_MESSAGE
    if isinstance(exc, ChatQuotaExceededException):
        return "quota_exceeded", QUOTA_EXCEEDED_MESSAGE
    if isinstance(exc, ChatConnectionException):
        return "connection_error", CONNECTION_ERROR_MESSAGE
    return "error", ERROR_MESSAGE


SSE_DONE = "data: [DONE]\n\n"


def format_sse(content: str | None = None, finish_reason: str | None = None) -> str:
    """One server-sent event carrying a completion chunk."""
    delta = {"content": content} if content else {}
    chunk = {"choices": [{"delta": delta, "finish_reason": finish_reason}]}
    return f"data: {json.dumps(chunk)}\n\n"


class ChatService:
    """
    Application service for the credit assistant.

    Failures never escape: each one becomes a single assistant message.
    """

    def __init__(self, chat_client: ChatCompletionClient):
        self._chat_client = chat_client

    async def reply(self, messages: Sequence[ChatMessage]) -> ChatReply:
        """
        Get the assistant's full reply to a conversation.

        Args:
            messages: The conversation so far, oldest first

        Returns:
            ChatReply with the joined reply, or the fixed failure message
        """
        parts: List[str] = []
        try:
            with track_chat_latency():
                async for delta in self._chat_client.stream(messages):
                    parts.append(delta)
        except ChatAPIException as e:
            outcome, content = failure_for(e)
            record_chat_outcome(outcome)
            logger.warning(
                "chat_reply_failed",
                outcome=outcome,
                code=e.code,
                status_code=e.status_code,
            )
            return ChatReply(
                message=ChatMessage(role=ChatRole.ASSISTANT, content=content),
                outcome=outcome,
            )

        record_chat_outcome("success")
        logger.info("chat_replied", turns=len(messages), chunks=len(parts))
        return ChatReply(
            message=ChatMessage(role=ChatRole.ASSISTANT, content="".join(parts)),
            outcome="success",
        )

    async def stream(self, messages: Sequence[ChatMessage]) -> AsyncIterator[str]:
        """
        Relay the reply as server-sent events.

        Deltas are re-emitted as completion chunks. A failure is emitted as
        one chunk holding the fixed message with finish_reason "error".
        The stream always ends with "data: [DONE]".
        """
        chunks = 0
        try:
            with track_chat_latency():
                async for delta in self._chat_client.stream(messages):
                    chunks += 1
                    yield format_sse(delta)
        except ChatAPIException as e:
            outcome, content = failure_for(e)
            record_chat_outcome(outcome)
            logger.warning(
                "chat_stream_failed",
                outcome=outcome,
                code=e.code,
                status_code=e.status_code,
                chunks_sent=chunks,
            )
            yield format_sse(content, finish_reason="error")
            yield SSE_DONE
            return

        record_chat_outcome("success")
        logger.info("chat_streamed", turns=len(messages), chunks=chunks)
        yield format_sse(finish_reason="stop")
        yield SSE_DONE
