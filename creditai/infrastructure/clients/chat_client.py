"""HTTP implementation of ChatCompletionClient."""

from typing import AsyncIterator, Sequence

import httpx
import structlog

from creditai.core.config import settings
from creditai.domain.entities import ChatMessage
from creditai.domain.exceptions import (
    ChatAPIException,
    ChatConnectionException,
    ChatQuotaExceededException,
    ChatRateLimitedException,
)
from creditai.domain.interfaces import ChatCompletionClient

from .sse import SSEDeltaParser

logger = structlog.get_logger(__name__)


class HttpChatCompletionClient(ChatCompletionClient):
    """
    HTTP client for the streaming chat completion endpoint.

    One request per conversation turn, bounded by a timeout and never retried:
    a retried stream would repeat text the caller has already shown.
    """

    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._url = base_url or settings.chat_api_url
        self._api_key = settings.chat_api_key if api_key is None else api_key
        self._timeout = timeout or settings.chat_api_timeout
        self._transport = transport

    def _headers(self) -> dict:
        headers = {"Content-Type": "application/json"}
        if self._api_key:
            headers["Authorization"] = f"Bearer {self._api_key}"
        return headers

    async def stream(self, messages: Sequence[ChatMessage]) -> AsyncIterator[str]:
        """Stream the assistant reply as text deltas."""
        payload = {"messages": [m.to_dict() for m in messages]}
        parser = SSEDeltaParser()

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                async with client.stream(
                    "POST",
                    self._url,
                    json=payload,
                    headers=self._headers(),
                ) as response:
                    if response.status_code >= 400:
                        await response.aread()
                        raise self._error_for_status(response)

                    async for chunk in response.aiter_text():
                        for delta in parser.feed(chunk):
                            yield delta
                        if parser.done:
                            break

                    for delta in parser.flush():
                        yield delta

        except httpx.TimeoutException:
            logger.warning("chat_api_timeout", timeout=self._timeout)
            raise ChatConnectionException("Chat API request timed out")
        except httpx.TransportError as e:
            logger.warning("chat_api_connection_error", error=str(e))
            raise ChatConnectionException(f"Chat API connection failed: {e}")
        except httpx.HTTPError as e:
            # Decoding errors, too many redirects
            logger.warning("chat_api_stream_error", error=str(e), error_type=type(e).__name__)
            raise ChatConnectionException(f"Chat API stream failed: {e}")

    def _error_for_status(self, response: httpx.Response) -> ChatAPIException:
        """Map an error status to its domain exception."""
        logger.warning(
            "chat_api_error_status",
            status_code=response.status_code,
        )
        if response.status_code == 429:
            return ChatRateLimitedException()
        if response.status_code == 402:
            return ChatQuotaExceededException()
        return ChatAPIException(
            message=f"Chat API error: {response.text}",
            status_code=response.status_code,
        )
