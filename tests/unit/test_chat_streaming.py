"""
Unit Tests for the chat completion stream.

These tests verify:
1. SSE parsing across arbitrary chunk boundaries
2. HTTP client status and transport error mapping (httpx.MockTransport)
3. Chat service failure messages and SSE relay
"""

import json
from typing import AsyncIterator, List, Sequence

import httpx
import pytest

from creditai.application.services import ChatService
from creditai.application.services.chat_service import (
    CONNECTION_ERROR_MESSAGE,
    ERROR_MESSAGE,
    QUOTA_EXCEEDED_MESSAGE,
    RATE_LIMITED_MESSAGE,
)
from creditai.domain.entities import ChatMessage, ChatRole
from creditai.domain.exceptions import (
    ChatAPIException,
    ChatConnectionException,
    ChatQuotaExceededException,
    ChatRateLimitedException,
)
from creditai.domain.interfaces import ChatCompletionClient
from creditai.infrastructure.clients import HttpChatCompletionClient, SSEDeltaParser


# =============================================================================
# Helpers
# =============================================================================

def sse_event(content: str) -> str:
    chunk = {"choices": [{"delta": {"content": content}}]}
    return f"data: {json.dumps(chunk)}\n"


CONVERSATION = [ChatMessage(role=ChatRole.USER, content="How do I improve my score?")]


async def collect(stream: AsyncIterator[str]) -> List[str]:
    return [item async for item in stream]


class StaticChatClient(ChatCompletionClient):
    """Yields fixed deltas, then optionally raises."""

    def __init__(self, deltas: Sequence[str] = (), error: Exception | None = None):
        self.deltas = list(deltas)
        self.error = error

    async def stream(self, messages):
        for delta in self.deltas:
            yield delta
        if self.error is not None:
            raise self.error


# =============================================================================
# SSE Parser Tests
# =============================================================================

class TestSSEDeltaParser:
    """Tests for incremental SSE parsing."""

    def test_single_event(self):
        parser = SSEDeltaParser()

        assert parser.feed(sse_event("Hello")) == ["Hello"]

    def test_multiple_events_in_one_chunk(self):
        parser = SSEDeltaParser()

        assert parser.feed(sse_event("Hel") + "\n" + sse_event("lo")) == ["Hel", "lo"]

    def test_line_split_across_chunks(self):
        parser = SSEDeltaParser()
        text = sse_event("Hello")

        assert parser.feed(text[:20]) == []
        assert parser.feed(text[20:]) == ["Hello"]

    def test_every_split_point(self):
        text = sse_event("a") + sse_event("b") + "data: [DONE]\n"

        for i in range(len(text)):
            parser = SSEDeltaParser()
            deltas = parser.feed(text[:i]) + parser.feed(text[i:])
            assert deltas == ["a", "b"]
            assert parser.done

    def test_crlf_line_endings(self):
        parser = SSEDeltaParser()

        assert parser.feed(sse_event("Hi").replace("\n", "\r\n")) == ["Hi"]

    def test_comments_blank_lines_and_other_fields_skipped(self):
        parser = SSEDeltaParser()

        assert parser.feed(": keep-alive\n\nevent: message\nid: 1\n") == []
        assert parser.feed(sse_event("ok")) == ["ok"]

    def test_done_stops_parsing(self):
        parser = SSEDeltaParser()

        assert parser.feed("data: [DONE]\n" + sse_event("late")) == []
        assert parser.done
        assert parser.feed(sse_event("later")) == []

    def test_role_only_delta_yields_nothing(self):
        parser = SSEDeltaParser()
        chunk = {"choices": [{"delta": {"role": "assistant"}}]}

        assert parser.feed(f"data: {json.dumps(chunk)}\n") == []

    def test_incomplete_json_waits_for_more_data(self):
        parser = SSEDeltaParser()

        assert parser.feed('data: {"choices": [{"delta"') == []
        assert parser.feed(': {"content": "x"}}]}\n') == ["x"]

    def test_flush_parses_unterminated_last_line(self):
        parser = SSEDeltaParser()

        assert parser.feed(sse_event("a") + sse_event("b").rstrip("\n")) == ["a"]
        assert parser.flush() == ["b"]

    def test_flush_ignores_garbage(self):
        parser = SSEDeltaParser()
        parser.feed("data: {not json")

        assert parser.flush() == []


# =============================================================================
# HTTP Client Tests
# =============================================================================

def client_for(handler) -> HttpChatCompletionClient:
    return HttpChatCompletionClient(
        base_url="http://chat.test/credit-chat",
        api_key="secret",
        timeout=5.0,
        transport=httpx.MockTransport(handler),
    )


class TestHttpChatCompletionClient:
    """Tests for HttpChatCompletionClient against httpx.MockTransport."""

    @pytest.mark.asyncio
    async def test_streams_deltas(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["auth"] = request.headers.get("authorization")
            seen["body"] = json.loads(request.content)
            body = sse_event("Pay ") + sse_event("on time.") + "data: [DONE]\n\n"
            return httpx.Response(
                200,
                content=body.encode(),
                headers={"content-type": "text/event-stream"},
            )

        deltas = await collect(client_for(handler).stream(CONVERSATION))

        assert deltas == ["Pay ", "on time."]
        assert seen["auth"] == "Bearer secret"
        assert seen["body"] == {
            "messages": [{"role": "user", "content": "How do I improve my score?"}]
        }

    @pytest.mark.asyncio
    async def test_no_auth_header_without_key(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["auth"] = request.headers.get("authorization")
            return httpx.Response(200, content=b"data: [DONE]\n")

        client = HttpChatCompletionClient(
            base_url="http://chat.test/credit-chat",
            api_key="",
            transport=httpx.MockTransport(handler),
        )

        assert await collect(client.stream(CONVERSATION)) == []
        assert seen["auth"] is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "status,exc_type",
        [
            (429, ChatRateLimitedException),
            (402, ChatQuotaExceededException),
            (500, ChatAPIException),
            (400, ChatAPIException),
        ],
    )
    async def test_error_status_mapping(self, status, exc_type):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(status, json={"error": "nope"})

        with pytest.raises(exc_type) as exc_info:
            await collect(client_for(handler).stream(CONVERSATION))

        assert exc_info.value.status_code == status

    @pytest.mark.asyncio
    async def test_transport_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(ChatConnectionException):
            await collect(client_for(handler).stream(CONVERSATION))

    @pytest.mark.asyncio
    async def test_timeout(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(ChatConnectionException):
            await collect(client_for(handler).stream(CONVERSATION))

    @pytest.mark.asyncio
    async def test_corrupt_body_is_connection_error(self):
        """A body that fails to decode surfaces as a connection failure."""
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200,
                headers={"Content-Encoding": "gzip", "Content-Type": "text/event-stream"},
                stream=httpx.ByteStream(b"data: not gzip at all\n\n"),
            )

        with pytest.raises(ChatConnectionException):
            await collect(client_for(handler).stream(CONVERSATION))

    @pytest.mark.asyncio
    async def test_too_many_redirects_is_connection_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.TooManyRedirects("redirect loop", request=request)

        with pytest.raises(ChatConnectionException):
            await collect(client_for(handler).stream(CONVERSATION))


# =============================================================================
# Chat Service Tests
# =============================================================================

class TestChatService:
    """Tests for ChatService reply and stream."""

    @pytest.mark.asyncio
    async def test_reply_joins_deltas(self):
        service = ChatService(StaticChatClient(["Keep ", "EMIs ", "low."]))

        reply = await service.reply(CONVERSATION)

        assert reply.ok
        assert reply.message.role == ChatRole.ASSISTANT
        assert reply.message.content == "Keep EMIs low."

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error,outcome,message",
        [
            (ChatRateLimitedException(), "rate_limited", RATE_LIMITED_MESSAGE),
            (ChatQuotaExceededException(), "quota_exceeded", QUOTA_EXCEEDED_MESSAGE),
            (ChatAPIException("boom", status_code=500), "error", ERROR_MESSAGE),
            (ChatConnectionException(), "connection_error", CONNECTION_ERROR_MESSAGE),
        ],
    )
    async def test_reply_failure_messages(self, error, outcome, message):
        service = ChatService(StaticChatClient(["partial"], error=error))

        reply = await service.reply(CONVERSATION)

        assert not reply.ok
        assert reply.outcome == outcome
        assert reply.message.content == message

    @pytest.mark.asyncio
    async def test_stream_relays_sse(self):
        service = ChatService(StaticChatClient(["a", "b"]))

        events = await collect(service.stream(CONVERSATION))
        parser = SSEDeltaParser()
        deltas = [d for event in events for d in parser.feed(event)]

        assert deltas == ["a", "b"]
        assert events[-1] == "data: [DONE]\n\n"
        assert parser.done

    @pytest.mark.asyncio
    async def test_stream_failure_ends_with_message_and_done(self):
        service = ChatService(StaticChatClient(["a"], error=ChatRateLimitedException()))

        events = await collect(service.stream(CONVERSATION))
        parser = SSEDeltaParser()
        deltas = [d for event in events for d in parser.feed(event)]

        assert deltas == ["a", RATE_LIMITED_MESSAGE]
        assert '"finish_reason": "error"' in events[-2]
        assert events[-1] == "data: [DONE]\n\n"

    @pytest.mark.asyncio
    async def test_corrupt_upstream_body_becomes_message(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200,
                headers={"Content-Encoding": "gzip"},
                stream=httpx.ByteStream(b"data: not gzip at all\n\n"),
            )

        service = ChatService(client_for(handler))

        reply = await service.reply(CONVERSATION)
        events = await collect(service.stream(CONVERSATION))

        assert reply.outcome == "connection_error"
        assert reply.message.content == CONNECTION_ERROR_MESSAGE
        assert events[-1] == "data: [DONE]\n\n"
