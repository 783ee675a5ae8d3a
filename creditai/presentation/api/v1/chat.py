"""Credit assistant chat API endpoints."""

from typing import Annotated, List

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse

from creditai.application.services import ChatService
from creditai.core.dependencies import get_chat_service
from creditai.domain.entities import ChatMessage, ChatRole
from creditai.presentation.schemas import (
    ChatRequestSchema,
    ChatResponseSchema,
    ErrorResponseSchema,
)

chat_router = APIRouter(
    prefix="/chat",
    responses={
        503: {"model": ErrorResponseSchema, "description": "Assistant unavailable"},
    },
)


def _to_messages(request: ChatRequestSchema) -> List[ChatMessage]:
    return [
        ChatMessage(role=ChatRole(m.role), content=m.content)
        for m in request.messages
    ]


@chat_router.post(
    "",
    response_model=ChatResponseSchema,
    summary="Ask the Assistant",
    description="""
    Send the conversation and get the assistant's full reply.

    Upstream failures come back as a fixed assistant message, not an error status.
    """,
)
async def chat(
    request: ChatRequestSchema,
    chat_service: Annotated[ChatService, Depends(get_chat_service)],
) -> ChatResponseSchema:
    reply = await chat_service.reply(_to_messages(request))
    return ChatResponseSchema(content=reply.message.content)


@chat_router.post(
    "/stream",
    summary="Stream the Assistant Reply",
    description="""
    Send the conversation and stream the reply as server-sent events.

    Each event carries a completion chunk (`choices[0].delta.content`);
    the stream ends with `data: [DONE]`.
    """,
    response_class=StreamingResponse,
    responses={
        200: {"content": {"text/event-stream": {}}},
    },
)
async def chat_stream(
    request: ChatRequestSchema,
    chat_service: Annotated[ChatService, Depends(get_chat_service)],
) -> StreamingResponse:
    return StreamingResponse(
        chat_service.stream(_to_messages(request)),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
            "X-Accel-Buffering": "no",
        },
    )
