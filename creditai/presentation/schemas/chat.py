"""Chat-related Pydantic schemas."""

from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ChatMessageSchema(BaseModel):
    """A single chat turn."""

    role: Literal["user", "assistant"] = Field(..., examples=["user"])
    content: str = Field(..., max_length=4000, examples=["How can I improve my score?"])


class ChatRequestSchema(BaseModel):
    """Schema for POST /v1/chat and /v1/chat/stream request bodies."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "messages": [
                        {"role": "user", "content": "What hurts my credit score the most?"}
                    ]
                }
            ]
        }
    )
    messages: List[ChatMessageSchema] = Field(
        ...,
        min_length=1,
        description="Conversation so far, oldest first",
    )

    @field_validator("messages")
    @classmethod
    def validate_last_turn(cls, v: List[ChatMessageSchema]) -> List[ChatMessageSchema]:
        """The conversation must end with a user turn."""
        if v[-1].role != "user":
            raise ValueError("the last message must come from the user")
        return v


class ChatResponseSchema(BaseModel):
    """Schema for POST /v1/chat response body."""

    role: Literal["assistant"] = "assistant"
    content: str
