"""Chat completion-related domain exceptions."""

from .base import DomainException


class ChatAPIException(DomainException):
    """Raised when the chat completion endpoint fails."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(
            message=message,
            code="CHAT_API_ERROR",
        )
        self.status_code = status_code


class ChatConnectionException(ChatAPIException):
    """Raised when the chat endpoint cannot be reached or the stream breaks."""

    def __init__(self, message: str = "Chat API connection failed"):
        super().__init__(
            message=message,
            status_code=None,
        )
        self.code = "CHAT_CONNECTION_ERROR"


class ChatRateLimitedException(ChatAPIException):
    """Raised when the chat endpoint answers 429."""

    def __init__(self):
        super().__init__(
            message="Chat API rate limit exceeded",
            status_code=429,
        )
        self.code = "CHAT_RATE_LIMITED"


class ChatQuotaExceededException(ChatAPIException):
    """Raised when the chat endpoint answers 402."""

    def __init__(self):
        super().__init__(
            message="Chat API usage quota exhausted",
            status_code=402,
        )
        self.code = "CHAT_QUOTA_EXCEEDED"
