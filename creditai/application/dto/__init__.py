"""Data Transfer Objects for application layer."""

from .score import ScoreReport, ScoreRequest, ScoreResponse
from .portfolio import (
    DashboardResponse,
    FairnessResponse,
    FairnessSubgroupDTO,
    ModelPerformanceResponse,
)
from .chat import ChatReply, ChatRequest

__all__ = [
    "ScoreRequest",
    "ScoreResponse",
    "ScoreReport",
    "DashboardResponse",
    "ModelPerformanceResponse",
    "FairnessSubgroupDTO",
    "FairnessResponse",
    "ChatRequest",
    "ChatReply",
]
