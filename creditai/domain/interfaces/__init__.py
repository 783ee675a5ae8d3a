"""
Domain Interfaces (Ports)
"""

from .repositories import BorrowerRepository
from .clients import ChatCompletionClient

__all__ = [
    "BorrowerRepository",
    "ChatCompletionClient",
]
