"""Repository implementations."""

from .borrower_repository import InMemoryBorrowerRepository

__all__ = [
    "InMemoryBorrowerRepository",
]
