"""Repository interfaces for portfolio data access."""

from abc import ABC, abstractmethod
from typing import List, Optional

from creditai.domain.entities import Borrower


class BorrowerRepository(ABC):
    """
    Abstract repository for portfolio borrowers.

    Implementations may serve generated mock data, a file, a database, etc.
    """

    @abstractmethod
    async def get_by_id(self, borrower_id: str) -> Optional[Borrower]:
        """
        Retrieve a borrower by ID.

        Args:
            borrower_id: The borrower's identifier (e.g. "BRW-1001")

        Returns:
            The borrower if found, None otherwise
        """
        ...

    @abstractmethod
    async def search(self, query: str = "", limit: int = 6) -> List[Borrower]:
        """
        Find borrowers whose name or ID contains the query.

        Args:
            query: Case-insensitive substring; empty matches everyone
            limit: Maximum number of borrowers to return

        Returns:
            Matching borrowers in portfolio order
        """
        ...

    @abstractmethod
    async def count(self) -> int:
        """Total number of borrowers available."""
        ...
