"""In-memory implementation of BorrowerRepository."""

from typing import List, Optional, Sequence

from creditai.domain.entities import Borrower
from creditai.domain.interfaces import BorrowerRepository


class InMemoryBorrowerRepository(BorrowerRepository):
    """
    Borrower repository over an in-memory list.

    Used with the generated portfolio; there is no persistence layer.
    """

    def __init__(self, borrowers: Sequence[Borrower]):
        self._borrowers = list(borrowers)
        self._by_id = {b.id.upper(): b for b in self._borrowers}

    async def get_by_id(self, borrower_id: str) -> Optional[Borrower]:
        """Retrieve a borrower by ID (case-insensitive)."""
        return self._by_id.get(borrower_id.strip().upper())

    async def search(self, query: str = "", limit: int = 6) -> List[Borrower]:
        """Find borrowers whose name or ID contains the query."""
        query = query.strip()
        if not query:
            return self._borrowers[:limit]

        matches = [b for b in self._borrowers if b.matches(query)]
        return matches[:limit]

    async def count(self) -> int:
        """Total number of borrowers."""
        return len(self._borrowers)
