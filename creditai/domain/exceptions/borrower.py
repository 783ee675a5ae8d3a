"""Borrower-related domain exceptions."""

from .base import DomainException


class BorrowerNotFoundException(DomainException):
    """Raised when a borrower cannot be found in the portfolio."""

    def __init__(self, borrower_id: str):
        super().__init__(
            message=f"Borrower not found: {borrower_id}",
            code="BORROWER_NOT_FOUND",
        )
        self.borrower_id = borrower_id
