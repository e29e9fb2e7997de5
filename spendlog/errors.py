"""Exceptions raised by the spendlog core."""


class SpendlogError(Exception):
    """Base class for spendlog errors."""


class ValidationError(SpendlogError, ValueError):
    """Raised when caller-supplied expense data fails validation."""


class StorageUnavailable(SpendlogError):
    """Raised when the database cannot be opened or a read/write fails."""


class NotFound(SpendlogError, LookupError):
    """Raised when an expense id does not exist."""

    def __init__(self, expense_id: int) -> None:
        super().__init__(f"Expense {expense_id} not found")
        self.expense_id = expense_id
