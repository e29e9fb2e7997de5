"""Pure functions for expense validation.

This module contains the functional core for expense input:
- No I/O operations (no database, no console, no files)
- No side effects
- Raises ValidationError before anything reaches the store
"""

import math
from typing import Any

from spendlog.dates import parse_iso_date
from spendlog.domain.models import Amount, CategoryName, IsoDate
from spendlog.errors import ValidationError


def parse_amount(value: Any) -> Amount:
    """Parse and validate an expense amount.

    Args:
        value: Number or numeric string (e.g., 12.5 or "12.50").

    Returns:
        Amount as float.

    Raises:
        ValidationError: If the value is not a finite number greater than zero.
    """
    if isinstance(value, bool):
        raise ValidationError(f"Invalid amount: {value!r}")

    try:
        amount = float(value.strip() if isinstance(value, str) else value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid amount: {value!r}") from None

    if not math.isfinite(amount) or amount <= 0:
        raise ValidationError("Amount must be greater than zero")

    return Amount(amount)


def clean_category(value: str | None) -> CategoryName:
    """Trim and validate a category name.

    Raises:
        ValidationError: If the category is empty after trimming.
    """
    category = (value or "").strip()
    if not category:
        raise ValidationError("Category must not be empty")
    return CategoryName(category)


def clean_note(value: str | None) -> str:
    """Trim an optional note, treating None as empty."""
    return (value or "").strip()


def validate_new_expense(amount: Any, category: str | None, note: str | None = None) -> tuple[Amount, CategoryName, str]:
    """Validate the fields supplied when creating an expense.

    Args:
        amount: Raw amount input.
        category: Raw category input.
        note: Optional note.

    Returns:
        Tuple of (amount, category, note) ready for insertion.

    Raises:
        ValidationError: If amount or category is invalid.
    """
    return parse_amount(amount), clean_category(category), clean_note(note)


def validate_expense_update(
    amount: Any, category: str | None, note: str | None, date: str
) -> tuple[Amount, CategoryName, str, IsoDate]:
    """Validate the fields supplied when editing an expense.

    Applies the same amount and category rules as creation, and requires
    a valid calendar date.

    Returns:
        Tuple of (amount, category, note, date) ready for update.

    Raises:
        ValidationError: If any field is invalid.
    """
    try:
        iso_date = IsoDate(parse_iso_date(date).isoformat())
    except (AttributeError, TypeError, ValueError):
        raise ValidationError(f"Invalid date: {date!r} (expected YYYY-MM-DD)") from None

    return parse_amount(amount), clean_category(category), clean_note(note), iso_date
