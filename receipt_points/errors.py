"""
Receipt error taxonomy.

Every error carries the HTTP status and client-facing message the API layer
answers with. None of them are retried or fatal to the process.
"""

from __future__ import annotations


class ReceiptError(Exception):
    """Base class for receipt processing failures."""

    status_code = 400
    detail = "Receipt error"

    def __init__(self, detail: str | None = None):
        if detail is not None:
            self.detail = detail
        super().__init__(self.detail)


class MalformedInputError(ReceiptError):
    """Raised when the submitted structure cannot be decoded into a receipt."""

    detail = "Invalid receipt format"


class ReceiptValidationError(ReceiptError):
    """Base class for well-typed receipts that fail validation."""


class EmptyItemsError(ReceiptValidationError):
    detail = "Receipt must contain at least one item"


class InvalidDateError(ReceiptValidationError):
    detail = "Invalid purchase date format"


class InvalidTimeError(ReceiptValidationError):
    detail = "Invalid purchase time format"


class EmptyDescriptionError(ReceiptValidationError):
    detail = "Item description cannot be empty"


class NotFoundError(ReceiptError):
    """Raised when a lookup identifier has no stored score."""

    status_code = 404
    detail = "Receipt not found"
