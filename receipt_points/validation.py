"""Validation gate run on every decoded receipt before it is scored."""

from .errors import (
    EmptyDescriptionError,
    EmptyItemsError,
    InvalidDateError,
    InvalidTimeError,
)
from .schemas import Receipt
from .utils.parsing import parse_date, parse_time


def validate_receipt(receipt: Receipt) -> None:
    """
    Raise the first ReceiptValidationError that applies, checked in this order:
    items present, purchase date, purchase time, item descriptions.
    Total and price text is not checked here; scoring tolerates bad amounts.
    """
    if not receipt.items:
        raise EmptyItemsError()

    if parse_date(receipt.purchase_date) is None:
        raise InvalidDateError()

    if parse_time(receipt.purchase_time) is None:
        raise InvalidTimeError()

    for item in receipt.items:
        if not item.short_description.strip():
            raise EmptyDescriptionError()
