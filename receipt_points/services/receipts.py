# receipt_points/services/receipts.py
from typing import Any, Mapping, Union

from pydantic import ValidationError

from ..errors import MalformedInputError, NotFoundError, ReceiptValidationError
from ..schemas import Receipt
from ..store import ScoreStore
from ..utils.logging import logger
from ..validation import validate_receipt
from .scoring import score_breakdown

def decode_receipt(payload: Union[Receipt, Mapping[str, Any]]) -> Receipt:
    if isinstance(payload, Receipt):
        return payload
    try:
        return Receipt.model_validate(payload)
    except ValidationError as e:
        logger.warning("Rejected undecodable receipt: %d field error(s)", e.error_count())
        raise MalformedInputError() from e

class ReceiptService:
    """Submit receipts for scoring and look their points up later."""

    def __init__(self, store: ScoreStore):
        self.store = store

    def submit(self, payload: Union[Receipt, Mapping[str, Any]]) -> str:
        """
        Decode, validate, score and store a receipt; return its identifier.
        Nothing is stored when decoding or validation fails.
        """
        receipt = decode_receipt(payload)
        try:
            validate_receipt(receipt)
        except ReceiptValidationError as e:
            logger.warning("Rejected receipt from %r: %s", receipt.retailer, e.detail)
            raise

        result = score_breakdown(receipt)
        receipt_id = self.store.assign(result["points"])
        logger.info("Receipt %s scored %s", receipt_id, result["points"])
        logger.debug("Receipt %s reasons: %s", receipt_id, result["reasons"])
        return receipt_id

    def lookup(self, receipt_id: str) -> int:
        points = self.store.get(receipt_id)
        if points is None:
            logger.info("Points lookup miss for %s", receipt_id)
            raise NotFoundError()
        return points
