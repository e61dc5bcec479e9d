# tests/test_receipts_service.py
import pytest
from pydantic import ValidationError

from receipt_points.errors import EmptyItemsError, MalformedInputError, NotFoundError
from receipt_points.schemas import Receipt
from receipt_points.services.receipts import ReceiptService, decode_receipt
from receipt_points.services.scoring import score_receipt
from receipt_points.store import ScoreStore

RECEIPT = {
    "retailer": "Walgreens",
    "purchaseDate": "2022-01-03",
    "purchaseTime": "14:45",
    "total": "2.65",
    "items": [
        {"shortDescription": "Pepsi - 12-oz", "price": "1.25"},
        {"shortDescription": "Dasani", "price": "1.40"},
    ],
}


@pytest.fixture
def service():
    return ReceiptService(ScoreStore())


def test_lookup_returns_scored_points(service):
    rid = service.submit(RECEIPT)
    assert service.lookup(rid) == score_receipt(Receipt.model_validate(RECEIPT))
    # Walgreens 9 + pair 5 + Dasani 1 + odd day 6 + afternoon 10
    assert service.lookup(rid) == 31


def test_submit_accepts_decoded_receipt(service):
    rid = service.submit(Receipt.model_validate(RECEIPT))
    assert service.lookup(rid) == 31


def test_empty_items_rejected_and_nothing_stored(service):
    for extra in [{}, {"purchaseDate": "nope"}, {"total": "100.00", "purchaseTime": "99:99"}]:
        with pytest.raises(EmptyItemsError):
            service.submit({**RECEIPT, **extra, "items": []})
    assert len(service.store) == 0


@pytest.mark.parametrize("payload", [
    {k: v for k, v in RECEIPT.items() if k != "total"},
    {**RECEIPT, "total": 2.65},
    {**RECEIPT, "items": [{"price": "1.00"}]},
    {**RECEIPT, "items": "Dasani"},
    ["not", "a", "receipt"],
    None,
])
def test_undecodable_payload_is_malformed(service, payload):
    with pytest.raises(MalformedInputError) as exc:
        service.submit(payload)
    assert isinstance(exc.value.__cause__, ValidationError)
    assert len(service.store) == 0


def test_lookup_unknown_id(service):
    with pytest.raises(NotFoundError) as exc:
        service.lookup("00000000-0000-0000-0000-000000000000")
    assert exc.value.status_code == 404


def test_repeated_submits_get_distinct_ids(service):
    receipt = decode_receipt(RECEIPT)
    ids = [service.submit(receipt) for _ in range(10_000)]
    assert len(set(ids)) == 10_000


def test_decoded_receipt_is_frozen():
    receipt = decode_receipt(RECEIPT)
    with pytest.raises(ValidationError):
        receipt.total = "0.00"
