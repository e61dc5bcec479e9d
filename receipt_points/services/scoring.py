# scoring.py
from __future__ import annotations
from typing import Any, Dict, List

from ..rules.ruleset import DEFAULT_RULES, retailer_name
from ..schemas import Receipt
from ..utils.parsing import parse_amount

# -----------------------------
# Main entry
# -----------------------------
def score_breakdown(receipt: Receipt) -> Dict[str, Any]:
    """
    Returns:
      {
        "points": int (>= 0),
        "reasons": [str],   # rules that contributed, in evaluation order
      }
    Notes:
      - expects a receipt that already passed validate_receipt
      - an unparseable or non-positive total stops scoring after the retailer rule
      - bad numeric text never raises; it just contributes nothing
    """
    reasons: List[str] = []

    points, reason = retailer_name(receipt)
    if reason: reasons.append(reason)

    # ---- Total gate
    total = parse_amount(receipt.total)
    if total is None or total <= 0:
        return {"points": points, "reasons": reasons}

    # ---- Remaining rules
    for rule in DEFAULT_RULES:
        inc, reason = rule(receipt, total)
        points += inc
        if reason: reasons.append(reason)

    return {"points": points, "reasons": reasons}

def score_receipt(receipt: Receipt) -> int:
    return score_breakdown(receipt)["points"]
