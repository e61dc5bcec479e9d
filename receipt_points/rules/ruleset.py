# receipt_points/rules/ruleset.py
import math
import re
from decimal import Decimal
from fractions import Fraction
from typing import Callable, List, Optional, Tuple

from ..schemas import Receipt
from ..utils.parsing import parse_amount, parse_date, parse_time

# -----------------------------
# Point values
# -----------------------------
ROUND_DOLLAR_POINTS = 50
QUARTER_MULTIPLE_POINTS = 25
ITEM_PAIR_POINTS = 5
ODD_DAY_POINTS = 6
AFTERNOON_POINTS = 10

# exact rationals; Decimal % raises once the quotient outgrows the context precision
QUARTER = Fraction(1, 4)
DESCRIPTION_PRICE_MULTIPLIER = Fraction(1, 5)  # 0.2
AFTERNOON_START_HOUR = 14  # inclusive
AFTERNOON_END_HOUR = 16    # exclusive

ALPHANUMERIC_RE = re.compile(r"[A-Za-z0-9]")

# (points, reason); reason is None when the rule contributed nothing
RuleResult = Tuple[int, Optional[str]]
Rule = Callable[[Receipt, Decimal], RuleResult]

# -----------------------------
# Ungated rule
# -----------------------------
def retailer_name(receipt: Receipt) -> RuleResult:
    """+1 per ASCII letter or digit in the retailer name."""
    pts = len(ALPHANUMERIC_RE.findall(receipt.retailer))
    return pts, ("retailer_name" if pts else None)

# -----------------------------
# Rules evaluated only for a positive total
# -----------------------------
def round_dollar(receipt: Receipt, total: Decimal) -> RuleResult:
    if Fraction(total).denominator == 1:
        return ROUND_DOLLAR_POINTS, "round_dollar"
    return 0, None

def quarter_multiple(receipt: Receipt, total: Decimal) -> RuleResult:
    if Fraction(total) % QUARTER == 0:
        return QUARTER_MULTIPLE_POINTS, "quarter_multiple"
    return 0, None

def item_pairs(receipt: Receipt, total: Decimal) -> RuleResult:
    pts = (len(receipt.items) // 2) * ITEM_PAIR_POINTS
    return pts, ("item_pairs" if pts else None)

def description_length(receipt: Receipt, total: Decimal) -> RuleResult:
    """
    For each item whose trimmed description length is a positive multiple of 3,
    add ceil(price * 0.2). Items with an unparseable or non-positive price are skipped.
    """
    pts = 0
    for item in receipt.items:
        # length in UTF-8 bytes, not characters
        n = len(item.short_description.strip().encode("utf-8"))
        if n == 0 or n % 3 != 0:
            continue
        price = parse_amount(item.price)
        if price is None or price <= 0:
            continue
        pts += math.ceil(Fraction(price) * DESCRIPTION_PRICE_MULTIPLIER)
    return pts, ("description_length" if pts else None)

def odd_day(receipt: Receipt, total: Decimal) -> RuleResult:
    d = parse_date(receipt.purchase_date)
    if d is not None and d.day % 2 == 1:
        return ODD_DAY_POINTS, "odd_day"
    return 0, None

def afternoon(receipt: Receipt, total: Decimal) -> RuleResult:
    t = parse_time(receipt.purchase_time)
    if t is not None and AFTERNOON_START_HOUR <= t.hour < AFTERNOON_END_HOUR:
        return AFTERNOON_POINTS, "afternoon"
    return 0, None

DEFAULT_RULES: List[Rule] = [
    round_dollar,
    quarter_multiple,
    item_pairs,
    description_length,
    odd_day,
    afternoon,
]
