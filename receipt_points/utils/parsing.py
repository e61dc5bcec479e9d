import re
from datetime import date, time
from decimal import Decimal, InvalidOperation

# ASCII digits only; str.isdigit and \d both accept other scripts
_DATE_RE = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")
_TIME_RE = re.compile(r"([0-9]{2}):([0-9]{2})")
# Decimal() alone also takes underscores, padding, other scripts' digits and NaN/Infinity
_AMOUNT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

# Same magnitude range as an IEEE double; anything outside is treated as unparseable
MAX_AMOUNT_EXPONENT = 308
MIN_AMOUNT_EXPONENT = -324

def parse_date(value: str) -> date | None:
    """Strict YYYY-MM-DD. Returns None for anything else, including impossible dates."""
    m = _DATE_RE.fullmatch(value or "")
    if not m:
        return None
    try:
        return date(int(m.group(1)), int(m.group(2)), int(m.group(3)))
    except ValueError:
        return None

def parse_time(value: str) -> time | None:
    """Strict 24-hour HH:MM."""
    m = _TIME_RE.fullmatch(value or "")
    if not m:
        return None
    try:
        return time(int(m.group(1)), int(m.group(2)))
    except ValueError:
        return None

def parse_amount(value: str) -> Decimal | None:
    """
    Parse a monetary amount as an exact decimal.
    Returns None unless the whole text is a plain ASCII number; callers treat
    that the same as a non-positive amount.
    """
    if not _AMOUNT_RE.fullmatch(value or ""):
        return None
    try:
        amount = Decimal(value)
    except InvalidOperation:
        return None
    if amount and not MIN_AMOUNT_EXPONENT <= amount.adjusted() <= MAX_AMOUNT_EXPONENT:
        return None
    return amount
