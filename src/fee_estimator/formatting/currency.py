"""Currency display and lossy free-text parsing (AUD, en-AU style)."""

import re

from fee_estimator.core.rounding import round_half_up

_NON_NUMERIC = re.compile(r"[^0-9.]")
_LEADING_FLOAT = re.compile(r"\d+(?:\.\d*)?|\.\d+")


def format_currency(amount: float, symbol: str = "$") -> str:
    """Render a whole-unit amount, e.g. ``5000000`` -> ``$5,000,000``."""
    whole = round_half_up(amount)
    sign = "-" if whole < 0 else ""
    return f"{sign}{symbol}{abs(whole):,}"


def parse_currency_input(text: str) -> float:
    """Best-effort parse of user-typed currency text.

    Everything except digits and ``.`` is discarded, then the longest leading
    number is read (``"1.2.3"`` gives 1.2). Returns 0.0 when nothing parses.
    Signs are discarded too, so this is not a validator.
    """
    cleaned = _NON_NUMERIC.sub("", text or "")
    match = _LEADING_FLOAT.match(cleaned)
    if not match:
        return 0.0
    return float(match.group())
