"""Parse-or-default helpers for raw journal input.

A journal form should never refuse an entry over a stray character, so
every parser here is total: malformed input falls back to a default.
"""

import re
from typing import Callable, Optional, TypeVar

T = TypeVar("T")

_MONEY_CHARS = re.compile(r"[^0-9+\-.]")
_NON_DIGITS = re.compile(r"[^0-9]")
_DECIMAL_PREFIX = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)")


def parse_or_default(
    raw: Optional[str], parser: Callable[[str], Optional[T]], default: T
) -> T:
    """Apply ``parser`` to ``raw``; return ``default`` when it yields nothing.

    Args:
        raw: Raw user input (``None`` is treated as empty).
        parser: Callable returning a value, or ``None`` / raising
            ``ValueError`` when the input is unusable.
        default: Fallback value.
    """
    try:
        value = parser(raw or "")
    except ValueError:
        return default
    return default if value is None else value


def _decimal(text: str) -> Optional[float]:
    match = _DECIMAL_PREFIX.match(_MONEY_CHARS.sub("", text))
    return float(match.group(0)) if match else None


def _positive_int(text: str) -> Optional[int]:
    digits = _NON_DIGITS.sub("", text)
    if not digits:
        return None
    value = int(digits)
    return value if value > 0 else None


def _non_negative_int(text: str) -> Optional[int]:
    digits = _NON_DIGITS.sub("", text)
    return int(digits) if digits else None


def parse_money(raw: Optional[str]) -> float:
    """Parse a P/L string such as ``"-$150"``; ``0.0`` when unparseable."""
    return parse_or_default(raw, _decimal, 0.0)


def parse_trades(raw: Optional[str]) -> int:
    """Parse a trade count; always at least 1.

    Digit runs longer than the interpreter's int conversion limit (4300
    digits by default) are unusable and give the default as well.
    """
    return parse_or_default(raw, _positive_int, 1)


def parse_non_neg_int(raw: Optional[str]) -> int:
    """Parse a long/short count; ``0`` when unparseable or too long to convert."""
    return parse_or_default(raw, _non_negative_int, 0)
