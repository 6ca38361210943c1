"""Text formatting helpers for badge messages."""

from decimal import ROUND_HALF_UP, Decimal
from typing import Union

METRIC_PREFIXES = ("k", "M", "G", "T", "P", "E", "Z", "Y")


def _to_fixed(value: float, digits: int) -> str:
    """Round half-up on the exact binary value of a float.

    9.95 is stored as 9.9499..., so it rounds to "9.9".
    """
    quantum = Decimal(1).scaleb(-digits)
    return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def metric(n: Union[int, float]) -> str:
    """Format a count compactly with a metric suffix.

    Scaled values below 10 keep one decimal digit unless that digit is 0,
    so 1200 becomes "1.2k", 1000 becomes "1k" and 12345 becomes "12k".
    Values that round up to 1000 of a prefix roll over to the next one.

    Args:
        n: Count to format

    Returns:
        Formatted count, e.g. "999", "1.5k", "12M"
    """
    abs_n = abs(n)
    sign = "-" if n < 0 else ""

    for index in reversed(range(len(METRIC_PREFIXES))):
        limit = 1000 ** (index + 1)
        if abs_n < limit:
            continue

        scaled = abs_n / limit
        text = _to_fixed(scaled, 1 if scaled < 10 else 0)
        if text.endswith(".0"):
            text = text[:-2]

        if text == "1000" and index + 1 < len(METRIC_PREFIXES):
            return f"{sign}1{METRIC_PREFIXES[index + 1]}"
        return f"{sign}{text}{METRIC_PREFIXES[index]}"

    return f"{n}"
