"""Field extraction and normalization for recognized dateTime groups.

Converts the raw digit strings captured by the recognizer into integers.

Fail-soft parsing:
    to_int_or_zero() substitutes 0 when a group cannot be parsed. The
    grammar already guarantees fixed-width ASCII digit groups, so this path
    is defensive only; it exists so that the assembler can never raise.

Python 3.13+. Zero external dependencies.
"""

from xsdatetime.constants import MAX_FRACTION_DIGITS

__all__ = ["fraction_to_milliseconds", "is_negative", "to_int_or_zero"]


def to_int_or_zero(digits: str | None) -> int:
    """Parse a decimal digit group, returning 0 if it cannot be parsed.

    Args:
        digits: Digit string captured by the recognizer (may be None)

    Returns:
        Integer value, or 0 for None or unparseable input

    Example:
        >>> to_int_or_zero("09")
        9
        >>> to_int_or_zero(None)
        0
    """
    if digits is None:
        return 0
    try:
        return int(digits, 10)
    except (TypeError, ValueError):
        return 0


def is_negative(sign: str | None) -> bool:
    """Check whether a captured sign string starts with '-'.

    None, empty strings, '+' and anything else count as non-negative.
    """
    return sign is not None and sign.startswith("-")


def fraction_to_milliseconds(digits: str | None) -> int:
    """Scale 1-3 fractional-second digits to milliseconds.

    The digits are right-padded with zeros to three places, so ``"5"`` is
    500 ms, ``"12"`` is 120 ms and ``"125"`` is 125 ms.

    Args:
        digits: Fractional digits without the leading '.', or None

    Returns:
        Milliseconds in [0, 999]; 0 when no fraction was captured
    """
    if not digits:
        return 0
    return to_int_or_zero(digits[:MAX_FRACTION_DIGITS].ljust(MAX_FRACTION_DIGITS, "0"))
