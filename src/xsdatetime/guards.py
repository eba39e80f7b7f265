"""Type guard functions for parse result type narrowing.

parse() returns DateTimeValue | None. The guard narrows the result for
mypy --strict callers.

Python 3.13+ with TypeIs support (PEP 742).

Example:
    >>> from xsdatetime import parse
    >>> from xsdatetime.guards import is_valid_datetime_value
    >>> result = parse("2005-11-14T02:16:38Z")
    >>> if is_valid_datetime_value(result):
    ...     # mypy knows result is DateTimeValue
    ...     year = result.year
"""

from typing import TypeIs

from xsdatetime.value import DateTimeValue

__all__ = ["is_valid_datetime_value"]


def is_valid_datetime_value(value: object) -> TypeIs[DateTimeValue]:
    """Type guard: Check if a parse() result holds a value.

    Safe to call directly on parse() result. Returns False for None and
    for anything that is not a DateTimeValue.

    Args:
        value: Result of parse() (may be None on malformed input)

    Returns:
        True if value is a DateTimeValue, False otherwise
    """
    return isinstance(value, DateTimeValue)
