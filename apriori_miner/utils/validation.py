"""
Precondition checks shared by the data structures and configuration.

All helpers raise ValueError with the given message when the condition fails.
"""
import math
from typing import Any, Iterable, Optional


def ensure_not_none(value: Any, message: str) -> None:
    if value is None:
        raise ValueError(message)


def ensure_not_empty(values: Iterable, message: str) -> None:
    if values is None or len(values) == 0:
        raise ValueError(message)


def ensure_at_least(value: float, minimum: float, message: str) -> None:
    if value is None or value < minimum:
        raise ValueError(message)


def ensure_greater(value: float, minimum: float, message: str) -> None:
    if value is None or value <= minimum:
        raise ValueError(message)


def ensure_int(value: Any, minimum: int, message: str) -> None:
    """Ensure that value is an int (not a bool) of at least minimum."""
    if not isinstance(value, int) or isinstance(value, bool) or value < minimum:
        raise ValueError(message)


def ensure_in_range(value: float, minimum: float, maximum: float, message: Optional[str] = None) -> None:
    """
    Ensure that minimum <= value <= maximum.

    NaN is always rejected.
    """
    if value is None or (isinstance(value, float) and math.isnan(value)) or not minimum <= value <= maximum:
        raise ValueError(message or f"Value must be in [{minimum}, {maximum}], got {value}")
