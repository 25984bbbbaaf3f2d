"""
Helper functions for assembling the movie content view.

Formatting and lookup utilities with no I/O: currency text, bounded list
slices and language display names.
"""

from typing import Optional, Sequence, TypeVar

from movie_content.classes.languages import Language

T = TypeVar("T")

MISSING_AMOUNT_PLACEHOLDER = "-"


def format_currency(amount: float) -> str:
    """
    Format an amount as en-US US-dollar text.

    Zero is shown as a placeholder since TMDB reports unknown budget and
    revenue as 0.

    Examples:
        >>> format_currency(0)
        '-'
        >>> format_currency(1000000)
        '$1,000,000.00'
        >>> format_currency(-5)
        '-$5.00'
    """
    if amount == 0:
        return MISSING_AMOUNT_PLACEHOLDER
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"


def take(items: Optional[Sequence[T]], limit: int) -> list[T]:
    """Return the first `limit` items as a new list; None is treated as empty."""
    if limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")
    if not items:
        return []
    return list(items[:limit])


def language_display_name(code: str) -> str:
    """Map an ISO 639-1 code to its display name, falling back to the raw code."""
    language = Language.from_code(code)
    return language.value if language else code
