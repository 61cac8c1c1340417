"""Formatting and display helpers."""

from __future__ import annotations


def format_byte_count(count: int) -> str:
    """Format a raw byte count with thousands separators.

    Examples:
        5_915_000 → '5,915,000 B'
        1 → '1 B'
    """
    return f"{count:,} B"


def format_digits(budget: int) -> str:
    """Describe a significant-digit budget."""
    if budget == 1:
        return "1 digit"
    return f"{budget} digits"
