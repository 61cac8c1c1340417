"""Scale resolution: pick the unit for a byte count.

The value is divided by 1000 until the quotient fits the three integer
digits of a scale. The remainder of the last division is kept so the
digit renderer can show it as the fractional part.
"""

from __future__ import annotations

from prettynumber.core.models import ScaledValue

SCALE_BASE = 1000
SCALE_DIGITS = 3  # decimal digits per scale step
MAX_SUPPORTED_SIZE = 1_000_000_000


def resolve_scale(value: int) -> ScaledValue:
    """Reduce a byte count to its scale.

    Args:
        value: Byte count in ``(0, MAX_SUPPORTED_SIZE)``.

    Returns:
        ScaledValue whose ``reduced`` is the quotient at the chosen scale
        followed by the last three-digit remainder.

    Examples:
        341 → ScaledValue(341, 0)
        5_915_000 → ScaledValue(5915, 2)
    """
    scale_index = 0
    while True:
        remainder = value % SCALE_BASE
        value //= SCALE_BASE
        if value > 0:
            scale_index += 1
        if value < SCALE_BASE:
            break

    return ScaledValue(reduced=value * SCALE_BASE + remainder, scale_index=scale_index)
