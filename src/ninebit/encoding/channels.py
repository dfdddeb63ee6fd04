"""Channel quantization between 8-bit and 3-bit values.

Both directions round half up using integer arithmetic. With 255 and 7 both
odd, an exact .5 can never occur, so the results match any round-half rule.
"""

from __future__ import annotations

from typing import Final

CHANNEL_MAX: Final = 255
LEVEL_MAX: Final = 7


def clamp_channel(value: int) -> int:
    """Clamp an 8-bit channel value to [0, 255]."""
    return max(0, min(CHANNEL_MAX, int(value)))


def quantize(channel: int) -> int:
    """Reduce an 8-bit channel (0-255) to a 3-bit level (0-7).

    Computes round(channel / 255 * 7). The result is clamped to 0-7 so a
    caller passing an out-of-range channel still gets a valid level.

    Args:
        channel: 8-bit channel value

    Returns:
        3-bit level
    """
    level = (2 * LEVEL_MAX * int(channel) + CHANNEL_MAX) // (2 * CHANNEL_MAX)
    return max(0, min(LEVEL_MAX, level))


def dequantize(level: int) -> int:
    """Expand a 3-bit level (0-7) to an 8-bit channel (0-255).

    Computes round(level / 7 * 255). quantize(dequantize(q)) == q for every
    level in 0-7.
    """
    level = max(0, min(LEVEL_MAX, int(level)))
    return (2 * CHANNEL_MAX * level + LEVEL_MAX) // (2 * LEVEL_MAX)
