"""Pixel encoding to and from 9-bit 3-3-3 binary codes.

Code layout (MSB first): [red:3][green:3][blue:3]
    (255, 0, 0) -> "111000000"
"""

from __future__ import annotations

import re

from ..exceptions import InvalidCodeFormatError
from ..models.enums import CODE_LENGTH
from .channels import CHANNEL_MAX, clamp_channel, dequantize, quantize

_CODE_PATTERN = re.compile(rf"[01]{{{CODE_LENGTH}}}")


def is_valid_code(token: object) -> bool:
    """Check whether a token is exactly 9 characters of '0'/'1'."""
    return isinstance(token, str) and _CODE_PATTERN.fullmatch(token) is not None


def encode_pixel(r: int, g: int, b: int) -> str:
    """Encode an RGB pixel as a 9-character binary code.

    Channels outside 0-255 are clamped before quantizing.

    Args:
        r: Red channel (0-255)
        g: Green channel (0-255)
        b: Blue channel (0-255)

    Returns:
        Code string, e.g. "000000101"
    """
    r3 = quantize(clamp_channel(r))
    g3 = quantize(clamp_channel(g))
    b3 = quantize(clamp_channel(b))
    packed = (r3 << 6) | (g3 << 3) | b3
    return format(packed, f"0{CODE_LENGTH}b")


def decode_code(code: str) -> tuple[int, int, int]:
    """Decode a 9-character binary code to an RGB pixel.

    Args:
        code: Code string

    Returns:
        (r, g, b) tuple, each 0-255

    Raises:
        InvalidCodeFormatError: If code is not 9 characters of '0'/'1'
    """
    if not is_valid_code(code):
        raise InvalidCodeFormatError(code)

    value = int(code, 2)
    r3 = (value >> 6) & 0b111
    g3 = (value >> 3) & 0b111
    b3 = value & 0b111
    return dequantize(r3), dequantize(g3), dequantize(b3)


def composite_over_white(r: int, g: int, b: int, a: int) -> tuple[int, int, int]:
    """Flatten an RGBA pixel onto a white background.

    Fully opaque pixels pass through unchanged; a fully transparent pixel
    becomes white regardless of its color.

    Args:
        r: Red channel (0-255)
        g: Green channel (0-255)
        b: Blue channel (0-255)
        a: Alpha (0 = transparent, 255 = opaque)

    Returns:
        Opaque (r, g, b) tuple
    """
    r, g, b, a = clamp_channel(r), clamp_channel(g), clamp_channel(b), clamp_channel(a)
    if a == CHANNEL_MAX:
        return r, g, b

    # round(c * a/255 + 255 * (1 - a/255)) without floats
    background = CHANNEL_MAX * (CHANNEL_MAX - a)

    def blend(channel: int) -> int:
        return (2 * (channel * a + background) + CHANNEL_MAX) // (2 * CHANNEL_MAX)

    return blend(r), blend(g), blend(b)
