"""Code table text format.

One image row per line, codes separated by whitespace:

    000000000 111111111
    111000000 000111000

Serialization is strict; parsing is tolerant. Empty lines are skipped, any
run of whitespace separates tokens, the first row sets the width, and cells
with an invalid or missing token decode to white. A line holding only
whitespace is kept as a row with no tokens, so it renders all white.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from ..exceptions import DimensionMismatchError
from ..models.enums import WHITE
from ..models.table import DecodedGrid
from .pixels import decode_code, is_valid_code

_LOGGER = logging.getLogger(__name__)

_LINE_BREAK = re.compile(r"\r?\n")


def serialize_grid(codes: Sequence[str], width: int, height: int) -> str:
    """Render a flat row-major list of codes as text.

    Args:
        codes: width * height codes in row-major order
        width: Number of codes per row
        height: Number of rows

    Returns:
        Rows joined by "\\n", codes within a row joined by a single space

    Raises:
        DimensionMismatchError: If len(codes) != width * height
    """
    if width < 0 or height < 0 or len(codes) != width * height:
        raise DimensionMismatchError(len(codes), width, height)

    return "\n".join(
        " ".join(codes[y * width:(y + 1) * width])
        for y in range(height)
    )


def tokenize_grid(text: str) -> list[list[str]]:
    """Split pasted text into rows of whitespace-separated tokens.

    Empty lines are dropped. Whitespace-only lines stay as empty rows.
    """
    return [line.split() for line in _LINE_BREAK.split(text.strip()) if line]


def parse_grid(text: str) -> DecodedGrid:
    """Parse code table text into RGB pixels.

    Never fails on malformed content: an empty text gives a 0x0 grid, and
    invalid tokens or cells missing from short rows become white.

    Args:
        text: Code table text (\\n or \\r\\n line endings)

    Returns:
        DecodedGrid sized (first row token count) x (non-empty line count)
    """
    rows = tokenize_grid(text)
    if not rows:
        return DecodedGrid(pixels=(), width=0, height=0)

    height = len(rows)
    width = len(rows[0])

    pixels: list[tuple[int, int, int]] = []
    fallback_cells = 0
    for row in rows:
        for x in range(width):
            token = row[x] if x < len(row) else None
            if token is not None and is_valid_code(token):
                pixels.append(decode_code(token))
            else:
                pixels.append(WHITE)
                fallback_cells += 1

    if fallback_cells:
        _LOGGER.debug(
            "Parsed %dx%d grid, %d cell(s) invalid or missing, rendered white",
            width,
            height,
            fallback_cells,
        )

    return DecodedGrid(
        pixels=tuple(pixels),
        width=width,
        height=height,
        fallback_cells=fallback_cells,
    )
