from __future__ import annotations

from enum import IntEnum
from typing import Final

# Code table geometry
CODE_LENGTH: Final = 9

# Fallback color for invalid or missing cells, and for sampling padding
WHITE: Final[tuple[int, int, int]] = (255, 255, 255)

# Square output resolution used when sampling source images
DEFAULT_TARGET_SIZE: Final = 20
MIN_TARGET_SIZE: Final = 20
MAX_TARGET_SIZE: Final = 150


class FitMode(IntEnum):
    """How a source image is sampled onto the square code grid.

    Padding is transparent and therefore encodes as white cells.
    """
    STRETCH = 0   # Resample to the grid size, aspect ratio ignored
    CONTAIN = 1   # Whole image visible, letterboxed with white cells
    COVER = 2     # Grid fully covered, overflow trimmed
    CROP = 3      # One source pixel per cell from the center, white cells around small images

    @classmethod
    def from_name(cls, name: str) -> FitMode:
        """Look up a fit mode by case-insensitive name (e.g. "contain")."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            choices = ", ".join(mode.name.lower() for mode in cls)
            raise ValueError(f"Unknown fit mode: {name!r} (choose from {choices})") from None
