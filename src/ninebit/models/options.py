"""Conversion options."""

from __future__ import annotations

from dataclasses import dataclass

from .enums import DEFAULT_TARGET_SIZE, MAX_TARGET_SIZE, MIN_TARGET_SIZE, FitMode


@dataclass(frozen=True, slots=True)
class ConversionOptions:
    """Settings for converting an image into a code table.

    Attributes:
        target_size: Output width and height in pixels (square grid)
        fit: How the source image is mapped onto the square grid
    """

    target_size: int = DEFAULT_TARGET_SIZE
    fit: FitMode = FitMode.STRETCH

    def __post_init__(self) -> None:
        if not MIN_TARGET_SIZE <= self.target_size <= MAX_TARGET_SIZE:
            raise ValueError(
                f"target_size out of range: {self.target_size} "
                f"(must be {MIN_TARGET_SIZE}-{MAX_TARGET_SIZE})"
            )
        if not isinstance(self.fit, FitMode):
            raise TypeError(f"fit must be FitMode, got {type(self.fit).__name__}")

    @property
    def dimensions(self) -> tuple[int, int]:
        """(width, height) of the output grid."""
        return self.target_size, self.target_size
