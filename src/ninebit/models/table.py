"""Code table and decoded grid value types."""

from __future__ import annotations

from dataclasses import dataclass

from ..exceptions import DimensionMismatchError


def _check_dimensions(count: int, width: int, height: int) -> None:
    if width < 0 or height < 0 or count != width * height:
        raise DimensionMismatchError(count, width, height)


@dataclass(frozen=True, slots=True)
class CodeTable:
    """Encoded image: row-major 9-bit codes plus grid dimensions.

    Attributes:
        codes: Flat row-major codes, width * height entries
        width: Number of columns
        height: Number of rows
    """

    codes: tuple[str, ...]
    width: int
    height: int

    def __post_init__(self) -> None:
        _check_dimensions(len(self.codes), self.width, self.height)

    @property
    def total_codes(self) -> int:
        """Number of codes (pixels) in the table."""
        return len(self.codes)

    def rows(self) -> list[list[str]]:
        """Split codes into one list per image row."""
        w = self.width
        return [list(self.codes[y * w:(y + 1) * w]) for y in range(self.height)]

    def to_text(self) -> str:
        """Serialize to the space/newline delimited text format."""
        from ..encoding.grid import serialize_grid

        return serialize_grid(self.codes, self.width, self.height)


@dataclass(frozen=True, slots=True)
class DecodedGrid:
    """RGB pixels parsed from a code table text.

    Attributes:
        pixels: Flat row-major (r, g, b) tuples, width * height entries
        width: Number of columns (token count of the first row)
        height: Number of non-blank rows
        fallback_cells: Cells rendered white because their token was invalid or missing
    """

    pixels: tuple[tuple[int, int, int], ...]
    width: int
    height: int
    fallback_cells: int = 0

    def __post_init__(self) -> None:
        _check_dimensions(len(self.pixels), self.width, self.height)

    @property
    def is_empty(self) -> bool:
        """True when the grid has no cells."""
        return self.width == 0 or self.height == 0

    def rows(self) -> list[list[tuple[int, int, int]]]:
        """Split pixels into one list per image row."""
        w = self.width
        return [list(self.pixels[y * w:(y + 1) * w]) for y in range(self.height)]
