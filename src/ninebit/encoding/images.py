"""Image sampling and rasterization for code tables."""

from __future__ import annotations

import logging

import numpy as np
from PIL import Image, ImageOps

from ..exceptions import EmptyGridError
from ..models.enums import FitMode
from ..models.table import CodeTable, DecodedGrid
from .pixels import composite_over_white, decode_code, encode_pixel

_LOGGER = logging.getLogger(__name__)

# Padding for CONTAIN and CROP: transparent, so it composites to white
_PAD_COLOR = (255, 255, 255, 0)


def fit_image(
    image: Image.Image,
    target_size: tuple[int, int],
    fit: FitMode,
) -> Image.Image:
    """Resample a source image onto the code grid as RGBA.

    The source is converted to RGBA first so its alpha survives until
    compositing. Cells not covered by the source (CONTAIN letterboxing, CROP
    of a small image) are fully transparent and end up white once encoded.

    Args:
        image: Source PIL Image (any mode)
        target_size: (width, height) of the code grid
        fit: How aspect ratio mismatches are resolved

    Returns:
        RGBA image of exactly target_size
    """
    image = image.convert("RGBA")

    if fit == FitMode.STRETCH:
        return image.resize(target_size, Image.Resampling.LANCZOS)

    if fit == FitMode.CONTAIN:
        return ImageOps.pad(image, target_size, Image.Resampling.LANCZOS, color=_PAD_COLOR)

    if fit == FitMode.COVER:
        return ImageOps.fit(image, target_size, Image.Resampling.LANCZOS)

    if fit == FitMode.CROP:
        tw, th = target_size
        sw, sh = image.size

        crop_w, crop_h = min(sw, tw), min(sh, th)
        left = (sw - crop_w) // 2
        top = (sh - crop_h) // 2
        cropped = image.crop((left, top, left + crop_w, top + crop_h))

        if crop_w == tw and crop_h == th:
            return cropped
        # Center on a transparent canvas
        canvas = Image.new("RGBA", target_size, _PAD_COLOR)
        canvas.paste(cropped, ((tw - crop_w) // 2, (th - crop_h) // 2))
        return canvas

    raise ValueError(f"Unknown fit mode: {fit}")


def sample_rgba(
    image: Image.Image,
    target_size: tuple[int, int],
    fit: FitMode = FitMode.STRETCH,
) -> np.ndarray:
    """Sample an image into a (height, width, 4) uint8 RGBA array."""
    width, height = target_size
    if width < 1 or height < 1:
        raise ValueError(f"target size must be at least 1x1, got {width}x{height}")

    if image.size != target_size:
        _LOGGER.debug("Resampling image from %s to %s (%s)", image.size, target_size, fit.name)
    fitted = fit_image(image, target_size, fit)
    return np.asarray(fitted, dtype=np.uint8)


def encode_image(
    image: Image.Image,
    target_size: tuple[int, int],
    fit: FitMode = FitMode.STRETCH,
) -> CodeTable:
    """Sample an image and encode every pixel as a 9-bit code.

    Transparent pixels are composited over white before encoding.

    Args:
        image: Source PIL Image (any mode)
        target_size: (width, height) of the code grid
        fit: Fit strategy for aspect ratio mismatches

    Returns:
        CodeTable with width * height codes in row-major order
    """
    pixels = sample_rgba(image, target_size, fit)
    height, width = pixels.shape[:2]

    codes = [
        encode_pixel(*composite_over_white(r, g, b, a))
        for r, g, b, a in pixels.reshape(-1, 4).tolist()
    ]

    _LOGGER.debug("Encoded %dx%d image: %d codes", width, height, len(codes))
    return CodeTable(codes=tuple(codes), width=width, height=height)


def _paint(
    pixels: list[tuple[int, int, int]] | tuple[tuple[int, int, int], ...],
    width: int,
    height: int,
    scale: int,
) -> Image.Image:
    if width == 0 or height == 0:
        raise EmptyGridError("Nothing to render: grid has no cells")
    if scale < 1:
        raise ValueError(f"scale out of range: {scale} (must be >= 1)")

    array = np.array(pixels, dtype=np.uint8).reshape(height, width, 3)
    image = Image.fromarray(array)

    if scale > 1:
        image = image.resize((width * scale, height * scale), Image.Resampling.NEAREST)
    return image


def render_grid(grid: DecodedGrid, scale: int = 1) -> Image.Image:
    """Rasterize a decoded grid into an RGB image.

    Args:
        grid: Parsed grid of RGB pixels
        scale: Integer enlargement factor (nearest neighbour, keeps pixels sharp)

    Returns:
        RGB image of size (width * scale, height * scale)

    Raises:
        EmptyGridError: If the grid has no cells
    """
    return _paint(grid.pixels, grid.width, grid.height, scale)


def render_table(table: CodeTable, scale: int = 1) -> Image.Image:
    """Rasterize an encoded table, showing the quantized colors."""
    pixels = [decode_code(code) for code in table.codes]
    return _paint(pixels, table.width, table.height, scale)
