"""Image <-> code table text conversion."""

from __future__ import annotations

import io
import logging
import os
from typing import BinaryIO, Union

from PIL import Image, UnidentifiedImageError

from .encoding import encode_image, parse_grid, render_grid
from .exceptions import ImageEncodingError
from .models.options import ConversionOptions
from .models.table import CodeTable

_LOGGER = logging.getLogger(__name__)

ImageSource = Union[Image.Image, bytes, str, os.PathLike, BinaryIO]


def load_image(source: ImageSource) -> Image.Image:
    """Load an image from a PIL Image, raw bytes, a path or a file object.

    Raises:
        ImageEncodingError: If the source can't be decoded as an image
    """
    if isinstance(source, Image.Image):
        return source
    if isinstance(source, bytes):
        source = io.BytesIO(source)

    try:
        image = Image.open(source)
        image.load()
    except (UnidentifiedImageError, OSError) as err:
        raise ImageEncodingError(f"Could not load image: {err}") from err
    return image


def convert_image(source: ImageSource, options: ConversionOptions | None = None) -> CodeTable:
    """Sample an image at the configured size and encode it as a code table.

    Args:
        source: Image, encoded image bytes, path or binary file object
        options: Conversion options (default: 20x20, stretched)

    Returns:
        CodeTable for the sampled image
    """
    options = options or ConversionOptions()
    image = load_image(source)

    _LOGGER.debug(
        "Converting %dx%d %s image at %dx%d",
        image.width,
        image.height,
        image.mode,
        *options.dimensions,
    )
    table = encode_image(image, options.dimensions, options.fit)
    _LOGGER.info("Encoded image as %dx%d code table", table.width, table.height)
    return table


def image_to_text(source: ImageSource, options: ConversionOptions | None = None) -> str:
    """Convert an image straight to code table text."""
    return convert_image(source, options).to_text()


def text_to_image(text: str, scale: int = 1) -> Image.Image:
    """Render code table text back into an RGB image.

    Invalid or missing cells are painted white.

    Raises:
        EmptyGridError: If the text contains no codes
    """
    grid = parse_grid(text)
    image = render_grid(grid, scale)
    _LOGGER.info(
        "Rendered %dx%d grid (%d fallback cells)",
        grid.width,
        grid.height,
        grid.fallback_cells,
    )
    return image
