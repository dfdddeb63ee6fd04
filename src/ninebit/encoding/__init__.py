"""9-bit code encoding and image processing."""

from .channels import clamp_channel, dequantize, quantize
from .grid import parse_grid, serialize_grid, tokenize_grid
from .images import encode_image, fit_image, render_grid, render_table, sample_rgba
from .pixels import composite_over_white, decode_code, encode_pixel, is_valid_code

__all__ = [
    "quantize",
    "dequantize",
    "clamp_channel",
    "encode_pixel",
    "decode_code",
    "is_valid_code",
    "composite_over_white",
    "serialize_grid",
    "tokenize_grid",
    "parse_grid",
    "fit_image",
    "sample_rgba",
    "encode_image",
    "render_grid",
    "render_table",
]
