"""ninebit: 9-bit (3-3-3) RGB text codec.

  Converts images into tables of 9-bit binary codes (3 bits each for red,
  green and blue) and renders such tables back into pixels.
  """

from .converter import convert_image, image_to_text, load_image, text_to_image
from .encoding import (
    clamp_channel,
    composite_over_white,
    decode_code,
    dequantize,
    encode_image,
    encode_pixel,
    is_valid_code,
    parse_grid,
    quantize,
    render_grid,
    render_table,
    serialize_grid,
    tokenize_grid,
)
from .exceptions import (
    DimensionMismatchError,
    EmptyGridError,
    ImageEncodingError,
    InvalidCodeFormatError,
    NinebitError,
)
from .models.enums import (
    CODE_LENGTH,
    DEFAULT_TARGET_SIZE,
    MAX_TARGET_SIZE,
    MIN_TARGET_SIZE,
    WHITE,
    FitMode,
)
from .models.options import ConversionOptions
from .models.table import CodeTable, DecodedGrid

__version__ = "0.1.0"

__all__ = [
    # Main API
    "convert_image",
    "image_to_text",
    "text_to_image",
    "load_image",
    # Codec
    "quantize",
    "dequantize",
    "clamp_channel",
    "encode_pixel",
    "decode_code",
    "is_valid_code",
    "composite_over_white",
    # Grid text format
    "serialize_grid",
    "tokenize_grid",
    "parse_grid",
    # Images
    "encode_image",
    "render_grid",
    "render_table",
    # Exceptions
    "NinebitError",
    "InvalidCodeFormatError",
    "DimensionMismatchError",
    "ImageEncodingError",
    "EmptyGridError",
    # Models
    "CodeTable",
    "DecodedGrid",
    "ConversionOptions",
    "FitMode",
    # Constants
    "CODE_LENGTH",
    "DEFAULT_TARGET_SIZE",
    "MIN_TARGET_SIZE",
    "MAX_TARGET_SIZE",
    "WHITE",
]
