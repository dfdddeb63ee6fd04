"""Data models for ninebit code tables."""

from .enums import (
    CODE_LENGTH,
    DEFAULT_TARGET_SIZE,
    MAX_TARGET_SIZE,
    MIN_TARGET_SIZE,
    WHITE,
    FitMode,
)
from .options import ConversionOptions
from .table import CodeTable, DecodedGrid

__all__ = [
    "CODE_LENGTH",
    "DEFAULT_TARGET_SIZE",
    "MAX_TARGET_SIZE",
    "MIN_TARGET_SIZE",
    "WHITE",
    "CodeTable",
    "ConversionOptions",
    "DecodedGrid",
    "FitMode",
]
