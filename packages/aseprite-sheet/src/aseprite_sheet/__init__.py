"""aseprite-sheet: typed models for Aseprite JSON sprite sheet exports.

This package provides:
- parse(): decode an Aseprite JSON export (array or hash layout)
- serialize(): encode the model back into JSON text
- SpritesheetData and friends: immutable Pydantic models of the export
- MalformedInputError: the single decode-failure error
- JSON Schema export utilities

Pixel data is never touched; only the JSON description of frames, tags,
layers and slices.
"""

from __future__ import annotations

__version__ = "0.1.0"

# Error types
from aseprite_sheet.errors import AsepriteSheetError, MalformedInputError

# JSON Schema export functions
from aseprite_sheet.export import export_spritesheet_schema

# Mapper
from aseprite_sheet.mapper import format_field_path, parse, serialize

# Schema models
from aseprite_sheet.schemas import (
    BlendMode,
    Cel,
    Dimensions,
    Direction,
    Frame,
    FrameTag,
    Layer,
    LayerGroup,
    Metadata,
    Point,
    Rect,
    Slice,
    SliceKey,
    SpritesheetData,
)

__all__ = [
    "__version__",
    # Mapper
    "parse",
    "serialize",
    "format_field_path",
    # Errors
    "AsepriteSheetError",
    "MalformedInputError",
    # JSON Schema exports
    "export_spritesheet_schema",
    # Schema models
    "SpritesheetData",
    "Frame",
    "Rect",
    "Dimensions",
    "Point",
    "Metadata",
    "FrameTag",
    "Direction",
    "Layer",
    "LayerGroup",
    "Cel",
    "BlendMode",
    "Slice",
    "SliceKey",
]
