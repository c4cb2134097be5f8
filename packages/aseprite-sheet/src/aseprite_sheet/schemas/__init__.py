"""Schema definitions for aseprite-sheet.

This module exports the Pydantic models describing an Aseprite JSON export:

Root Model:
- SpritesheetData: frames collection plus metadata

Frames:
- Frame: one sprite sheet region
- FrameSequence / FrameMapping / Frames: array and hash layouts

Metadata:
- Metadata: sheet image description and optional sections
- FrameTag, Direction: animation ranges
- Layer, LayerGroup, Cel, BlendMode: exported layers
- Slice, SliceKey: named sub-rectangles

Geometry:
- Rect, Dimensions, Point
"""

from __future__ import annotations

from aseprite_sheet.schemas.common import SHEET_MODEL_CONFIG, Int32, Opacity, UInt32
from aseprite_sheet.schemas.frame import (
    ARRAY_LAYOUT,
    HASH_LAYOUT,
    Frame,
    FrameMapping,
    Frames,
    FrameSequence,
    frames_layout,
)
from aseprite_sheet.schemas.frame_tag import Direction, FrameTag
from aseprite_sheet.schemas.geometry import Dimensions, Point, Rect
from aseprite_sheet.schemas.layer import (
    BlendMode,
    Cel,
    Layer,
    LayerEntry,
    LayerGroup,
    layer_kind,
)
from aseprite_sheet.schemas.metadata import Metadata
from aseprite_sheet.schemas.slice import Slice, SliceKey
from aseprite_sheet.schemas.spritesheet import SpritesheetData

__all__ = [
    # Configuration and integer kinds
    "SHEET_MODEL_CONFIG",
    "Int32",
    "Opacity",
    "UInt32",
    # Geometry
    "Dimensions",
    "Point",
    "Rect",
    # Frames
    "ARRAY_LAYOUT",
    "HASH_LAYOUT",
    "Frame",
    "FrameMapping",
    "FrameSequence",
    "Frames",
    "frames_layout",
    # Metadata
    "BlendMode",
    "Cel",
    "Direction",
    "FrameTag",
    "Layer",
    "LayerEntry",
    "LayerGroup",
    "Metadata",
    "Slice",
    "SliceKey",
    "layer_kind",
    # Root
    "SpritesheetData",
]
