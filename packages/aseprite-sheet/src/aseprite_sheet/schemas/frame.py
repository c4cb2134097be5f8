"""Frame models and the shape-polymorphic frames collection.

Aseprite exports ``frames`` in one of two layouts:

- array: ``"frames": [{"filename": "boonga 0.ase", ...}, ...]``
- hash:  ``"frames": {"boonga 0.ase": {...}, ...}``

There is no field declaring which layout was used, so the variant is chosen
by the structural kind of the JSON value (see ``frames_layout``).
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Annotated, Any, Literal

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    Discriminator,
    PlainSerializer,
    StrictBool,
    StrictStr,
    Tag,
)

from aseprite_sheet.schemas.common import SHEET_MODEL_CONFIG, UInt32
from aseprite_sheet.schemas.geometry import Dimensions, Rect

ARRAY_LAYOUT = "array"
HASH_LAYOUT = "hash"

FramesLayout = Literal["array", "hash"]


class Frame(BaseModel):
    """One sprite sheet region.

    Attributes:
        filename: Frame identifier (e.g. "boonga 0.ase").
        frame: Position and size of the region within the sheet image.
        rotated: Whether the region is stored rotated in the sheet.
        trimmed: Whether transparent borders were removed before packing.
        sprite_source_size: Bounds of the region within the untrimmed sprite.
        source_size: Size of the untrimmed sprite.
        duration: Display time in milliseconds.
    """

    model_config = SHEET_MODEL_CONFIG

    filename: StrictStr
    frame: Rect
    rotated: StrictBool
    trimmed: StrictBool
    sprite_source_size: Rect
    source_size: Dimensions
    duration: UInt32


def _fill_filenames(value: Any) -> Any:
    """Use each hash key as the frame filename when the entry has none."""
    if not isinstance(value, Mapping):
        return value
    return {
        key: (
            {"filename": key, **entry}
            if isinstance(entry, Mapping) and "filename" not in entry
            else entry
        )
        for key, entry in value.items()
    }


def _freeze_frames(value: dict[str, Frame]) -> Mapping[str, Frame]:
    return MappingProxyType(value)


def _thaw_frames(value: Mapping[str, Frame]) -> dict[str, Frame]:
    return dict(value)


def frames_layout(value: Any) -> str | None:
    """Return the frames layout tag for a raw or validated frames value.

    Args:
        value: The value found at ``frames``.

    Returns:
        "array" for sequences, "hash" for mappings, None for anything else.
    """
    if isinstance(value, (list, tuple)):
        return ARRAY_LAYOUT
    if isinstance(value, Mapping):
        return HASH_LAYOUT
    return None


FrameSequence = tuple[Frame, ...]
"""Frames in export order (array layout)."""

FrameMapping = Annotated[
    dict[str, Frame],
    BeforeValidator(_fill_filenames),
    AfterValidator(_freeze_frames),
    PlainSerializer(_thaw_frames, return_type=dict[str, Frame]),
]
"""Read-only frames keyed by name in document order (hash layout)."""

Frames = Annotated[
    Annotated[FrameSequence, Tag(ARRAY_LAYOUT)] | Annotated[FrameMapping, Tag(HASH_LAYOUT)],
    Discriminator(
        frames_layout,
        custom_error_type="frames_layout",
        custom_error_message="Input should be a JSON array or object of frames",
    ),
]
"""Frames collection, selected by the structural kind of the input."""
