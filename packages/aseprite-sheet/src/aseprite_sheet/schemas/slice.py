"""Slice models: named sub-rectangles used for gameplay metadata.

A slice may change shape over time; each key sets its bounds from a given
frame onward.
"""

from __future__ import annotations

from pydantic import BaseModel, StrictStr

from aseprite_sheet.schemas.common import SHEET_MODEL_CONFIG, UInt32
from aseprite_sheet.schemas.geometry import Point, Rect


class SliceKey(BaseModel):
    """Slice shape starting at a frame.

    Attributes:
        frame: Frame index where this key takes effect.
        bounds: Slice rectangle in sprite coordinates.
        center: Nine-patch center rectangle, relative to bounds, if set.
        pivot: Pivot point, relative to bounds, if set.
    """

    model_config = SHEET_MODEL_CONFIG

    frame: UInt32
    bounds: Rect
    center: Rect | None = None
    pivot: Point | None = None


class Slice(BaseModel):
    """A named slice and its keys.

    Attributes:
        name: Slice name (e.g. "hitbox").
        color: Hex color tag.
        keys: Keys in export order.
        data: User-assigned text, if set.
    """

    model_config = SHEET_MODEL_CONFIG

    name: StrictStr
    color: StrictStr
    keys: tuple[SliceKey, ...]
    data: StrictStr | None = None

    def key_for_frame(self, frame: int) -> SliceKey | None:
        """Return the key in effect at ``frame``.

        The key in effect is the last one whose frame is at or before
        ``frame``. Returns None when the slice starts after ``frame``.
        """
        current: SliceKey | None = None
        for key in sorted(self.keys, key=lambda k: k.frame):
            if key.frame > frame:
                break
            current = key
        return current
