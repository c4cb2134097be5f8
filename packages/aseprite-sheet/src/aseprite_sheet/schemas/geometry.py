"""Geometry value models: Rect, Dimensions, Point.

All values are pixel units. Widths and heights are never negative.
"""

from __future__ import annotations

from pydantic import BaseModel

from aseprite_sheet.schemas.common import SHEET_MODEL_CONFIG, Int32, UInt32


class Rect(BaseModel):
    """Axis-aligned rectangle in pixel units.

    Attributes:
        x: Left edge.
        y: Top edge.
        w: Width (non-negative).
        h: Height (non-negative).

    Example:
        >>> Rect(x=1, y=1, w=18, h=18).right
        19
    """

    model_config = SHEET_MODEL_CONFIG

    x: Int32
    y: Int32
    w: UInt32
    h: UInt32

    @property
    def right(self) -> int:
        """Exclusive right edge (x + w)."""
        return self.x + self.w

    @property
    def bottom(self) -> int:
        """Exclusive bottom edge (y + h)."""
        return self.y + self.h

    @property
    def size(self) -> Dimensions:
        """Width and height of the rectangle."""
        return Dimensions(w=self.w, h=self.h)


class Dimensions(BaseModel):
    """Width and height in pixel units."""

    model_config = SHEET_MODEL_CONFIG

    w: UInt32
    h: UInt32


class Point(BaseModel):
    """A pixel coordinate, used for slice pivots."""

    model_config = SHEET_MODEL_CONFIG

    x: Int32
    y: Int32
