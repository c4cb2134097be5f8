"""Frame tag models: named animation ranges.

Aseprite exports tags under ``meta.frameTags`` only when tag export was
requested.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, StrictStr

from aseprite_sheet.schemas.common import SHEET_MODEL_CONFIG, UInt32


class Direction(str, Enum):
    """Playback direction of a tagged animation."""

    forward = "forward"
    reverse = "reverse"
    pingpong = "pingpong"


class FrameTag(BaseModel):
    """A named, inclusive range of frames forming one animation.

    ``from_ <= to`` is expected but not enforced; a reversed range is the
    producer's problem, not a decode failure.

    Attributes:
        name: Tag name (e.g. "walk").
        from_: First frame index, inclusive. Serialized as "from".
        to: Last frame index, inclusive.
        direction: Playback direction.

    Example:
        >>> tag = FrameTag.model_validate(
        ...     {"name": "walk", "from": 0, "to": 3, "direction": "forward"}
        ... )
        >>> list(tag.frame_range)
        [0, 1, 2, 3]
    """

    model_config = SHEET_MODEL_CONFIG

    name: StrictStr
    from_: UInt32 = Field(..., alias="from")
    to: UInt32
    direction: Direction

    @property
    def frame_range(self) -> range:
        """Frame indices covered by the tag, in ascending order."""
        return range(self.from_, self.to + 1)
