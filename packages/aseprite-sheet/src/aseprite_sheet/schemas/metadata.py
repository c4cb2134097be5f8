"""Sheet metadata model (the ``meta`` section of an export).

The optional sections ``frameTags``, ``layers`` and ``slices`` are None when
absent from the document, so callers can tell "not requested at export time"
apart from "exported as empty".
"""

from __future__ import annotations

from pydantic import BaseModel, Field, StrictStr

from aseprite_sheet.schemas.common import SHEET_MODEL_CONFIG
from aseprite_sheet.schemas.frame_tag import FrameTag
from aseprite_sheet.schemas.geometry import Dimensions
from aseprite_sheet.schemas.layer import LayerEntry
from aseprite_sheet.schemas.slice import Slice


class Metadata(BaseModel):
    """Description of the sheet image and the optional exported sections.

    Attributes:
        app: Producing application (e.g. "http://www.aseprite.org/").
        version: Producing application version (e.g. "1.1.6-dev").
        image: Sheet image filename.
        format: Pixel format descriptor (e.g. "RGBA8888").
        size: Overall sheet size.
        scale: Export scale, kept verbatim as text (e.g. "1").
        frame_tags: Animation tags, if tag export was requested.
            Serialized as "frameTags".
        layers: Image and group layers, if layer export was requested.
        slices: Slices, if slice export was requested.
    """

    model_config = SHEET_MODEL_CONFIG

    app: StrictStr
    version: StrictStr
    image: StrictStr
    format: StrictStr
    size: Dimensions
    scale: StrictStr = Field(..., description="Export scale as written by the exporter")
    frame_tags: tuple[FrameTag, ...] | None = None
    layers: tuple[LayerEntry, ...] | None = None
    slices: tuple[Slice, ...] | None = None
