"""Layer models: image layers, group layers and cels.

Aseprite lists layers under ``meta.layers`` only when layer export was
requested. Image layers carry ``opacity`` and ``blendMode``; group layers
carry neither, so entries are told apart by which keys they hold.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any

from pydantic import BaseModel, Discriminator, StrictStr, Tag

from aseprite_sheet.schemas.common import SHEET_MODEL_CONFIG, Int32, Opacity, UInt32

IMAGE_LAYER = "layer"
GROUP_LAYER = "group"


class BlendMode(str, Enum):
    """Blend mode identifiers written by Aseprite.

    ``Layer.blend_mode`` is kept as a plain string so that modes added by
    newer Aseprite releases still decode; use ``Layer.known_blend_mode``
    to map it onto this enum.
    """

    normal = "normal"
    multiply = "multiply"
    screen = "screen"
    overlay = "overlay"
    darken = "darken"
    lighten = "lighten"
    color_dodge = "color_dodge"
    color_burn = "color_burn"
    hard_light = "hard_light"
    soft_light = "soft_light"
    difference = "difference"
    exclusion = "exclusion"
    hsl_hue = "hsl_hue"
    hsl_saturation = "hsl_saturation"
    hsl_color = "hsl_color"
    hsl_luminosity = "hsl_luminosity"
    addition = "addition"
    subtract = "subtract"
    divide = "divide"


class Cel(BaseModel):
    """Per-frame layer content that carries user data.

    Attributes:
        frame: Frame index the cel belongs to.
        opacity: Cel opacity (0-255), if exported.
        color: Hex color tag (e.g. "#fe5b59ff"), if set.
        data: User-assigned text, if set.
        z_index: Cel z-index offset, if exported. Serialized as "zIndex".
    """

    model_config = SHEET_MODEL_CONFIG

    frame: UInt32
    opacity: Opacity | None = None
    color: StrictStr | None = None
    data: StrictStr | None = None
    z_index: Int32 | None = None


class Layer(BaseModel):
    """An image layer.

    Attributes:
        name: Layer name.
        opacity: Layer opacity (0-255).
        blend_mode: Blend mode identifier (e.g. "normal"). Serialized as "blendMode".
        color: Hex color tag, if set.
        data: User-assigned text, if set.
        group: Name of the parent group layer, if nested.
        cels: Cels carrying color or data, if any were exported.
    """

    model_config = SHEET_MODEL_CONFIG

    name: StrictStr
    opacity: Opacity
    blend_mode: StrictStr
    color: StrictStr | None = None
    data: StrictStr | None = None
    group: StrictStr | None = None
    cels: tuple[Cel, ...] | None = None

    @property
    def known_blend_mode(self) -> BlendMode | None:
        """Return the BlendMode for blend_mode, or None if unrecognized."""
        try:
            return BlendMode(self.blend_mode)
        except ValueError:
            return None


class LayerGroup(BaseModel):
    """A group layer: a named container with no pixels of its own.

    Attributes:
        name: Group name.
        color: Hex color tag, if set.
        data: User-assigned text, if set.
        group: Name of the parent group layer, if nested.
    """

    model_config = SHEET_MODEL_CONFIG

    name: StrictStr
    color: StrictStr | None = None
    data: StrictStr | None = None
    group: StrictStr | None = None


def layer_kind(value: Any) -> str | None:
    """Return "layer" or "group" for a raw or validated layer entry."""
    if isinstance(value, Layer):
        return IMAGE_LAYER
    if isinstance(value, LayerGroup):
        return GROUP_LAYER
    if isinstance(value, dict):
        if {"opacity", "blendMode", "blend_mode"} & value.keys():
            return IMAGE_LAYER
        return GROUP_LAYER
    return None


LayerEntry = Annotated[
    Annotated[Layer, Tag(IMAGE_LAYER)] | Annotated[LayerGroup, Tag(GROUP_LAYER)],
    Discriminator(
        layer_kind,
        custom_error_type="layer_entry",
        custom_error_message="Input should be a JSON object describing a layer",
    ),
]
"""An entry of ``meta.layers``: an image layer or a group layer."""
