"""Shared model configuration and integer kinds for sprite sheet schemas.

Every schema model uses SHEET_MODEL_CONFIG so that:
- instances are immutable once parsed
- unknown keys from newer Aseprite versions are ignored
- JSON field names (camelCase) and Python attribute names (snake_case)
  are both accepted on construction
- serialization always uses the JSON field names

Scalars are strict: "16" is not an integer and 1 is not a boolean. Nested
models and enums still accept plain dicts and strings.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import ConfigDict, Field, Strict
from pydantic.alias_generators import to_camel

SHEET_MODEL_CONFIG = ConfigDict(
    frozen=True,
    extra="ignore",
    alias_generator=to_camel,
    validate_by_name=True,
    validate_by_alias=True,
    serialize_by_alias=True,
)

UINT32_MAX = 2**32 - 1
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

# Sizes, frame indices and durations
UInt32 = Annotated[int, Strict(), Field(ge=0, le=UINT32_MAX)]

# Positions, which may sit left of or above an origin
Int32 = Annotated[int, Strict(), Field(ge=INT32_MIN, le=INT32_MAX)]

# Layer and cel opacity
Opacity = Annotated[int, Strict(), Field(ge=0, le=255)]
