"""Schema mapper: JSON text <-> SpritesheetData.

This module provides the two operations of aseprite-sheet:
- parse(): decode an Aseprite JSON export into SpritesheetData
- serialize(): encode SpritesheetData back into JSON text

Both are pure. parse() accepts text, bytes or an already-open readable
stream and never opens files itself.
"""

from __future__ import annotations

import json
from typing import IO, TYPE_CHECKING, Any

import structlog
from pydantic import ValidationError as PydanticValidationError

from aseprite_sheet.errors import MalformedInputError
from aseprite_sheet.schemas.frame import ARRAY_LAYOUT, HASH_LAYOUT
from aseprite_sheet.schemas.layer import GROUP_LAYER, IMAGE_LAYER
from aseprite_sheet.schemas.spritesheet import SpritesheetData

if TYPE_CHECKING:
    from pydantic_core import ErrorDetails

logger = structlog.get_logger(__name__)

# Tags pydantic inserts into error locations for shape-selected unions
_FRAMES_TAGS = frozenset({ARRAY_LAYOUT, HASH_LAYOUT})
_LAYER_TAGS = frozenset({IMAGE_LAYER, GROUP_LAYER})

# Longest repr of an offending input quoted in error messages
MAX_ACTUAL_LENGTH = 60

Source = str | bytes | bytearray | IO[str] | IO[bytes]


def parse(source: Source) -> SpritesheetData:
    """Parse an Aseprite JSON export.

    The frames layout is detected from the document: a JSON array at
    ``frames`` yields a tuple of Frame, a JSON object yields a read-only
    mapping keyed by frame name. Unknown keys are ignored at every level.

    Args:
        source: JSON text, UTF-8 bytes, or a readable stream of either.

    Returns:
        Fully validated SpritesheetData.

    Raises:
        MalformedInputError: If the document is not valid JSON, a field has
            the wrong type, or a required field is missing.
        TypeError: If source is not text, bytes or a readable stream.

    Example:
        >>> sheet = parse(Path("boonga.json").read_bytes())
        >>> sheet.meta.frame_tags[0].name
        'testtag'
    """
    if hasattr(source, "read"):
        source = source.read()
    if not isinstance(source, (str, bytes, bytearray)):
        raise TypeError(
            f"Expected JSON text, bytes or a readable stream, got {type(source).__name__}"
        )

    try:
        sheet = SpritesheetData.model_validate_json(source)
    except PydanticValidationError as e:
        raise _to_malformed_input(e) from e

    logger.debug(
        "spritesheet_parsed",
        layout=sheet.layout,
        frame_count=sheet.frame_count,
        app_version=sheet.meta.version,
    )
    return sheet


def serialize(data: SpritesheetData, *, indent: int | None = None) -> str:
    """Serialize SpritesheetData to JSON text.

    Field names follow the Aseprite export (``spriteSourceSize``,
    ``frameTags``, ``blendMode`` ...). ``frames`` is written as an array or an
    object, matching the layout of ``data``. Optional fields that are None are
    omitted rather than written as null.

    Args:
        data: Sheet to serialize.
        indent: Indentation for pretty output (default: compact).

    Returns:
        JSON text that parse() maps back to a value equal to ``data``.
    """
    return data.model_dump_json(by_alias=True, exclude_none=True, indent=indent)


def format_field_path(loc: tuple[int | str, ...]) -> str | None:
    """Build a readable field path from a pydantic error location.

    Union tags pydantic adds for shape-selected unions are dropped, sequence
    indices become ``[n]`` and frame names in the hash layout become
    ``["name"]`` with JSON string escaping.

    Args:
        loc: Error location, e.g. ("frames", "array", 0, "frame", "x").

    Returns:
        Path such as 'frames[0].frame.x', or None for the document root.

    Example:
        >>> format_field_path(("frames", "hash", "a.png", "duration"))
        'frames["a.png"].duration'
        >>> format_field_path(("meta", "layers", 1, "layer", "opacity"))
        'meta.layers[1].opacity'
    """
    path = ""
    previous: int | str | None = None
    for part in loc:
        if previous == "frames" and part in _FRAMES_TAGS:
            pass
        elif isinstance(previous, int) and part in _LAYER_TAGS:
            pass
        elif isinstance(part, int):
            path += f"[{part}]"
        elif previous == HASH_LAYOUT and path.endswith("frames"):
            path += f"[{json.dumps(part, ensure_ascii=False)}]"
        else:
            path += f".{part}" if path else part
        previous = part
    return path or None


def _describe_input(value: Any) -> str:
    """Return a short repr of an offending input value."""
    if isinstance(value, dict):
        return "an object"
    if isinstance(value, (list, tuple)):
        return "an array"
    text = repr(value)
    if len(text) > MAX_ACTUAL_LENGTH:
        text = text[: MAX_ACTUAL_LENGTH - 3] + "..."
    return text


def _to_malformed_input(err: PydanticValidationError) -> MalformedInputError:
    """Translate a pydantic ValidationError into MalformedInputError.

    The first reported error supplies field_path/expected/actual; every
    error is kept in ``issues``.
    """
    errors: list[ErrorDetails] = err.errors(include_url=False)
    issues = [(format_field_path(tuple(e["loc"])), e["msg"]) for e in errors]

    first = errors[0]
    actual: str | None = None
    if first["type"] == "json_invalid":
        expected = f"Invalid JSON: {first.get('ctx', {}).get('error', first['msg'])}"
    elif first["type"] == "missing":
        expected = "Field required"
    else:
        expected = first["msg"]
        actual = _describe_input(first["input"])

    return MalformedInputError(
        field_path=issues[0][0],
        expected=expected,
        actual=actual,
        issues=issues,
        internal_details=str(err),
    )
