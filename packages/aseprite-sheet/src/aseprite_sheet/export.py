"""JSON Schema export for aseprite-sheet.

Generates a JSON Schema Draft 2020-12 document from the SpritesheetData model
describing the Aseprite export layout this package accepts. Useful for
validating exports in other languages or editor tooling.
"""

from __future__ import annotations

from typing import Any

from aseprite_sheet.schemas import SpritesheetData

SCHEMA_DIALECT = "https://json-schema.org/draft/2020-12/schema"
SCHEMA_ID = "https://aseprite-sheet.dev/schemas/spritesheet.schema.json"


def export_spritesheet_schema() -> dict[str, Any]:
    """Export the SpritesheetData JSON Schema.

    Field names in the schema are the JSON names written by Aseprite
    (``spriteSourceSize``, ``frameTags`` ...). Unknown keys stay permitted,
    matching the parser.

    Returns:
        Dictionary containing the JSON Schema.

    Example:
        >>> schema = export_spritesheet_schema()
        >>> schema["$schema"]
        'https://json-schema.org/draft/2020-12/schema'
        >>> schema["required"]
        ['frames', 'meta']
    """
    schema = SpritesheetData.model_json_schema(by_alias=True, mode="validation")

    schema["$schema"] = SCHEMA_DIALECT
    schema["$id"] = SCHEMA_ID

    return schema
