"""Custom exception hierarchy for aseprite-sheet.

This module defines the exception classes raised by the schema mapper:
- AsepriteSheetError: Base exception for all aseprite-sheet errors
- MalformedInputError: Raised when a document cannot be decoded

Design:
- User-facing messages name the offending field and the expected shape
- Technical details (the full pydantic error report) are logged via structlog
- Errors propagate to the caller; the mapper never recovers internally
"""

from __future__ import annotations

import structlog

logger = structlog.get_logger(__name__)


class AsepriteSheetError(Exception):
    """Base exception for aseprite-sheet.

    All aseprite-sheet exceptions inherit from this class. The user message is
    safe to display; technical details are logged internally.

    Args:
        user_message: Message to display to the user.
        internal_details: Optional technical details for logging. Logged at
            error level but never included in the exception message.

    Example:
        >>> raise AsepriteSheetError(
        ...     "Sprite sheet unusable",
        ...     internal_details="3 validation errors for SpritesheetData ...",
        ... )
    """

    def __init__(
        self,
        user_message: str,
        *,
        internal_details: str | None = None,
    ) -> None:
        """Initialize AsepriteSheetError with user message and optional internal details.

        Args:
            user_message: Message to display to the user.
            internal_details: Technical details for internal logging only.
        """
        super().__init__(user_message)
        self.user_message = user_message

        if internal_details:
            logger.error(
                "aseprite_sheet_error",
                error_type=self.__class__.__name__,
                user_message=user_message,
                internal_details=internal_details,
            )


class MalformedInputError(AsepriteSheetError):
    """Raised when a sprite sheet document cannot be decoded.

    Covers every decode failure: invalid JSON syntax, type mismatches
    (e.g. ``frame`` is a string instead of an object) and missing required
    fields (e.g. ``meta`` absent). Parsing never yields a partial result.

    Attributes:
        field_path: Path to the first offending field (e.g. "frames[0].frame.x"),
            or None when the document itself is not valid JSON.
        expected: Description of what the field should contain.
        actual: Short repr of the value found, when available.
        issues: Every (field_path, message) pair reported by validation.

    Example:
        >>> raise MalformedInputError(
        ...     field_path="frames[0].frame.x",
        ...     expected="Input should be a valid integer",
        ...     actual="'not-a-number'",
        ... )
        # User sees: "Malformed sprite sheet data (field 'frames[0].frame.x':
        #            Input should be a valid integer, got 'not-a-number')"
    """

    def __init__(
        self,
        *,
        field_path: str | None = None,
        expected: str | None = None,
        actual: str | None = None,
        issues: list[tuple[str | None, str]] | None = None,
        internal_details: str | None = None,
    ) -> None:
        """Initialize MalformedInputError with field context.

        Args:
            field_path: Path to the offending field (optional).
            expected: What the field should contain (optional).
            actual: Short repr of the value found (optional).
            issues: All (field_path, message) pairs (optional).
            internal_details: Technical details for internal logging only.
        """
        detail_parts: list[str] = []
        if expected:
            detail_parts.append(expected)
        if actual is not None:
            detail_parts.append(f"got {actual}")
        detail = ", ".join(detail_parts)

        if field_path:
            context = f"field '{field_path}'"
            context = f"{context}: {detail}" if detail else context
            user_message = f"Malformed sprite sheet data ({context})"
        elif detail:
            user_message = f"Malformed sprite sheet data ({detail})"
        else:
            user_message = "Malformed sprite sheet data"

        super().__init__(user_message, internal_details=internal_details)

        self.field_path = field_path
        self.expected = expected
        self.actual = actual
        self.issues = list(issues) if issues else []
