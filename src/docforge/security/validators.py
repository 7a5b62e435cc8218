"""
Input Validators - validation and sanitizing at the library boundary.

Parse at the boundary: storage keys, tuning limits and raw document text are
checked once where they enter docforge, never deep inside the rubric or the
history state machine.

Keep this file under 120 lines.
"""

import logging
import re

logger = logging.getLogger(__name__)

STORAGE_KEY_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_.:-]*$")
MAX_STORAGE_KEY_LENGTH = 200


class ValidationError(ValueError):
    """Raised when input validation fails. Contains a user-friendly message."""

    pass


def validate_not_empty(value: str, field_name: str = "input") -> str:
    """Validate that a string is not empty or whitespace-only."""
    if not value or not value.strip():
        raise ValidationError(f"{field_name} cannot be empty")
    return value.strip()


def validate_length(
    value: str,
    field_name: str = "input",
    min_length: int = 0,
    max_length: int = 100_000,
) -> str:
    """Validate string length is within bounds."""
    if len(value) < min_length:
        raise ValidationError(f"{field_name} must be at least {min_length} characters")
    if len(value) > max_length:
        raise ValidationError(f"{field_name} must be at most {max_length} characters")
    return value


def validate_storage_key(value: str, field_name: str = "identifier") -> str:
    """Validate a document identifier used to build a storage key.

    Accepts UUIDs, slugs and dotted/colon-separated names. Rejects path
    separators and whitespace so keys are safe as file names.
    """
    value = validate_not_empty(value, field_name)
    validate_length(value, field_name, max_length=MAX_STORAGE_KEY_LENGTH)
    if not STORAGE_KEY_PATTERN.match(value):
        raise ValidationError(
            f"{field_name} must start with a letter or digit and contain only "
            f"letters, digits, '_', '-', '.', and ':'"
        )
    return value


def validate_positive_int(value: int, field_name: str = "number") -> int:
    """Validate that a value is an integer >= 1."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValidationError(f"{field_name} must be a positive integer (got {value!r})")
    return value


def validate_range(
    value: int,
    field_name: str = "value",
    minimum: int = 0,
    maximum: int = 100,
) -> int:
    """Validate that an integer lies within [minimum, maximum]."""
    if value < minimum or value > maximum:
        raise ValidationError(
            f"{field_name} must be between {minimum} and {maximum} (got {value})"
        )
    return value


def sanitize_text(content: str, max_length: int = 200_000) -> str:
    """
    Normalize raw document text before analysis.

    - Strips null bytes (binary-looking input)
    - Normalizes CRLF and lone CR line endings to LF
    - Truncates to max_length so pattern scans stay bounded

    Does not alter anything else; the result is still the user's text.
    """
    if not content:
        return ""

    content = content.replace("\x00", "")
    content = content.replace("\r\n", "\n").replace("\r", "\n")

    if len(content) > max_length:
        content = content[:max_length]
        logger.info(f"[Validators] Document truncated to {max_length} chars")

    return content
