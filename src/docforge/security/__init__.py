"""Security utilities -- boundary validation and text sanitizing."""
from .validators import (
    ValidationError,
    sanitize_text,
    validate_length,
    validate_not_empty,
    validate_positive_int,
    validate_range,
    validate_storage_key,
)
