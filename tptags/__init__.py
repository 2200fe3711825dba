"""Validation and normalization of tracing policy tags."""

from tptags.errors import (
    TagError,
    TagErrorKind,
    TagSyntaxError,
    TagsResult,
    TagValidationError,
)
from tptags.tags import (
    DEFAULT_TAGS,
    TP_MAX_TAG_LEN,
    TP_MAX_TAGS,
    TP_MIN_TAG_LEN,
    escape_tag,
    is_default_tag,
    validate_tags,
)

__version__ = "1.0.0"

__all__ = [
    "DEFAULT_TAGS",
    "TP_MAX_TAGS",
    "TP_MIN_TAG_LEN",
    "TP_MAX_TAG_LEN",
    "TagError",
    "TagErrorKind",
    "TagSyntaxError",
    "TagValidationError",
    "TagsResult",
    "escape_tag",
    "is_default_tag",
    "validate_tags",
]
