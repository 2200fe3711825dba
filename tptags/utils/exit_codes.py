"""Semantic exit codes for machine-readable CLI results."""

from tptags.errors import TagErrorKind

# Success
SUCCESS = 0

# General/unexpected error
GENERAL_ERROR = 1

# Tag list rejected (too many tags, too short, escape failed)
VALIDATION_ERROR = 4

EXIT_CODES_BY_KIND = {
    TagErrorKind.TOO_MANY_TAGS: VALIDATION_ERROR,
    TagErrorKind.TOO_SHORT: VALIDATION_ERROR,
    TagErrorKind.ESCAPE_FAILED: VALIDATION_ERROR,
}


def exit_code_for_kind(kind: TagErrorKind) -> int:
    """Map a tag error kind to a semantic exit code.

    Args:
        kind: Failure classification from validation

    Returns:
        Semantic exit code
    """
    return EXIT_CODES_BY_KIND[kind]
