"""Tracing policy tag validation.

Tags are either one of the known default tags, stored verbatim, or custom
tags, stored as their escaped body (the quoted form minus the surrounding
quotes) so they can be re-quoted for display without double escaping.

Lengths are measured in UTF-8 bytes. Truncation of long custom tags keeps
whole characters only.
"""

from typing import Sequence

from tptags.errors import TagError, TagErrorKind, TagSyntaxError, TagsResult
from tptags.quote import QUOTE, quote

# Max tags of a tracing policy
TP_MAX_TAGS = 16
TP_MIN_TAG_LEN = 2
TP_MAX_TAG_LEN = 128

DEFAULT_TAGS = frozenset(
    {
        "observability.filesystem",
        "observability.privilege",
        "observability.process",
    }
)


def byte_len(s: str) -> int:
    """Return the UTF-8 encoded length of ``s``."""
    return len(s.encode("utf-8", "surrogatepass"))


def truncate_tag(tag: str, limit: int = TP_MAX_TAG_LEN) -> str:
    """Return the longest prefix of whole characters that fits in ``limit`` bytes."""
    size = 0
    for i, ch in enumerate(tag):
        size += byte_len(ch)
        if size > limit:
            return tag[:i]
    return tag


def is_default_tag(tag: str) -> bool:
    return tag in DEFAULT_TAGS


def escape_tag(tag: str) -> str:
    """Escape a custom tag into its canonical stored form.

    Args:
        tag: Raw custom tag

    Returns:
        Escaped tag body without surrounding quotes

    Raises:
        TagSyntaxError: TOO_SHORT if under TP_MIN_TAG_LEN bytes, ESCAPE_FAILED
            if the quoted form is malformed.
    """
    if byte_len(tag) < TP_MIN_TAG_LEN:
        raise TagSyntaxError(TagErrorKind.TOO_SHORT)
    if byte_len(tag) > TP_MAX_TAG_LEN:
        tag = truncate_tag(tag)

    quoted = quote(tag)
    if byte_len(quoted) <= byte_len(tag) or quoted[0] != QUOTE or quoted[-1] != QUOTE:
        raise TagSyntaxError(TagErrorKind.ESCAPE_FAILED)

    # Stored without the quotes; events re-quote it when printing
    return quoted[1:-1]


def validate_tags(tags: Sequence[str]) -> TagsResult:
    """Validate and escape the tags of a tracing policy.

    Default tags pass through unchanged, custom tags are escaped. The first
    bad entry fails the whole list.

    Args:
        tags: Raw tags in policy order

    Returns:
        TagsResult holding the stored tags as a tuple (same length and order as the
        input) or the error
    """
    if len(tags) == 0:
        return TagsResult.success(())
    if len(tags) > TP_MAX_TAGS:
        return TagsResult.failure(TagError(TagErrorKind.TOO_MANY_TAGS))

    new_tags = []
    for i, tag in enumerate(tags):
        if not is_default_tag(tag):
            try:
                tag = escape_tag(tag)
            except TagSyntaxError as e:
                return TagsResult.failure(TagError(e.kind, index=i))
        new_tags.append(tag)

    return TagsResult.success(new_tags)
