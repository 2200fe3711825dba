"""Tag display utilities."""

from typing import Sequence

from tptags.quote import QUOTE


def quote_for_display(tag: str) -> str:
    """Wrap a stored tag in quotes, as events print it."""
    return f"{QUOTE}{tag}{QUOTE}"


def format_tags_for_display(tags: Sequence[str], max_tags: int = 3) -> str:
    """Format tags for display with truncation.

    Args:
        tags: List of tags
        max_tags: Maximum tags to show (default 3)

    Returns:
        Formatted string like "observability.process, my-tag, +2 more"
    """
    if not tags:
        return ""

    if len(tags) <= max_tags:
        return ", ".join(tags)

    shown = ", ".join(tags[:max_tags])
    remaining = len(tags) - max_tags
    return f"{shown}, +{remaining} more"
