"""JSON tag file parsing utility for -f/--file options."""

import json
from pathlib import Path

import click


def load_tags_file(file_path: str) -> list[str]:
    """Load a tag list from a JSON file.

    The document is either a list of strings or an object with a "tags"
    list, as found in a policy spec.

    Args:
        file_path: Path to JSON file.

    Returns:
        Tags in file order.

    Raises:
        FileNotFoundError: If file does not exist.
        ValueError: If file contains invalid JSON or no tag list.
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")

    text = path.read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {file_path}: {e}")

    if isinstance(data, dict):
        data = data.get("tags", [])
    if not isinstance(data, list) or not all(isinstance(t, str) for t in data):
        raise ValueError(f"Expected a list of strings in {file_path}")
    return data


def load_tags_option(ctx, param, value) -> list[str] | None:
    """Click callback for -f/--file option that loads tags.

    Usage:
        @click.option("-f", "--file", callback=load_tags_option, expose_value=True)

    Returns:
        Parsed tags, or None if no file specified.

    Raises:
        click.BadParameter: If file not found or contains invalid JSON.
    """
    if value is None:
        return None

    try:
        return load_tags_file(value)
    except FileNotFoundError:
        raise click.BadParameter(f"File not found: {value}")
    except ValueError as e:
        raise click.BadParameter(str(e))
