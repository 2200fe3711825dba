"""Main CLI entry point for tracing policy tag validation."""

import json
import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from tptags.config import load_config
from tptags.errors import TagErrorKind
from tptags.quote import unquote
from tptags.tags import (
    DEFAULT_TAGS,
    TP_MAX_TAG_LEN,
    TP_MAX_TAGS,
    TP_MIN_TAG_LEN,
    is_default_tag,
    validate_tags,
)
from tptags.utils.display import format_tags_for_display, quote_for_display
from tptags.utils.exit_codes import VALIDATION_ERROR, exit_code_for_kind
from tptags.utils.file_input import load_tags_option
from tptags.utils.output import (
    emit_error,
    get_output_format,
    set_color_output,
    set_output_format,
)

console = Console()

_HINTS = {
    TagErrorKind.TOO_MANY_TAGS: f"A policy accepts at most {TP_MAX_TAGS} tags",
    TagErrorKind.TOO_SHORT: f"Custom tags need at least {TP_MIN_TAG_LEN} bytes",
    TagErrorKind.ESCAPE_FAILED: "The tag could not be escaped",
}

format_option = click.option(
    "--format",
    "fmt",
    type=click.Choice(["json", "table"]),
    default=None,
    help="Output format (default from TPTAGS_FORMAT, else table)",
)


def _resolve_format(ctx, fmt):
    set_output_format(fmt or ctx.obj["config"].default_format)


@click.group()
@click.version_option(version="1.0.0")
@click.pass_context
def main(ctx):
    """Validate and normalize tracing policy tags.

    Default tags are kept as-is. Custom tags are truncated to
    128 bytes and escaped so they print safely in events.

    Examples:
        tptags validate observability.process my-team
        tptags validate -f policy-tags.json --format json
        tptags defaults
    """
    ctx.ensure_object(dict)
    config = load_config()
    ctx.obj["config"] = config
    console.no_color = not config.color_output
    set_color_output(config.color_output)


@main.command(name="validate")
@click.argument("tags", nargs=-1)
@click.option(
    "-f",
    "--file",
    "file_tags",
    callback=load_tags_option,
    help="JSON file with a tag list or an object with a 'tags' list",
)
@format_option
@click.pass_context
def validate_cmd(ctx, tags, file_tags, fmt):
    """Validate tags and print their stored form.

    Tags from --file come first, followed by TAGS arguments.
    """
    _resolve_format(ctx, fmt)
    raw = list(file_tags or []) + list(tags)

    result = validate_tags(raw)
    if not result.ok:
        err = result.error
        emit_error(err.kind.value, err.message, index=err.index, hint=_HINTS[err.kind])
        sys.exit(exit_code_for_kind(err.kind))

    if get_output_format() == "json":
        print(json.dumps({"tags": result.tags}, indent=2))
        return

    if not result.tags:
        console.print("[dim]No tags[/dim]")
        return

    table = Table(title="Policy tags")
    table.add_column("#", style="dim")
    table.add_column("Input", style="cyan")
    table.add_column("Stored", style="green")
    table.add_column("Kind")

    for i, (before, after) in enumerate(zip(raw, result.tags)):
        kind = "default" if is_default_tag(before) else "custom"
        table.add_row(str(i), escape(repr(before)), escape(quote_for_display(after)), kind)

    console.print(table)
    summary = format_tags_for_display(result.tags, ctx.obj["config"].display_max_tags)
    console.print(f"\n[dim]Stored tags: {escape(summary)}[/dim]")


@main.command(name="defaults")
@format_option
@click.pass_context
def defaults_cmd(ctx, fmt):
    """List the default tags and the tag limits."""
    _resolve_format(ctx, fmt)
    limits = {
        "max_tags": TP_MAX_TAGS,
        "min_tag_len": TP_MIN_TAG_LEN,
        "max_tag_len": TP_MAX_TAG_LEN,
    }

    if get_output_format() == "json":
        print(json.dumps({"default_tags": sorted(DEFAULT_TAGS), "limits": limits}, indent=2))
        return

    table = Table(title="Default tags")
    table.add_column("Tag", style="cyan")
    for t in sorted(DEFAULT_TAGS):
        table.add_row(t)

    console.print(table)
    console.print(
        f"\n[dim]Max tags: {TP_MAX_TAGS}, custom tag length: "
        f"{TP_MIN_TAG_LEN}-{TP_MAX_TAG_LEN} bytes[/dim]"
    )


@main.command(name="show")
@click.argument("stored", nargs=-1, required=True)
@format_option
@click.pass_context
def show_cmd(ctx, stored, fmt):
    """Show stored tags as events print them, with their raw value."""
    _resolve_format(ctx, fmt)

    rows = []
    for i, tag in enumerate(stored):
        quoted = quote_for_display(tag)
        try:
            raw = unquote(quoted)
        except ValueError as e:
            emit_error("INVALID_STORED_TAG", f"stored tag n{i}: {e}", index=i)
            sys.exit(VALIDATION_ERROR)
        rows.append({"stored": tag, "display": quoted, "raw": raw})

    if get_output_format() == "json":
        print(json.dumps(rows, indent=2))
        return

    table = Table(title="Stored tags")
    table.add_column("Display", style="cyan")
    table.add_column("Raw")
    for row in rows:
        table.add_row(escape(row["display"]), escape(repr(row["raw"])))

    console.print(table)


if __name__ == "__main__":
    main()
