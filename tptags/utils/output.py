"""Output format utilities."""

import json
import sys

# Global output format and color state
_output_format = "table"
_color_output = True


def set_output_format(fmt: str) -> None:
    """Set the global output format."""
    global _output_format
    _output_format = fmt


def get_output_format() -> str:
    """Get the current output format."""
    return _output_format


def set_color_output(enabled: bool) -> None:
    """Enable or disable color for error output."""
    global _color_output
    _color_output = enabled


def emit_error(code: str, message: str, index: int | None = None, hint: str = "") -> None:
    """Emit an error in the appropriate format.

    In JSON mode, outputs structured JSON to stderr.
    In table mode, uses Rich console for pretty output.
    """
    if _output_format == "json":
        error_obj = {
            "error": True,
            "code": code,
            "message": message,
        }
        if index is not None:
            error_obj["index"] = index
        if hint:
            error_obj["hint"] = hint
        print(json.dumps(error_obj), file=sys.stderr)
    else:
        from rich.console import Console
        from rich.markup import escape

        console = Console(stderr=True, no_color=not _color_output)
        console.print(f"[red]{escape(message)}[/red]")
        if hint:
            console.print(f"[dim]{escape(hint)}[/dim]")
