"""Configuration management for the tag CLI."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
import os
import sys
from rich.console import Console
from rich.markup import escape

from tptags.utils.exit_codes import VALIDATION_ERROR

console = Console()

_FALSE_VALUES = ("0", "false", "no", "off")


class TagsConfig(BaseSettings):
    """Display configuration from environment variables.

    Tag limits and the default tag set are fixed and not configurable.
    """

    # Display options
    default_format: str = Field(default="table", alias="TPTAGS_FORMAT")
    color_output: bool = Field(default=True, alias="TPTAGS_COLOR")
    display_max_tags: int = Field(default=3, ge=1, alias="TPTAGS_DISPLAY_MAX_TAGS")

    model_config = SettingsConfigDict(
        env_file=".envrc",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("default_format")
    @classmethod
    def check_format(cls, v: str) -> str:
        """Accept table or json, case-insensitively."""
        fmt = v.lower()
        if fmt not in ("table", "json"):
            raise ValueError(f"unsupported format '{v}' (expected table or json)")
        return fmt


def load_config() -> TagsConfig:
    """Load and validate configuration."""
    try:
        return TagsConfig()
    except Exception as e:
        # Settings failed validation, so fall back to the raw color variable
        color = os.environ.get("TPTAGS_COLOR", "").lower()
        console.no_color = color in _FALSE_VALUES
        console.print(f"[red]Configuration error: {escape(str(e))}[/red]")
        console.print("\n[yellow]Optional environment variables:[/yellow]")
        console.print("  - TPTAGS_FORMAT (table or json, defaults to table)")
        console.print("  - TPTAGS_COLOR (defaults to true)")
        console.print("  - TPTAGS_DISPLAY_MAX_TAGS (defaults to 3)")
        sys.exit(VALIDATION_ERROR)
