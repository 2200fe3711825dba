"""Shared test fixtures and utilities."""

import pytest
from click.testing import CliRunner

import tptags.cli
import tptags.config
from tptags.utils.output import set_color_output, set_output_format


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Run every test without TPTAGS_* variables or a stray .envrc file."""
    for name in ("TPTAGS_FORMAT", "TPTAGS_COLOR", "TPTAGS_DISPLAY_MAX_TAGS"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    yield
    set_output_format("table")
    set_color_output(True)
    tptags.cli.console.no_color = False
    tptags.config.console.no_color = False


@pytest.fixture
def runner():
    """Click CLI test runner.

    Example:
        def test_command(runner):
            result = runner.invoke(main, ['validate', 'my-tag'])
            assert result.exit_code == 0
    """
    return CliRunner()


def make_custom_tags(count, prefix="tag"):
    """Return ``count`` distinct custom tags that validate unchanged."""
    return [f"{prefix}-{i}" for i in range(count)]
