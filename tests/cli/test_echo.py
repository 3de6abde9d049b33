# xutils:header:start
#
#   project      : Xutils
#   file         : test_echo.py
#   file_relpath : tests/cli/test_echo.py
#   license      : MIT
#   copyright    : (c) 2025 Xutils contributors
#
# xutils:header:end

"""CLI tests: `echo` renders markup to stdout."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click
import pytest

from tests.cli.conftest import (
    assert_CONFIG_ERROR,
    assert_MARKUP_ERROR,
    assert_SUCCESS,
    run_cli,
    run_cli_in,
)
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from pathlib import Path


@mark_cli
def test_echo_plain_output_with_placeholders() -> None:
    result = run_cli(["--no-color", "echo", "Hello <r>{0}</r>, you have {1} items", "Alice", "5"])

    assert_SUCCESS(result)
    assert result.output == "Hello Alice, you have 5 items\n"


@mark_cli
def test_echo_no_newline() -> None:
    result = run_cli(["--no-color", "echo", "-n", "<y>warn</y>"])

    assert_SUCCESS(result)
    assert result.output == "warn"


@mark_cli
def test_echo_escaped_brackets() -> None:
    result = run_cli(["--no-color", "echo", "&lt;red&gt; is literal"])

    assert_SUCCESS(result)
    assert result.output == "<red> is literal\n"


@mark_cli
def test_echo_color_always_emits_ansi() -> None:
    """`--color always` styles non-default segments with ANSI escapes."""
    result = run_cli(["--color", "always", "echo", "a<r>b</r>"])

    assert_SUCCESS(result)
    assert result.output == "a" + click.style("b", fg="bright_red") + "\n"


@mark_cli
def test_echo_color_never_beats_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FORCE_COLOR", "1")
    result = run_cli(["--color", "never", "echo", "<r>b</r>"])

    assert_SUCCESS(result)
    assert result.output == "b\n"


@mark_cli
def test_echo_malformed_markup_exits_with_markup_error() -> None:
    result = run_cli(["--no-color", "echo", "<red>unterminated"])

    assert_MARKUP_ERROR(result)
    assert "Malformed markup" in result.output


@mark_cli
def test_echo_uses_configured_newline(tmp_path: Path) -> None:
    (tmp_path / "xutils.toml").write_text('[console]\nnewline = "\\r\\n"\n', encoding="utf-8")
    result = run_cli_in(tmp_path, ["--no-color", "echo", "x"])

    assert_SUCCESS(result)
    assert result.stdout_bytes == b"x\r\n"


@mark_cli
def test_echo_default_colors_from_config_are_unstyled(tmp_path: Path) -> None:
    """Text in the configured default foreground is written without ANSI codes."""
    (tmp_path / "xutils.toml").write_text('[console]\nforeground = "white"\n', encoding="utf-8")
    result = run_cli_in(tmp_path, ["--color", "always", "echo", "<w>x</w><g>y</g>"])

    assert_SUCCESS(result)
    assert result.output == "x" + click.style("y", fg="white") + "\n"


@mark_cli
def test_echo_invalid_config_exits_with_config_error(tmp_path: Path) -> None:
    (tmp_path / "xutils.toml").write_text('[console]\nforeground = "chartreuse"\n', encoding="utf-8")
    result = run_cli_in(tmp_path, ["echo", "x"])

    assert_CONFIG_ERROR(result)
    assert "chartreuse" in result.output


@mark_cli
def test_echo_explicit_config_file(tmp_path: Path) -> None:
    config = tmp_path / "console.toml"
    config.write_text('[console]\ncolor = "never"\n', encoding="utf-8")
    result = run_cli(["--config", str(config), "echo", "<r>b</r>"])

    assert_SUCCESS(result)
    assert result.output == "b\n"
