# xutils:header:start
#
#   project      : Xutils
#   file         : settings.py
#   file_relpath : src/xutils/config/settings.py
#   license      : MIT
#   copyright    : (c) 2025 Xutils contributors
#
# xutils:header:end

"""Console settings loaded from TOML files and the environment.

Settings are resolved in layers (later wins):

1. built-in defaults (`ConsoleSettings()`),
2. ``[tool.xutils.console]`` in ``pyproject.toml`` (working directory),
3. ``[console]`` in ``xutils.toml`` (working directory),
4. an explicit config file (``--config``), either layout,
5. CLI flags, applied by the caller via `ConsoleSettings.with_overrides`.

Example ``xutils.toml``:

```toml
[console]
foreground = "gray"
background = "black"
newline = "\\n"
color = "auto"
```

Parsing is done with `tomlkit`; unreadable or malformed files are logged
and ignored. Invalid *values* raise `SettingsError`.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any, Final, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from xutils.config.logging import get_logger
from xutils.console.palette import ConsoleColor, resolve_color
from xutils.constants import PYPROJECT_TOML_NAME, XUTILS_TOML_NAME
from xutils.errors import SettingsError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from xutils.config.logging import XutilsLogger

logger: XutilsLogger = get_logger(__name__)

TomlTable = dict[str, Any]


class Toml:
    """TOML section names and keys used by Xutils configuration."""

    SECTION_TOOL: Final[str] = "tool"
    SECTION_XUTILS: Final[str] = "xutils"
    SECTION_CONSOLE: Final[str] = "console"

    KEY_FOREGROUND: Final[str] = "foreground"
    KEY_BACKGROUND: Final[str] = "background"
    KEY_NEWLINE: Final[str] = "newline"
    KEY_COLOR: Final[str] = "color"


class ColorMode(str, Enum):
    """User intent for colorized terminal output.

    Attributes:
        AUTO: Enable color only when appropriate (typically when stdout is a TTY).
        ALWAYS: Force-enable color regardless of TTY status.
        NEVER: Disable color entirely.
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    color_mode_override: ColorMode | None,
    output_format: str | None = None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
        1. **Machine formats**: If `output_format` is `"json"`, return False.
        2. **Override**: `ALWAYS` → True; `NEVER` → False.
        3. **Environment**:
            - `FORCE_COLOR` (set and not equal to `"0"`) → True
            - `NO_COLOR` (set to any value) → False
        4. **Auto**: If none of the above decide, return `stdout.isatty()`.

    Args:
        color_mode_override: Requested `ColorMode`; `None` behaves like `AUTO`.
        output_format: Output format; `"json"` suppresses color.
        stdout_isatty: Optional override for TTY detection. When `None`, the function
            calls `sys.stdout.isatty()` and falls back to `False` on error.

    Returns:
        True if ANSI color should be enabled; False otherwise.
    """
    if output_format and output_format.lower() == "json":
        return False

    if color_mode_override == ColorMode.ALWAYS:
        return True
    if color_mode_override == ColorMode.NEVER:
        return False

    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False

    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (OSError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document (``xutils.toml`` or ``pyproject.toml``).

    Returns:
        The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def extract_console_table(data: Mapping[str, Any], *, pyproject: bool) -> TomlTable:
    """Return the console settings table from a parsed TOML document.

    ``pyproject.toml`` nests it under ``[tool.xutils.console]``; ``xutils.toml``
    uses a top-level ``[console]`` table. Missing sections yield ``{}``.
    """
    table: Any = data
    path = (Toml.SECTION_TOOL, Toml.SECTION_XUTILS) if pyproject else ()
    for key in (*path, Toml.SECTION_CONSOLE):
        table = table.get(key) if isinstance(table, dict) else None
        if table is None:
            return {}
    return cast("TomlTable", table) if isinstance(table, dict) else {}


def _color_value(table: Mapping[str, Any], key: str) -> ConsoleColor | None:
    raw = table.get(key)
    if raw is None:
        return None
    color = resolve_color(raw) if isinstance(raw, str) else None
    if color is None:
        raise SettingsError(f"Invalid color for '{key}': {raw!r}")
    return color


@dataclass(frozen=True)
class ConsoleSettings:
    """Resolved console settings.

    Attributes:
        default_foreground (ConsoleColor): Foreground treated as the terminal default.
        default_background (ConsoleColor): Background treated as the terminal default.
        newline (str): Sequence appended by the line-terminated write variants.
        color_mode (ColorMode): Requested color behavior.
    """

    default_foreground: ConsoleColor = ConsoleColor.GRAY
    default_background: ConsoleColor = ConsoleColor.BLACK
    newline: str = "\n"
    color_mode: ColorMode = ColorMode.AUTO

    def merged_with(self, table: Mapping[str, Any]) -> ConsoleSettings:
        """Return a copy with the values from a ``[console]`` table applied.

        Raises:
            SettingsError: If a value has the wrong type or names an unknown color/mode.
        """
        changes: dict[str, Any] = {}
        fg = _color_value(table, Toml.KEY_FOREGROUND)
        if fg is not None:
            changes["default_foreground"] = fg
        bg = _color_value(table, Toml.KEY_BACKGROUND)
        if bg is not None:
            changes["default_background"] = bg
        newline = table.get(Toml.KEY_NEWLINE)
        if newline is not None:
            if not isinstance(newline, str):
                raise SettingsError(f"Invalid value for '{Toml.KEY_NEWLINE}': {newline!r}")
            changes["newline"] = newline
        mode = table.get(Toml.KEY_COLOR)
        if mode is not None:
            try:
                changes["color_mode"] = ColorMode(str(mode).lower())
            except ValueError as exc:
                raise SettingsError(f"Invalid value for '{Toml.KEY_COLOR}': {mode!r}") from exc
        unknown = set(table) - {
            Toml.KEY_FOREGROUND,
            Toml.KEY_BACKGROUND,
            Toml.KEY_NEWLINE,
            Toml.KEY_COLOR,
        }
        for key in sorted(unknown):
            logger.warning("Ignoring unknown console setting: %s", key)
        return replace(self, **changes)

    def with_overrides(self, *, color_mode: ColorMode | None = None) -> ConsoleSettings:
        """Return a copy with CLI-level overrides applied (``None`` keeps the value)."""
        if color_mode is None:
            return self
        return replace(self, color_mode=color_mode)

    def color_enabled(self, *, output_format: str | None = None) -> bool:
        """Resolve whether ANSI color should be emitted for these settings."""
        return resolve_color_mode(color_mode_override=self.color_mode, output_format=output_format)


def load_settings(*, cwd: Path | None = None, config_file: Path | None = None) -> ConsoleSettings:
    """Resolve `ConsoleSettings` from the TOML layers.

    Args:
        cwd (Path | None): Directory searched for ``pyproject.toml`` / ``xutils.toml``.
            Defaults to the current working directory.
        config_file (Path | None): Explicit config file applied last. A file named
            ``pyproject.toml`` is read with the ``[tool.xutils.console]`` layout.

    Returns:
        ConsoleSettings: The merged settings.

    Raises:
        SettingsError: If a layer contains an invalid value.
    """
    base = cwd or Path.cwd()
    settings = ConsoleSettings()
    layers: list[tuple[Path, bool]] = [
        (base / PYPROJECT_TOML_NAME, True),
        (base / XUTILS_TOML_NAME, False),
    ]
    if config_file is not None:
        layers.append((config_file, config_file.name == PYPROJECT_TOML_NAME))

    for path, pyproject in layers:
        if not path.is_file():
            if path == config_file:
                logger.error("Config file not found: %s", path)
            continue
        table = extract_console_table(load_toml_dict(path), pyproject=pyproject)
        if table:
            logger.debug("Applying console settings from %s", path)
            settings = settings.merged_with(table)
    return settings
