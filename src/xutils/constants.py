# xutils:header:start
#
#   project      : Xutils
#   file         : constants.py
#   file_relpath : src/xutils/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Xutils contributors
#
# xutils:header:end

"""Xutils Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

XUTILS_VERSION: str = get_version("xutils")

# Environment variable consulted for the internal log level.
LOG_LEVEL_ENV_VAR: str = "XUTILS_LOG_LEVEL"

# Names of the configuration files looked up in the working directory.
XUTILS_TOML_NAME: str = "xutils.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"

# Synthetic root element wrapping markup text before parsing.
MARKUP_ROOT_TAG: str = "ROOT"
