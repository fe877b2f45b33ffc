# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""editorcmd package.

Modules:
- editorcmd.core: Environment lookup, tokenizing, editor command resolution
- editorcmd.ui: Launching the editor, terminal colours
- editorcmd.cli: CLI entry point package (editorcmd)
- editorcmd._util: Internal helpers (logging)
"""

from .core import (
    EditorCommand,
    EmptyCommand,
    InvalidSyntax,
    NoEditorConfigured,
    ResolveError,
    editor_command,
    resolve,
    split_command,
)

__all__ = [
    "EditorCommand",
    "EmptyCommand",
    "InvalidSyntax",
    "NoEditorConfigured",
    "ResolveError",
    "editor_command",
    "resolve",
    "split_command",
]

# Version information - single source of truth using importlib.metadata
try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("editorcmd")
except PackageNotFoundError:
    # Fallback for development mode when package is not installed
    try:
        import tomllib
        from pathlib import Path

        pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"
        if pyproject_path.exists():
            with open(pyproject_path, "rb") as f:
                pyproject_data = tomllib.load(f)
                __version__ = pyproject_data["project"]["version"]
        else:
            __version__ = "unknown"
    except (OSError, KeyError, tomllib.TOMLDecodeError):
        __version__ = "unknown"
