# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Utility to open files in the user's preferred editor."""

import os
import subprocess
import sys

from .._util.logging_utils import _log_debug
from ..core.environment import EnvironmentSource
from ..core.errors import ResolveError
from ..core.resolver import editor_command
from .terminal import gray, red, supports_color


def format_error(err: ResolveError) -> str:
    """Render a resolve error for stderr, with its hint on a second line."""
    enabled = supports_color(sys.stderr)
    text = red(f"editorcmd: {err.message}", enabled)
    if err.hint:
        text += "\n" + gray(f"hint: {err.hint}", enabled)
    return text


def open_in_editor(
    file_path: str | os.PathLike[str],
    priority: str | None = None,
    default: str | None = None,
    *,
    env: EnvironmentSource | None = None,
) -> bool:
    """Open *file_path* in the user's preferred editor (blocking).

    See :func:`editorcmd.core.resolver.editor_command` for how the editor is
    chosen.

    Returns ``True`` if the editor ran and exited successfully, ``False``
    otherwise (a message is printed to stderr in that case).
    """
    try:
        command = editor_command(file_path, priority, default, env=env)
    except ResolveError as e:
        _log_debug(f"resolve failed for {os.fspath(file_path)}: {e.message}")
        print(format_error(e), file=sys.stderr)
        return False

    _log_debug(f"editor from {command.source}: {command}")
    try:
        subprocess.run(command.argv, check=True)  # noqa: S603
    except FileNotFoundError:
        _log_debug(f"editor not found: {command.program}")
        print(f"editorcmd: editor not found: {command.program}", file=sys.stderr)
        return False
    except OSError as e:
        _log_debug(f"cannot run editor {command.program!r}: {e.strerror}")
        print(f"editorcmd: cannot run editor {command.program}: {e.strerror}", file=sys.stderr)
        return False
    except subprocess.CalledProcessError as e:
        _log_debug(f"editor exited with status {e.returncode}: {command}")
        print(
            f"editorcmd: editor exited with status {e.returncode}: {command}",
            file=sys.stderr,
        )
        return False
    return True
