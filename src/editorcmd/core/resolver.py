# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Resolve the user's editor into an executable command.

The command string is loaded from one of the following sources, in
decreasing precedence:

  1. ``priority`` argument (an application-specific configured command)
  2. ``$VISUAL``
  3. ``$EDITOR``
  4. ``default`` argument (an application fallback)

The first source with a value wins. It is split like a shell command line,
the first word becomes the program and the file to edit is appended as the
last argument. Nothing is executed here; see :mod:`editorcmd.ui.editor`.
"""

import os
from dataclasses import dataclass

from .environment import EnvironmentSource, get_nonblank, make_lookup
from .errors import EmptyCommand, NoEditorConfigured
from .lex import join_args, split_command

ENV_VARS = ("VISUAL", "EDITOR")


@dataclass(frozen=True)
class EditorCommand:
    """A program plus its ordered arguments, ready for ``subprocess.run``."""

    program: str
    args: tuple[str, ...]
    source: str

    @property
    def argv(self) -> list[str]:
        return [self.program, *self.args]

    def __str__(self) -> str:
        return join_args(self.argv)


def _select(
    priority: str | None,
    default: str | None,
    env: EnvironmentSource | None,
) -> tuple[str, str]:
    """Return ``(source, command)`` for the first source that has a value."""
    if priority is not None:
        return "priority", priority

    lookup = make_lookup(env)
    for name in ENV_VARS:
        value = get_nonblank(lookup, name)
        if value is not None:
            return name, value

    if default is not None:
        return "default", default
    raise NoEditorConfigured()


def editor_command(
    file_path: str | os.PathLike[str],
    priority: str | None = None,
    default: str | None = None,
    *,
    env: EnvironmentSource | None = None,
) -> EditorCommand:
    """Build the command that opens *file_path* in the user's editor.

    Blank ``VISUAL``/``EDITOR`` values count as unset. ``priority`` and
    ``default`` are taken as given when not ``None``, so a blank one fails
    with :class:`EmptyCommand`. A parse error in the selected source is
    raised straight away rather than falling through to the next source.

    Raises:
        NoEditorConfigured: no source has a value.
        EmptyCommand: the selected value has no words.
        InvalidSyntax: the selected value has broken quoting.
    """
    source, command = _select(priority, default, env)
    words = split_command(command)
    if not words:
        raise EmptyCommand(source)
    program, *args = words
    args.append(os.fspath(file_path))
    return EditorCommand(program=program, args=tuple(args), source=source)


def resolve(
    file_path: str | os.PathLike[str],
    *,
    env: EnvironmentSource | None = None,
) -> EditorCommand:
    """Build the editor command for *file_path* from ``VISUAL``/``EDITOR`` only."""
    return editor_command(file_path, env=env)
