# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Shell-style command-line lexical helpers.

Splitting follows POSIX shell quoting: whitespace separates words, single
quotes are literal, double quotes allow backslash escapes, and a quoted empty
string is kept as an empty word.
"""

import shlex
from collections.abc import Iterable

from .errors import InvalidSyntax


def split_command(command: str) -> list[str]:
    """Split *command* into argv words.

    Raises :class:`InvalidSyntax` for an unterminated quote or a dangling
    escape character.
    """
    try:
        return shlex.split(command)
    except ValueError as e:
        raise InvalidSyntax(command, str(e)) from e


def quote_arg(value: str) -> str:
    """Quote a single argument for display in a POSIX shell."""
    return shlex.quote(value)


def join_args(args: Iterable[str]) -> str:
    """Join argv into a shell command fragment."""
    return " ".join(quote_arg(a) for a in args)
