# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Editor resolution: environment lookup, tokenizing and command building."""

from .environment import EnvironmentSource, make_lookup
from .errors import EmptyCommand, InvalidSyntax, NoEditorConfigured, ResolveError
from .lex import join_args, quote_arg, split_command
from .resolver import EditorCommand, editor_command, resolve

__all__ = [
    "EditorCommand",
    "EmptyCommand",
    "EnvironmentSource",
    "InvalidSyntax",
    "NoEditorConfigured",
    "ResolveError",
    "editor_command",
    "join_args",
    "make_lookup",
    "quote_arg",
    "resolve",
    "split_command",
]
