# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Errors raised while resolving the editor command."""


class ResolveError(Exception):
    """Base exception for editor resolution errors.

    Attributes:
        message: User-facing error message.
        hint: Optional actionable suggestion.
    """

    def __init__(self, message: str, hint: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.hint = hint


class NoEditorConfigured(ResolveError):
    """Raised when no source provides an editor command."""

    def __init__(self) -> None:
        super().__init__(
            "VISUAL and EDITOR environment variables are undefined",
            hint="Set VISUAL or EDITOR, e.g. export EDITOR=vim",
        )


_SOURCE_NAMES = {
    "priority": "the priority editor command (--priority)",
    "default": "the default editor command (--default)",
}


class EmptyCommand(ResolveError):
    """Raised when the selected editor command has no tokens."""

    def __init__(self, source: str) -> None:
        super().__init__(
            "Editor command is empty",
            hint=f"Check the value of {_SOURCE_NAMES.get(source, source)}",
        )
        self.source = source


class InvalidSyntax(ResolveError):
    """Raised when an editor command can't be split into shell words."""

    def __init__(self, command: str, reason: str) -> None:
        super().__init__(
            f"Invalid editor command: {reason}",
            hint=f"Fix the quoting in {command!r}",
        )
        self.command = command
        self.reason = reason
