#!/usr/bin/env python3
# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

import argparse
import json

from .. import __version__
from .._util.logging_utils import _log_debug
from ..core.errors import ResolveError
from ..core.resolver import EditorCommand, editor_command
from ..ui.editor import format_error, open_in_editor

# Optional: bash completion via argcomplete
try:
    import argcomplete  # type: ignore
except ImportError:  # pragma: no cover - optional dep
    argcomplete = None  # type: ignore


def _command_json(command: EditorCommand) -> str:
    return json.dumps(
        {"program": command.program, "args": list(command.args), "source": command.source}
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="editorcmd",
        description="editorcmd – open a file in the editor named by $VISUAL or $EDITOR",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Editor sources, highest precedence first:\n"
            "  --priority CMD, $VISUAL, $EDITOR, --default CMD\n"
            "\n"
            "Examples:\n"
            "  editorcmd notes.md                 (open in your editor)\n"
            "  editorcmd --print notes.md         (show the command only)\n"
            "  editorcmd --default nano notes.md  (fallback when nothing is set)\n"
        ),
    )
    parser.add_argument("--version", action="version", version=f"editorcmd {__version__}")
    parser.add_argument(
        "--priority",
        metavar="CMD",
        help="Editor command that overrides $VISUAL and $EDITOR",
    )
    parser.add_argument(
        "--default",
        metavar="CMD",
        help="Editor command used when neither $VISUAL nor $EDITOR is set",
    )
    out = parser.add_mutually_exclusive_group()
    out.add_argument(
        "--print",
        dest="print_only",
        action="store_true",
        help="Print the shell-quoted editor command instead of running it",
    )
    out.add_argument(
        "--json",
        dest="json_only",
        action="store_true",
        help="Print the editor command as JSON instead of running it",
    )
    parser.add_argument("file", help="File to open")
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    if argcomplete is not None:
        argcomplete.autocomplete(parser)  # type: ignore[attr-defined]
    args = parser.parse_args(argv)

    if args.print_only or args.json_only:
        try:
            command = editor_command(args.file, args.priority, args.default)
        except ResolveError as e:
            _log_debug(f"resolve failed for {args.file}: {e.message}")
            raise SystemExit(format_error(e)) from e
        print(_command_json(command) if args.json_only else str(command))
        return

    if not open_in_editor(args.file, args.priority, args.default):
        raise SystemExit(1)


if __name__ == "__main__":
    main()
