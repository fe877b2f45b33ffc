# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

import unittest

from editorcmd.core.errors import InvalidSyntax, ResolveError
from editorcmd.core.lex import join_args, quote_arg, split_command


class SplitCommandTests(unittest.TestCase):
    """Tests for split_command()."""

    def test_plain_words(self) -> None:
        self.assertEqual(split_command("code --wait"), ["code", "--wait"])

    def test_collapses_runs_of_whitespace(self) -> None:
        self.assertEqual(split_command("  vim\t-u  NONE \n"), ["vim", "-u", "NONE"])

    def test_single_and_double_quotes(self) -> None:
        self.assertEqual(
            split_command("ned '--single \" quotes' \"--double ' quotes\""),
            ["ned", '--single " quotes', "--double ' quotes"],
        )

    def test_quoted_path_with_spaces(self) -> None:
        self.assertEqual(
            split_command('"/Applications/Sublime Text.app/subl" -w'),
            ["/Applications/Sublime Text.app/subl", "-w"],
        )

    def test_backslash_escape(self) -> None:
        self.assertEqual(split_command(r"my\ editor -n"), ["my editor", "-n"])

    def test_keeps_empty_quoted_words(self) -> None:
        self.assertEqual(split_command("vim \"\" ''"), ["vim", "", ""])

    def test_hash_is_not_a_comment(self) -> None:
        self.assertEqual(split_command("ed #1"), ["ed", "#1"])

    def test_empty_and_blank_strings(self) -> None:
        self.assertEqual(split_command(""), [])
        self.assertEqual(split_command("   "), [])

    def test_unterminated_quote(self) -> None:
        with self.assertRaises(InvalidSyntax) as cm:
            split_command("vim -c 'set nu")
        self.assertEqual(cm.exception.command, "vim -c 'set nu")
        self.assertEqual(cm.exception.reason, "No closing quotation")
        self.assertEqual(str(cm.exception), "Invalid editor command: No closing quotation")
        self.assertIsInstance(cm.exception.__cause__, ValueError)

    def test_dangling_escape(self) -> None:
        with self.assertRaises(InvalidSyntax) as cm:
            split_command("vim \\")
        self.assertEqual(cm.exception.reason, "No escaped character")

    def test_invalid_syntax_is_a_resolve_error(self) -> None:
        with self.assertRaises(ResolveError):
            split_command('"')


class QuoteTests(unittest.TestCase):
    """Tests for quote_arg() and join_args()."""

    def test_safe_words_are_not_quoted(self) -> None:
        self.assertEqual(join_args(["code", "--wait", "a.txt"]), "code --wait a.txt")

    def test_quotes_spaces_and_empty(self) -> None:
        self.assertEqual(quote_arg("my file"), "'my file'")
        self.assertEqual(quote_arg(""), "''")

    def test_join_then_split_gives_back_argv(self) -> None:
        argv = ["ned", '--single " quotes', "--double ' quotes", "", "$HOME/x y"]
        self.assertEqual(split_command(join_args(argv)), argv)


if __name__ == "__main__":
    unittest.main()
