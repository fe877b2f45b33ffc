# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

import os
import sys
from typing import TextIO


def supports_color(stream: TextIO | None = None) -> bool:
    """Check if *stream* (stdout by default) supports color output.

    Follows the NO_COLOR standard (https://no-color.org/).
    """
    if "NO_COLOR" in os.environ:
        return False
    stream = sys.stdout if stream is None else stream
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def color(text: str, code: str, enabled: bool) -> str:
    if not enabled:
        return text
    return f"\x1b[{code}m{text}\x1b[0m"


def red(text: str, enabled: bool) -> str:
    return color(text, "31", enabled)


def gray(text: str, enabled: bool) -> str:
    return color(text, "90", enabled)
