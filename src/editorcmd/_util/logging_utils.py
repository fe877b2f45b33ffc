# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Utility functions for logging."""

import time

from ..core.paths import state_root

LOG_FILE_NAME = "editorcmd.log"


def _log_debug(message: str) -> None:
    """Append a simple debug line to the editorcmd log.

    This is intentionally very small and best-effort so it never interferes
    with launching the editor. It records which source the command came from
    and the final argv, which is usually all that is needed to explain why a
    given editor was (or wasn't) picked.

    Writes timestamped lines to ``state_root()/editorcmd.log``. Any OS error
    is ignored so this function never raises or affects callers. Undecodable
    characters (e.g. surrogate-escaped filenames) are written backslash-escaped.
    """
    try:
        log_path = state_root() / LOG_FILE_NAME
        log_path.parent.mkdir(parents=True, exist_ok=True)
        timestamp = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())
        with open(log_path, "a", encoding="utf-8", errors="backslashreplace") as f:
            f.write(f"[{timestamp}] {message}\n")
    except OSError:
        pass
