# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Platform-aware path resolution for the state directory."""

import getpass
import os
from pathlib import Path

from platformdirs import user_data_dir

APP_NAME = "editorcmd"


def _is_root() -> bool:
    """Return True if the current process is running as root."""
    try:
        return os.geteuid() == 0  # type: ignore[attr-defined]
    except AttributeError:
        return getpass.getuser() == "root"


def state_root() -> Path:
    """
    Writable state (debug log).

    Priority:
      1. EDITORCMD_STATE_DIR
      2. if root   → /var/lib/editorcmd
         else      → platformdirs user data dir (~/.local/share/editorcmd)
    """
    env = os.getenv("EDITORCMD_STATE_DIR")
    if env:
        return Path(env).expanduser()

    if _is_root():
        return Path("/var/lib") / APP_NAME

    return Path(user_data_dir(APP_NAME))
