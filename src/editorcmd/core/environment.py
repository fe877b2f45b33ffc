# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Environment variable lookup used by the editor resolver.

The resolver never touches ``os.environ`` directly; it goes through a lookup
built here so callers and tests can hand in their own variables.
"""

import os
from collections.abc import Callable, Mapping

EnvLookup = Callable[[str], str | None]
EnvironmentSource = Mapping[str, str] | EnvLookup


def make_lookup(env: EnvironmentSource | None = None) -> EnvLookup:
    """Return a ``name -> value`` lookup for *env*.

    - ``None``: the live process environment, read at call time.
    - a mapping (``os.environ``, a plain dict): ``mapping.get``.
    - a callable: used as-is.
    """
    if env is None:
        return os.environ.get
    if isinstance(env, Mapping):
        return env.get
    if callable(env):
        return env
    raise TypeError(f"unsupported environment source: {type(env).__name__}")


def get_nonblank(lookup: EnvLookup, name: str) -> str | None:
    """Return the value of *name*, or None if it is unset or only whitespace."""
    value = lookup(name)
    if value is None or not value.strip():
        return None
    return value
