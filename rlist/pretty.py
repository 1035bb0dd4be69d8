# rlist/pretty.py
"""
Pretty-print helpers for RList.

This does NOT change RList.__str__ / to_display_string, which render every
element. pretty_rlist gives a bounded, human-facing rendering that stays
short for lists with thousands of elements.

Usage:

    from rlist import from_sequence
    from rlist.pretty import pretty_rlist

    print(pretty_rlist(from_sequence(range(10000))))
    # [0, 1, 2, 3, 4, 5, 6, 7, …(+9992)]

Defaults come from the environment:

    RLIST_PRETTY_MAX_WIDTH   elements shown per list (default 8)
    RLIST_PRETTY_MAX_DEPTH   nesting shown before "…" (default 4)
"""

from __future__ import annotations

import os
from typing import Any, Optional

from rlist.core.rlist import RList


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value < 0:
        raise ValueError(f"{name} must be >= 0, got {value}")
    return value


RLIST_PRETTY_MAX_WIDTH = _env_int("RLIST_PRETTY_MAX_WIDTH", 8)
RLIST_PRETTY_MAX_DEPTH = _env_int("RLIST_PRETTY_MAX_DEPTH", 4)


def pretty_rlist(
    lst: RList[Any],
    *,
    max_width: Optional[int] = None,
    max_depth: Optional[int] = None,
) -> str:
    """Render an RList compactly.

    Conventions
    -----------
    * Elements are rendered with ``repr`` (strings keep their quotes).
    * Nested RLists are rendered the same way, one level deeper.
    * After ``max_width`` elements the rest of a list collapses into
      ``…(+N)`` where N is the number of hidden elements.
    * A nested list deeper than ``max_depth`` renders as ``…``.

    Parameters
    ----------
    lst:
        RList to pretty-print.
    max_width:
        Max number of elements to show per list. Defaults to
        ``RLIST_PRETTY_MAX_WIDTH``.
    max_depth:
        Max nesting depth. Defaults to ``RLIST_PRETTY_MAX_DEPTH``.
    """
    if not isinstance(lst, RList):
        raise TypeError(f"pretty_rlist: expected an RList, got {type(lst).__name__}")
    width = RLIST_PRETTY_MAX_WIDTH if max_width is None else max_width
    depth_limit = RLIST_PRETTY_MAX_DEPTH if max_depth is None else max_depth
    if width < 0 or depth_limit < 0:
        raise ValueError("pretty_rlist: max_width and max_depth must be >= 0")

    def rec(node: RList[Any], depth: int) -> str:
        if depth > depth_limit:
            return "…"

        items: list[str] = []
        shown = 0
        cur = node
        while not cur.is_empty() and shown < width:
            x = cur.head()
            items.append(rec(x, depth + 1) if isinstance(x, RList) else repr(x))
            shown += 1
            cur = cur.tail()

        # hidden remainder
        if not cur.is_empty():
            items.append(f"…(+{cur.length()})")

        return "[" + ", ".join(items) + "]"

    return rec(lst, 0)
