# rlist/listutils.py
"""
Constructor and bridge helpers for RList.

Design:
-------
* Lists are built from two constructors:
      NIL()         -> the shared empty list
      CONS(h, t)    -> Cons(h, t)

* Python sequences cross the boundary through list_from_py / py_from_list.
  Nested Python lists become nested RLists and back, so
  py_from_list(list_from_py(x)) == x for any nesting of lists.

* head / tail here are the free-function spellings of the RList methods and
  reject anything that is not an RList with TypeError.
"""

from __future__ import annotations

from typing import Any, Iterable, List

from rlist.core.rlist import NIL as _NIL, Cons, RList


# ---------------------------------------------------------------------------
# Core constructors
# ---------------------------------------------------------------------------

def NIL() -> RList[Any]:
    """Empty list sentinel."""
    return _NIL


def CONS(h: Any, t: RList[Any]) -> RList[Any]:
    """Cons cell: h in front of t."""
    return Cons(h, t)


def prepend(elem: Any, lst: RList[Any]) -> RList[Any]:
    """O(1) prepend; lst is shared, not copied."""
    if not isinstance(lst, RList):
        raise TypeError(f"prepend: expected an RList, got {type(lst).__name__}")
    return lst.prepend(elem)


def from_sequence(items: Iterable[Any]) -> RList[Any]:
    return RList.from_sequence(items)


# ---------------------------------------------------------------------------
# Python list <-> RList bridges
# ---------------------------------------------------------------------------

def list_from_py(seq: List[Any]) -> RList[Any]:
    """
    Build an RList from a Python list, converting nested lists too.

    Example:
        list_from_py([1, [2, 3]])  ->  CONS(1, CONS(CONS(2, CONS(3, NIL())), NIL()))
    """
    if not isinstance(seq, list):
        raise TypeError(f"list_from_py: expected a list, got {type(seq).__name__}")
    m = NIL()
    for item in reversed(seq):
        if isinstance(item, list):
            item = list_from_py(item)
        m = CONS(item, m)
    return m


def py_from_list(m: RList[Any]) -> List[Any]:
    """
    Convert an RList back to a Python list, converting nested RLists too.
    """
    if not isinstance(m, RList):
        raise TypeError(f"py_from_list: expected an RList, got {type(m).__name__}")
    return [py_from_list(x) if isinstance(x, RList) else x for x in m.to_list()]


# ---------------------------------------------------------------------------
# Recognizers and accessors
# ---------------------------------------------------------------------------

def is_rlist(m: Any) -> bool:
    """Return True if m is an RList (NIL or a Cons chain)."""
    return isinstance(m, RList)


def head(m: RList[Any]) -> Any:
    """Return first element of a non-empty list."""
    if not isinstance(m, RList):
        raise TypeError("head: value is not an RList")
    return m.head()


def tail(m: RList[Any]) -> RList[Any]:
    """Return the suffix after the first element."""
    if not isinstance(m, RList):
        raise TypeError("tail: value is not an RList")
    return m.tail()


def flatten(m: RList[Any]) -> RList[Any]:
    """Concatenate a list of lists, preserving order within and across them."""
    if not isinstance(m, RList):
        raise TypeError("flatten: value is not an RList")
    return m.flatten()
