# rlist/__init__.py
"""
rlist public API surface.

This module exposes a small, coherent core:

    - Type: RList, Cons, NIL
    - Errors: RListError, EmptyListAccess, InvalidIndex, IndexOutOfRange
    - Constructors / bridges: CONS, prepend, from_sequence,
                              list_from_py, py_from_list, is_rlist,
                              head, tail, flatten
    - Pretty: pretty_rlist

Prepending reads right to left with the ``**`` operator:

    >>> from rlist import NIL
    >>> str(1 ** 2 ** 3 ** NIL)
    '[1, 2, 3]'
"""

from __future__ import annotations

from .core.rlist import RList, Cons, NIL
from .errors import RListError, EmptyListAccess, InvalidIndex, IndexOutOfRange

from .listutils import (
    CONS,
    prepend,
    from_sequence,
    list_from_py,
    py_from_list,
    is_rlist,
    head,
    tail,
    flatten,
)

from .pretty import pretty_rlist


__all__ = [
    # core
    "RList",
    "Cons",
    "NIL",

    # errors
    "RListError",
    "EmptyListAccess",
    "InvalidIndex",
    "IndexOutOfRange",

    # lists
    "CONS",
    "prepend",
    "from_sequence",
    "list_from_py",
    "py_from_list",
    "is_rlist",
    "head",
    "tail",
    "flatten",

    # pretty
    "pretty_rlist",
]
