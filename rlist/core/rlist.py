"""
RLIST CORE
==========
Immutable, singly-linked, persistent lists.

    NIL          -> the empty list, one instance shared by every element type
    Cons(h, t)   -> a node holding h whose suffix is the list t

A list is NIL or a finite chain of Cons nodes ending in NIL. Nodes never
change after construction, so every transformation returns a new list and
suffixes are shared freely between lists.

Every traversal below is a while-loop over the chain with a local
accumulator. Python has no tail-call elimination, and lists of tens of
thousands of elements are routine, so nothing here recurses on the length
of a list.
"""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, List, TypeVar

from rlist.errors import EmptyListAccess, IndexOutOfRange, InvalidIndex

T = TypeVar("T")
S = TypeVar("S")


def _check_index(index: Any, op: str) -> None:
    # bool is an int subclass
    if isinstance(index, bool) or not isinstance(index, int):
        raise TypeError(f"{op}: index must be an int, got {type(index).__name__}")


def _push_all(src: "RList[Any]", acc: "RList[Any]") -> "RList[Any]":
    """Prepend every element of src onto acc, in src order.

    The elements of src therefore end up reversed in front of acc:
    _push_all([1, 2, 3], [9]) -> [3, 2, 1, 9].
    """
    cur = src
    while not cur.is_empty():
        acc = Cons(cur._value, acc)
        cur = cur._rest
    return acc


class RList(Generic[T]):
    """A persistent singly-linked list: either NIL or a Cons node.

    RList itself is abstract; NIL and Cons are its only values.
    """

    __slots__ = ()

    def __new__(cls, *args, **kwargs):
        if cls is RList:
            raise TypeError("RList cannot be instantiated directly; use NIL or Cons")
        return super().__new__(cls)

    # ---------- construction ----------

    @staticmethod
    def empty() -> "RList[Any]":
        return NIL

    @classmethod
    def from_sequence(cls, items: Iterable[T]) -> "RList[T]":
        """Build a list holding items in input order.

        items is read exactly once: each item is prepended to an
        accumulator, which is reversed once at the end.
        """
        acc: RList[T] = NIL
        for item in items:
            acc = Cons(item, acc)
        return acc.reverse()

    def prepend(self, elem: S) -> "RList[Any]":
        return Cons(elem, self)

    def __rpow__(self, elem: Any) -> "RList[Any]":
        # elem ** lst; ** is right-associative, so 1 ** 2 ** NIL == [1, 2]
        return Cons(elem, self)

    def __pow__(self, other: Any) -> "RList[Any]":
        # the element being prepended is itself a list
        if isinstance(other, RList):
            return Cons(self, other)
        return NotImplemented

    # ---------- variant queries ----------

    def is_empty(self) -> bool:
        raise NotImplementedError

    def head(self) -> T:
        raise NotImplementedError

    def tail(self) -> "RList[T]":
        raise NotImplementedError

    # ---------- inspection ----------

    def at(self, index: int) -> T:
        """Element at zero-based index, found by walking index links.

        Raises InvalidIndex for a negative index and EmptyListAccess when the
        walk falls off the end of the list.
        """
        _check_index(index, "at")
        if index < 0:
            raise InvalidIndex(f"at: negative index {index}")
        cur: RList[T] = self
        for _ in range(index):
            if cur.is_empty():
                break
            cur = cur._rest
        if cur.is_empty():
            raise EmptyListAccess(f"at: index {index} past end of list")
        return cur._value

    def length(self) -> int:
        n = 0
        cur = self
        while not cur.is_empty():
            n += 1
            cur = cur._rest
        return n

    def to_list(self) -> List[T]:
        out: List[T] = []
        cur = self
        while not cur.is_empty():
            out.append(cur._value)
            cur = cur._rest
        return out

    def to_display_string(self) -> str:
        return "[" + ", ".join(str(x) for x in self.to_list()) + "]"

    __str__ = to_display_string

    def __repr__(self) -> str:
        return "RList([" + ", ".join(repr(x) for x in self.to_list()) + "])"

    # ---------- structural identity ----------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RList):
            return NotImplemented
        a: RList[Any] = self
        b: RList[Any] = other
        # a shared suffix (or NIL on both sides) ends the comparison early
        while a is not b:
            if a.is_empty() or b.is_empty():
                return False
            if a._value != b._value:
                return False
            a, b = a._rest, b._rest
        return True

    def __hash__(self) -> int:
        return hash(tuple(self.to_list()))

    # ---------- transformation ----------

    def reverse(self) -> "RList[T]":
        return _push_all(self, NIL)

    def concat(self, other: "RList[S]") -> "RList[Any]":
        """Elements of self followed by the elements of other.

        self is reversed once and its elements pushed onto other, so the
        cost is O(len(self)) and other is shared as the suffix, never
        copied. NIL.concat(other) is other.
        """
        if not isinstance(other, RList):
            raise TypeError(f"concat: expected an RList, got {type(other).__name__}")
        return _push_all(self.reverse(), other)

    def __add__(self, other: Any) -> "RList[Any]":
        if not isinstance(other, RList):
            return NotImplemented
        return self.concat(other)

    def remove_at(self, index: int) -> "RList[T]":
        """New list without the element at index.

        index 0 returns the existing tail in O(1). Otherwise the visited
        prefix is collected in reverse and pushed back onto the suffix that
        follows the removed node; that suffix is shared with self. Length is
        never measured up front: landing on NIL means index >= length.
        """
        _check_index(index, "remove_at")
        if index < 0:
            raise IndexOutOfRange(f"remove_at: index {index} out of range")
        prefix: RList[T] = NIL
        cur: RList[T] = self
        for _ in range(index):
            if cur.is_empty():
                break
            prefix = Cons(cur._value, prefix)
            cur = cur._rest
        # the walk landed on NIL: index >= length
        if cur.is_empty():
            raise IndexOutOfRange(f"remove_at: index {index} out of range")
        return _push_all(prefix, cur._rest)

    def map(self, f: Callable[[T], S]) -> "RList[S]":
        acc: RList[S] = NIL
        cur = self
        while not cur.is_empty():
            acc = Cons(f(cur._value), acc)
            cur = cur._rest
        return acc.reverse()

    def flat_map(self, f: Callable[[T], "RList[S]"]) -> "RList[S]":
        """Concatenation of f(x) for every x, in order.

        Each sub-list is pushed onto one shared accumulator, which is
        reversed once at the end.
        """
        acc: RList[S] = NIL
        cur = self
        while not cur.is_empty():
            sub = f(cur._value)
            if not isinstance(sub, RList):
                raise TypeError(
                    f"flat_map: function must return an RList, got {type(sub).__name__}"
                )
            acc = _push_all(sub, acc)
            cur = cur._rest
        return acc.reverse()

    def filter(self, pred: Callable[[T], bool]) -> "RList[T]":
        acc: RList[T] = NIL
        cur = self
        while not cur.is_empty():
            if pred(cur._value):
                acc = Cons(cur._value, acc)
            cur = cur._rest
        return acc.reverse()

    def flatten(self) -> "RList[Any]":
        """Concatenate a list of lists into one list."""
        acc: RList[Any] = NIL
        cur = self
        while not cur.is_empty():
            sub = cur._value
            if not isinstance(sub, RList):
                raise TypeError(
                    f"flatten: every element must be an RList, got {type(sub).__name__}"
                )
            acc = _push_all(sub, acc)
            cur = cur._rest
        return acc.reverse()


class _Nil(RList[Any]):
    """The empty list. Only one instance ever exists: NIL."""

    __slots__ = ()
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __reduce__(self):
        return (_Nil, ())

    def is_empty(self) -> bool:
        return True

    def head(self):
        raise EmptyListAccess("head of empty list")

    def tail(self):
        raise EmptyListAccess("tail of empty list")


class Cons(RList[T]):
    """A node: value plus a shared reference to the rest of the list."""

    __slots__ = ("_value", "_rest")

    def __init__(self, value: T, rest: RList[T]):
        if not isinstance(rest, RList):
            raise TypeError(f"Cons: rest must be an RList, got {type(rest).__name__}")
        object.__setattr__(self, "_value", value)
        object.__setattr__(self, "_rest", rest)

    def __setattr__(self, name, value):
        raise AttributeError("RList nodes are immutable")

    def __delattr__(self, name):
        raise AttributeError("RList nodes are immutable")

    def __reduce__(self):
        return (_from_items, (self.to_list(),))

    @property
    def value(self) -> T:
        return self._value

    @property
    def rest(self) -> RList[T]:
        return self._rest

    def is_empty(self) -> bool:
        return False

    def head(self) -> T:
        return self._value

    def tail(self) -> RList[T]:
        return self._rest


NIL: RList[Any] = _Nil()


def _from_items(items):
    # pickle / copy support
    return RList.from_sequence(items)
