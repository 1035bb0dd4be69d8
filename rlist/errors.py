# rlist/errors.py
"""
Error taxonomy for RList operations.

Every failure is local and recoverable: it is raised synchronously to the
immediate caller and never caught inside the package.

    EmptyListAccess  -- head / tail / at reached NIL where an element was needed
    InvalidIndex     -- at() called with a negative index
    IndexOutOfRange  -- remove_at() called with index < 0 or index >= length
"""


class RListError(Exception):
    """Base class for all RList failures."""
    pass


class EmptyListAccess(RListError, LookupError):
    """An element was required but the traversal reached the empty list."""
    pass


class InvalidIndex(RListError, ValueError):
    """A positional lookup was given a negative index."""
    pass


class IndexOutOfRange(RListError, IndexError):
    """A positional removal was given an index outside [0, length)."""
    pass
