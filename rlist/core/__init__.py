from rlist.core.rlist import RList, Cons, NIL

__all__ = ["RList", "Cons", "NIL"]
