# -----------------------------------------------------------------------------
# OrderedSet - an insertion ordered set with structural (deep) equality.
#
# Two views of the same data are maintained: an index (a dict from the
# structural key of each element to True) for membership testing and an order
# list of the elements themselves. Every mutation updates both, and neither is
# handed out to callers. Deleting an element is linear in the size of the set
# because it has to be found and removed from the order list.
# ------------------------------------------------------------------------------

from typing import (Any, Dict, Callable, Generic, Iterable, Iterator, List,
                    Optional, TypeVar)

from .util.tools import structural_key

__all__ = [
    'OrderedSet',
    'intersection',
    'union',
    'difference',
    'symmetric_difference',
    'is_subset',
    'is_superset',
    'is_disjoint',
    ]

T = TypeVar("T")

#------------------------------------------------------------------------------
# Return an OrderedSet of the iterable, avoiding the copy if it already is one.
#------------------------------------------------------------------------------
def _as_oset(iterable):
    if isinstance(iterable, OrderedSet): return iterable
    return OrderedSet(iterable)

def _is_setlike(other):
    return isinstance(other, (OrderedSet, set, frozenset))

# ------------------------------------------------------------------------------
#
# ------------------------------------------------------------------------------

class OrderedSet(Generic[T]):
    """An insertion ordered set.

    Elements are compared by value, including unhashable lists and dicts (see
    ``structural_key()``). Iteration, indexing and the string forms follow the
    order in which the elements were first added.

    """
    def __init__(self, iterable: Optional[Iterable[T]] = None) -> None:
        self._index: Dict[Any, bool] = {}
        self._order: List[T] = []
        if iterable is not None:
            for elem in iterable: self.add(elem)

    # Mutable so not hashable
    __hash__ = None  # type: ignore

    #--------------------------------------------------------------------------
    # Internal functions
    #--------------------------------------------------------------------------

    # Identity before equality, the same as the dict lookup in _index, so that
    # members that are not equal to themselves (nan) are still found
    def _position(self, key):
        for posn, elem in enumerate(self._order):
            k = structural_key(elem)
            if k is key or k == key: return posn
        raise ValueError("{} is not in {}".format(key, type(self).__name__))

    # Replace the contents with that of another OrderedSet
    def _take(self, other):
        self._index = other._index
        self._order = other._order

    #--------------------------------------------------------------------------
    # Basic operations
    #--------------------------------------------------------------------------

    def add(self, elem: T) -> "OrderedSet[T]":
        """Add an element if it is not already present.

        A new element becomes the last one in iteration order. Re-adding an
        existing element leaves the order unchanged. Returns the set itself.
        """
        key = structural_key(elem)
        if key in self._index: return self
        self._index[key] = True
        self._order.append(elem)
        return self

    def delete(self, elem: T) -> bool:
        """Remove an element, returning True if it was present."""
        key = structural_key(elem)
        if key not in self._index: return False
        del self._order[self._position(key)]
        del self._index[key]
        return True

    def has(self, elem: Any) -> bool:
        return structural_key(elem) in self._index

    def remove(self, elem: T) -> None:
        if not self.delete(elem): raise KeyError(elem)

    def discard(self, elem: T) -> None:
        self.delete(elem)

    def pop(self, last: bool = True) -> T:
        if not self._order:
            raise KeyError("pop from an empty {}".format(type(self).__name__))
        elem = self._order.pop() if last else self._order.pop(0)
        del self._index[structural_key(elem)]
        return elem

    def clear(self) -> None:
        self._index = {}
        self._order = []

    def copy(self) -> "OrderedSet[T]":
        tmp = self.__class__()
        tmp._index = self._index.copy()
        tmp._order = list(self._order)
        return tmp

    def to_list(self) -> List[T]:
        return list(self._order)

    #--------------------------------------------------------------------------
    # Sequence style functions
    #--------------------------------------------------------------------------

    def index(self, elem: Any) -> int:
        key = structural_key(elem)
        if key not in self._index:
            raise ValueError("{!r} is not in {}".format(elem, type(self).__name__))
        return self._position(key)

    def count(self, elem: Any) -> int:
        return 1 if self.has(elem) else 0

    def sorted(self, key: Optional[Callable[[T], Any]] = None,
               reverse: bool = False) -> "OrderedSet[T]":
        """Return a new set with the elements in sorted order."""
        tmp = self.copy()
        tmp._order.sort(key=key, reverse=reverse)
        return tmp

    #--------------------------------------------------------------------------
    # Boolean set functions
    #--------------------------------------------------------------------------
    def isdisjoint(self, other: Iterable[Any]) -> bool:
        return is_disjoint(self, other)

    def issubset(self, other: Iterable[Any]) -> bool:
        return is_subset(self, other)

    def issuperset(self, other: Iterable[Any]) -> bool:
        return is_superset(self, other)

    # Since __eq__ will return False for two OrderedSets with same elements but
    # a different order so provide a separate function.
    def isequal(self, other: Iterable[Any]) -> bool:
        other = _as_oset(other)
        if len(self) != len(other): return False
        return is_subset(self, other)

    #--------------------------------------------------------------------------
    # Set operations
    #--------------------------------------------------------------------------
    def union(self, *others: Iterable[T]) -> "OrderedSet[T]":
        tmp = self.copy()
        tmp.update(*others)
        return tmp

    def intersection(self, *others: Iterable[Any]) -> "OrderedSet[T]":
        tmp = self.copy()
        tmp.intersection_update(*others)
        return tmp

    def difference(self, *others: Iterable[Any]) -> "OrderedSet[T]":
        tmp = self.copy()
        tmp.difference_update(*others)
        return tmp

    def symmetric_difference(self, other: Iterable[T]) -> "OrderedSet[T]":
        tmp = self.copy()
        tmp.symmetric_difference_update(other)
        return tmp

    def update(self, *others: Iterable[T]) -> None:
        for other in others:
            for elem in other: self.add(elem)

    def intersection_update(self, *others: Iterable[Any]) -> None:
        if not others: return
        keeps = [_as_oset(other) for other in others]
        tmp = self.__class__(e for e in self._order
                             if all(keep.has(e) for keep in keeps))
        self._take(tmp)

    def difference_update(self, *others: Iterable[Any]) -> None:
        if not others: return
        drops = [_as_oset(other) for other in others]
        tmp = self.__class__(e for e in self._order
                             if not any(drop.has(e) for drop in drops))
        self._take(tmp)

    def symmetric_difference_update(self, other: Iterable[T]) -> None:
        self._take(symmetric_difference(self, other))

    #--------------------------------------------------------------------------
    # Special functions to support set and container operations
    #--------------------------------------------------------------------------

    def __contains__(self, elem: Any) -> bool:
        """Implemement set 'in' operator."""
        return self.has(elem)

    def __bool__(self) -> bool:
        """Implemement set bool operator."""
        return bool(self._index)

    def __len__(self) -> int:
        return len(self._index)

    def __iter__(self) -> Iterator[T]:
        return iter(self._order)

    def __reversed__(self) -> Iterator[T]:
        return reversed(self._order)

    def __getitem__(self, index):
        """Element by position, or a new OrderedSet for a slice."""
        if isinstance(index, slice):
            return self.__class__(self._order[index])
        try:
            return self._order[index]
        except IndexError:
            raise IndexError("{} index out of range".format(
                type(self).__name__)) from None

    def __eq__(self, other):
        """Overloaded boolean operator."""
        if isinstance(other, OrderedSet):
            return self._order == other._order
        elif isinstance(other, (set, frozenset)):
            if len(self) != len(other): return False
            return all(self.has(elem) for elem in other)
        return NotImplemented

    def __lt__(self, other):
        """Implemement set < operator."""
        if not _is_setlike(other): return NotImplemented
        return self <= other and len(self) != len(other)

    def __le__(self, other):
        """Implemement set <= operator."""
        if not _is_setlike(other): return NotImplemented
        return self.issubset(other)

    def __gt__(self, other):
        """Implemement set > operator."""
        if not _is_setlike(other): return NotImplemented
        return self >= other and len(self) != len(other)

    def __ge__(self, other):
        """Implemement set >= operator."""
        if not _is_setlike(other): return NotImplemented
        return self.issuperset(other)

    def __or__(self, other):
        """Implemement set | operator."""
        return self.union(other)

    def __and__(self, other):
        """Implemement set & operator."""
        return self.intersection(other)

    def __sub__(self, other):
        """Implemement set - operator."""
        return self.difference(other)

    def __xor__(self, other):
        """Implemement set ^ operator."""
        return self.symmetric_difference(other)

    def __ior__(self, other):
        """Implemement set |= operator."""
        self.update(other)
        return self

    def __iand__(self, other):
        """Implemement set &= operator."""
        self.intersection_update(other)
        return self

    def __isub__(self, other):
        """Implemement set -= operator."""
        self.difference_update(other)
        return self

    def __ixor__(self, other):
        """Implemement set ^= operator."""
        self.symmetric_difference_update(other)
        return self

    #--------------------------------------------------------------------------
    # String representation
    #--------------------------------------------------------------------------

    def __str__(self):
        if not self: return "set()"
        return "{" + ", ".join([repr(e) for e in self]) + "}"

    def __repr__(self):
        if not self: return "{}()".format(type(self).__name__)
        return self.__str__()

#------------------------------------------------------------------------------
# Set algebra over any pair of iterables. The result is always a new
# OrderedSet and neither operand is modified.
#------------------------------------------------------------------------------

def intersection(a: Iterable[T], b: Iterable[Any]) -> OrderedSet[T]:
    """Elements in both a and b, in the order of a."""
    other = _as_oset(b)
    return OrderedSet(elem for elem in a if other.has(elem))

def union(a: Iterable[T], b: Iterable[T]) -> OrderedSet[T]:
    """Elements of a followed by the elements of b that are not in a."""
    tmp = OrderedSet(a)
    tmp.update(b)
    return tmp

def difference(a: Iterable[T], b: Iterable[Any]) -> OrderedSet[T]:
    """Elements of a that are not in b."""
    other = _as_oset(b)
    return OrderedSet(elem for elem in a if not other.has(elem))

def symmetric_difference(a: Iterable[T], b: Iterable[T]) -> OrderedSet[T]:
    """Elements in exactly one of a and b, in the order of their union."""
    a, b = _as_oset(a), _as_oset(b)
    return difference(union(a, b), intersection(a, b))

def is_subset(sub: Iterable[Any], sup: Iterable[Any]) -> bool:
    sup = _as_oset(sup)
    return all(sup.has(elem) for elem in sub)

def is_superset(sup: Iterable[Any], sub: Iterable[Any]) -> bool:
    return is_subset(sub, sup)

def is_disjoint(a: Iterable[Any], b: Iterable[Any]) -> bool:
    return not intersection(a, b)

#------------------------------------------------------------------------------
# main
#------------------------------------------------------------------------------
if __name__ == "__main__":
    raise RuntimeError('Cannot run modules')
