# -----------------------------------------------------------------------------
# Structural (deep) equality keys. The OrderedSet index is a dict so every
# element needs a hashable key, but the built-in compound types (list, dict,
# set, bytearray) are unhashable. structural_key() turns a value into a
# hashable key such that any two values that compare equal with == produce
# equal keys.
# ------------------------------------------------------------------------------

from collections import OrderedDict

__all__ = [
    'structural_key',
    ]

# ------------------------------------------------------------------------------
# Frozen stand-in for an unhashable list or dict. The kind is part of the key
# because [1,2] != (1,2) but the frozen items of both are the same tuple.
# ------------------------------------------------------------------------------

class _FrozenValue(object):
    __slots__ = ('_kind', '_items', '_hash')

    def __init__(self, kind, items):
        self._kind = kind
        self._items = items
        self._hash = hash((kind, items))

    def __eq__(self, other):
        if not isinstance(other, _FrozenValue): return NotImplemented
        return self._kind == other._kind and self._items == other._items

    def __hash__(self):
        return self._hash

    def __repr__(self):
        return "_FrozenValue({!r}, {!r})".format(self._kind, self._items)

# ------------------------------------------------------------------------------
# structural_key
# ------------------------------------------------------------------------------

def _is_hashable(value):
    try:
        hash(value)
    except TypeError:
        return False
    return True

def structural_key(value):
    """Return a hashable key for value that respects value equality.

    Hashable values are their own key. Lists and dicts (recursively) become
    frozen wrappers, tuples holding unhashable items become tuples of keys,
    sets become frozensets and bytearrays become bytes; these are the same
    conversions that keep == between the mutable and immutable built-in types
    (``{1} == frozenset({1})``, ``bytearray(b'a') == b'a'``).

    Raises TypeError for any other unhashable value.
    """
    if _is_hashable(value): return value

    if isinstance(value, list):
        return _FrozenValue('list', tuple(structural_key(v) for v in value))
    if isinstance(value, tuple):
        return tuple(structural_key(v) for v in value)
    # OrderedDicts compare equal only when their items are in the same order.
    # Note: an OrderedDict and a dict with the same items are == but get
    # different keys, since no single key can agree with both comparisons.
    if isinstance(value, OrderedDict):
        return _FrozenValue('odict', tuple(
            (k, structural_key(v)) for k, v in value.items()))
    if isinstance(value, dict):
        return _FrozenValue('dict', frozenset(
            (k, structural_key(v)) for k, v in value.items()))
    if isinstance(value, (set, frozenset)):
        return frozenset(value)
    if isinstance(value, bytearray):
        return bytes(value)
    raise TypeError(("unhashable type with no structural key: "
                     "'{}'").format(type(value).__name__))

#------------------------------------------------------------------------------
# main
#------------------------------------------------------------------------------
if __name__ == "__main__":
    raise RuntimeError('Cannot run modules')
