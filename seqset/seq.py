# -----------------------------------------------------------------------------
# Generic sequence functions. Each is a functools.singledispatch function
# whose default implementation only relies on the sequence protocol (len,
# indexing, slicing, iteration) so it works for lists, tuples, strings and
# OrderedSets alike. OrderedSet registers its own implementation where the
# result has to stay a set or where its index answers faster than a scan.
#
# Functions that build a new sequence of the same kind go through a registry
# mapping sequence types to a list-to-container constructor.
# ------------------------------------------------------------------------------

import functools
import itertools
import logging
import operator

from .oset import OrderedSet

__all__ = [
    'register_sequence_type',
    'unregister_sequence_type',
    'to_list',
    'into',
    'elt',
    'length',
    'do',
    'copy',
    'subseq',
    'seq_map',
    'seq_filter',
    'seq_reduce',
    'seq_sort',
    'seq_reverse',
    'concatenate',
    'uniq',
    'contains',
    ]

g_logger = logging.getLogger(__name__)

#------------------------------------------------------------------------------
# Sequence type registry
#------------------------------------------------------------------------------

_from_list = {
    list: list,
    tuple: tuple,
    str: "".join,
    OrderedSet: OrderedSet,
}

def register_sequence_type(type_, from_list):
    """Register the function that builds a type_ sequence from a list."""
    _from_list[type_] = from_list

def unregister_sequence_type(type_):
    _from_list.pop(type_, None)

# A type registered as its own constructor also builds its subclasses, so
# rebuilding a subclass of OrderedSet (or list) keeps the subclass
def _lookup_from_list(type_):
    for klass in type_.__mro__:
        if klass in _from_list:
            from_list = _from_list[klass]
            return type_ if from_list is klass else from_list
    return None

# Rebuild a sequence of the same kind as seq, or a list if it is unknown
def _rewrap(seq, elems):
    from_list = _lookup_from_list(type(seq))
    if from_list is None: return elems
    return from_list(elems)

#------------------------------------------------------------------------------
# Conversion
#------------------------------------------------------------------------------

@functools.singledispatch
def to_list(seq):
    """Return the elements of seq as a new list."""
    return list(seq)

@to_list.register(OrderedSet)
def _to_list_oset(seq):
    return seq.to_list()


def into(seq, type_):
    """Convert seq into a sequence of type_.

    The sequence is first converted to a list and then passed to the
    constructor registered for type_. An unregistered type_ is called with the
    list directly, so any container class that accepts an iterable works.
    """
    from_list = _lookup_from_list(type_) if isinstance(type_, type) else None
    if from_list is None:
        if not callable(type_):
            raise TypeError("{!r} is not a sequence type".format(type_))
        from_list = type_
    return from_list(to_list(seq))

#------------------------------------------------------------------------------
# Element access and traversal
#------------------------------------------------------------------------------

@functools.singledispatch
def elt(seq, n):
    """Return the element at index n; IndexError when out of range."""
    return seq[n]

@functools.singledispatch
def length(seq):
    return len(seq)

@functools.singledispatch
def do(seq, fn):
    """Call fn on each element of seq in order. Returns seq."""
    for elem in seq: fn(elem)
    return seq

@functools.singledispatch
def copy(seq):
    return seq[:]

@copy.register(OrderedSet)
def _copy_oset(seq):
    return seq.copy()

# Normalise (possibly negative) bounds, raising rather than clamping
def _subseq_bounds(size, start, end):
    nstart = start + size if start < 0 else start
    if end is None: nend = size
    else: nend = end + size if end < 0 else end
    if not 0 <= nstart <= nend <= size:
        raise IndexError(("subseq bounds ({}, {}) are out of range for a "
                          "sequence of length {}").format(start, end, size))
    return nstart, nend

@functools.singledispatch
def subseq(seq, start, end=None):
    """Return the elements from start up to (not including) end.

    Negative bounds count from the end of the sequence. Unlike slicing the
    bounds are not clamped: IndexError is raised if either falls outside the
    sequence or start comes after end. An OrderedSet produces an OrderedSet.
    """
    nstart, nend = _subseq_bounds(length(seq), start, end)
    return seq[nstart:nend]

#------------------------------------------------------------------------------
# Functional operations. map, filter and reduce produce plain values; the
# results of mapping a set need not be unique.
#------------------------------------------------------------------------------

@functools.singledispatch
def seq_map(seq, fn):
    return [fn(elem) for elem in seq]

@functools.singledispatch
def seq_filter(seq, pred):
    return [elem for elem in seq if pred(elem)]

@functools.singledispatch
def seq_reduce(seq, fn, initial):
    return functools.reduce(fn, seq, initial)

@functools.singledispatch
def seq_sort(seq, cmp):
    """Return a sorted copy of seq using the three-way comparison cmp(a, b)."""
    return _rewrap(seq, sorted(seq, key=functools.cmp_to_key(cmp)))

@seq_sort.register(OrderedSet)
def _seq_sort_oset(seq, cmp):
    return seq.sorted(key=functools.cmp_to_key(cmp))

@functools.singledispatch
def seq_reverse(seq):
    return _rewrap(seq, list(reversed(seq)))

def concatenate(type_, *seqs):
    """Join the seqs into a single sequence of type_.

    For OrderedSet this keeps the first occurrence of each element across all
    the seqs, taken in argument order.
    """
    return into(list(itertools.chain.from_iterable(to_list(s) for s in seqs)),
                type_)

#------------------------------------------------------------------------------
# Uniqueness and containment. With a custom testfn an OrderedSet cannot use
# its index (which is built on value equality) so falls back to the same
# linear scan as any other sequence.
#------------------------------------------------------------------------------

def _uniq_scan(seq, testfn):
    result = []
    for elem in seq:
        if not any(testfn(elem, kept) for kept in result): result.append(elem)
    return result

def _contains_scan(seq, value, testfn):
    return any(testfn(elem, value) for elem in seq)

@functools.singledispatch
def uniq(seq, testfn=None):
    """Return a list of the elements of seq without duplicates.

    Duplicates are found with testfn(a, b), which defaults to ==. The first
    occurrence of each element is kept.
    """
    return _uniq_scan(seq, testfn or operator.eq)

@uniq.register(OrderedSet)
def _uniq_oset(seq, testfn=None):
    if testfn is None: return seq.to_list()
    g_logger.debug("uniq() with a custom testfn: scanning %d elements", len(seq))
    return _uniq_scan(seq, testfn)

@functools.singledispatch
def contains(seq, value, testfn=None):
    """Return True if testfn(elem, value) holds for some element of seq.

    testfn defaults to ==.
    """
    return _contains_scan(seq, value, testfn or operator.eq)

@contains.register(OrderedSet)
def _contains_oset(seq, value, testfn=None):
    if testfn is None: return seq.has(value)
    g_logger.debug("contains() with a custom testfn: scanning %d elements",
                   len(seq))
    return _contains_scan(seq, value, testfn)

#------------------------------------------------------------------------------
# main
#------------------------------------------------------------------------------
if __name__ == "__main__":
    raise RuntimeError('Cannot run modules')
