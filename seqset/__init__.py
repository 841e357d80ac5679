# -----------------------------------------------------------------------------
# SeqSet: an insertion ordered set with structural equality that works with
# generic sequence functions.
#
# The set itself and the set algebra functions are exported here. The generic
# sequence functions live in seqset.seq since several of their names (copy,
# length, do, ...) are too generic to be star-imported.
# ------------------------------------------------------------------------------

from .oset import *
from .oset import __all__ as _oset_all
from . import seq

__version__ = '1.0.0'
__author__ = 'SeqSet developers'
__license__ = 'MIT'

__all__ = list(_oset_all) + ['seq']
