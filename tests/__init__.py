# ------------------------------------------------------------------------------
# Collect all the test cases so that runtests.py can load them from the package
# ------------------------------------------------------------------------------

from .test_util_tools import *
from .test_oset import *
from .test_seq import *
