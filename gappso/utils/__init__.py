"""
The :mod:`gappso.utils` module includes the reporter, the random source
helper and a set of benchmark objective functions.
"""

from .random import check_random_state
from .reporter import Reporter

__all__ = ["Reporter", "check_random_state"]
