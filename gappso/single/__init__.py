"""
The :mod:`gappso.single` module implements various techniques in
continuous single-objective optimization. These require only one
objective function that can be optimized in a continuous space.
"""

from .global_best import GlobalBestPSO

__all__ = ["GlobalBestPSO"]
