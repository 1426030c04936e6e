# -*- coding: utf-8 -*-

"""Helpers for the injectable random source"""

# Import modules
import numbers

import numpy as np


def check_random_state(seed=None):
    """Turn a seed into a random source

    Any object exposing numpy :code:`Generator`-compatible
    :code:`random()` and :code:`uniform(low, high, size)` methods is
    accepted as is, so tests can pass in instrumented sources.

    Parameters
    ----------
    seed : None, int, numpy.random.Generator or object
        :code:`None` or an integer seeds a fresh :code:`default_rng`.
        Anything else is returned unchanged.

    Returns
    -------
    numpy.random.Generator or object
        the random source to draw from

    Raises
    ------
    TypeError
        When :code:`seed` is neither a seed nor a random source
    """
    if seed is None or isinstance(seed, (numbers.Integral, np.random.SeedSequence)):
        return np.random.default_rng(seed)
    if isinstance(seed, (np.random.Generator, np.random.RandomState)):
        return seed
    if callable(getattr(seed, "random", None)) and callable(getattr(seed, "uniform", None)):
        return seed
    raise TypeError("{!r} cannot be used as a random source".format(seed))
