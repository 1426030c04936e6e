#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""Fixtures for tests"""

# Import modules
import numpy as np
import pytest

# Import from gappso
from gappso.utils.functions.single_obj import sphere


class CountingRandom(object):
    """Random source that counts the draws it hands out"""

    def __init__(self, seed=None):
        self._rng = np.random.default_rng(seed)
        self.random_calls = 0
        self.uniform_calls = 0

    def random(self, *args, **kwargs):
        self.random_calls += 1
        return self._rng.random(*args, **kwargs)

    def uniform(self, *args, **kwargs):
        self.uniform_calls += 1
        return self._rng.uniform(*args, **kwargs)


class CountingObjective(object):
    """Objective wrapper that counts its calls"""

    def __init__(self, func):
        self.func = func
        self.calls = 0

    def __call__(self, x, **kwargs):
        self.calls += 1
        return self.func(x, **kwargs)


@pytest.fixture
def counting_rng():
    """Seeded random source counting its draws"""
    return CountingRandom(seed=0)


@pytest.fixture
def counting_objective():
    """Factory wrapping an objective into a call counter"""
    return CountingObjective


@pytest.fixture
def params():
    """1D sphere configuration for most PSO use-cases"""
    return {
        "fun": sphere,
        "nb_dim": 1,
        "initial_positions": None,
        "lower_bound": -10.0,
        "upper_bound": 10.0,
        "w": 0.7,
        "c1": 1.5,
        "c2": 1.5,
        "nb_particles": 20,
        "max_iter": 200,
        "known_best_fitness": 0.0,
        "tol": 1e-3,
        "positions_hist_flag": True,
    }


@pytest.fixture
def gap_params(params):
    """2D sphere configuration with a gap around the origin"""
    params.update(nb_dim=2, initial_positions=(2.0, 0.0, 0.0), lower_bound=-5.0, upper_bound=5.0)
    return params
