#!/usr/bin/env python
# -*- coding: utf-8 -*-

# Import modules
import numpy as np
import pytest

# Import from gappso
from gappso.utils.functions import single_obj as fx


@pytest.fixture
def common_minima():
    return np.zeros((3, 2))


@pytest.mark.parametrize("func", [fx.sphere, fx.rastrigin, fx.ackley])
def test_minima_at_origin(func, common_minima):
    """Test if the functions reach 0 at the origin"""
    np.testing.assert_array_almost_equal(func(common_minima), np.zeros(3))


def test_rosenbrock_minimum():
    """Test if rosenbrock reaches 0 at (1, ..., 1)"""
    np.testing.assert_array_almost_equal(fx.rosenbrock(np.ones((4, 3))), np.zeros(4))


@pytest.mark.parametrize("func", [fx.sphere, fx.rastrigin, fx.ackley, fx.rosenbrock])
def test_output_shape(func):
    """Test if one cost is returned per particle"""
    x = np.random.default_rng(0).uniform(-1, 1, size=(7, 4))
    assert func(x).shape == (7,)
    assert (func(x) > 0).all()
