#!/usr/bin/env python
# -*- coding: utf-8 -*-

# Import modules
import numpy as np
import pytest

# Import from gappso
from gappso.backend.handlers import BoundaryHandler


@pytest.fixture
def bounds():
    return (-2.0, 2.0)


@pytest.fixture
def positions():
    return np.array([[0.0, 3.5, -1.0], [-2.0, 2.0, -7.0], [1.0, 1.5, 0.5]])


def test_random_keeps_inbound_coordinates(positions, bounds):
    """Test if coordinates within (or on) the bounds are left untouched"""
    bh = BoundaryHandler(strategy="random")
    new_pos = bh(positions, bounds, np.random.default_rng(0))
    inbound = (positions >= bounds[0]) & (positions <= bounds[1])
    np.testing.assert_array_equal(new_pos[inbound], positions[inbound])


def test_random_resamples_outbound_coordinates(positions, bounds):
    """Test if every violating coordinate is redrawn within the bounds"""
    bh = BoundaryHandler()
    new_pos = bh(positions, bounds, np.random.default_rng(0))
    assert (new_pos >= bounds[0]).all() and (new_pos <= bounds[1]).all()
    assert new_pos[0, 1] != positions[0, 1]
    assert new_pos[1, 2] != positions[1, 2]


def test_random_draws_one_value_per_violation(positions, bounds, counting_rng):
    """Test if the random source is asked for exactly the violating coordinates"""
    sizes = []
    uniform = counting_rng.uniform

    def spy(low, high, size=None):
        sizes.append(size)
        return uniform(low, high, size=size)

    counting_rng.uniform = spy
    BoundaryHandler()(positions, bounds, counting_rng)
    assert sizes == [2]


def test_random_without_violations_draws_nothing(bounds, counting_rng):
    """Test if an in-bound swarm is returned as is"""
    positions = np.zeros((4, 2))
    new_pos = BoundaryHandler()(positions, bounds, counting_rng)
    np.testing.assert_array_equal(new_pos, positions)
    assert counting_rng.uniform_calls == 0


def test_random_does_not_mutate_input(positions, bounds):
    """Test if the input position-matrix is not modified in place"""
    original = positions.copy()
    BoundaryHandler()(positions, bounds, np.random.default_rng(0))
    np.testing.assert_array_equal(positions, original)


def test_unknown_strategy_raises():
    """Test if an unrecognized strategy raises ValueError"""
    with pytest.raises(ValueError, match="Unrecognized strategy"):
        BoundaryHandler(strategy="nearest")
