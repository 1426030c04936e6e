#!/usr/bin/env python
# -*- coding: utf-8 -*-

# Import modules
import numpy as np
import pytest

# Import from gappso
from gappso.backend.operators import compute_objective_function, compute_pbest
from gappso.backend.swarms import Swarm
from gappso.utils.functions.single_obj import sphere


@pytest.fixture
def swarm():
    position = np.array([[1.0, 2.0], [0.5, 0.5], [-1.0, 0.0]])
    return Swarm(
        position=position,
        velocity=np.zeros_like(position),
        options={"w": 0.5, "c1": 1.0, "c2": 1.0},
        pbest_pos=np.array([[9.0, 9.0], [8.0, 8.0], [7.0, 7.0]]),
        pbest_cost=np.array([3.0, 1.0, 2.0]),
        current_cost=np.array([4.0, 0.5, 2.0]),
    )


def test_compute_pbest_updates_costs_strictly(swarm):
    """Test if personal best costs only move on strict improvements"""
    _, pbest_cost = compute_pbest(swarm)
    np.testing.assert_array_equal(pbest_cost, [3.0, 0.5, 2.0])


def test_compute_pbest_keeps_positions(swarm):
    """Test if personal best positions are not moved by an improvement"""
    pbest_pos, _ = compute_pbest(swarm)
    np.testing.assert_array_equal(pbest_pos, [[9.0, 9.0], [8.0, 8.0], [7.0, 7.0]])


def test_compute_pbest_is_monotonic(swarm):
    """Test if personal best costs never increase"""
    _, pbest_cost = compute_pbest(swarm)
    assert (pbest_cost <= swarm.pbest_cost).all()


def test_compute_objective_function_return_values(swarm):
    """Test if one cost per particle is returned"""
    cost = compute_objective_function(swarm, sphere)
    np.testing.assert_array_almost_equal(cost, [5.0, 0.5, 1.0])


def test_compute_objective_function_passes_kwargs(swarm):
    """Test if keyword arguments reach the objective"""
    cost = compute_objective_function(swarm, lambda x, shift: sphere(x) + shift, shift=1.0)
    np.testing.assert_array_almost_equal(cost, [6.0, 1.5, 2.0])


def test_compute_objective_function_accepts_column(swarm):
    """Test if a column of costs is flattened"""
    cost = compute_objective_function(swarm, lambda x: sphere(x).reshape(-1, 1))
    assert cost.shape == (3,)


def test_compute_objective_function_wrong_shape_raises(swarm):
    """Test if an objective returning the wrong shape raises ValueError"""
    with pytest.raises(ValueError):
        compute_objective_function(swarm, lambda x: x)
