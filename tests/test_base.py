#!/usr/bin/env python
# -*- coding: utf-8 -*-

# Import modules
import pytest

# Import from gappso
from gappso.base import SwarmOptimizer
from gappso.config import PSOConfig


class MySwarm(SwarmOptimizer):
    def __init__(self, config, rng=None):
        super(MySwarm, self).__init__(config, rng=rng)

    def optimize(self, verbose=False, **kwargs):
        self.n_epochs = self.config.max_iter
        return self.n_epochs


class NoOptimize(SwarmOptimizer):
    pass


def test_subclass_with_optimize(params):
    """Test if a subclass overriding optimize only can be built and run"""
    swarm = MySwarm(PSOConfig.from_dict(params), rng=0)
    assert swarm.swarm_size == (20, 1)
    assert swarm.cost_history == []
    assert swarm.optimize() == 200


def test_subclass_without_optimize_raises(params):
    """Test if a subclass missing optimize cannot be instantiated"""
    with pytest.raises(TypeError):
        NoOptimize(PSOConfig.from_dict(params))


def test_reset_clears_statistics(params):
    """Test if reset brings the run statistics back to their initial values"""
    swarm = MySwarm(PSOConfig.from_dict(params))
    swarm.optimize()
    swarm.cost_history.append(1.0)
    swarm.first_hitting_time = 40
    swarm.reset()
    assert swarm.n_epochs == 0
    assert swarm.cost_history == []
    assert swarm.pos_history == []
    assert swarm.first_hitting_time is None
