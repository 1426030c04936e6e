#!/usr/bin/env python
# -*- coding: utf-8 -*-

# Import modules
import numpy as np
import pytest

# Import from gappso
import gappso
from gappso import ConfigurationError, PSOConfig, pso


def test_pso_with_mapping(params):
    """Test if a plain mapping runs a full optimization"""
    result = pso(params, rng=0)
    assert isinstance(result, gappso.OptimizationResult)
    if result.converged:
        assert len(result.positions_history) == result.n_epochs
    else:
        assert len(result.positions_history) == params["max_iter"]


def test_pso_with_config(params):
    """Test if a ready PSOConfig is accepted as is"""
    first = pso(PSOConfig.from_dict(params), rng=3)
    second = pso(params, rng=3)
    assert first.cost_history == second.cost_history


def test_pso_missing_tol_makes_no_evaluation(params, counting_objective):
    """Test if a configuration without tol fails before any evaluation"""
    objective = counting_objective(params["fun"])
    params["fun"] = objective
    del params["tol"]
    with pytest.raises(ConfigurationError):
        pso(params)
    assert objective.calls == 0


@pytest.mark.parametrize("bad", [None, 42, [("tol", 0.1)]])
def test_pso_rejects_non_mapping(bad):
    """Test if anything but a mapping or a PSOConfig is refused"""
    with pytest.raises(ConfigurationError):
        pso(bad)


def test_pso_uncallable_objective(params):
    """Test if a non-callable objective raises TypeError"""
    params["fun"] = np.zeros(3)
    with pytest.raises(TypeError):
        pso(params)


def test_pso_gap_run(gap_params):
    """Test if a gap configuration runs end to end"""
    gap_params.update(max_iter=50)
    result = pso(gap_params, rng=5)
    assert result.n_evaluations == gap_params["nb_particles"] * (1 + result.n_epochs)
