# -*- coding: utf-8 -*-

"""
One-call entry point

:func:`pso` validates a configuration mapping, runs a
:class:`gappso.single.GlobalBestPSO` on it and returns the result:

.. code-block:: python

    import gappso
    from gappso.utils.functions import single_obj as fx

    result = gappso.pso({
        "fun": fx.sphere,
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
    }, rng=0)
    result.first_hitting_time, len(result.positions_history)
"""

# Import standard library
from collections.abc import Mapping
from typing import Any, Union

from .base import OptimizationResult
from .config import PSOConfig
from .single.global_best import GlobalBestPSO


def pso(params: Union[Mapping[str, Any], PSOConfig], rng=None, verbose=False, **kwargs) -> OptimizationResult:
    """Run a global best PSO described by :code:`params`

    Parameters
    ----------
    params : Mapping or gappso.config.PSOConfig
        the thirteen configuration fields, see :class:`gappso.config.PSOConfig`
    rng : None, int or numpy.random.Generator, optional
        random source, or a seed for a fresh :code:`default_rng`
    verbose : bool
        show a progress bar
    kwargs : dict
        arguments for the objective function

    Returns
    -------
    gappso.base.OptimizationResult
        first hitting time, positions history and run statistics

    Raises
    ------
    ConfigurationError
        When fields are missing, unknown or mistyped
    TypeError
        When the objective is not callable
    ValueError
        When a field holds an invalid value
    """
    config = params if isinstance(params, PSOConfig) else PSOConfig.from_dict(params)
    return GlobalBestPSO(config, rng=rng).optimize(verbose=verbose, **kwargs)
