# -*- coding: utf-8 -*-

"""
Swarm Operation Backend

This module abstracts the cost bookkeeping of a swarm: evaluating the
objective on every particle at once, and keeping track of each particle's
personal best cost.
"""

# Import standard library
import logging

# Import modules
import numpy as np

from ..utils.reporter import Reporter

rep = Reporter(logger=logging.getLogger(__name__))


def compute_objective_function(swarm, objective_func, **kwargs):
    """Evaluate particles using the objective function

    The objective is called once on the whole position-matrix.

    Parameters
    ----------
    swarm : gappso.backend.swarms.Swarm
        a Swarm instance
    objective_func : function
        objective function to be evaluated
    kwargs : dict
        arguments for the objective function

    Returns
    -------
    numpy.ndarray
        Cost-matrix for the given swarm, of shape :code:`(n_particles,)`

    Raises
    ------
    ValueError
        When the objective does not return one cost per particle
    """
    cost = np.asarray(objective_func(swarm.position, **kwargs), dtype=float)
    if cost.shape != (swarm.n_particles,):
        # Objectives written for column vectors return (n_particles, 1)
        if cost.shape == (swarm.n_particles, 1):
            return cost.ravel()
        message = "Objective function must return an array of shape ({},), got {}".format(
            swarm.n_particles, cost.shape
        )
        rep.logger.error(message)
        raise ValueError(message)
    return cost


def compute_pbest(swarm):
    """Update the personal best score of a swarm instance

    A particle's recorded best cost is replaced only where its current cost
    is strictly lower.

    The personal best *positions* are returned unchanged: they are set once
    from the initial positions and never follow later improvements, even
    though the velocity update keeps pulling each particle towards them.
    Reported first hitting times depend on this behaviour.

    Parameters
    ----------
    swarm : gappso.backend.swarms.Swarm
        a Swarm instance

    Returns
    -------
    numpy.ndarray
        personal best positions of shape :code:`(n_particles, n_dimensions)`
    numpy.ndarray
        personal best costs of shape :code:`(n_particles,)`
    """
    mask_cost = swarm.current_cost < swarm.pbest_cost
    new_pbest_cost = np.where(mask_cost, swarm.current_cost, swarm.pbest_cost)
    return swarm.pbest_pos, new_pbest_cost
