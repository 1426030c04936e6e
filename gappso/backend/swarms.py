# -*- coding: utf-8 -*-

"""
Swarm Class Backend

This module implements a Swarm class that holds the state of every particle
during an optimization run. It is passed around the backend functions, which
read from it and return the values that the optimizer writes back.
"""

# Import standard library
import dataclasses
from typing import Dict

# Import modules
import numpy as np


@dataclasses.dataclass
class Swarm:
    """A Swarm Class

    Attributes
    ----------
    position : numpy.ndarray
        position-matrix at a given timestep of shape :code:`(n_particles, dimensions)`
    velocity : numpy.ndarray
        velocity-matrix at a given timestep of shape :code:`(n_particles, dimensions)`
    options : dict
        the velocity update coefficients :code:`{'w', 'c1', 'c2'}`
    pbest_pos : numpy.ndarray
        personal best positions of each particle of shape :code:`(n_particles, dimensions)`.
        Set once from the initial positions, see :func:`gappso.backend.operators.compute_pbest`.
    pbest_cost : numpy.ndarray
        personal best costs of each particle of shape :code:`(n_particles,)`
    best_pos : numpy.ndarray
        best position found by the swarm of shape :code:`(dimensions,)`,
        NaN until a finite cost is seen
    best_cost : float
        best cost found by the swarm, default is :code:`numpy.inf`
    current_cost : numpy.ndarray
        the current cost found by the swarm of shape :code:`(n_particles,)`
    """

    position: np.ndarray
    velocity: np.ndarray
    options: Dict[str, float] = dataclasses.field(default_factory=dict)
    pbest_pos: np.ndarray = None
    pbest_cost: np.ndarray = None
    best_pos: np.ndarray = None
    best_cost: float = np.inf
    current_cost: np.ndarray = None

    def __post_init__(self):
        self.position = np.asarray(self.position, dtype=float)
        self.velocity = np.asarray(self.velocity, dtype=float)
        if self.position.ndim != 2:
            raise ValueError("Swarm position must be a 2D array, got shape {}".format(self.position.shape))
        if self.velocity.shape != self.position.shape:
            raise ValueError(
                "Swarm velocity shape {} does not match position shape {}".format(
                    self.velocity.shape, self.position.shape
                )
            )
        if self.pbest_pos is None:
            self.pbest_pos = self.position.copy()
        if self.pbest_cost is None:
            self.pbest_cost = np.full(self.n_particles, np.inf)
        if self.best_pos is None:
            self.best_pos = np.full(self.dimensions, np.nan)
        if self.current_cost is None:
            self.current_cost = np.full(self.n_particles, np.inf)

    @property
    def n_particles(self):
        return self.position.shape[0]

    @property
    def dimensions(self):
        return self.position.shape[1]
