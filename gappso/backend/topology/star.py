# -*- coding: utf-8 -*-

r"""
A Star Network Topology

This class implements a star topology. In this topology,
all particles are connected to one another. This social
behavior is often found in GlobalBest PSO
optimizers.

The velocity update draws the two acceleration factors once per
iteration, as single scalars shared by every particle and every
dimension:

.. math::

   v_{ij}(t + 1) = w * v_{ij}(t) + c_{1}r_{1}(t)[y_{ij} − x_{ij}(t)]
                   + c_{2}r_{2}(t)[\hat{y}_{j}(t) − x_{ij}(t)]
"""

# Import modules
import numpy as np

from .base import Topology


class Star(Topology):
    def compute_gbest(self, swarm, **kwargs):
        """Update the global best using a star topology

        The global best only moves on a strict improvement over the swarm's
        current best cost. Among particles sharing the lowest cost, the
        first one wins. Particles with a NaN cost are skipped, and a swarm
        whose costs are all NaN keeps its current best.

        Parameters
        ----------
        swarm : gappso.backend.swarms.Swarm
            a Swarm instance, with :code:`current_cost` evaluated

        Returns
        -------
        numpy.ndarray
            Best position of shape :code:`(n_dimensions, )`
        float
            Best cost
        """
        if np.isnan(swarm.current_cost).all():
            return swarm.best_pos, swarm.best_cost
        best_index = int(np.nanargmin(swarm.current_cost))
        new_best = swarm.current_cost[best_index]
        if new_best < swarm.best_cost:
            return swarm.position[best_index].copy(), float(new_best)
        return swarm.best_pos, swarm.best_cost

    def compute_velocity(self, swarm, rng):
        """Compute the velocity matrix

        :code:`rng.random()` is called exactly twice, once per
        acceleration coefficient.

        Parameters
        ----------
        swarm : gappso.backend.swarms.Swarm
            a Swarm instance
        rng : numpy.random.Generator
            random source providing :code:`random`

        Returns
        -------
        numpy.ndarray
            Updated velocity matrix
        """
        w = swarm.options["w"]
        c1 = swarm.options["c1"]
        c2 = swarm.options["c2"]
        r1 = rng.random()
        r2 = rng.random()
        cognitive = c1 * r1 * (swarm.pbest_pos - swarm.position)
        # best_pos broadcasts over every particle
        social = c2 * r2 * (swarm.best_pos - swarm.position)
        return (w * swarm.velocity) + cognitive + social

    def compute_position(self, swarm, bounds, bh, rng):
        """Update the position matrix

        Parameters
        ----------
        swarm : gappso.backend.swarms.Swarm
            a Swarm instance
        bounds : tuple of float
            the minimum and maximum bound
        bh : gappso.backend.handlers.BoundaryHandler
            a BoundaryHandler instance
        rng : numpy.random.Generator
            random source used to resample out-of-bounds coordinates

        Returns
        -------
        numpy.ndarray
            New position-matrix
        """
        position = swarm.position + swarm.velocity
        return bh(position, bounds, rng)
