# -*- coding: utf-8 -*-

r"""
A Global-best Particle Swarm Optimization (gbest PSO) algorithm with
first hitting time detection.

It takes a set of candidate solutions, and tries to find the best
solution using a position-velocity update method. Uses a
star-topology where each particle is attracted to the best
performing particle.

The position update can be defined as:

.. math::

   x_{i}(t+1) = x_{i}(t) + v_{i}(t+1)

Where the position at the current timestep :math:`t` is updated using
the computed velocity at :math:`t+1`. The velocity update is defined as:

.. math::

   v_{ij}(t + 1) = w * v_{ij}(t) + c_{1}r_{1}(t)[y_{ij} − x_{ij}(t)]
                   + c_{2}r_{2}(t)[\hat{y}_{j}(t) − x_{ij}(t)]

Here, :math:`r_{1}` and :math:`r_{2}` are single scalars drawn once per
iteration, and :math:`y_{ij}` are the personal best positions recorded at
initialization. Coordinates leaving the bounds are redrawn uniformly
within them.

The run stops as soon as the global best cost comes within :code:`tol` of
the known best fitness. The number of objective evaluations spent at that
point is the *first hitting time*.

An example usage is as follows:

.. code-block:: python

    from gappso.config import PSOConfig
    from gappso.single import GlobalBestPSO
    from gappso.utils.functions import single_obj as fx

    config = PSOConfig(
        fun=fx.sphere, nb_dim=2, initial_positions=None,
        lower_bound=-5.0, upper_bound=5.0, w=0.7, c1=1.5, c2=1.5,
        nb_particles=30, max_iter=500, known_best_fitness=0.0,
        tol=1e-6, positions_hist_flag=False,
    )
    optimizer = GlobalBestPSO(config, rng=42)
    result = optimizer.optimize()
    print(result.first_hitting_time)
"""

# Import standard library
import logging

# Import modules
import numpy as np

from ..backend.generators import create_swarm
from ..backend.handlers import BoundaryHandler
from ..backend.operators import compute_objective_function, compute_pbest
from ..backend.topology import Star
from ..base import OptimizationResult, SwarmOptimizer
from ..utils.reporter import Reporter


class GlobalBestPSO(SwarmOptimizer):
    def __init__(self, config, rng=None):
        """Initialize the swarm

        Attributes
        ----------
        config : gappso.config.PSOConfig
            validated parameters of the run
        rng : None, int or numpy.random.Generator, optional
            random source for initialization, bounds handling and the
            velocity coefficients. An integer seeds a fresh
            :code:`numpy.random.default_rng`.
        """
        super(GlobalBestPSO, self).__init__(config, rng=rng)

        # Initialize logger
        self.rep = Reporter(logger=logging.getLogger(__name__))
        # Initialize the topology
        self.top = Star()
        self.bh = BoundaryHandler(strategy="random")
        self.name = __name__

    def optimize(self, verbose=False, **kwargs):
        """Optimize the swarm until convergence or for max_iter iterations

        Parameters
        ----------
        verbose : bool
            show a progress bar. Default is :code:`False`
        kwargs : dict
            arguments for the objective function

        Returns
        -------
        gappso.base.OptimizationResult
            the first hitting time, the positions history and run
            statistics
        """
        config = self.config
        objective_func = config.fun

        self.rep.log("Obj. func. args: {}".format(kwargs), lvl=logging.DEBUG)
        self.rep.log(
            "Optimize for at most {} iters with {}".format(config.max_iter, self.options),
            lvl=logging.INFO,
        )

        # Initialize the resettable attributes
        self.reset()
        self.swarm = create_swarm(
            n_particles=self.n_particles,
            dimensions=self.dimensions,
            bounds=self.bounds,
            rng=self.rng,
            gap=config.initial_positions,
            options=self.options,
        )

        # Initial evaluation, the swarm starts with an infinite best cost
        self.swarm.current_cost = compute_objective_function(self.swarm, objective_func, **kwargs)
        self.n_evaluations = self.n_particles
        self.swarm.pbest_pos = self.swarm.position.copy()
        self.swarm.pbest_cost = self.swarm.current_cost.copy()
        self.swarm.best_pos, self.swarm.best_cost = self.top.compute_gbest(self.swarm)
        self.cost_history.append(self.swarm.best_cost)

        iterations = self.rep.pbar(config.max_iter, self.name) if verbose else range(config.max_iter)
        try:
            for _ in iterations:
                # Perform velocity and position updates
                self.swarm.velocity = self.top.compute_velocity(self.swarm, self.rng)
                self.swarm.position = self.top.compute_position(self.swarm, self.bounds, self.bh, self.rng)

                # Compute cost for current position
                self.swarm.current_cost = compute_objective_function(self.swarm, objective_func, **kwargs)
                self.n_evaluations += self.n_particles

                # Update gbest, then personal bests
                self.swarm.best_pos, self.swarm.best_cost = self.top.compute_gbest(self.swarm)
                self.swarm.pbest_pos, self.swarm.pbest_cost = compute_pbest(self.swarm)
                self.n_epochs += 1

                if verbose:
                    self.rep.hook(best_cost=self.swarm.best_cost)
                # Save to history
                hist = self.ToHistory(best_cost=self.swarm.best_cost, position=self.swarm.position)
                self._populate_history(hist)

                # Verify stop criteria based on the absolute distance to the known best
                if np.abs(self.swarm.best_cost - config.known_best_fitness) < config.tol:
                    self.first_hitting_time = self.n_evaluations
                    self.rep.log(
                        "Converged after {} iters, first hitting time: {}".format(
                            self.n_epochs, self.first_hitting_time
                        ),
                        lvl=logging.INFO,
                    )
                    break
        finally:
            if verbose:
                iterations.close()

        # Obtain the final best_cost and the final best_position
        final_best_cost = self.swarm.best_cost
        final_best_pos = self.swarm.best_pos.copy()
        # Write report in log and return the result
        self.rep.log(
            "Optimization finished | best cost: {}, best pos: {}, evaluations: {}".format(
                final_best_cost, final_best_pos, self.n_evaluations
            ),
            lvl=logging.INFO,
        )
        return OptimizationResult(
            first_hitting_time=self.first_hitting_time,
            positions_history=list(self.pos_history),
            best_cost=final_best_cost,
            best_pos=final_best_pos,
            n_evaluations=self.n_evaluations,
            n_epochs=self.n_epochs,
            cost_history=list(self.cost_history),
        )
