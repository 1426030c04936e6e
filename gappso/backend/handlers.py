# -*- coding: utf-8 -*-

"""
Handlers

This module provides the :class:`BoundaryHandler`, which decides what
happens to particles that leave the search space after a position
update.

Out-of-bounds coordinates are resampled, not clamped: each violating
coordinate of each particle receives a fresh, independent uniform draw
from the bounds while the particle's other coordinates are left as they
are. A particle sitting exactly on a bound is inside the search space.
"""

# Import standard library
import inspect
import logging

# Import modules
import numpy as np

from ..utils.reporter import Reporter


class HandlerMixin(object):
    """A HandlerMixing class

    This class offers some basic functionality for the Handlers.
    """

    def _out_of_bounds(self, position, bounds):
        """Helper method to find the out-of-bounds coordinates

        Parameters
        ----------
        position : numpy.ndarray
            position-matrix of shape :code:`(n_particles, dimensions)`
        bounds : tuple of float
            the minimum and maximum bound

        Returns
        -------
        numpy.ndarray
            boolean mask of the coordinates outside the bounds
        """
        lb, ub = bounds
        return (position < lb) | (position > ub)

    def _get_all_strategies(self):
        """Helper method to automatically generate a dict of strategies"""
        return {
            k: v
            for k, v in inspect.getmembers(self, predicate=inspect.isroutine)
            if not k.startswith(("__", "_"))
        }


class BoundaryHandler(HandlerMixin):
    def __init__(self, strategy="random"):
        """A BoundaryHandler class

        This class offers a way to handle boundary conditions. It is called
        with the new positions, the bounds and the random source.

        Attributes
        ----------
        strategy : str
            The strategy used to repair the positions. Only
            :code:`"random"` is available.
        """
        self.strategy = strategy
        self.strategies = self._get_all_strategies()
        self.rep = Reporter(logger=logging.getLogger(__name__))
        if self.strategy not in self.strategies:
            message = "Unrecognized strategy: {}. Choose one among: {}".format(
                self.strategy, sorted(self.strategies)
            )
            self.rep.logger.error(message)
            raise ValueError(message)

    def __call__(self, position, bounds, rng, **kwargs):
        """Apply the selected strategy to the position-matrix given the bounds

        Parameters
        ----------
        position : numpy.ndarray
            The swarm position to be handled
        bounds : tuple of float
            the minimum and maximum bound
        rng : numpy.random.Generator
            random source providing :code:`uniform`
        kwargs : dict

        Returns
        -------
        numpy.ndarray
            the adjusted positions of the swarm
        """
        return self.strategies[self.strategy](position, bounds, rng, **kwargs)

    def random(self, position, bounds, rng, **kwargs):
        """Set the out-of-bounds coordinates to random values

        Each coordinate outside the bounds is replaced by its own uniform
        draw within the bounds; coordinates inside the bounds are kept.

        Returns
        -------
        numpy.ndarray
            a new position-matrix, the input is left untouched
        """
        lb, ub = bounds
        new_pos = np.array(position, dtype=float, copy=True)
        mask = self._out_of_bounds(new_pos, bounds)
        n_out = int(np.count_nonzero(mask))
        if n_out:
            new_pos[mask] = rng.uniform(lb, ub, size=n_out)
        return new_pos
