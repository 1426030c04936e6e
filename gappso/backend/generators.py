# -*- coding: utf-8 -*-

"""
Swarm Generation Backend

This module abstracts how a swarm is generated. You can see and
modify the default behavior for generating particle positions and
velocities, including the constrained "gap" initialization that keeps
every particle out of a square region of a 2D search space.
"""

# Import standard library
import logging

# Import modules
import numpy as np

from .swarms import Swarm

logger = logging.getLogger(__name__)


def generate_swarm(n_particles, dimensions, bounds, rng):
    """Generate a swarm uniformly distributed in a box

    Parameters
    ----------
    n_particles : int
        number of particles to be generated in the swarm.
    dimensions: int
        number of dimensions to be generated in the swarm
    bounds : tuple of float
        a tuple of size 2 where the first entry is the minimum bound while
        the second entry is the maximum bound, shared by every dimension.
    rng : numpy.random.Generator
        random source providing :code:`uniform`

    Returns
    -------
    numpy.ndarray
        swarm matrix of shape (n_particles, dimensions)
    """
    lb, ub = bounds
    return rng.uniform(lb, ub, size=(n_particles, dimensions))


def in_gap(position, gap):
    """Mask of the particles lying inside a square gap

    The gap is closed, so particles on its edge count as inside.

    Parameters
    ----------
    position : numpy.ndarray
        2D positions of shape :code:`(n_particles, 2)`
    gap : tuple of float
        :code:`(half_width, center_x, center_y)`

    Returns
    -------
    numpy.ndarray
        boolean array of shape :code:`(n_particles,)`
    """
    half_width, center_x, center_y = gap
    inside_x = (position[:, 0] >= center_x - half_width) & (position[:, 0] <= center_x + half_width)
    inside_y = (position[:, 1] >= center_y - half_width) & (position[:, 1] <= center_y + half_width)
    return inside_x & inside_y


def generate_gap_swarm(n_particles, bounds, gap, rng):
    """Generate a 2D swarm that avoids a square gap

    Particles are drawn uniformly in the box, then every particle falling
    inside the gap is redrawn until none is left. There is no cap on the
    number of passes; the configuration guarantees the gap does not cover
    the whole box.

    Parameters
    ----------
    n_particles : int
        number of particles to be generated in the swarm.
    bounds : tuple of float
        a tuple of size 2 with the minimum and maximum bound.
    gap : tuple of float
        :code:`(half_width, center_x, center_y)` of the excluded square
    rng : numpy.random.Generator
        random source providing :code:`uniform`

    Returns
    -------
    numpy.ndarray
        swarm matrix of shape (n_particles, 2)
    """
    lb, ub = bounds
    position = generate_swarm(n_particles, 2, bounds, rng)
    bad_idx = np.flatnonzero(in_gap(position, gap))
    n_passes = 0
    while bad_idx.size:
        position[bad_idx] = rng.uniform(lb, ub, size=(bad_idx.size, 2))
        bad_idx = np.flatnonzero(in_gap(position, gap))
        n_passes += 1
    logger.debug("Gap initialization settled after {} resampling pass(es)".format(n_passes))
    return position


def generate_velocity(n_particles, dimensions):
    """Initialize the velocity matrix at rest

    Parameters
    ----------
    n_particles : int
        number of particles to be generated in the swarm.
    dimensions: int
        number of dimensions to be generated in the swarm.

    Returns
    -------
    numpy.ndarray
        zero velocity matrix of shape (n_particles, dimensions)
    """
    return np.zeros((n_particles, dimensions))


def create_swarm(n_particles, dimensions, bounds, rng, gap=None, options=None):
    """Create a Swarm class from the configured initialization

    Parameters
    ----------
    n_particles : int
        number of particles to be generated in the swarm.
    dimensions: int
        number of dimensions to be generated in the swarm.
    bounds : tuple of float
        a tuple of size 2 with the minimum and maximum bound.
    rng : numpy.random.Generator
        random source providing :code:`uniform`
    gap : tuple of float, optional
        :code:`(half_width, center_x, center_y)`. When given the swarm must
        be two-dimensional and no particle starts inside the gap.
    options : dict, optional
        swarm options :code:`{'w', 'c1', 'c2'}`

    Returns
    -------
    gappso.backend.swarms.Swarm
        a Swarm class
    """
    if gap is None:
        position = generate_swarm(n_particles, dimensions, bounds, rng)
    else:
        if dimensions != 2:
            raise ValueError("Gap initialization requires 2 dimensions, got {}".format(dimensions))
        position = generate_gap_swarm(n_particles, bounds, gap, rng)
    velocity = generate_velocity(n_particles, dimensions)
    return Swarm(position=position, velocity=velocity, options=dict(options or {}))
