# -*- coding: utf-8 -*-

"""
Base class for Topologies

A topology decides which best position a particle is pulled towards and
how velocities and positions are computed from it.
"""

# Import standard library
import abc


class Topology(abc.ABC):
    @abc.abstractmethod
    def compute_gbest(self, swarm):
        """Compute the best particle of the swarm and return the cost and
        position"""
        raise NotImplementedError("Topology::compute_gbest()")

    @abc.abstractmethod
    def compute_position(self, swarm, bounds, bh, rng):
        """Update the swarm's position-matrix"""
        raise NotImplementedError("Topology::compute_position()")

    @abc.abstractmethod
    def compute_velocity(self, swarm, rng):
        """Update the swarm's velocity-matrix"""
        raise NotImplementedError("Topology::compute_velocity()")
