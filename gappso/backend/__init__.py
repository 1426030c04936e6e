"""
The :code:`gappso.backend` module abstracts the state of a swarm and the
operations applied to it at every iteration.
"""

from .generators import create_swarm, generate_gap_swarm, generate_swarm, generate_velocity
from .handlers import BoundaryHandler
from .operators import compute_objective_function, compute_pbest
from .swarms import Swarm

__all__ = [
    "BoundaryHandler",
    "Swarm",
    "compute_objective_function",
    "compute_pbest",
    "create_swarm",
    "generate_gap_swarm",
    "generate_swarm",
    "generate_velocity",
]
