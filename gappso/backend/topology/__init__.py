"""
The :code:`gappso.backend.topology` module implements the topology a swarm
optimizer uses to share information between particles.
"""

from .base import Topology
from .star import Star

__all__ = ["Topology", "Star"]
