# -*- coding: utf-8 -*-

"""
gappso: global best Particle Swarm Optimization with gap initialization
and first hitting time detection.
"""

__author__ = """gappso developers"""
__version__ = "0.1.0"

from .base import OptimizationResult
from .config import PSOConfig
from .exceptions import ConfigurationError
from .pso import pso
from .single import GlobalBestPSO

__all__ = [
    "ConfigurationError",
    "GlobalBestPSO",
    "OptimizationResult",
    "PSOConfig",
    "pso",
    "single",
    "utils",
]
