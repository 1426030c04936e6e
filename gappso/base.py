# -*- coding: utf-8 -*-

r"""
Base class for single-objective Particle Swarm Optimization
implementations.

The base class stores the validated configuration and the random source,
and keeps the run statistics and history lists through :meth:`reset` and
:meth:`_populate_history`. Only :meth:`optimize` is abstract, so a subclass
cannot be instantiated until it overrides it. When defining your own
swarm implementation, create another class,

    >>> class MySwarm(SwarmOptimizer):
    >>>     def __init__(self, config, rng=None):
    >>>        super(MySwarm, self).__init__(config, rng=rng)

and implement :meth:`optimize`.

As a guide, check the global best implementation in
:code:`gappso.single.global_best`.
"""

# Import standard library
import abc
import dataclasses
from collections import namedtuple
from typing import List, Optional

# Import modules
import numpy as np

from .config import PSOConfig
from .exceptions import ConfigurationError
from .utils.random import check_random_state


@dataclasses.dataclass(frozen=True)
class OptimizationResult:
    """Outcome of an optimization run

    Attributes
    ----------
    first_hitting_time : int or None
        number of objective evaluations spent when the global best cost
        first came within :code:`tol` of :code:`known_best_fitness`, or
        :code:`None` when it never did
    positions_history : list of numpy.ndarray
        one copy of the position-matrix per iteration, empty when the
        history was disabled
    best_cost : float
        global best cost at the end of the run
    best_pos : numpy.ndarray
        global best position at the end of the run
    n_evaluations : int
        total number of objective evaluations, one per particle per call
    n_epochs : int
        number of iterations executed
    cost_history : list of float
        global best cost after initialization and after each iteration
    """

    first_hitting_time: Optional[int]
    positions_history: List[np.ndarray]
    best_cost: float
    best_pos: np.ndarray
    n_evaluations: int
    n_epochs: int
    cost_history: List[float]

    @property
    def converged(self):
        return self.first_hitting_time is not None


class SwarmOptimizer(abc.ABC):
    def __init__(self, config, rng=None):
        """Initialize the swarm

        Stores the configuration and the random source. The swarm itself
        is created at the start of every :meth:`optimize` call.

        Attributes
        ----------
        config : gappso.config.PSOConfig
            validated parameters of the run
        rng : None, int or numpy.random.Generator, optional
            random source, or a seed for a fresh :code:`default_rng`
        """
        if not isinstance(config, PSOConfig):
            raise ConfigurationError(
                "Expected a PSOConfig, got {}. Use PSOConfig.from_dict() for mappings".format(
                    type(config).__name__
                )
            )
        # Initialize primary swarm attributes
        self.config = config
        self.n_particles = config.nb_particles
        self.dimensions = config.nb_dim
        self.bounds = config.bounds
        self.options = config.options
        self.swarm_size = (self.n_particles, self.dimensions)
        self.rng = check_random_state(rng)
        # Initialize named tuple for populating the history list
        self.ToHistory = namedtuple(
            "ToHistory",
            ["best_cost", "position"],
        )
        # Initialize resettable attributes
        self.reset()

    def _populate_history(self, hist):
        """Populate all history lists

        The :code:`cost_history` list is always filled. Positions are only kept when
        :code:`positions_hist_flag` is set.

        Parameters
        ----------
        hist : collections.namedtuple
            Must be of the same type as self.ToHistory
        """
        self.cost_history.append(hist.best_cost)
        if self.config.positions_hist_flag:
            self.pos_history.append(hist.position.copy())

    @abc.abstractmethod
    def optimize(self, verbose=False, **kwargs):
        """Optimize the swarm for a number of iterations

        Performs the optimization to evaluate the objective
        function :code:`config.fun` for at most :code:`config.max_iter`
        iterations.

        Parameters
        ----------
        verbose : bool
            show a progress bar
        kwargs : dict
            arguments for the objective function

        Raises
        ------
        NotImplementedError
            When this method is not implemented.
        """
        raise NotImplementedError("SwarmOptimizer::optimize()")

    def reset(self):
        """Reset the attributes of the optimizer

        All run state is re-initialized here. This method is called
        during initialization, at the start of every :meth:`optimize`
        call, and can be called from an instance.

        Only per-run state belongs here: the swarm itself, the history
        lists and the run statistics. Parameters of the run live in
        :code:`self.config` and are never reset.
        """
        # Initialize history lists
        self.cost_history = []
        self.pos_history = []

        # Initialize run statistics
        self.n_evaluations = 0
        self.n_epochs = 0
        self.first_hitting_time = None

        # The swarm is generated by optimize(), after the run starts
        self.swarm = None
