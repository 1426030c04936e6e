# -*- coding: utf-8 -*-

r"""
Typed configuration for a single optimization run.

A run is described by exactly thirteen fields. They can be given either
as keyword arguments to :class:`PSOConfig` or as a mapping passed to
:meth:`PSOConfig.from_dict`, which also rejects missing and unknown keys:

.. code-block:: python

    from gappso.config import PSOConfig
    from gappso.utils.functions import single_obj as fx

    config = PSOConfig.from_dict({
        "fun": fx.sphere,
        "nb_dim": 2,
        "initial_positions": (1.0, 0.0, 0.0),
        "lower_bound": -5.0,
        "upper_bound": 5.0,
        "w": 0.7,
        "c1": 1.5,
        "c2": 1.5,
        "nb_particles": 30,
        "max_iter": 500,
        "known_best_fitness": 0.0,
        "tol": 1e-4,
        "positions_hist_flag": False,
    })

Every field is validated at construction, in declaration order, so no
objective evaluation can happen on a bad configuration.
"""

# Import standard library
import dataclasses
import logging
import numbers
from collections.abc import Mapping, Sequence
from typing import Any, Callable, Optional, Tuple

# Import modules
import numpy as np

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def _fail(exc_type, msg):
    logger.error(msg)
    raise exc_type(msg)


def _is_integer(value):
    return isinstance(value, numbers.Integral) and not isinstance(value, (bool, np.bool_))


def _is_real(value):
    return isinstance(value, numbers.Real) and not isinstance(value, (bool, np.bool_))


@dataclasses.dataclass(frozen=True)
class PSOConfig:
    """Parameters of one optimization run

    Mappings should go through :meth:`from_dict`, which reports missing
    and unknown fields as :class:`ConfigurationError`. Calling the class
    directly is the keyword-argument path: a missing argument there is a
    plain :code:`TypeError` raised by Python before any validation runs.

    Attributes
    ----------
    fun : callable
        objective function mapping a :code:`(nb_particles, nb_dim)` array
        of positions to a :code:`(nb_particles,)` array of costs
    nb_dim : int
        number of dimensions of the search space
    initial_positions : tuple or None
        :code:`None` (or an empty sequence) for uniform random
        initialization, or :code:`(half_width, center_x, center_y)`
        describing a square gap no initial particle may fall in. Only
        valid when :code:`nb_dim == 2`.
    lower_bound : float
        lower bound shared by every dimension
    upper_bound : float
        upper bound shared by every dimension
    w : float
        inertia parameter
    c1 : float
        cognitive parameter
    c2 : float
        social parameter
    nb_particles : int
        number of particles in the swarm
    max_iter : int
        maximum number of iterations
    known_best_fitness : float
        target cost used to detect convergence
    tol : float
        absolute tolerance around :code:`known_best_fitness`
    positions_hist_flag : bool
        record a copy of the positions at every iteration
    """

    fun: Callable
    nb_dim: int
    initial_positions: Optional[Tuple[float, float, float]]
    lower_bound: float
    upper_bound: float
    w: float
    c1: float
    c2: float
    nb_particles: int
    max_iter: int
    known_best_fitness: float
    tol: float
    positions_hist_flag: bool

    def __post_init__(self):
        if not callable(self.fun):
            _fail(TypeError, "Objective function must be callable, got {}".format(type(self.fun).__name__))

        self._check_integer("nb_dim")
        if self.nb_dim <= 0:
            _fail(ValueError, "nb_dim must be > 0, got {}".format(self.nb_dim))

        self._check_real("lower_bound")
        self._check_real("upper_bound")
        self._check_finite("lower_bound")
        self._check_finite("upper_bound")
        if not self.lower_bound < self.upper_bound:
            _fail(
                ValueError,
                "lower_bound must be less than upper_bound, got ({}, {})".format(self.lower_bound, self.upper_bound),
            )

        # Depends on the validated dimension and bounds
        object.__setattr__(self, "initial_positions", self._check_gap(self.initial_positions))

        for name in ("w", "c1", "c2", "known_best_fitness"):
            self._check_real(name)
        self._check_finite("known_best_fitness")

        self._check_integer("nb_particles")
        if self.nb_particles <= 0:
            _fail(ValueError, "nb_particles must be > 0, got {}".format(self.nb_particles))

        self._check_integer("max_iter")
        if self.max_iter < 0:
            _fail(ValueError, "max_iter must be >= 0, got {}".format(self.max_iter))

        self._check_real("tol")
        self._check_finite("tol")
        if self.tol < 0:
            _fail(ValueError, "tol must be >= 0, got {}".format(self.tol))

        if not isinstance(self.positions_hist_flag, (bool, np.bool_)):
            _fail(
                ConfigurationError,
                "positions_hist_flag must be a bool, got {}".format(type(self.positions_hist_flag).__name__),
            )

    @classmethod
    def field_names(cls):
        """Names of the configuration fields, in declaration order"""
        return tuple(f.name for f in dataclasses.fields(cls))

    @classmethod
    def from_dict(cls, params: Mapping[str, Any]) -> "PSOConfig":
        """Build a configuration from a mapping with exactly the expected keys

        Parameters
        ----------
        params : Mapping
            one entry per configuration field

        Returns
        -------
        PSOConfig
            the validated configuration

        Raises
        ------
        ConfigurationError
            When :code:`params` is not a mapping, or when keys are missing
            or unknown
        """
        if not isinstance(params, Mapping):
            _fail(ConfigurationError, "Configuration must be a mapping, got {}".format(type(params).__name__))

        expected = cls.field_names()
        missing = [name for name in expected if name not in params]
        extra = sorted(str(name) for name in params if name not in expected)
        if missing or extra:
            msg = "Invalid configuration"
            if missing:
                msg += "; missing field(s): {}".format(", ".join(missing))
            if extra:
                msg += "; unknown field(s): {}".format(", ".join(extra))
            _fail(ConfigurationError, msg)

        return cls(**{name: params[name] for name in expected})

    @property
    def options(self):
        """Velocity update coefficients as an options dict"""
        return {"w": self.w, "c1": self.c1, "c2": self.c2}

    @property
    def bounds(self):
        return self.lower_bound, self.upper_bound

    @property
    def has_gap(self):
        return self.initial_positions is not None

    def _check_integer(self, name):
        value = getattr(self, name)
        if not _is_integer(value):
            _fail(ConfigurationError, "{} must be an integer, got {}".format(name, type(value).__name__))

    def _check_real(self, name):
        value = getattr(self, name)
        if not _is_real(value):
            _fail(ConfigurationError, "{} must be a real number, got {}".format(name, type(value).__name__))

    def _check_finite(self, name):
        value = getattr(self, name)
        if not np.isfinite(value):
            _fail(ValueError, "{} must be finite, got {}".format(name, value))

    def _check_gap(self, gap: Optional[Sequence[float]]):
        if gap is None:
            return None
        if (
            isinstance(gap, (str, bytes))
            or not isinstance(gap, (Sequence, np.ndarray))
            or (isinstance(gap, np.ndarray) and gap.ndim != 1)
        ):
            _fail(
                ConfigurationError,
                "initial_positions must be empty or a (half_width, center_x, center_y) sequence, got {}".format(
                    type(gap).__name__
                ),
            )
        if len(gap) == 0:
            return None
        if len(gap) != 3 or not all(_is_real(value) for value in gap):
            _fail(
                ConfigurationError,
                "initial_positions must hold exactly three real numbers, got {!r}".format(gap),
            )
        if self.nb_dim != 2:
            _fail(ValueError, "A gap in initial_positions requires nb_dim == 2, got {}".format(self.nb_dim))

        half_width, center_x, center_y = (float(value) for value in gap)
        if half_width < 0:
            _fail(ValueError, "Gap half width must be >= 0, got {}".format(half_width))

        # A gap covering the whole box would never let the resampling stop
        covers_x = center_x - half_width <= self.lower_bound and center_x + half_width >= self.upper_bound
        covers_y = center_y - half_width <= self.lower_bound and center_y + half_width >= self.upper_bound
        if covers_x and covers_y:
            _fail(ValueError, "Gap {!r} covers the whole search space".format(tuple(gap)))

        return half_width, center_x, center_y
