# -*- coding: utf-8 -*-

"""
Reporter module for logging and progress bars

Every optimizer and handler owns a :class:`Reporter` wrapping its module
logger:

.. code-block:: python

    import logging
    from gappso.utils import Reporter

    rep = Reporter(logger=logging.getLogger(__name__))
    rep.log("Here's my message", lvl=logging.INFO)

The logging configuration can be customized by passing the path of a YAML
file holding a :code:`logging.config.dictConfig` mapping, either as
:code:`config_path` or through the :code:`GAPPSO_LOG_CFG` environment
variable:

.. code-block:: python

    rep = Reporter(config_path="/path/to/logging.yaml")

When neither is given, a console handler is attached to the :code:`gappso`
logger unless the application has configured one already.

The progress bar wraps :code:`tqdm.trange`:

.. code-block:: python

    for i in rep.pbar(100, name="Optimizer"):
        rep.hook(best_cost=best_cost)
"""

# Import standard library
import copy
import logging
import logging.config
import os

# Import modules
import yaml
from tqdm import trange


class Reporter(object):
    """A Reporter object that abstracts various logging capabilities

    Attributes
    ----------
    logger : logging.Logger
        the logger messages are sent to
    """

    _env_key = "GAPPSO_LOG_CFG"
    _bar_fmt = "{l_bar}{bar}|{n_fmt}/{total_fmt}{postfix}"
    _default_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {"format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"}
        },
        "handlers": {
            "default": {
                "level": "INFO",
                "class": "logging.StreamHandler",
                "formatter": "standard",
            }
        },
        "loggers": {
            "gappso": {"handlers": ["default"], "level": "INFO", "propagate": False}
        },
    }

    def __init__(self, config_path=None, logger=None):
        """Initialize the reporter

        Parameters
        ----------
        config_path : str, optional
            path to a YAML logging configuration. Falls back to the
            :code:`GAPPSO_LOG_CFG` environment variable, then to the
            default console configuration.
        logger : logging.Logger, optional
            the logger to report to. Default is this module's logger.
        """
        self.logger = logger or logging.getLogger(__name__)
        self.t = None
        self._setup_logger(config_path)

    def log(self, msg, lvl=logging.INFO, *args, **kwargs):
        """Log a message within a set level

        Parameters
        ----------
        msg : str
            message to be logged
        lvl : int, optional
            logging level. Default is :code:`logging.INFO`
        """
        self.logger.log(lvl, msg, *args, **kwargs)

    def pbar(self, iters, desc=None):
        """Create a tqdm iterable

        Parameters
        ----------
        iters : int
            maximum number of iterations
        desc : str, optional
            name of the progress bar that will be displayed

        Returns
        -------
        tqdm._tqdm.tqdm
            a tqdm iterable
        """
        self.t = trange(iters, desc=desc, bar_format=self._bar_fmt)
        return self.t

    def hook(self, *args, **kwargs):
        """Set a hook on the progress bar

        Does nothing when no progress bar is running.

        Parameters
        ----------
        *args : tuple
            positional arguments of :code:`tqdm.set_postfix`
        **kwargs : dict
            keyword arguments of :code:`tqdm.set_postfix`
        """
        if self.t is not None:
            self.t.set_postfix(*args, **kwargs)

    def _setup_logger(self, path=None):
        value = path or os.getenv(self._env_key, None)
        if value:
            with open(value, "rt") as f:
                config = yaml.safe_load(f.read())
            logging.config.dictConfig(config)
        elif not logging.getLogger("gappso").handlers:
            self._load_defaults()

    def _load_defaults(self):
        logging.config.dictConfig(copy.deepcopy(self._default_config))
