# -*- coding: utf-8 -*-

"""Exceptions raised by gappso"""


class ConfigurationError(Exception):
    """Raised when an optimizer configuration is incomplete or mistyped

    Value errors on otherwise well-formed fields (e.g. a non-positive
    dimension) raise :code:`ValueError` instead, and a non-callable
    objective raises :code:`TypeError`.
    """
