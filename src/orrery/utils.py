"""
Utility functions, helpers and exception types for the Orrery package.
"""

import warnings
from typing import Type
from .config import config


class OrreryError(Exception):
    """Base class for all errors raised by the Orrery package."""


class InvalidDate(OrreryError, ValueError):
    """Calendar input outside the supported range or not a real date."""


class UnknownPlanet(OrreryError, KeyError):
    """Planet identifier is not one of the supported planets."""

    def __str__(self):
        # KeyError quotes its argument, keep the plain message instead
        return str(self.args[0]) if self.args else ""


class NonConvergence(OrreryError, RuntimeError):
    """Kepler iteration exceeded its iteration cap."""


def normalize_angle(x: float) -> float:
    """
    Wrap an angle into [0, 360) degrees.

    Examples
    --------
    >>> normalize_angle(-90.0)
    270.0
    >>> normalize_angle(720.5)
    0.5
    """
    x = x % 360.0
    # -1e-20 % 360 rounds to 360.0
    if x >= 360.0:
        x -= 360.0
    return x


def validation_error(message: str, error_class: Type[Exception] = ValueError):
    """
    Raise error or warn based on config.STRICT_VALIDATION.

    This function provides consistent validation behavior across the package.
    When STRICT_VALIDATION is True (default), raises the specified exception.
    When False, issues a UserWarning instead.

    Parameters
    ----------
    message : str
        Validation error message
    error_class : Type[Exception], optional
        Exception class to raise if STRICT_VALIDATION is True.
        Default: ValueError

    Raises
    ------
    Exception (of type error_class)
        If config.STRICT_VALIDATION is True

    Warns
    -----
    UserWarning
        If config.STRICT_VALIDATION is False

    Examples
    --------
    >>> from orrery.utils import validation_error, InvalidDate
    >>> from orrery import config
    >>> config.STRICT_VALIDATION = True
    >>> validation_error("Month out of range", InvalidDate)  # Raises InvalidDate

    >>> config.STRICT_VALIDATION = False
    >>> validation_error("Month out of range", InvalidDate)  # Issues warning
    """
    if config.STRICT_VALIDATION:
        raise error_class(message)
    else:
        warnings.warn(message, UserWarning, stacklevel=3)
