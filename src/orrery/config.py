"""
Global Configuration for Orrery Package
=======================================

This module provides package-wide configuration settings that users can modify
to control numerical tolerances, validation behavior, and default plotting options.

Examples
--------
View current configuration:

>>> import orrery
>>> print(orrery.config)

Modify settings:

>>> orrery.config.KEPLER_TOL = 1e-10  # Tighter Kepler convergence
>>> orrery.config.DEFAULT_PLOT_POINTS = 720  # Smoother orbit curves

Reset to defaults:

>>> orrery.config.reset()

Temporarily modify settings:

>>> with orrery.temp_config(STRICT_VALIDATION=False):
...     # Bad dates warn instead of raising for this block only
...     orrery.centuries_from_date(2001, 2, 29)

Notes
-----
These settings affect package-wide behavior. Modifying them will impact
all subsequent operations until changed again or reset.
"""

from dataclasses import dataclass
from contextlib import contextmanager


@dataclass
class OrreryConfig:
    """
    Global configuration for Orrery package.

    Attributes
    ----------
    KEPLER_TOL : float
        Newton iteration stops once two successive eccentric anomaly
        iterates differ by less than this [rad].
        Default: 1e-6
    KEPLER_MAX_ITER : int
        Maximum Newton iterations before NonConvergence is raised.
        Default: 100
    MIN_YEAR : int
        Earliest calendar year covered by the element table.
        Default: -2999
    MAX_YEAR : int
        Latest calendar year covered by the element table.
        Default: 3000
    STRICT_VALIDATION : bool
        If True, validation failures raise exceptions.
        If False, validation failures issue warnings.
        Default: True
    EQUALITY_RTOL : float
        Relative tolerance for Position and PlanetState equality.
        Default: 1e-12
    EQUALITY_ATOL : float
        Absolute tolerance for Position and PlanetState equality.
        Default: 1e-14
    DEFAULT_PLOT_POINTS : int
        Default number of points sampled along a drawn orbit.
        Default: 360
    """

    # Kepler solver
    KEPLER_TOL: float = 1e-6
    KEPLER_MAX_ITER: int = 100

    # Supported calendar range
    MIN_YEAR: int = -2999
    MAX_YEAR: int = 3000

    # Validation behavior
    STRICT_VALIDATION: bool = True

    # Numerical tolerance for equality comparisons
    EQUALITY_RTOL: float = 1e-12
    EQUALITY_ATOL: float = 1e-14

    # Plotting defaults
    DEFAULT_PLOT_POINTS: int = 360

    def reset(self):
        """
        Reset all configuration values to package defaults.

        Examples
        --------
        >>> import orrery
        >>> orrery.config.KEPLER_MAX_ITER = 5  # Modify
        >>> orrery.config.reset()  # Back to defaults
        >>> orrery.config.KEPLER_MAX_ITER
        100
        """
        defaults = OrreryConfig()
        for key in self.__dataclass_fields__:
            setattr(self, key, getattr(defaults, key))

    def __repr__(self):
        """Return formatted string showing all configuration values."""
        lines = ["OrreryConfig:"]
        lines.append("  Kepler Solver:")
        lines.append(f"    KEPLER_TOL = {self.KEPLER_TOL}")
        lines.append(f"    KEPLER_MAX_ITER = {self.KEPLER_MAX_ITER}")
        lines.append("  Calendar Range:")
        lines.append(f"    MIN_YEAR = {self.MIN_YEAR}")
        lines.append(f"    MAX_YEAR = {self.MAX_YEAR}")
        lines.append("  Numerical Tolerances:")
        lines.append(f"    EQUALITY_RTOL = {self.EQUALITY_RTOL}")
        lines.append(f"    EQUALITY_ATOL = {self.EQUALITY_ATOL}")
        lines.append("  Behavior:")
        lines.append(f"    STRICT_VALIDATION = {self.STRICT_VALIDATION}")
        lines.append("  Plotting:")
        lines.append(f"    DEFAULT_PLOT_POINTS = {self.DEFAULT_PLOT_POINTS}")
        return "\n".join(lines)


# Global configuration instance
config = OrreryConfig()


@contextmanager
def temp_config(**kwargs):
    """
    Context manager for temporarily modifying configuration values.

    Configuration is automatically restored when the context exits,
    even if an exception occurs.

    Parameters
    ----------
    **kwargs
        Configuration attributes to temporarily modify.

    Examples
    --------
    >>> import orrery
    >>> with orrery.temp_config(KEPLER_TOL=1e-12):
    ...     E = orrery.solve_kepler(45.0, 0.2)
    >>> # Original config restored here
    >>> orrery.config.KEPLER_TOL
    1e-06

    Raises
    ------
    AttributeError
        If an invalid configuration attribute is specified.
    """
    old_values = {}
    for key, value in kwargs.items():
        if not hasattr(config, key):
            raise AttributeError(
                f"OrreryConfig has no attribute '{key}'. "
                f"Valid attributes: {list(config.__dataclass_fields__.keys())}"
            )
        old_values[key] = getattr(config, key)
        setattr(config, key, value)

    try:
        yield config
    finally:
        for key, value in old_values.items():
            setattr(config, key, value)
