'''Orrery Kepler equation solver
Mean anomaly -> eccentric anomaly -> true anomaly for elliptic orbits'''

import numpy as np
from typing import NamedTuple, Optional
from .config import config
from .utils import validation_error, NonConvergence


class AnomalyTriple(NamedTuple):
    """Mean, eccentric and true anomaly [deg], each derived from the previous"""
    M: float
    E: float
    v: float


def _check_eccentricity(e: float):
    if not 0 <= e < 1:
        validation_error(f"Elliptic orbit requires 0 <= e < 1, got e={e}")


def solve_kepler(M: float, e: float, tol: Optional[float] = None,
                 max_iter: Optional[int] = None) -> float:
    """
    Solve Kepler's equation M = E - e*sin(E) for the eccentric anomaly.

    Newton's method on f(x) = e*sin(x) - x + M, starting from x0 = pi.

    Parameters
    ----------
    M : float
        Mean anomaly [deg]
    e : float
        Eccentricity, 0 <= e < 1
    tol : float, optional
        Stop once successive iterates differ by less than this [rad].
        Defaults to config.KEPLER_TOL
    max_iter : int, optional
        Iteration cap. Defaults to config.KEPLER_MAX_ITER

    Returns
    -------
    float
        Eccentric anomaly [deg]

    Raises
    ------
    ValueError
        If e is outside [0, 1) and config.STRICT_VALIDATION is True
    NonConvergence
        If the iteration cap is reached before convergence
    """
    _check_eccentricity(e)
    if tol is None:
        tol = config.KEPLER_TOL
    if max_iter is None:
        max_iter = config.KEPLER_MAX_ITER

    m = np.radians(M)
    x = x_last = np.pi
    for _ in range(max_iter):
        x_last = x
        x = x - (e*np.sin(x) - x + m) / (e*np.cos(x) - 1)
        if abs(x - x_last) < tol:
            return float(np.degrees(x))
    raise NonConvergence(
        f"Kepler iteration did not converge within {max_iter} iterations "
        f"(M={M}°, e={e}, last step {abs(x - x_last):.3e} rad)")


def true_anomaly(E: float, e: float) -> float:
    """
    True anomaly from eccentric anomaly via the half-angle relation.

    v = 2*atan(tan(E/2) * sqrt((1+e)/(1-e))), result in (-180, 180] [deg]
    """
    _check_eccentricity(e)
    half_E = np.radians(E) / 2
    return float(np.degrees(2*np.arctan(np.tan(half_E) * np.sqrt((1 + e)/(1 - e)))))


def anomalies(M: float, e: float) -> AnomalyTriple:
    """Mean, eccentric and true anomaly for a mean anomaly M [deg]"""
    E = solve_kepler(M, e)
    return AnomalyTriple(M=M, E=E, v=true_anomaly(E, e))
