'''Orrery orbit ellipse projection
Geometry of an orbit ellipse after projection onto the ecliptic plane,
for drawing the orbit path (independent of the planet's anomaly)'''

import numpy as np
from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING
from .config import config
from .frames import to_ecliptic
from .utils import normalize_angle

if TYPE_CHECKING:
    from .orbital_elements import PropagatedElements


@dataclass(frozen=True)
class EllipseGeometry:
    """
    Projected orbit ellipse in the ecliptic (x, y) plane.

    Attributes
    ----------
    rx : float
        Projected semi-major axis length [AU]
    ry : float
        Projected semi-minor axis length [AU]
    dx : float
        Projected distance from the ellipse center to the Sun (focus) [AU]
    theta : float
        Direction of the projected major axis, center towards perihelion,
        in [0, 360) [deg]

    The ellipse center lies at dx from the Sun, opposite the direction theta.
    """
    rx: float
    ry: float
    dx: float
    theta: float

    @property
    def center(self) -> np.ndarray:
        """Ellipse center in ecliptic (x, y) [AU]"""
        t = np.radians(self.theta)
        return -self.dx * np.array([np.cos(t), np.sin(t)])

    def sample(self, n_points: Optional[int] = None) -> np.ndarray:
        """
        Points along the ellipse described by these parameters.

        Parameters
        ----------
        n_points : int, optional
            Number of points (default: config.DEFAULT_PLOT_POINTS). The
            first point is repeated at the end to close the curve.

        Returns
        -------
        np.ndarray
            Array of shape (n_points + 1, 2) of ecliptic (x, y) [AU]
        """
        if n_points is None:
            n_points = config.DEFAULT_PLOT_POINTS
        if n_points < 3:
            raise ValueError(f"Need at least 3 points to draw an ellipse, got {n_points}")
        u = np.linspace(0, 2*np.pi, n_points + 1)
        t = np.radians(self.theta)
        # axis-aligned ellipse, shifted by -dx, then rotated by theta
        x = self.rx*np.cos(u) - self.dx
        y = self.ry*np.sin(u)
        return np.column_stack([x*np.cos(t) - y*np.sin(t),
                                x*np.sin(t) + y*np.cos(t)])


def _planar_distance(p, q) -> float:
    return float(np.hypot(p[0] - q[0], p[1] - q[1]))


def project_ellipse(a: float, e: float, I: float, omega: float,
                    Omega: float) -> EllipseGeometry:
    """
    Project an orbit ellipse onto the ecliptic plane.

    Three orbital plane reference points are rotated into the ecliptic:
    the center O = (-c, 0, 0), the perihelion end of the major axis
    A = (a - c, 0, 0) and the end of the minor axis B = (-c, b, 0),
    with c = e*a and b = sqrt(a² - c²). Lengths are measured after
    dropping the z component.

    Parameters
    ----------
    a : float
        Semi-major axis [AU]
    e : float
        Eccentricity
    I, omega, Omega : float
        Inclination, argument of perihelion, ascending node [deg]

    Returns
    -------
    EllipseGeometry
    """
    c = e*a
    b = np.sqrt(a*a - c*c)
    O = to_ecliptic([-c, 0.0, 0.0], I, omega, Omega)
    A = to_ecliptic([a - c, 0.0, 0.0], I, omega, Omega)
    B = to_ecliptic([-c, b, 0.0], I, omega, Omega)
    theta = normalize_angle(float(np.degrees(np.arctan2(A[1] - O[1], A[0] - O[0]))))
    return EllipseGeometry(
        rx=_planar_distance(A, O),
        ry=_planar_distance(B, O),
        dx=_planar_distance(O, (0.0, 0.0)),
        theta=theta,
    )


def project_ellipse_from(elements: "PropagatedElements") -> EllipseGeometry:
    """Shortcut for project_ellipse with the fields of PropagatedElements"""
    return project_ellipse(elements.a, elements.e, elements.I,
                           elements.omega, elements.Omega)
