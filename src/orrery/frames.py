'''Orrery coordinate frames
Orbital plane <-> heliocentric ecliptic transformations and the derived
heliocentric longitude and latitude'''

import numpy as np
from dataclasses import dataclass
from typing import TYPE_CHECKING
from .config import config
from .utils import normalize_angle

if TYPE_CHECKING:
    from .orbital_elements import PropagatedElements


def _readonly(vec) -> np.ndarray:
    arr = np.array(vec, dtype=float)
    arr.flags.writeable = False
    return arr


def rotation_matrix(I: float, omega: float, Omega: float) -> np.ndarray:
    """
    Orbital plane to ecliptic rotation Rz(-Omega) @ Rx(-I) @ Rz(-omega).

    Parameters
    ----------
    I : float
        Inclination [deg]
    omega : float
        Argument of perihelion [deg]
    Omega : float
        Longitude of the ascending node [deg]

    Returns
    -------
    np.ndarray
        Read-only 3x3 orthogonal matrix
    """
    cos_I, sin_I = np.cos(np.radians(I)), np.sin(np.radians(I))
    cos_w, sin_w = np.cos(np.radians(omega)), np.sin(np.radians(omega))
    cos_O, sin_O = np.cos(np.radians(Omega)), np.sin(np.radians(Omega))

    R = np.array([
        [cos_w*cos_O - cos_I*sin_w*sin_O, -cos_O*sin_w - cos_I*cos_w*sin_O,  sin_I*sin_O],
        [cos_I*cos_O*sin_w + cos_w*sin_O,  cos_I*cos_w*cos_O - sin_w*sin_O, -cos_O*sin_I],
        [sin_I*sin_w,                      cos_w*sin_I,                      cos_I      ]
    ])
    R.flags.writeable = False
    return R


def orbital_position(v: float, a: float, e: float) -> np.ndarray:
    """
    Position in the orbital plane, x axis towards perihelion [AU].

    r = a(1 - e²)/(1 + e*cos v); z is always 0
    """
    v_rad = np.radians(v)
    r = a*(1 - e**2) / (1 + e*np.cos(v_rad))
    return _readonly([r*np.cos(v_rad), r*np.sin(v_rad), 0.0])


def to_ecliptic(point, I: float, omega: float, Omega: float) -> np.ndarray:
    """Rotate an orbital plane point into heliocentric ecliptic coordinates"""
    return _readonly(rotation_matrix(I, omega, Omega) @ np.asarray(point, dtype=float))


def from_ecliptic(point, I: float, omega: float, Omega: float) -> np.ndarray:
    """Inverse of to_ecliptic (the rotation is orthogonal, so use its transpose)"""
    return _readonly(rotation_matrix(I, omega, Omega).T @ np.asarray(point, dtype=float))


def heliocentric_longitude(point) -> float:
    """Ecliptic longitude of a heliocentric point, in [0, 360) [deg]"""
    x, y, _ = point
    return normalize_angle(float(np.degrees(np.arctan2(y, x))))


def heliocentric_latitude(point) -> float:
    """
    Ecliptic latitude of a heliocentric point [deg].

    Undefined when x = y = 0, which a planet with a > 0 never reaches.
    """
    x, y, z = point
    return float(np.degrees(np.arctan(z / np.sqrt(x*x + y*y))))


@dataclass(frozen=True, eq=False)
class Position:
    """
    Heliocentric position of a body.

    Attributes
    ----------
    orbital_coordinate : np.ndarray
        Orbital plane coordinates [AU] (z = 0)
    ecliptic_coordinate : np.ndarray
        Heliocentric ecliptic coordinates [AU]
    heliocentric_longitude : float
        [deg], in [0, 360)
    heliocentric_latitude : float
        [deg]
    """
    orbital_coordinate: np.ndarray
    ecliptic_coordinate: np.ndarray
    heliocentric_longitude: float
    heliocentric_latitude: float

    @property
    def distance(self) -> float:
        """Heliocentric distance [AU]"""
        return float(np.linalg.norm(self.ecliptic_coordinate))

    def __eq__(self, other):
        #Equal within config.EQUALITY_RTOL / EQUALITY_ATOL
        if not isinstance(other, Position):
            return NotImplemented
        mine = np.concatenate([self.orbital_coordinate, self.ecliptic_coordinate,
                               [self.heliocentric_longitude, self.heliocentric_latitude]])
        theirs = np.concatenate([other.orbital_coordinate, other.ecliptic_coordinate,
                                 [other.heliocentric_longitude, other.heliocentric_latitude]])
        return bool(np.allclose(mine, theirs, rtol=config.EQUALITY_RTOL,
                                atol=config.EQUALITY_ATOL))


def position(elements: "PropagatedElements", v: float) -> Position:
    """Heliocentric position for propagated elements at true anomaly v [deg]"""
    oc = orbital_position(v, elements.a, elements.e)
    ec = to_ecliptic(oc, elements.I, elements.omega, elements.Omega)
    return Position(
        orbital_coordinate=oc,
        ecliptic_coordinate=ec,
        heliocentric_longitude=heliocentric_longitude(ec),
        heliocentric_latitude=heliocentric_latitude(ec),
    )
