'''Orrery planet facade
Planet lookup, element propagation and full heliocentric state of a planet
at a given time'''

import numpy as np
from dataclasses import dataclass
from typing import Optional, Dict, Any
from .defaults import ELEMENT_TABLE, CORRECTIONS
from .orbital_elements import (OrbitalElementSet, CorrectionTerm,
                               PropagatedElements, propagate_elements)
from .kepler import anomalies
from .frames import position
from .ellipse import EllipseGeometry, project_ellipse_from
from .timescale import centuries_from_date
from .config import config
from .utils import UnknownPlanet

PLANETS = tuple(ELEMENT_TABLE)


def resolve_planet(planet: str) -> str:
    """Normalize an identifier and check it is supported"""
    key = planet.strip().lower() if isinstance(planet, str) else None
    if key not in ELEMENT_TABLE:
        raise UnknownPlanet(
            f"Unknown planet {planet!r}. Use one of: {list(PLANETS)}")
    return key


def get_element_set(planet: str) -> OrbitalElementSet:
    """Base elements and rates for a planet"""
    return ELEMENT_TABLE[resolve_planet(planet)]


def get_correction(planet: str) -> Optional[CorrectionTerm]:
    """Mean anomaly correction for a planet, None if it has none"""
    return CORRECTIONS.get(resolve_planet(planet))


def propagate(planet: str, T: float) -> PropagatedElements:
    """
    Orbital elements of a planet at time T.

    Parameters
    ----------
    planet : str
        Planet identifier, one of PLANETS (case-insensitive)
    T : float
        Julian centuries since J2000.0

    Returns
    -------
    PropagatedElements

    Raises
    ------
    UnknownPlanet
        If the identifier is not supported
    """
    key = resolve_planet(planet)
    return propagate_elements(ELEMENT_TABLE[key], T, CORRECTIONS.get(key))


@dataclass(frozen=True, eq=False)
class PlanetState:
    """
    Heliocentric state of a planet at one time.

    Holds the propagated elements (a, e, I, L, pi, omega, Omega, M),
    the anomalies (M, E, v), the position and optionally the projected
    orbit geometry. Angles are in degrees, lengths in AU, all referred
    to the J2000.0 ecliptic and equinox.
    """
    planet: str
    T: float
    a: float
    e: float
    I: float
    L: float
    pi: float
    omega: float
    Omega: float
    M: float
    E: float
    v: float
    orbital_coordinate: np.ndarray
    ecliptic_coordinate: np.ndarray
    heliocentric_longitude: float
    heliocentric_latitude: float
    orbit: Optional[EllipseGeometry] = None

    @property
    def distance(self) -> float:
        """Heliocentric distance [AU]"""
        return float(np.linalg.norm(self.ecliptic_coordinate))

    def as_dict(self) -> Dict[str, Any]:
        """Flat mapping of scalar values (coordinates split into components)"""
        oc = self.orbital_coordinate
        ec = self.ecliptic_coordinate
        data = {
            'T': self.T,
            'a': self.a, 'e': self.e, 'I': self.I, 'L': self.L,
            'pi': self.pi, 'omega': self.omega, 'Omega': self.Omega,
            'M': self.M, 'E': self.E, 'v': self.v,
            'oc_x': float(oc[0]), 'oc_y': float(oc[1]), 'oc_z': float(oc[2]),
            'ec_x': float(ec[0]), 'ec_y': float(ec[1]), 'ec_z': float(ec[2]),
            'hL': self.heliocentric_longitude,
            'hB': self.heliocentric_latitude,
        }
        if self.orbit is not None:
            data.update({
                'orbit_rx': self.orbit.rx,
                'orbit_ry': self.orbit.ry,
                'orbit_dx': self.orbit.dx,
                'orbit_theta': self.orbit.theta,
            })
        return data

    def __eq__(self, other):
        #Same planet and same values within config.EQUALITY_RTOL / EQUALITY_ATOL
        if not isinstance(other, PlanetState):
            return NotImplemented
        mine, theirs = self.as_dict(), other.as_dict()
        if self.planet != other.planet or mine.keys() != theirs.keys():
            return False
        return bool(np.allclose(list(mine.values()), list(theirs.values()),
                                rtol=config.EQUALITY_RTOL,
                                atol=config.EQUALITY_ATOL))

    def __repr__(self):
        #Machine-readable representation
        return (f"PlanetState({self.planet!r}, T={self.T!r}, "
                f"hL={self.heliocentric_longitude:.6f}, "
                f"hB={self.heliocentric_latitude:.6f}, r={self.distance:.6f})")

    def __str__(self):
        #Human-readable representation
        x, y, z = self.ecliptic_coordinate
        return (f"{self.planet} at T = {self.T:+.8f} cy:\n"
                f"  M  = {self.M:12.6f}°  E = {self.E:12.6f}°  v = {self.v:12.6f}°\n"
                f"  ec = [{x:12.8f}, {y:12.8f}, {z:12.8f}] AU\n"
                f"  hL = {self.heliocentric_longitude:12.6f}°\n"
                f"  hB = {self.heliocentric_latitude:12.6f}°")


def planet_state(planet: str, T: float, with_orbit: bool = False) -> PlanetState:
    """
    Full heliocentric state of a planet at time T.

    Parameters
    ----------
    planet : str
        Planet identifier, one of PLANETS (case-insensitive)
    T : float
        Julian centuries since J2000.0
    with_orbit : bool, optional
        Also compute the projected orbit ellipse (default False)

    Returns
    -------
    PlanetState
    """
    key = resolve_planet(planet)
    elements = propagate(key, T)
    M, E, v = anomalies(elements.M, elements.e)
    pos = position(elements, v)
    return PlanetState(
        planet=key, T=T,
        a=elements.a, e=elements.e, I=elements.I, L=elements.L,
        pi=elements.pi, omega=elements.omega, Omega=elements.Omega,
        M=M, E=E, v=v,
        orbital_coordinate=pos.orbital_coordinate,
        ecliptic_coordinate=pos.ecliptic_coordinate,
        heliocentric_longitude=pos.heliocentric_longitude,
        heliocentric_latitude=pos.heliocentric_latitude,
        orbit=project_ellipse_from(elements) if with_orbit else None,
    )


def state_on_date(planet: str, year: int, month: int, day: int,
                  with_orbit: bool = False) -> PlanetState:
    """Heliocentric state of a planet at noon of a Gregorian date"""
    return planet_state(planet, centuries_from_date(year, month, day),
                        with_orbit=with_orbit)


def orbit_geometry(planet: str, T: float) -> EllipseGeometry:
    """Projected orbit ellipse of a planet at time T"""
    return project_ellipse_from(propagate(planet, T))
