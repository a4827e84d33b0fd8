'''Orrery solar system snapshots
State of every planet at one time, with export to pandas'''

import numpy as np
import pandas as pd
from datetime import datetime
from typing import Dict, Iterable, Iterator, Optional, Tuple
from .planet import PLANETS, PlanetState, planet_state, resolve_planet
from .timescale import centuries_from_date, datetime_to_centuries


class Snapshot:
    """
    States of a group of planets at a single time.

    Behaves as a read-only mapping-like collection: index by planet
    identifier, iterate over states in heliocentric order.
    """
    def __init__(self, T: float, states: Iterable[PlanetState]):
        self._T = T
        self._states: Dict[str, PlanetState] = {s.planet: s for s in states}

    @property
    def T(self) -> float:
        """Julian centuries since J2000.0"""
        return self._T

    @property
    def planets(self) -> Tuple[str, ...]:
        """Planet identifiers in this snapshot"""
        return tuple(self._states)

    def positions(self) -> np.ndarray:
        """Ecliptic coordinates of all planets, shape (n_planets, 3) [AU]"""
        return np.array([s.ecliptic_coordinate for s in self._states.values()])

    def to_dataframe(self) -> pd.DataFrame:
        """
        Export the snapshot to a pandas DataFrame.

        Returns
        -------
        pd.DataFrame
            One row per planet, indexed by planet identifier, with the
            columns of PlanetState.as_dict()
        """
        if not self._states:
            return pd.DataFrame()
        df = pd.DataFrame([s.as_dict() for s in self._states.values()],
                          index=pd.Index(self.planets, name='planet'))
        return df

    # ========== SPECIAL METHODS ==========
    def __getitem__(self, planet: str) -> PlanetState:
        return self._states[resolve_planet(planet)]

    def __contains__(self, planet) -> bool:
        return isinstance(planet, str) and planet.strip().lower() in self._states

    def __iter__(self) -> Iterator[PlanetState]:
        return iter(self._states.values())

    def __len__(self):
        return len(self._states)

    def __repr__(self):
        return f"Snapshot(T={self._T!r}, planets={list(self._states)})"


class SolarSystem:
    """
    Evaluates a fixed group of planets at arbitrary times.

    Parameters
    ----------
    planets : str or iterable of str, optional
        Planet identifier(s) to include (default: all of PLANETS)
    with_orbits : bool, optional
        Compute the projected orbit ellipse for every planet (default True)

    Examples
    --------
    >>> from orrery import SolarSystem
    >>> snap = SolarSystem().on_date(2024, 3, 20)
    >>> snap['mars'].heliocentric_longitude
    >>> df = snap.to_dataframe()
    """
    def __init__(self, planets: Optional[Iterable[str]] = None,
                 with_orbits: bool = True):
        if planets is None:
            planets = PLANETS
        elif isinstance(planets, str):
            planets = (planets,)
        # keep table order, drop duplicates
        keys = {resolve_planet(p) for p in planets}
        self._planets = tuple(p for p in PLANETS if p in keys)
        self._with_orbits = with_orbits

    @property
    def planets(self) -> Tuple[str, ...]:
        return self._planets

    def at(self, T: float) -> Snapshot:
        """Snapshot at T Julian centuries since J2000.0"""
        return Snapshot(T, (planet_state(p, T, with_orbit=self._with_orbits)
                            for p in self._planets))

    def on_date(self, year: int, month: int, day: int) -> Snapshot:
        """Snapshot at noon of a Gregorian date"""
        return self.at(centuries_from_date(year, month, day))

    def at_datetime(self, dt: datetime) -> Snapshot:
        """Snapshot at a datetime (naive values are taken as UTC)"""
        return self.at(datetime_to_centuries(dt))

    def __repr__(self):
        return f"SolarSystem(planets={list(self._planets)})"
