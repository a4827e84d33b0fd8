"""
Orrery: Heliocentric Planet Positions from Mean Orbital Elements

A Python package computing heliocentric positions of the major planets from
low-precision mean orbital elements, and the projection of their orbits onto
the ecliptic plane for 2D drawing.
"""

# Configuration
from .config import config, temp_config

# Errors
from .utils import OrreryError, InvalidDate, UnknownPlanet, NonConvergence

# Time conversion
from .timescale import (julian_day, julian_centuries, centuries_from_date,
                        unix_to_centuries, datetime_to_centuries,
                        is_leap_year, days_in_month, validate_date)

# Core computation
from .orbital_elements import (ElementRecord, OrbitalElementSet, CorrectionTerm,
                               PropagatedElements, propagate_elements)
from .kepler import AnomalyTriple, solve_kepler, true_anomaly, anomalies
from .frames import (Position, rotation_matrix, orbital_position, to_ecliptic,
                     from_ecliptic, heliocentric_longitude, heliocentric_latitude)
from .ellipse import EllipseGeometry, project_ellipse
from .planet import (PLANETS, PlanetState, propagate, planet_state,
                     state_on_date, orbit_geometry)
from .solar_system import SolarSystem, Snapshot

# Package metadata
__version__ = "0.1.0"

# Define what gets imported with "from orrery import *"
__all__ = [
    # Configuration
    "config",
    "temp_config",
    # Errors
    "OrreryError",
    "InvalidDate",
    "UnknownPlanet",
    "NonConvergence",
    # Time conversion
    "julian_day",
    "julian_centuries",
    "centuries_from_date",
    "unix_to_centuries",
    "datetime_to_centuries",
    "is_leap_year",
    "days_in_month",
    "validate_date",
    # Classes
    "ElementRecord",
    "OrbitalElementSet",
    "CorrectionTerm",
    "PropagatedElements",
    "AnomalyTriple",
    "Position",
    "EllipseGeometry",
    "PlanetState",
    "SolarSystem",
    "Snapshot",
    # Functions
    "propagate_elements",
    "solve_kepler",
    "true_anomaly",
    "anomalies",
    "rotation_matrix",
    "orbital_position",
    "to_ecliptic",
    "from_ecliptic",
    "heliocentric_longitude",
    "heliocentric_latitude",
    "project_ellipse",
    "propagate",
    "planet_state",
    "state_on_date",
    "orbit_geometry",
    # Constants
    "PLANETS",
]
