'''Orrery orbital element types
Mean orbital elements with linear secular rates, outer planet mean anomaly
corrections, and propagation of the elements to a given time'''

import numpy as np
from dataclasses import dataclass, fields
from typing import Optional
from .utils import normalize_angle


@dataclass(frozen=True)
class ElementRecord:
    """
    Immutable set of six mean orbital elements (or their rates).

    Attributes
    ----------
    a : float
        Semi-major axis [AU]
    e : float
        Eccentricity [dimensionless]
    I : float
        Inclination to the ecliptic [deg]
    L : float
        Mean longitude [deg]
    pi : float
        Longitude of perihelion [deg]
    Omega : float
        Longitude of the ascending node [deg]

    When used as a rate, every field is the change per Julian century.
    """
    a: float
    e: float
    I: float
    L: float
    pi: float
    Omega: float

    def __iter__(self):
        #Allow unpacking like a, e, I, L, pi, Omega = record
        return iter(getattr(self, f.name) for f in fields(self))


@dataclass(frozen=True)
class OrbitalElementSet:
    """
    Base elements at J2000.0 plus their linear rates per Julian century.

    The table values keep a > 0 and 0 <= e < 1 over the supported date
    range; nothing here checks it.
    """
    base: ElementRecord
    rate: ElementRecord

    def at(self, T: float) -> ElementRecord:
        """Elements evaluated as base + rate*T (no normalization)"""
        return ElementRecord(*(b + r*T for b, r in zip(self.base, self.rate)))


@dataclass(frozen=True)
class CorrectionTerm:
    """
    Mean anomaly correction for the outer planets.

    correction(T) = b*T² + c*cos(f*T) + s*sin(f*T), with f*T in degrees
    """
    b: float
    c: float
    s: float
    f: float

    def evaluate(self, T: float) -> float:
        """Correction to add to the mean anomaly at time T [deg]"""
        fT = np.radians(self.f*T)
        return float(self.b*T*T + self.c*np.cos(fT) + self.s*np.sin(fT))


@dataclass(frozen=True)
class PropagatedElements:
    """
    Orbital elements evaluated at a specific time.

    Attributes
    ----------
    T : float
        Julian centuries since J2000.0
    a, e, I, pi, Omega : float
        Elements at T (angles in degrees, not normalized)
    L : float
        Mean longitude at T, normalized to [0, 360) [deg]
    omega : float
        Argument of perihelion, pi - Omega (not normalized) [deg]
    M : float
        Mean anomaly including any correction term, in [0, 360) [deg]
    """
    T: float
    a: float
    e: float
    I: float
    L: float
    pi: float
    Omega: float
    omega: float
    M: float

    def __str__(self):
        #Human-readable representation
        return (f"Propagated Elements (T = {self.T:+.8f} cy):\n"
                f"  a     = {self.a:12.8f} AU\n"
                f"  e     = {self.e:12.8f}\n"
                f"  I     = {self.I:12.6f}°\n"
                f"  L     = {self.L:12.6f}°\n"
                f"  pi    = {self.pi:12.6f}°\n"
                f"  Omega = {self.Omega:12.6f}°\n"
                f"  omega = {self.omega:12.6f}°\n"
                f"  M     = {self.M:12.6f}°")


def mean_anomaly(L: float, pi: float) -> float:
    """Uncorrected mean anomaly M = L - pi [deg]"""
    return L - pi


def propagate_elements(element_set: OrbitalElementSet, T: float,
                       correction: Optional[CorrectionTerm] = None
                       ) -> PropagatedElements:
    """
    Evaluate an element set at time T.

    Parameters
    ----------
    element_set : OrbitalElementSet
        Base elements and rates
    T : float
        Julian centuries since J2000.0
    correction : CorrectionTerm, optional
        Mean anomaly correction (outer planets only)

    Returns
    -------
    PropagatedElements
    """
    a, e, I, L, pi, Omega = element_set.at(T)
    L = normalize_angle(L)
    omega = pi - Omega
    M = mean_anomaly(L, pi)
    if correction is not None:
        M += correction.evaluate(T)
    M = normalize_angle(M)
    return PropagatedElements(T=T, a=a, e=e, I=I, L=L, pi=pi,
                              Omega=Omega, omega=omega, M=M)
