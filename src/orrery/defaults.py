"""
Planetary Element Table
=======================

Mean orbital elements of the major planets referred to the J2000.0 mean
ecliptic and equinox, with linear rates per Julian century, valid for
3000 BC to AD 3000.

Values taken from E.M. Standish, "Keplerian Elements for Approximate
Positions of the Major Planets", JPL Solar System Dynamics, Tables 2a
(elements and rates) and 2b (additional terms for the mean anomaly of
Jupiter through Neptune).

Earth is represented by the Earth-Moon barycenter.

Examples
--------
>>> from orrery.defaults import ELEMENT_TABLE, CORRECTIONS
>>> ELEMENT_TABLE['mars'].base.a
1.52371243
>>> CORRECTIONS['mars'] is None
True
"""
from typing import Dict, Optional
from .orbital_elements import ElementRecord, OrbitalElementSet, CorrectionTerm

"""
Elements and rates, Table 2a
Units: a [AU], e [-], I, L, pi, Omega [deg]; rates per Julian century
"""

MERCURY = OrbitalElementSet(
    base=ElementRecord(a=0.38709843, e=0.20563661, I=7.00559432,
                       L=252.25166724, pi=77.45771895, Omega=48.33961819),
    rate=ElementRecord(a=0.00000000, e=0.00002123, I=-0.00590158,
                       L=149472.67486623, pi=0.15940013, Omega=-0.12214182),
)

VENUS = OrbitalElementSet(
    base=ElementRecord(a=0.72332102, e=0.00676399, I=3.39777545,
                       L=181.97970850, pi=131.76755713, Omega=76.67261496),
    rate=ElementRecord(a=-0.00000026, e=-0.00005107, I=0.00043494,
                       L=58517.81560260, pi=0.05679648, Omega=-0.27274174),
)

EARTH_MOON = OrbitalElementSet(
    base=ElementRecord(a=1.00000018, e=0.01673163, I=-0.00054346,
                       L=100.46691572, pi=102.93005885, Omega=-5.11260389),
    rate=ElementRecord(a=-0.00000003, e=-0.00003661, I=-0.01337178,
                       L=35999.37306329, pi=0.31795260, Omega=-0.24123856),
)

MARS = OrbitalElementSet(
    base=ElementRecord(a=1.52371243, e=0.09336511, I=1.85181869,
                       L=-4.56813164, pi=-23.91744784, Omega=49.71320984),
    rate=ElementRecord(a=0.00000097, e=0.00009149, I=-0.00724757,
                       L=19140.29934243, pi=0.45223625, Omega=-0.26852431),
)

JUPITER = OrbitalElementSet(
    base=ElementRecord(a=5.20248019, e=0.04853590, I=1.29861416,
                       L=34.33479152, pi=14.27495244, Omega=100.29282654),
    rate=ElementRecord(a=-0.00002864, e=0.00018026, I=-0.00322699,
                       L=3034.90371757, pi=0.18199196, Omega=0.13024619),
)

SATURN = OrbitalElementSet(
    base=ElementRecord(a=9.54149883, e=0.05550825, I=2.49424102,
                       L=50.07571329, pi=92.86136063, Omega=113.63998702),
    rate=ElementRecord(a=-0.00003065, e=-0.00032044, I=0.00451969,
                       L=1222.11494724, pi=0.54179478, Omega=-0.25015002),
)

URANUS = OrbitalElementSet(
    base=ElementRecord(a=19.18797948, e=0.04685740, I=0.77298127,
                       L=314.20276625, pi=172.43404441, Omega=73.96250215),
    rate=ElementRecord(a=-0.00020455, e=-0.00001550, I=-0.00180155,
                       L=428.49512595, pi=0.09266985, Omega=0.05739699),
)

NEPTUNE = OrbitalElementSet(
    base=ElementRecord(a=30.06952752, e=0.00895439, I=1.77005520,
                       L=304.22289287, pi=46.68158724, Omega=131.78635853),
    rate=ElementRecord(a=0.00006447, e=0.00000818, I=0.00022400,
                       L=218.46515314, pi=0.01009938, Omega=-0.00606302),
)

# Supported planet identifiers, ordered by distance from the Sun
ELEMENT_TABLE: Dict[str, OrbitalElementSet] = {
    'mercury': MERCURY,
    'venus': VENUS,
    'earth_moon': EARTH_MOON,
    'mars': MARS,
    'jupiter': JUPITER,
    'saturn': SATURN,
    'uranus': URANUS,
    'neptune': NEPTUNE,
}

"""
Mean anomaly corrections, Table 2b
M += b*T² + c*cos(f*T) + s*sin(f*T), f in degrees per century
"""

CORRECTIONS: Dict[str, Optional[CorrectionTerm]] = {
    'mercury': None,
    'venus': None,
    'earth_moon': None,
    'mars': None,
    'jupiter': CorrectionTerm(b=-0.00012452, c=0.06064060,
                              s=-0.35635438, f=38.35125000),
    'saturn': CorrectionTerm(b=0.00025899, c=-0.13434469,
                             s=0.87320147, f=38.35125000),
    'uranus': CorrectionTerm(b=0.00058331, c=-0.97731848,
                             s=0.17689245, f=7.67025000),
    'neptune': CorrectionTerm(b=-0.00041348, c=0.68346318,
                              s=-0.10162547, f=7.67025000),
}
