"""Smoke tests to verify package imports work."""

def test_package_imports():
    """Test that all main classes can be imported."""
    from orrery import PropagatedElements, PlanetState, SolarSystem, EllipseGeometry
    assert PropagatedElements is not None
    assert PlanetState is not None
    assert SolarSystem is not None
    assert EllipseGeometry is not None

def test_version_exists():
    """Test that version is defined."""
    import orrery
    assert hasattr(orrery, '__version__')
    assert orrery.__version__ == "0.1.0"

def test_can_propagate_planet():
    """Test basic propagation."""
    from orrery import propagate
    elements = propagate('mars', 0.0)
    assert elements.a == 1.52371243

def test_can_create_snapshot():
    """Test basic SolarSystem snapshot."""
    from orrery import SolarSystem, PLANETS
    snap = SolarSystem().at(0.0)
    assert len(snap) == len(PLANETS) == 8

def test_display_is_separate():
    """Display layer imports on its own and is not pulled in by the package."""
    import orrery
    from orrery.display import DISPLAY_STYLES
    assert 'earth_moon_inner' in DISPLAY_STYLES
    assert not hasattr(orrery, 'DISPLAY_STYLES')
