"""
Test suite for the Kepler equation solver.

Tests cover:
- Special values (M = 0, M = 180, circular orbits)
- Residual of Kepler's equation over a grid of M and e
- True anomaly from eccentric anomaly
- Iteration cap and eccentricity validation
"""

import pytest
import numpy as np
from orrery import (solve_kepler, true_anomaly, anomalies, AnomalyTriple,
                    NonConvergence, temp_config)


ECCENTRICITIES = [0.0, 0.0167, 0.2056, 0.5, 0.9, 0.99]
MEAN_ANOMALIES = [0.0, 0.5, 45.0, 90.0, 179.9, 180.0, 181.0, 270.0, 359.99]


class TestSolveKepler:
    """Eccentric anomaly from mean anomaly."""

    @pytest.mark.parametrize("e", ECCENTRICITIES)
    def test_zero_mean_anomaly(self, e):
        """M = 0 implies E = 0."""
        assert solve_kepler(0.0, e) == pytest.approx(0.0, abs=1e-9)

    @pytest.mark.parametrize("e", ECCENTRICITIES)
    def test_half_orbit(self, e):
        """M = 180 implies E = 180."""
        assert solve_kepler(180.0, e) == pytest.approx(180.0, abs=1e-9)

    @pytest.mark.parametrize("M", MEAN_ANOMALIES)
    def test_circular_orbit(self, M):
        """E = M when e = 0."""
        assert solve_kepler(M, 0.0) == pytest.approx(M, abs=1e-9)

    @pytest.mark.parametrize("e", ECCENTRICITIES)
    @pytest.mark.parametrize("M", MEAN_ANOMALIES)
    def test_residual(self, M, e):
        """Kepler's equation holds at convergence (in radians)."""
        E = np.radians(solve_kepler(M, e))
        residual = E - e*np.sin(E) - np.radians(M)
        assert abs(residual) < 1e-6

    @pytest.mark.parametrize("e", [0.1, 0.5, 0.9])
    def test_monotonic_in_mean_anomaly(self, e):
        values = [solve_kepler(M, e) for M in np.linspace(0, 359, 60)]
        assert np.all(np.diff(values) > 0)

    def test_tighter_tolerance(self):
        E = np.radians(solve_kepler(30.0, 0.7, tol=1e-14))
        assert E - 0.7*np.sin(E) == pytest.approx(np.radians(30.0), abs=1e-14)

    def test_tolerance_from_config(self):
        with temp_config(KEPLER_TOL=1e-13):
            E = np.radians(solve_kepler(30.0, 0.7))
        assert E - 0.7*np.sin(E) == pytest.approx(np.radians(30.0), abs=1e-13)


class TestNonConvergence:
    """Iteration cap."""

    def test_cap_from_config(self):
        with temp_config(KEPLER_MAX_ITER=1):
            with pytest.raises(NonConvergence, match="did not converge"):
                solve_kepler(45.0, 0.2)

    def test_cap_argument(self):
        with pytest.raises(NonConvergence):
            solve_kepler(45.0, 0.2, max_iter=2)

    def test_is_runtime_error(self):
        with pytest.raises(RuntimeError):
            solve_kepler(10.0, 0.9, max_iter=1)

    def test_default_cap_is_enough(self):
        """Documented eccentricities converge well within the cap."""
        solve_kepler(0.01, 0.99, max_iter=100)


class TestEccentricityValidation:
    """Only elliptic orbits are accepted."""

    @pytest.mark.parametrize("e", [-0.1, 1.0, 1.5])
    def test_rejects_non_elliptic(self, e):
        with pytest.raises(ValueError, match="0 <= e < 1"):
            solve_kepler(10.0, e)

    def test_true_anomaly_rejects_parabolic(self):
        with pytest.raises(ValueError):
            true_anomaly(10.0, 1.0)


class TestTrueAnomaly:
    """True anomaly from eccentric anomaly."""

    @pytest.mark.parametrize("E", [0.0, 30.0, 90.0, 150.0, -60.0])
    def test_circular(self, E):
        assert true_anomaly(E, 0.0) == pytest.approx(E)

    def test_perihelion(self):
        assert true_anomaly(0.0, 0.5) == 0.0

    def test_aphelion(self):
        assert true_anomaly(180.0, 0.3) == pytest.approx(180.0)

    def test_ahead_of_eccentric_anomaly(self):
        """Between perihelion and aphelion v > E for e > 0."""
        assert true_anomaly(60.0, 0.4) > 60.0

    def test_second_half_of_orbit(self):
        """E past 180 gives a negative true anomaly (not normalized)."""
        v = true_anomaly(270.0, 0.2)
        assert -180 < v < 0

    @pytest.mark.parametrize("E, e", [(40.0, 0.1), (100.0, 0.6), (200.0, 0.3)])
    def test_geometric_identity(self, E, e):
        """cos v = (cos E - e)/(1 - e cos E)."""
        v = np.radians(true_anomaly(E, e))
        E_rad = np.radians(E)
        assert np.cos(v) == pytest.approx((np.cos(E_rad) - e)/(1 - e*np.cos(E_rad)))


class TestAnomalies:
    """Chained anomaly computation."""

    def test_sequence(self):
        triple = anomalies(75.0, 0.25)
        assert isinstance(triple, AnomalyTriple)
        assert triple.M == 75.0
        assert triple.E == solve_kepler(75.0, 0.25)
        assert triple.v == true_anomaly(triple.E, 0.25)

    def test_unpacking(self):
        M, E, v = anomalies(10.0, 0.1)
        assert M < E < v
