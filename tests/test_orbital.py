"""
Tests for aerocalc.orbital

ISS-like 400 km orbit: v ≈ 7.67 km/s, T ≈ 92.4 min.
400 km → GEO (35 786 km) Hohmann: Δv ≈ 2.40 + 1.46 km/s, ≈ 5.3 h.
"""

import logging
import pytest
from aerocalc.orbital import (
    R_EARTH, circular_orbit, circular_velocity, hohmann_transfer,
)


class TestCircularOrbit:
    def test_leo(self):
        orb = circular_orbit(400.0)
        assert orb.radius == pytest.approx(R_EARTH + 400e3)
        assert orb.velocity == pytest.approx(7672.0, rel=1e-3)
        assert orb.period / 60.0 == pytest.approx(92.4, rel=1e-3)

    def test_small_negative_clamped(self, caplog):
        with caplog.at_level(logging.WARNING, logger="aerocalc.orbital"):
            orb = circular_orbit(-0.5)
        assert orb.altitude_km == 0.0
        assert "negative" in caplog.text

    def test_below_centre_rejected(self):
        with pytest.raises(ValueError):
            circular_orbit(-7000.0)


class TestHohmann:
    @pytest.fixture
    def leo_to_geo(self):
        return hohmann_transfer(400.0, 35786.0)

    def test_burns(self, leo_to_geo):
        assert leo_to_geo.delta_v1 == pytest.approx(2399.0, rel=1e-2)
        assert leo_to_geo.delta_v2 == pytest.approx(1457.0, rel=1e-2)
        assert leo_to_geo.delta_v_total == pytest.approx(
            leo_to_geo.delta_v1 + leo_to_geo.delta_v2)

    def test_transfer_time(self, leo_to_geo):
        assert leo_to_geo.transfer_time / 3600.0 == pytest.approx(5.29, rel=1e-2)
        assert leo_to_geo.transfer_sma == pytest.approx(
            0.5 * (leo_to_geo.initial_radius + leo_to_geo.final_radius))

    def test_lowering_is_symmetric(self, leo_to_geo):
        down = hohmann_transfer(35786.0, 400.0)
        assert down.delta_v_total == pytest.approx(leo_to_geo.delta_v_total)
        assert down.transfer_time == pytest.approx(leo_to_geo.transfer_time)

    def test_first_burn_reaches_transfer_periapsis(self, leo_to_geo):
        v1 = circular_velocity(leo_to_geo.initial_radius)
        assert leo_to_geo.delta_v1 == pytest.approx(10071.8 - v1, rel=1e-3)

    def test_same_orbit_rejected(self):
        with pytest.raises(ValueError, match="same"):
            hohmann_transfer(500.0, 500.0)
