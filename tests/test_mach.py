"""
Tests for aerocalc.mach
"""

import pytest
from aerocalc.atmosphere import IsaInputError, speed_of_sound
from aerocalc.mach import mach_number, airspeed_from_mach, flight_regime


class TestMachNumber:
    def test_sonic_at_sea_level(self):
        a0 = speed_of_sound(288.15)
        res = mach_number(a0, 0.0)
        assert res.mach == pytest.approx(1.0)
        assert res.regime == "Supersonic"
        assert res.is_supersonic
        assert not res.is_subsonic

    def test_temperatures_reported(self):
        res = mach_number(100.0, 0.0)
        assert res.temperature == pytest.approx(288.15)
        assert res.temperature_c == pytest.approx(15.0)
        assert res.temperature_f == pytest.approx(59.0)

    def test_speed_of_sound_drops_with_altitude(self):
        low = mach_number(250.0, 0.0)
        high = mach_number(250.0, 11000.0)
        assert high.speed_of_sound == pytest.approx(295.07, abs=0.05)
        assert high.mach > low.mach

    def test_negative_airspeed(self):
        with pytest.raises(ValueError):
            mach_number(-1.0, 0.0)

    def test_altitude_out_of_model_range(self):
        with pytest.raises(IsaInputError):
            mach_number(200.0, 90000.0)


class TestAirspeedFromMach:
    def test_cruise(self):
        """M 0.85 at 10 km: T = 223.15 K, a ≈ 299.5 m/s."""
        res = airspeed_from_mach(0.85, 10000.0)
        assert res.temperature == pytest.approx(223.15)
        assert res.speed_of_sound == pytest.approx(299.5, abs=0.1)
        assert res.airspeed == pytest.approx(0.85 * res.speed_of_sound)
        assert res.regime == "Transonic"

    def test_roundtrip(self):
        v = airspeed_from_mach(2.2, 15000.0).airspeed
        assert mach_number(v, 15000.0).mach == pytest.approx(2.2)

    def test_negative_mach(self):
        with pytest.raises(ValueError):
            airspeed_from_mach(-0.1, 0.0)


class TestRegimes:
    @pytest.mark.parametrize("M,label", [
        (0.0, "Subsonic"), (0.79, "Subsonic"), (0.8, "Transonic"),
        (1.0, "Supersonic"), (3.0, "High Supersonic"), (5.0, "Hypersonic"),
        (10.0, "High Hypersonic"), (25.0, "High Hypersonic"),
    ])
    def test_boundaries(self, M, label):
        assert flight_regime(M) == label

    def test_hypersonic_flag(self):
        assert airspeed_from_mach(6.0, 30000.0).is_hypersonic
