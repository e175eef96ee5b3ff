"""
Tests for aerocalc.rocket

Reference: Δv = Isp·g0·ln(m0/mf); 1 s of Isp = 9.80665 m/s exhaust velocity.
"""

import math
import pytest
from aerocalc.rocket import (
    g0,
    propellant_mass_fraction,
    ideal_delta_v,
    convert_specific_impulse,
    isp_category,
    MissionPhase,
    delta_v_budget,
    mission_complexity,
    common_phase,
)


class TestMassFraction:
    def test_split(self):
        mf = propellant_mass_fraction(1000.0, 100.0)
        assert mf.propellant_mass == pytest.approx(900.0)
        assert mf.propellant_mass_fraction == pytest.approx(0.9)
        assert mf.structural_mass_fraction == pytest.approx(0.1)
        assert mf.mass_ratio == pytest.approx(10.0)

    @pytest.mark.parametrize("m0,mf", [(0.0, 0.0), (100.0, -1.0),
                                       (100.0, 100.0), (100.0, 150.0)])
    def test_invalid_masses(self, m0, mf):
        with pytest.raises(ValueError):
            propellant_mass_fraction(m0, mf)


class TestRocketEquation:
    def test_ideal_delta_v(self):
        assert ideal_delta_v(300.0, 1000.0, 100.0) == pytest.approx(
            300.0 * g0 * math.log(10.0))

    def test_no_burn_gives_zero(self):
        assert ideal_delta_v(300.0, 500.0, 500.0) == 0.0

    def test_invalid(self):
        with pytest.raises(ValueError):
            ideal_delta_v(0.0, 1000.0, 100.0)
        with pytest.raises(ValueError):
            ideal_delta_v(300.0, 100.0, 1000.0)


class TestSpecificImpulse:
    def test_from_seconds(self):
        isp = convert_specific_impulse(300.0)
        assert isp.meters_per_second == pytest.approx(2941.995)
        assert isp.kilometers_per_second == pytest.approx(2.941995)
        assert isp.category == "Good Performance"

    def test_units_agree(self):
        a = convert_specific_impulse(3000.0, "m/s")
        b = convert_specific_impulse(3.0, "km/s")
        assert a.seconds == pytest.approx(b.seconds)
        assert a.seconds == pytest.approx(305.915, rel=1e-5)

    def test_feet_per_second(self):
        isp = convert_specific_impulse(1000.0, "ft/s")
        assert isp.meters_per_second == pytest.approx(304.8, rel=1e-5)
        assert isp.feet_per_second == pytest.approx(1000.0)

    @pytest.mark.parametrize("seconds,label", [
        (150.0, "Low Performance"),
        (200.0, "Moderate Performance"),
        (450.0, "High Performance"),
        (999.0, "Very High Performance"),
        (1000.0, "Exceptional Performance"),
    ])
    def test_categories(self, seconds, label):
        assert isp_category(seconds)[0] == label

    @pytest.mark.parametrize("value,unit", [(0.0, "s"), (-5.0, "s"),
                                            (math.nan, "s"), (300.0, "lbf")])
    def test_invalid(self, value, unit):
        with pytest.raises(ValueError):
            convert_specific_impulse(value, unit)


class TestDeltaVBudget:
    @pytest.fixture
    def geo_mission(self):
        return [
            common_phase("Launch to LEO"),
            common_phase("leo to gto"),
            MissionPhase("GTO to GEO", 1500.0, "orbital", enabled=False),
        ]

    def test_totals(self, geo_mission):
        b = delta_v_budget(geo_mission)
        assert b.total_delta_v == pytest.approx(13300.0)
        assert b.enabled_total_delta_v == pytest.approx(11800.0)

    def test_breakdown_uses_enabled_phases(self, geo_mission):
        b = delta_v_budget(geo_mission)
        assert b.breakdown["launch"] == pytest.approx(9400.0)
        assert b.breakdown["transfer"] == pytest.approx(2400.0)
        assert b.breakdown["orbital"] == 0.0
        assert b.complexity == "Very High Complexity"

    def test_empty_mission(self):
        b = delta_v_budget([])
        assert b.total_delta_v == 0.0
        assert b.complexity == "No Mission Defined"

    @pytest.mark.parametrize("dv,label", [
        (1999.0, "Low Complexity"),
        (2000.0, "Moderate Complexity"),
        (9999.0, "High Complexity"),
        (25000.0, "Extreme Complexity"),
    ])
    def test_complexity_bands(self, dv, label):
        assert mission_complexity(dv) == label

    def test_bad_phase(self):
        with pytest.raises(ValueError):
            MissionPhase("Hop", 100.0, "suborbital")
        with pytest.raises(ValueError):
            MissionPhase("Hop", -1.0)
        with pytest.raises(KeyError):
            common_phase("Warp to Alpha Centauri")
