"""
Tests for aerocalc.gas_dynamics

Validated against the NACA 1135 tables for γ = 1.4:
  M = 2    →  p/p₀ ≈ 0.1278, T/T₀ ≈ 0.5556, ρ/ρ₀ ≈ 0.2300, A/A* ≈ 1.6875
              μ = 30°, ν ≈ 26.38°
  shock M₁ = 2  →  M₂ ≈ 0.5774, p₂/p₁ = 4.5, T₂/T₁ ≈ 1.6875,
                   ρ₂/ρ₁ ≈ 2.6667, p₀₂/p₀₁ ≈ 0.7209, p₀₂/p₁ ≈ 5.640
"""

import math
import pytest
from aerocalc.gas_dynamics import (
    area_mach_relation,
    mach_from_area_ratio,
    isentropic_pressure_ratio,
    isentropic_temperature_ratio,
    mach_from_pressure_ratio,
    mach_angle,
    prandtl_meyer,
    rayleigh_pitot_ratio,
    normal_shock,
    normal_shock_from_pitot_ratio,
    normal_shock_table,
    isentropic_flow,
    theta_beta_mach,
    max_deflection_angle,
    oblique_shock,
)


class TestAreaMachRelation:
    def test_sonic_throat(self):
        """A/A* = 1 at M = 1 for any γ."""
        assert area_mach_relation(1.0, 1.4) == pytest.approx(1.0, abs=1e-12)
        assert area_mach_relation(1.0, 1.2) == pytest.approx(1.0, abs=1e-12)

    def test_known_area_ratio(self):
        assert area_mach_relation(2.0, 1.4) == pytest.approx(1.6875, rel=1e-4)


class TestMachFromAreaRatio:
    def test_supersonic_root(self):
        assert mach_from_area_ratio(1.6875, 1.4) == pytest.approx(2.0, rel=1e-6)

    def test_subsonic_root(self):
        M = mach_from_area_ratio(1.6875, 1.4, supersonic=False)
        assert M < 1.0
        assert area_mach_relation(M, 1.4) == pytest.approx(1.6875, rel=1e-6)

    def test_rejects_below_one(self):
        with pytest.raises(ValueError):
            mach_from_area_ratio(0.5)


class TestIsentropicRatios:
    def test_pressure_ratio(self):
        assert isentropic_pressure_ratio(2.0, 1.4) == pytest.approx(0.1278, rel=1e-3)

    def test_temperature_ratio(self):
        assert isentropic_temperature_ratio(2.0, 1.4) == pytest.approx(0.5556, rel=1e-3)

    def test_mach_from_pressure_ratio(self):
        pr = isentropic_pressure_ratio(2.5, 1.4)
        assert mach_from_pressure_ratio(pr, 1.4) == pytest.approx(2.5, rel=1e-10)

    def test_stagnation_is_zero_mach(self):
        assert mach_from_pressure_ratio(1.0) == 0.0

    @pytest.mark.parametrize("pr", [0.0, -0.1, 1.5])
    def test_pressure_ratio_out_of_range(self, pr):
        with pytest.raises(ValueError):
            mach_from_pressure_ratio(pr)


class TestWaveAngles:
    def test_mach_angle(self):
        assert math.degrees(mach_angle(2.0)) == pytest.approx(30.0)

    def test_nu_at_mach_1(self):
        """ν(1) = 0 for any γ."""
        assert prandtl_meyer(1.0, 1.4) == pytest.approx(0.0, abs=1e-12)

    def test_nu_at_mach_2(self):
        assert math.degrees(prandtl_meyer(2.0, 1.4)) == pytest.approx(26.38, rel=1e-3)

    def test_subsonic_rejected(self):
        with pytest.raises(ValueError):
            prandtl_meyer(0.5)
        with pytest.raises(ValueError):
            mach_angle(0.5)


class TestNormalShock:
    @pytest.fixture
    def shock_m2(self):
        return normal_shock(2.0, 1.4)

    def test_downstream_mach(self, shock_m2):
        assert shock_m2.mach2 == pytest.approx(0.5774, rel=1e-3)

    def test_static_ratios(self, shock_m2):
        assert shock_m2.pressure_ratio == pytest.approx(4.5, rel=1e-9)
        assert shock_m2.temperature_ratio == pytest.approx(1.6875, rel=1e-4)
        assert shock_m2.density_ratio == pytest.approx(2.6667, rel=1e-4)

    def test_total_pressure_loss(self, shock_m2):
        assert shock_m2.total_pressure_ratio == pytest.approx(0.7209, rel=1e-3)
        assert shock_m2.entropy_change > 0
        assert shock_m2.entropy_change == pytest.approx(
            -math.log(shock_m2.total_pressure_ratio))

    def test_weak_shock_limit(self):
        s = normal_shock(1.0001)
        assert s.mach2 == pytest.approx(1.0, abs=1e-3)
        assert s.total_pressure_ratio == pytest.approx(1.0, abs=1e-6)

    @pytest.mark.parametrize("M1,gamma", [(1.0, 1.4), (0.8, 1.4), (2.0, 1.0)])
    def test_invalid_inputs(self, M1, gamma):
        with pytest.raises(ValueError):
            normal_shock(M1, gamma)


class TestObliqueShock:
    def test_weak_solution_mach_3(self):
        s = oblique_shock(3.0, 20.0)
        assert s.wave_angle == pytest.approx(37.76, abs=0.02)
        assert s.pressure_ratio == pytest.approx(3.771, rel=2e-3)
        assert s.mach2 == pytest.approx(1.994, rel=2e-3)
        assert s.weak

    def test_weak_solution_mach_2(self):
        s = oblique_shock(2.0, 10.0)
        assert s.wave_angle == pytest.approx(39.31, abs=0.02)
        assert s.mach2 == pytest.approx(1.641, rel=2e-3)
        assert s.mach_angle == pytest.approx(30.0)

    def test_wave_angle_satisfies_theta_beta_mach(self):
        s = oblique_shock(2.5, 15.0)
        theta = theta_beta_mach(2.5, math.radians(s.wave_angle))
        assert math.degrees(theta) == pytest.approx(15.0, abs=1e-8)

    def test_strong_solution_is_subsonic(self):
        weak = oblique_shock(2.0, 10.0)
        strong = oblique_shock(2.0, 10.0, weak=False)
        _, beta_star = max_deflection_angle(2.0)
        assert strong.wave_angle > beta_star > weak.wave_angle
        assert strong.mach2 < 1.0
        assert strong.pressure_ratio > weak.pressure_ratio

    @pytest.mark.parametrize("M1,theta_max,beta", [
        (2.0, 22.97, 64.67),
        (3.0, 34.07, 65.24),
    ])
    def test_max_deflection(self, M1, theta_max, beta):
        t, b = max_deflection_angle(M1)
        assert t == pytest.approx(theta_max, abs=0.02)
        assert b == pytest.approx(beta, abs=0.02)

    def test_detached_shock_rejected(self):
        with pytest.raises(ValueError, match="detaches"):
            oblique_shock(2.0, 25.0)

    def test_zero_deflection_is_mach_wave(self):
        s = oblique_shock(2.0, 0.0)
        assert s.wave_angle == pytest.approx(30.0)
        assert s.pressure_ratio == pytest.approx(1.0)
        assert s.mach2 == pytest.approx(2.0)

    def test_zero_deflection_strong_is_normal_shock(self):
        s = oblique_shock(2.0, 0.0, weak=False)
        assert s.wave_angle == pytest.approx(90.0)
        assert s.pressure_ratio == pytest.approx(4.5)

    @pytest.mark.parametrize("M1,theta", [(1.0, 5.0), (0.5, 5.0), (2.0, -1.0)])
    def test_invalid_inputs(self, M1, theta):
        with pytest.raises(ValueError):
            oblique_shock(M1, theta)


class TestPitotInversion:
    def test_rayleigh_known_value(self):
        assert rayleigh_pitot_ratio(2.0) == pytest.approx(5.640, rel=1e-3)

    @pytest.mark.parametrize("M", [1.2, 2.0, 3.5, 8.0])
    def test_roundtrip(self, M):
        shock = normal_shock_from_pitot_ratio(rayleigh_pitot_ratio(M))
        assert shock.mach1 == pytest.approx(M, rel=1e-8)

    def test_subsonic_ratio_rejected(self):
        with pytest.raises(ValueError):
            normal_shock_from_pitot_ratio(1.5)


class TestShockTable:
    def test_grid(self):
        table = normal_shock_table(1.5, 5.0, 8)
        assert len(table) == 8
        assert table[0].mach1 == pytest.approx(1.5)
        assert table[-1].mach1 == pytest.approx(5.0)
        losses = [s.total_pressure_ratio for s in table]
        assert losses == sorted(losses, reverse=True)

    def test_subsonic_start_clamped(self):
        table = normal_shock_table(0.5, 2.0, 4)
        assert table[0].mach1 == pytest.approx(1.05)


class TestIsentropicFlow:
    def test_supersonic_row(self):
        row = isentropic_flow(2.0)
        assert row.pressure_ratio == pytest.approx(0.1278, rel=1e-3)
        assert row.density_ratio == pytest.approx(0.2300, rel=1e-3)
        assert row.area_ratio == pytest.approx(1.6875, rel=1e-4)
        assert row.mach_angle == pytest.approx(30.0)
        assert row.prandtl_meyer_angle == pytest.approx(26.38, rel=1e-3)
        assert row.pitot_pressure_ratio == pytest.approx(5.640, rel=1e-3)

    def test_subsonic_row(self):
        row = isentropic_flow(0.5)
        assert math.isnan(row.mach_angle)
        assert row.prandtl_meyer_angle == 0.0
        assert row.pitot_pressure_ratio == pytest.approx(1.0 / row.pressure_ratio)

    def test_pitot_continuous_at_sonic(self):
        assert isentropic_flow(1.0).pitot_pressure_ratio == pytest.approx(
            1.0 / isentropic_pressure_ratio(1.0))

    def test_stagnation(self):
        row = isentropic_flow(0.0)
        assert math.isinf(row.area_ratio)
        assert row.pressure_ratio == 1.0

    def test_invalid(self):
        with pytest.raises(ValueError):
            isentropic_flow(-1.0)
        with pytest.raises(ValueError):
            isentropic_flow(2.0, gamma=0.9)
