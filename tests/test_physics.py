"""Tests for the shared energy-balance formulas."""

from __future__ import annotations

import numpy as np
import pytest

from src.daisyworld import physics
from src.daisyworld.constants import (
    CONDUCTIVITY_CONSTANT,
    DEATH_RATE,
    EXTINCTION_FLOOR,
    GROUND_ALBEDO,
    OPTIMAL_TEMPERATURE,
)
from src.daisyworld.species import SPECIES_ALBEDOS


def test_surface_albedo_of_bare_ground_is_ground_albedo():
    assert physics.surface_albedo(np.zeros(3), SPECIES_ALBEDOS) == pytest.approx(GROUND_ALBEDO)


def test_surface_albedo_handles_rows_of_bands():
    proportions = np.array([[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 0.0]])
    albedos = physics.surface_albedo(proportions, SPECIES_ALBEDOS)
    assert albedos == pytest.approx([0.75, 0.25, 0.5])


def test_global_temperature_at_half_albedo_is_about_27_celsius():
    assert physics.global_temperature(1.0, 0.5) == pytest.approx(26.9, abs=0.2)


def test_global_temperature_of_non_positive_luminosity_is_nan():
    with np.errstate(invalid="ignore"):
        assert np.isnan(physics.global_temperature(-1.0, 0.5))


def test_local_temperature_reduces_to_conduction_formula_at_unit_multiplier():
    temp = physics.local_temperature(0.5, 20.0, 0.25)
    assert temp == pytest.approx(CONDUCTIVITY_CONSTANT * (0.5 - 0.25) + 20.0)


def test_local_temperature_rises_with_insolation():
    dim = physics.local_temperature(0.5, 20.0, 0.25, multiplier=0.6)
    bright = physics.local_temperature(0.5, 20.0, 0.25, multiplier=1.5)
    assert bright > dim


def test_growth_rate_function_peaks_at_optimal_temperature():
    assert physics.growth_rate_function(OPTIMAL_TEMPERATURE) == pytest.approx(1.0)
    assert physics.growth_rate_function(OPTIMAL_TEMPERATURE + 5) < 1.0
    assert physics.growth_rate_function(OPTIMAL_TEMPERATURE - 5) == pytest.approx(
        physics.growth_rate_function(OPTIMAL_TEMPERATURE + 5)
    )
    # Far from the optimum the factor goes negative
    assert physics.growth_rate_function(OPTIMAL_TEMPERATURE + 25) < 0.0


def test_growth_rate_without_ground_is_pure_death():
    assert physics.growth_rate(0.4, OPTIMAL_TEMPERATURE, 0.0) == pytest.approx(-0.4 * DEATH_RATE)


def test_apply_extinction_floor_zeroes_small_values_only():
    values = np.array([0.0, EXTINCTION_FLOOR / 2, EXTINCTION_FLOOR, 0.5])
    floored = physics.apply_extinction_floor(values)
    assert floored.tolist() == [0.0, 0.0, EXTINCTION_FLOOR, 0.5]


def test_band_luminosity_multipliers_are_linear_from_pole_to_equator():
    multipliers = physics.band_luminosity_multipliers(90)
    assert len(multipliers) == 90
    assert multipliers[0] == pytest.approx(0.6)
    assert multipliers[-1] == pytest.approx(1.5)
    assert np.allclose(np.diff(multipliers), 0.9 / 89)


def test_band_luminosity_multipliers_need_two_bands():
    with pytest.raises(ValueError):
        physics.band_luminosity_multipliers(1)


def test_round_world_albedo_weights_bright_bands_more():
    multipliers = np.array([0.5, 1.5])
    # A reflective equator matters more than a reflective pole
    reflective_equator = physics.round_world_albedo(np.array([0.5, 0.75]), multipliers)
    reflective_pole = physics.round_world_albedo(np.array([0.75, 0.5]), multipliers)
    assert reflective_equator > reflective_pole
    assert reflective_equator == pytest.approx(1 - (0.5 * 0.5 + 1.5 * 0.25) / 2)
