"""Tests for the flat Daisyworld planet."""

from __future__ import annotations

import itertools

import numpy as np
import pytest

from src.daisyworld import Planet, Species
from src.daisyworld.constants import (
    BOOST_THRESHOLD,
    EXTINCTION_FLOOR,
    GROUND_ALBEDO,
    TIME_STEP,
)
from src.daisyworld.species import SPECIES_ALBEDOS


def _frozen(white: float, black: float, luminosity: float = 1.0, **kwargs) -> Planet:
    planet = Planet(white, black, luminosity, **kwargs)
    planet.set_daisy_growth_and_death(False)
    return planet


def test_two_color_planet_temperatures():
    planet = _frozen(0.5, 0.5)

    assert planet.get_total_albedo() == pytest.approx(0.5)
    assert planet.get_global_temperature() == pytest.approx(26, abs=1)
    assert planet.get_temperature_of(Species.BLACK) == pytest.approx(31, abs=1)
    assert planet.get_temperature_of(Species.WHITE) == pytest.approx(21, abs=1)


def test_ground_proportion_is_what_daisies_leave():
    planet = _frozen(0.2, 0.3, gray=0.1)
    assert planet.get_ground_proportion() == pytest.approx(0.4)


@pytest.mark.parametrize(
    "white, black, gray",
    [combo for combo in itertools.product([0.0, 0.2, 0.5], repeat=3) if sum(combo) <= 1.0],
)
def test_albedo_stays_within_surface_albedos(white, black, gray):
    planet = _frozen(white, black, gray=gray)
    low = min(SPECIES_ALBEDOS + (GROUND_ALBEDO,))
    high = max(SPECIES_ALBEDOS + (GROUND_ALBEDO,))
    assert low - 1e-12 <= planet.get_total_albedo() <= high + 1e-12


def test_gray_daisies_do_not_change_albedo():
    bare = _frozen(0.0, 0.0)
    gray = _frozen(0.0, 0.0, gray=0.6)
    assert gray.get_total_albedo() == pytest.approx(bare.get_total_albedo())
    assert gray.is_species_enabled(Species.GRAY)
    assert not bare.is_species_enabled(Species.GRAY)


def test_temperature_increases_with_luminosity():
    planet = _frozen(0.3, 0.4)
    temps = []
    for luminosity in np.linspace(0.5, 1.7, 25):
        planet.set_solar_luminosity(luminosity)
        temps.append(planet.get_global_temperature())
    assert all(later > earlier for earlier, later in zip(temps, temps[1:]))


def test_temperature_cache_follows_luminosity_changes():
    planet = _frozen(0.5, 0.5)
    before = planet.get_global_temperature()
    planet.set_solar_luminosity(1.2)
    assert planet.get_global_temperature() > before
    assert planet.get_solar_luminosity() == 1.2


def test_non_positive_luminosity_propagates_nan():
    planet = _frozen(0.5, 0.5, luminosity=0.0)
    assert planet.get_global_temperature() == pytest.approx(-273.0)
    with np.errstate(invalid="ignore"):
        planet.set_solar_luminosity(-1.0)
        assert np.isnan(planet.get_global_temperature())


@pytest.mark.parametrize(
    "white, black, luminosity",
    [(0.5, 0.5, 1.0), (0.0015, 0.0015, 1.7), (0.002, 0.6, 0.5), (0.7, 0.0011, 1.3)],
)
def test_no_population_lingers_below_extinction_floor(white, black, luminosity):
    planet = Planet(white, black, luminosity)
    for _ in range(500):
        planet.update()
        for species in Species:
            proportion = planet.get_proportion(species)
            assert proportion == 0.0 or proportion >= EXTINCTION_FLOOR


def test_update_applies_rates_from_one_snapshot():
    planet = Planet(0.3, 0.4, 1.0)
    rates = {species: planet.growth_rate(species) for species in (Species.WHITE, Species.BLACK)}
    before = {species: planet.get_proportion(species) for species in rates}

    planet.update()

    for species, rate in rates.items():
        assert planet.get_proportion(species) == pytest.approx(before[species] + rate * TIME_STEP)
    assert planet.update_count == 1
    assert planet.get_time() == pytest.approx(TIME_STEP)


def test_black_only_planet_settles_like_the_paper():
    planet = Planet(0.0, 0.5, 1.0)
    planet.set_white_enabled(False)

    for _ in range(planet.get_updates_per_time_unit() * 100):
        planet.update()

    assert planet.get_proportion_black() == pytest.approx(0.15, abs=0.05)
    assert planet.get_global_temperature() == pytest.approx(35, abs=3)
    assert planet.get_proportion_white() == 0.0


def test_disabling_a_species_removes_it_for_good():
    planet = Planet(0.4, 0.4, 1.0)
    planet.set_white_enabled(False)
    assert planet.get_proportion_white() == 0.0

    for _ in range(200):
        planet.update()
        assert planet.get_proportion_white() == 0.0
    assert not planet.is_species_enabled("white")


def test_frozen_planet_only_advances_the_clock():
    planet = _frozen(0.3, 0.3)
    planet.update()
    assert planet.get_proportion_white() == 0.3
    assert planet.get_proportion_black() == 0.3
    assert planet.update_count == 1
    assert not planet.is_growing()


def test_boost_raises_extinct_species_to_threshold():
    planet = Planet(0.0, 0.2, 1.0)
    planet.boost_if_extinct()
    assert planet.get_proportion_white() == BOOST_THRESHOLD
    assert planet.get_proportion_black() == 0.2
    # gray is disabled and stays absent
    assert planet.get_proportion_gray() == 0.0


def test_boost_twice_equals_boost_once():
    planet = Planet(0.004, 0.0, 1.0)
    planet.boost_if_extinct({Species.WHITE: 0.05, Species.BLACK: 0.02})
    once = (planet.get_proportion_white(), planet.get_proportion_black())
    planet.boost_if_extinct({Species.WHITE: 0.05, Species.BLACK: 0.02})
    assert (planet.get_proportion_white(), planet.get_proportion_black()) == once
    assert once == (0.05, 0.02)


def test_boost_skips_disabled_species():
    planet = Planet(0.0, 0.0, 1.0)
    planet.set_black_enabled(False)
    planet.boost_if_extinct(0.03)
    assert planet.get_proportion_white() == 0.03
    assert planet.get_proportion_black() == 0.0


def test_species_can_be_named_by_string():
    planet = _frozen(0.1, 0.2)
    assert planet.get_proportion("black") == 0.2
    assert planet.get_proportion("w") == 0.1
    with pytest.raises(ValueError, match="Unknown daisy species"):
        planet.get_proportion("purple")


def test_latitude_queries_need_a_round_world():
    planet = _frozen(0.1, 0.2)
    with pytest.raises(ValueError):
        planet.get_display_band_proportions(Species.WHITE)
    with pytest.raises(ValueError):
        planet.get_local_temperature(0.25, band=3)


@pytest.mark.parametrize("round_world", [False, True])
def test_cached_values_follow_every_mutator(round_world):
    planet = Planet(0.3, 0.3, 1.0, round_world=round_world)

    def observe():
        return planet.get_total_albedo(), planet.get_global_temperature()

    # Disabling white darkens the planet
    before = observe()
    planet.set_white_enabled(False)
    assert planet.get_total_albedo() < before[0]
    assert planet.get_global_temperature() > before[1]

    # Reseeding white brightens it again
    before = observe()
    planet.set_white_enabled(True)
    planet.boost_if_extinct(0.2)
    assert planet.get_total_albedo() > before[0]
    assert planet.get_global_temperature() < before[1]

    # One step of growth changes the cover
    before = observe()
    planet.update()
    assert observe() != before

    # Switching modes changes how albedo is weighted
    before = observe()
    planet.set_round_world(not round_world)
    assert planet.get_total_albedo() != pytest.approx(before[0], abs=1e-9)
    planet.set_round_world(round_world)
    rebuilt = Planet(planet.get_proportion_white(), planet.get_proportion_black(),
                     1.0, round_world=round_world)
    assert observe() == pytest.approx(
        (rebuilt.get_total_albedo(), rebuilt.get_global_temperature()))
