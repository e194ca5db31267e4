"""Energy-balance formulas for Daisyworld.

Every function here is pure and works on plain floats as well as numpy
arrays, so the flat planet and the latitude bands share one implementation
of the physics.
"""

import numpy as np
from typing import Sequence, Union

from .constants import (
    FLUX_CONSTANT,
    STEFAN_CONSTANT,
    CELSIUS_OFFSET,
    CONDUCTIVITY_CONSTANT,
    OPTIMAL_TEMPERATURE,
    GROWTH_CURVATURE,
    DEATH_RATE,
    GROUND_ALBEDO,
    EXTINCTION_FLOOR,
    POLAR_LUMINOSITY_MULTIPLIER,
    EQUATORIAL_LUMINOSITY_MULTIPLIER,
)

ArrayLike = Union[float, np.ndarray]


def surface_albedo(proportions: np.ndarray, albedos: Sequence[float],
                   ground_albedo: float = GROUND_ALBEDO) -> ArrayLike:
    """Area-weighted albedo of a patch of daisies and bare ground.

    Args:
        proportions: Species proportions, species along the last axis
        albedos: Albedo of each species, same order as the last axis
        ground_albedo: Albedo of the uncovered ground

    Returns:
        Albedo of the patch (one value per row for 2D input)
    """
    proportions = np.asarray(proportions, dtype=float)
    ground = 1.0 - proportions.sum(axis=-1)
    return proportions @ np.asarray(albedos, dtype=float) + ground * ground_albedo


def global_temperature(luminosity: ArrayLike, albedo: ArrayLike) -> ArrayLike:
    """Planetary emission temperature in degrees Celsius.

    Stefan-Boltzmann balance, equation (4) of Daisyworld. Non-positive
    luminosity yields NaN; it is not guarded here.

    Args:
        luminosity: Dimensionless solar luminosity
        albedo: Planetary albedo

    Returns:
        Temperature in degrees Celsius
    """
    absorption = 1.0 - albedo
    radicand = FLUX_CONSTANT * np.asarray(luminosity, dtype=float) * absorption / STEFAN_CONSTANT
    return np.power(radicand, 0.25) - CELSIUS_OFFSET


def local_temperature(global_albedo: float, global_temp: float,
                      albedo: ArrayLike, multiplier: ArrayLike = 1.0) -> ArrayLike:
    """Temperature of a patch with the given albedo, equation (7) of Daisyworld.

    The patch's absorptivity is scaled by its insolation multiplier before
    the conduction term is applied, so with multiplier 1 this is
    q * (A - albedo) + T.

    Args:
        global_albedo: Planetary albedo
        global_temp: Planetary temperature in degrees Celsius
        albedo: Albedo of the patch
        multiplier: Insolation multiplier of the latitude band

    Returns:
        Local temperature in degrees Celsius
    """
    effective_albedo = 1.0 - multiplier * (1.0 - albedo)
    return CONDUCTIVITY_CONSTANT * (global_albedo - effective_albedo) + global_temp


def growth_rate_function(local_temp: ArrayLike) -> ArrayLike:
    """Parabolic growth factor peaking at the optimal temperature."""
    return 1.0 - GROWTH_CURVATURE * (OPTIMAL_TEMPERATURE - local_temp) ** 2


def growth_rate(proportion: ArrayLike, local_temp: ArrayLike,
                ground_proportion: ArrayLike) -> ArrayLike:
    """Net growth of a daisy population per unit time.

    Growth is limited by the bare ground left to colonise; death is a
    fixed fraction of the population.
    """
    return proportion * (growth_rate_function(local_temp) * ground_proportion - DEATH_RATE)


def apply_extinction_floor(proportions: ArrayLike) -> ArrayLike:
    """Zero every proportion below the extinction floor."""
    return np.where(proportions < EXTINCTION_FLOOR, 0.0, proportions)


def band_luminosity_multipliers(bands: int,
                                polar: float = POLAR_LUMINOSITY_MULTIPLIER,
                                equatorial: float = EQUATORIAL_LUMINOSITY_MULTIPLIER
                                ) -> np.ndarray:
    """Insolation multiplier of each latitude band, linear in band index.

    Args:
        bands: Number of bands (index 0 is the pole)
        polar: Multiplier at the pole
        equatorial: Multiplier at the equator

    Returns:
        Array of length `bands`

    Raises:
        ValueError: If fewer than two bands are requested
    """
    if bands < 2:
        raise ValueError(f"At least two latitude bands are required, got {bands}")
    step = (equatorial - polar) / (bands - 1)
    return polar + step * np.arange(bands)


def round_world_albedo(band_albedos: np.ndarray, multipliers: np.ndarray) -> float:
    """Energy-weighted planetary albedo of a banded planet.

    Bands that receive more sunlight count for more of the absorbed energy,
    so this is 1 - mean(multiplier * (1 - albedo)) rather than a plain mean.
    """
    band_albedos = np.asarray(band_albedos, dtype=float)
    absorbed = multipliers * (1.0 - band_albedos)
    return 1.0 - absorbed.sum() / len(band_albedos)
