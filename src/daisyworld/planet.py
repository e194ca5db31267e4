"""Planet state and time stepping for Daisyworld.

This module holds the planet-wide ground cover, the solar luminosity and the
species switches, derives albedo and temperature from them, and advances the
daisy populations one discrete step at a time. In round-world mode the ground
cover is delegated to LatitudeBands.
"""

import numpy as np
from typing import Dict, Mapping, Optional, Tuple, Union

from .constants import (
    TIME_STEP,
    UPDATES_PER_TIME_UNIT,
    EXTINCTION_FLOOR,
    BOOST_THRESHOLD,
    LATITUDE_BANDS,
    DISPLAY_BANDS,
)
from .latitude import LatitudeBands
from .physics import (
    surface_albedo,
    global_temperature,
    local_temperature,
    growth_rate,
)
from .species import Species, SPECIES_ORDER, SPECIES_ALBEDOS

Thresholds = Union[float, Mapping[Species, float], None]


class Planet:
    """A Daisyworld planet with white, black and optionally gray daisies.

    Derived quantities (planetary albedo and temperature) are cached and the
    cache is dropped by every method that changes state. Growth and death can
    be frozen with set_daisy_growth_and_death(False), in which case update()
    only advances the step counter.
    """

    def __init__(
            self,
            white: float = 0.5,
            black: float = 0.5,
            luminosity: float = 1.0,
            gray: Optional[float] = None,
            round_world: bool = False,
            bands: int = LATITUDE_BANDS
    ):
        """Initialize the planet with its starting ground cover.

        Args:
            white: Initial proportion of white daisies
            black: Initial proportion of black daisies
            luminosity: Dimensionless solar luminosity (1.0 is the baseline)
            gray: Initial proportion of gray daisies; None leaves gray disabled
            round_world: Start in latitude-resolved mode
            bands: Number of latitude bands used in round-world mode
        """
        self.solar_luminosity = luminosity
        self.cover: Dict[Species, float] = {
            Species.WHITE: float(white),
            Species.BLACK: float(black),
            Species.GRAY: float(gray) if gray is not None else 0.0,
        }
        self.enabled: Dict[Species, bool] = {
            Species.WHITE: True,
            Species.BLACK: True,
            Species.GRAY: gray is not None,
        }
        self.growth_enabled = True
        self.bands = bands
        self.latitude: Optional[LatitudeBands] = None
        self.update_count = 0

        self._cached_albedo: Optional[float] = None
        self._cached_temperature: Optional[float] = None

        if round_world:
            self.set_round_world(True)

    def _invalidate(self) -> None:
        self._cached_albedo = None
        self._cached_temperature = None

    def _flat_row(self) -> np.ndarray:
        return np.array([self.cover[species] for species in SPECIES_ORDER])

    def _enabled_mask(self) -> np.ndarray:
        return np.array([self.enabled[species] for species in SPECIES_ORDER])

    def _require_round_world(self) -> LatitudeBands:
        if self.latitude is None:
            raise ValueError("Latitude queries are only available on a round world")
        return self.latitude

    # Queries

    def is_round_world(self) -> bool:
        return self.latitude is not None

    def is_species_enabled(self, species: Species) -> bool:
        return self.enabled[Species.parse(species)]

    def is_growing(self) -> bool:
        return self.growth_enabled

    def get_solar_luminosity(self) -> float:
        return self.solar_luminosity

    def get_proportion(self, species: Species) -> float:
        """Planet-wide proportion of a species.

        On a round world this is the equal-weight mean over the bands.
        """
        species = Species.parse(species)
        if self.latitude is not None:
            return self.latitude.proportion(species)
        return self.cover[species]

    def get_proportion_white(self) -> float:
        return self.get_proportion(Species.WHITE)

    def get_proportion_black(self) -> float:
        return self.get_proportion(Species.BLACK)

    def get_proportion_gray(self) -> float:
        return self.get_proportion(Species.GRAY)

    def get_ground_proportion(self) -> float:
        """Proportion of bare ground, 1 minus every species proportion."""
        return 1.0 - sum(self.get_proportion(species) for species in SPECIES_ORDER)

    def get_total_albedo(self) -> float:
        """Planetary albedo.

        Flat worlds use the area-weighted mean of the surfaces; round worlds
        weight each band by the sunlight it receives.
        """
        if self._cached_albedo is None:
            if self.latitude is not None:
                self._cached_albedo = self.latitude.planet_albedo()
            else:
                self._cached_albedo = float(surface_albedo(self._flat_row(), SPECIES_ALBEDOS))
        return self._cached_albedo

    def get_global_temperature(self) -> float:
        """Planetary temperature in degrees Celsius."""
        if self._cached_temperature is None:
            self._cached_temperature = float(
                global_temperature(self.solar_luminosity, self.get_total_albedo())
            )
        return self._cached_temperature

    def get_local_temperature(self, albedo: float, band: Optional[int] = None) -> float:
        """Temperature of a patch with the given albedo.

        Args:
            albedo: Albedo of the patch
            band: Latitude band of the patch (round world only); without a
                band the patch gets baseline insolation

        Returns:
            Local temperature in degrees Celsius
        """
        multiplier = 1.0
        if band is not None:
            multiplier = self.get_band_luminosity_multipliers()[self._check_band(band)]
        return float(local_temperature(
            self.get_total_albedo(), self.get_global_temperature(), albedo, multiplier
        ))

    def get_temperature_of(self, species: Species, band: Optional[int] = None) -> float:
        """Local temperature of a species' patches."""
        return self.get_local_temperature(Species.parse(species).albedo, band)

    def growth_rate(self, species: Species, band: Optional[int] = None) -> float:
        """Current net growth rate of a species, per unit time.

        On a round world a band must be given, since each band grows from its
        own proportion, ground and local temperature.
        """
        species = Species.parse(species)
        if self.latitude is None:
            return float(growth_rate(
                self.cover[species],
                self.get_temperature_of(species),
                self.get_ground_proportion(),
            ))
        if band is None:
            raise ValueError("A latitude band is required for round-world growth rates")
        band = self._check_band(band)
        rates = self.latitude.growth_rates(self.get_total_albedo(), self.get_global_temperature())
        return float(rates[band, SPECIES_ORDER.index(species)])

    def get_time(self) -> float:
        """Elapsed simulated time in time units."""
        return self.update_count * TIME_STEP

    @staticmethod
    def get_updates_per_time_unit() -> int:
        return UPDATES_PER_TIME_UNIT

    # Round-world queries

    def _check_band(self, band: int) -> int:
        latitude = self._require_round_world()
        if not 0 <= band < latitude.bands:
            raise ValueError(f"Band {band} is out of range 0..{latitude.bands - 1}")
        return band

    def get_band_luminosity_multipliers(self) -> np.ndarray:
        return self._require_round_world().multipliers.copy()

    def get_band_proportions(self, species: Species) -> np.ndarray:
        return self._require_round_world().band_proportions(Species.parse(species))

    def get_display_band_proportions(self, species: Species,
                                     display_bands: int = DISPLAY_BANDS) -> np.ndarray:
        """Species proportions averaged into coarse display bands, pole first."""
        return self._require_round_world().display_bands(Species.parse(species), display_bands)

    def get_latitude_stats(self, species: Species) -> Tuple[int, float, int]:
        """Min, mean and max occupied band index of a species.

        Returns (bands, nan, -1) when the species is absent everywhere.
        """
        return self._require_round_world().latitude_stats(Species.parse(species))

    # Commands

    def set_solar_luminosity(self, luminosity: float) -> None:
        self.solar_luminosity = luminosity
        self._invalidate()

    def set_species_enabled(self, species: Species, enabled: bool) -> None:
        """Allow or forbid a species; disabling removes it everywhere at once."""
        species = Species.parse(species)
        self.enabled[species] = enabled
        if not enabled:
            self.cover[species] = 0.0
            if self.latitude is not None:
                self.latitude.zero(species)
        self._invalidate()

    def set_white_enabled(self, enabled: bool) -> None:
        self.set_species_enabled(Species.WHITE, enabled)

    def set_black_enabled(self, enabled: bool) -> None:
        self.set_species_enabled(Species.BLACK, enabled)

    def set_gray_enabled(self, enabled: bool) -> None:
        self.set_species_enabled(Species.GRAY, enabled)

    def set_daisy_growth_and_death(self, enabled: bool) -> None:
        self.growth_enabled = enabled
        self._invalidate()

    def set_round_world(self, round_world: bool) -> None:
        """Switch between the flat and latitude-resolved models.

        Flat to round copies each proportion into every band; round to flat
        takes the equal-weight mean over the bands. Setting the current mode
        again changes nothing.
        """
        if round_world == self.is_round_world():
            return
        if round_world:
            self.latitude = LatitudeBands.from_flat(self._flat_row(), self.bands)
        else:
            for species, value in zip(SPECIES_ORDER, self.latitude.to_flat()):
                self.cover[species] = float(value)
            self.latitude = None
        self._invalidate()

    def boost_if_extinct(self, thresholds: Thresholds = None) -> None:
        """Reseed enabled species that have fallen below a threshold.

        Each enabled species below its threshold is raised to exactly the
        threshold. On a round world the planet-wide proportion is compared,
        and a species below it is raised to the threshold in every band
        where it is below.

        Args:
            thresholds: One threshold for all species, or a mapping per
                species; defaults to BOOST_THRESHOLD
        """
        if thresholds is None:
            thresholds = BOOST_THRESHOLD
        if not isinstance(thresholds, Mapping):
            thresholds = {species: thresholds for species in SPECIES_ORDER}

        for species, threshold in thresholds.items():
            species = Species.parse(species)
            if not self.enabled[species]:
                continue
            if self.latitude is not None:
                self.latitude.boost(species, threshold)
            elif self.cover[species] < threshold:
                self.cover[species] = float(threshold)
        self._invalidate()

    def update(self) -> None:
        """Advance the simulation by one time step.

        Every growth rate is computed from the state at the start of the step
        before any population changes.
        """
        if self.growth_enabled:
            if self.latitude is not None:
                self.latitude.step(
                    self.get_total_albedo(),
                    self.get_global_temperature(),
                    self._enabled_mask(),
                    TIME_STEP,
                )
            else:
                self._update_flat()
        self.update_count += 1
        self._invalidate()

    def _update_flat(self) -> None:
        increments = {
            species: self.growth_rate(species) * TIME_STEP
            for species in SPECIES_ORDER
            if self.enabled[species]
        }
        for species, increment in increments.items():
            proportion = self.cover[species] + increment
            self.cover[species] = 0.0 if proportion < EXTINCTION_FLOOR else proportion

    def __repr__(self) -> str:
        mode = "round" if self.is_round_world() else "flat"
        return (
            f"Planet({mode}, L={self.solar_luminosity:.3f}, "
            f"white={self.get_proportion_white():.3f}, "
            f"black={self.get_proportion_black():.3f}, "
            f"gray={self.get_proportion_gray():.3f}, "
            f"T={self.get_global_temperature():.2f}C)"
        )
