"""Latitude-resolved ground cover for a round Daisyworld.

The planet is divided into equal-area latitude bands. Band 0 is the pole and
the last band is the equator; insolation rises linearly from pole to equator,
display bands are contiguous runs counted from the pole, and the latitude
statistics report band indices in the same direction.
"""

import numpy as np
from typing import Optional, Sequence, Tuple

from .constants import (
    LATITUDE_BANDS,
    POLAR_LUMINOSITY_MULTIPLIER,
    EQUATORIAL_LUMINOSITY_MULTIPLIER,
    DISPLAY_BANDS,
)
from .physics import (
    surface_albedo,
    local_temperature,
    growth_rate,
    apply_extinction_floor,
    band_luminosity_multipliers,
    round_world_albedo,
)
from .species import Species, SPECIES_ORDER, SPECIES_ALBEDOS


class LatitudeBands:
    """Per-band daisy proportions and the physics applied band by band.

    Proportions are held in a (bands, species) array whose columns follow
    SPECIES_ORDER.
    """

    def __init__(
            self,
            proportions: np.ndarray,
            polar_multiplier: float = POLAR_LUMINOSITY_MULTIPLIER,
            equatorial_multiplier: float = EQUATORIAL_LUMINOSITY_MULTIPLIER
    ):
        """Initialize the bands from an explicit proportion table.

        Args:
            proportions: Array of shape (bands, len(SPECIES_ORDER))
            polar_multiplier: Insolation multiplier of band 0
            equatorial_multiplier: Insolation multiplier of the last band
        """
        self.proportions = np.array(proportions, dtype=float)
        if self.proportions.ndim != 2 or self.proportions.shape[1] != len(SPECIES_ORDER):
            raise ValueError(
                f"Expected a (bands, {len(SPECIES_ORDER)}) proportion table, "
                f"got shape {self.proportions.shape}"
            )
        self.bands = self.proportions.shape[0]
        self.multipliers = band_luminosity_multipliers(
            self.bands, polar_multiplier, equatorial_multiplier
        )
        self.albedos = np.asarray(SPECIES_ALBEDOS, dtype=float)

        # Latitude of each band in degrees, 90 at the pole down to 0 at the equator
        self.latitudes = 90.0 * (1.0 - np.arange(self.bands) / (self.bands - 1))

    @classmethod
    def from_flat(cls, flat_proportions: Sequence[float],
                  bands: int = LATITUDE_BANDS, **kwargs) -> "LatitudeBands":
        """Broadcast planet-wide proportions identically to every band."""
        row = np.asarray(flat_proportions, dtype=float)
        return cls(np.tile(row, (bands, 1)), **kwargs)

    def to_flat(self) -> np.ndarray:
        """Equal-weight average of each species over all bands."""
        return self.proportions.mean(axis=0)

    @staticmethod
    def _column(species: Species) -> int:
        return SPECIES_ORDER.index(species)

    def ground_proportions(self) -> np.ndarray:
        return 1.0 - self.proportions.sum(axis=1)

    def band_albedos(self) -> np.ndarray:
        return surface_albedo(self.proportions, self.albedos)

    def planet_albedo(self) -> float:
        """Insolation-weighted albedo of the whole planet."""
        return float(round_world_albedo(self.band_albedos(), self.multipliers))

    def local_temperatures(self, global_albedo: float, global_temp: float) -> np.ndarray:
        """Local temperature of every species patch in every band.

        Returns:
            Array of shape (bands, species) in degrees Celsius
        """
        return local_temperature(
            global_albedo,
            global_temp,
            self.albedos[np.newaxis, :],
            self.multipliers[:, np.newaxis],
        )

    def growth_rates(self, global_albedo: float, global_temp: float,
                     enabled: Optional[np.ndarray] = None) -> np.ndarray:
        """Growth rate of every species in every band from one shared snapshot.

        Args:
            global_albedo: Planetary albedo at the start of the step
            global_temp: Planetary temperature at the start of the step
            enabled: Boolean mask per species; disabled species get zero rate

        Returns:
            Array of shape (bands, species)
        """
        temps = self.local_temperatures(global_albedo, global_temp)
        ground = self.ground_proportions()[:, np.newaxis]
        rates = growth_rate(self.proportions, temps, ground)
        if enabled is not None:
            rates = np.where(np.asarray(enabled, dtype=bool)[np.newaxis, :], rates, 0.0)
        return rates

    def step(self, global_albedo: float, global_temp: float,
             enabled: np.ndarray, dt: float) -> None:
        """Advance every band by one time step.

        All rates are computed before any band is written, so every band
        sees the same pre-step state.
        """
        enabled = np.asarray(enabled, dtype=bool)
        rates = self.growth_rates(global_albedo, global_temp, enabled)
        updated = apply_extinction_floor(self.proportions + rates * dt)
        self.proportions[:, enabled] = updated[:, enabled]

    def proportion(self, species: Species) -> float:
        """Area-weighted (equal per band) proportion of a species."""
        return float(self.proportions[:, self._column(species)].mean())

    def band_proportions(self, species: Species) -> np.ndarray:
        return self.proportions[:, self._column(species)].copy()

    def zero(self, species: Species) -> None:
        self.proportions[:, self._column(species)] = 0.0

    def boost(self, species: Species, threshold: float) -> None:
        """Reseed a species whose planet-wide proportion is below `threshold`.

        Every band where it is below the threshold is raised to exactly the
        threshold; a species at or above it overall is left untouched.
        """
        if self.proportion(species) >= threshold:
            return
        column = self._column(species)
        self.proportions[:, column] = np.maximum(self.proportions[:, column], threshold)

    def display_bands(self, species: Species, display_bands: int = DISPLAY_BANDS) -> np.ndarray:
        """Average contiguous runs of bands into a coarser view.

        Args:
            species: Species to report
            display_bands: Number of display bands, must divide the band count

        Returns:
            Array of length `display_bands`, display band 0 at the pole
        """
        if display_bands <= 0 or self.bands % display_bands:
            raise ValueError(
                f"{display_bands} display bands do not evenly divide {self.bands} bands"
            )
        column = self.proportions[:, self._column(species)]
        return column.reshape(display_bands, -1).mean(axis=1)

    def latitude_stats(self, species: Species) -> Tuple[int, float, int]:
        """Lowest, population-weighted mean and highest occupied band index.

        A species absent from every band gives (bands, nan, -1).
        """
        column = self.proportions[:, self._column(species)]
        occupied = np.nonzero(column > 0.0)[0]
        if len(occupied) == 0:
            return self.bands, float("nan"), -1
        mean = float(np.average(np.arange(self.bands), weights=column))
        return int(occupied[0]), mean, int(occupied[-1])
