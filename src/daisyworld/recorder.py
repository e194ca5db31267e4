"""Data recording for Daisyworld runs.

A DataRecorder polls a Planet through its query methods and collects one row
per sample. Rows can be turned into an xarray Dataset for analysis or written
out as a CSV table.
"""

import numpy as np
import xarray as xr
from typing import Dict, List, Optional

from .planet import Planet
from .species import SPECIES_ORDER

_UNITS = {
    "t": "time units",
    "L": "dimensionless",
    "temp": "degC",
}


class DataRecorder:
    """Collects planet observations every `repeat` updates.

    Columns are t, L, a_w, a_b, a_g and temp, plus min_band_x, mean_band_x and
    max_band_x for every species while the planet is round.
    """

    def __init__(self, planet: Planet, repeat: int = 1):
        """Initialize the recorder.

        Args:
            planet: Planet to observe
            repeat: Record on every update count divisible by this
        """
        if repeat < 1:
            raise ValueError(f"Recording interval must be at least 1, got {repeat}")
        self.planet = planet
        self.repeat = repeat
        self.rows: List[Dict[str, float]] = []
        self._last_update: Optional[int] = None

    def __len__(self) -> int:
        return len(self.rows)

    def observe(self) -> Dict[str, float]:
        """Read the current planet state as a row, without storing it."""
        planet = self.planet
        row = {
            "t": planet.get_time(),
            "L": float(planet.get_solar_luminosity()),
        }
        for species in SPECIES_ORDER:
            row[f"a_{species.abbreviation}"] = planet.get_proportion(species)
        row["temp"] = planet.get_global_temperature()

        if planet.is_round_world():
            for species in SPECIES_ORDER:
                low, mean, high = planet.get_latitude_stats(species)
                row[f"min_band_{species.abbreviation}"] = float(low)
                row[f"mean_band_{species.abbreviation}"] = mean
                row[f"max_band_{species.abbreviation}"] = float(high)
        return row

    def record(self) -> Dict[str, float]:
        """Store a row for the current state regardless of the interval."""
        row = self.observe()
        self.rows.append(row)
        self._last_update = self.planet.update_count
        return row

    def poll(self) -> bool:
        """Record if the planet's update count falls on the interval.

        Returns:
            True if a row was recorded
        """
        count = self.planet.update_count
        if count % self.repeat or count == self._last_update:
            return False
        self.record()
        return True

    def clear(self) -> None:
        self.rows = []
        self._last_update = None

    def columns(self) -> List[str]:
        """Column names in first-seen order."""
        names: List[str] = []
        for row in self.rows:
            for name in row:
                if name not in names:
                    names.append(name)
        return names

    def to_dataset(self) -> xr.Dataset:
        """Recorded rows as a Dataset over a 'sample' dimension.

        Columns missing from some rows (latitude statistics recorded only
        while the planet was round) are filled with NaN.
        """
        names = self.columns() or ["t"]
        samples = np.arange(len(self.rows))

        def column(name):
            return np.array([row.get(name, np.nan) for row in self.rows], dtype=float)

        dataset = xr.Dataset(
            data_vars={
                name: (["sample"], column(name)) for name in names if name != "t"
            },
            coords={
                "sample": samples,
                "t": (["sample"], column("t")),
            }
        )

        for name in dataset.variables:
            if name in _UNITS:
                dataset[name].attrs["units"] = _UNITS[name]
            elif name.startswith("a_"):
                dataset[name].attrs["units"] = "fraction"
            elif "_band_" in name:
                dataset[name].attrs["units"] = "band index"
        dataset.attrs["round_world"] = int(self.planet.is_round_world())
        return dataset

    def to_dataframe(self):
        """Recorded rows as a pandas DataFrame in column order."""
        return self.to_dataset().to_dataframe().reset_index(drop=True)[self.columns()]

    def to_csv(self, filename: str = "daisyworld.csv") -> None:
        """Write the recorded rows as a CSV table.

        Args:
            filename: Output filename
        """
        self.to_dataframe().to_csv(filename, index=False)
        print(f"Daisyworld data ({len(self.rows)} rows) saved to {filename}")
