"""Plotting helpers for Daisyworld results."""

import numpy as np
import matplotlib.pyplot as plt
import xarray as xr
from typing import Optional, Tuple

from src.daisyworld import Planet, Species
from src.daisyworld.constants import DISPLAY_BANDS, OPTIMAL_TEMPERATURE
from src.daisyworld.species import SPECIES_ORDER

# Line colors per species; white daisies are drawn in a light gray so they show up
SPECIES_COLORS = {
    Species.WHITE: "#c8c8c8",
    Species.BLACK: "black",
    Species.GRAY: "#808080",
}


class Visualizer:
    """Draws recorded Daisyworld data and planet states with matplotlib."""

    def __init__(self, figsize: Tuple[float, float] = (12, 6)):
        self.figsize = figsize

    def _axis(self, ax):
        if ax is None:
            plt.figure(figsize=self.figsize)
            ax = plt.gca()
        return ax

    @staticmethod
    def _plot_species(ax, x, dataset: xr.Dataset) -> None:
        for species in SPECIES_ORDER:
            name = f"a_{species.abbreviation}"
            if name not in dataset or not np.any(dataset[name].values > 0):
                continue
            ax.plot(x, dataset[name].values, color=SPECIES_COLORS[species],
                    label=f"{species.value} daisies")
        ax.set_ylim(0, 1)
        ax.set_ylabel("Area fraction")

    def plot_time_series(self, dataset: xr.Dataset, ax=None,
                         title: str = "Daisy populations over time"):
        """Plot proportions and temperature against time.

        Args:
            dataset: Dataset produced by DataRecorder.to_dataset()
            ax: Optional matplotlib axis for plotting
            title: Title for the plot

        Returns:
            Tuple of (proportion axis, temperature axis)
        """
        ax = self._axis(ax)
        t = dataset["t"].values
        self._plot_species(ax, t, dataset)
        ax.set_xlabel("Time")

        temp_ax = ax.twinx()
        temp_ax.plot(t, dataset["temp"].values, color="tab:red", linestyle="--",
                     label="temperature")
        temp_ax.axhline(y=OPTIMAL_TEMPERATURE, color="tab:red", linestyle=":", alpha=0.4)
        temp_ax.set_ylabel("Temperature (°C)")

        ax.legend(loc="upper left")
        temp_ax.legend(loc="upper right")
        ax.grid(alpha=0.3)
        ax.set_title(title)
        return ax, temp_ax

    def plot_luminosity_sweep(self, dataset: xr.Dataset, ax=None,
                              title: str = "Response to solar luminosity"):
        """Plot the settled state of a sweep against luminosity.

        Rising and falling halves are drawn in the same colors, so hysteresis
        shows up as two separate curves.

        Returns:
            Tuple of (proportion axis, temperature axis)
        """
        ax = self._axis(ax)
        luminosity = dataset["L"].values
        self._plot_species(ax, luminosity, dataset)
        ax.set_xlabel("Solar luminosity")

        temp_ax = ax.twinx()
        temp_ax.plot(luminosity, dataset["temp"].values, color="tab:red",
                     marker=".", linestyle="none", label="temperature")
        temp_ax.set_ylabel("Temperature (°C)")

        ax.legend(loc="upper left")
        ax.grid(alpha=0.3)
        ax.set_title(title)
        return ax, temp_ax

    def plot_latitude_bands(self, planet: Planet, ax=None,
                            display_bands: int = DISPLAY_BANDS,
                            title: str = "Daisies by latitude"):
        """Show display-band proportions of each species, pole at the top.

        Raises:
            ValueError: If the planet is not round
        """
        if not planet.is_round_world():
            raise ValueError("Latitude bands can only be plotted for a round world")
        ax = self._axis(ax)

        grid = np.array([
            planet.get_display_band_proportions(species, display_bands)
            for species in SPECIES_ORDER
        ]).T

        img = ax.imshow(grid, cmap="Greens", vmin=0, vmax=1,
                        aspect="auto", interpolation="nearest", origin="upper")
        ax.set_xticks(range(len(SPECIES_ORDER)))
        ax.set_xticklabels([species.value for species in SPECIES_ORDER])
        ax.set_ylabel("Display band (0 = pole)")
        plt.colorbar(img, ax=ax, label="Area fraction")

        ax.text(
            0.02, 0.02, f"T = {planet.get_global_temperature():.1f}°C",
            transform=ax.transAxes,
            bbox=dict(facecolor="white", alpha=0.7, edgecolor="gray")
        )
        ax.set_title(title)
        return img

    def plot_run(self, dataset: xr.Dataset, planet: Optional[Planet] = None):
        """Combined figure of a run, with the latitude view for round planets.

        Returns:
            Matplotlib figure
        """
        columns = 2 if planet is not None and planet.is_round_world() else 1
        fig, axes = plt.subplots(1, columns, figsize=self.figsize, squeeze=False)
        self.plot_time_series(dataset, ax=axes[0, 0])
        if columns == 2:
            self.plot_latitude_bands(planet, ax=axes[0, 1])
        plt.tight_layout()
        return fig
