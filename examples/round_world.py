#!/usr/bin/env python3
"""Demonstrate the latitude-resolved Daisyworld.

Daisies on a round planet settle into latitude belts: black daisies towards
the cooler poles, white daisies towards the hot equator.
"""

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation

from src.daisyworld import Planet, Species
from src.utils import Visualizer


def animate_round_world(planet, frames=100, updates_per_frame=50):
    """Animate the display bands while the planet evolves."""
    print("\n=== Round World Animation ===")
    visualizer = Visualizer(figsize=(6, 8))
    fig, ax = plt.subplots(figsize=(6, 8))
    img = visualizer.plot_latitude_bands(planet, ax=ax)

    def update(frame):
        for _ in range(updates_per_frame):
            planet.update()
        grid = [planet.get_display_band_proportions(species) for species in
                (Species.WHITE, Species.BLACK, Species.GRAY)]
        img.set_array(np.array(grid).T)
        ax.set_title(f"t = {planet.get_time():.0f}, T = {planet.get_global_temperature():.1f}°C")
        return (img,)

    ani = FuncAnimation(fig, update, frames=frames, blit=False, repeat=False)
    plt.show()
    return ani


def compare_flat_and_round(luminosity=1.0, time_units=100):
    """Run the same starting state flat and round and compare where it settles."""
    print("\n=== Flat versus Round ===")
    results = {}
    for round_world in (False, True):
        planet = Planet(white=0.3, black=0.3, luminosity=luminosity, round_world=round_world)
        for _ in range(time_units * planet.get_updates_per_time_unit()):
            planet.update()
        results["round" if round_world else "flat"] = planet
        print(f"{'Round' if round_world else 'Flat'}: {planet!r}")

    round_planet = results["round"]
    for species in (Species.WHITE, Species.BLACK):
        low, mean, high = round_planet.get_latitude_stats(species)
        print(f"{species.value} daisies occupy bands {low}-{high} (mean {mean:.1f})")
    return results


if __name__ == "__main__":
    results = compare_flat_and_round()
    animate_round_world(Planet(white=0.3, black=0.3, round_world=True))
    print("Simulation complete.")
