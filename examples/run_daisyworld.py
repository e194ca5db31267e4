#!/usr/bin/env python3
"""Run a single Daisyworld simulation from the command line.

Example:
    python -m examples.run_daisyworld --luminosity 1.0 --no-white --output black.csv --plot
"""

import sys

import matplotlib.pyplot as plt

from src.daisyworld import DataRecorder
from src.daisyworld.experiments import run_updates
from src.utils import Configuration, Visualizer


def main(args=None):
    """Build a planet from the configuration, run it and report the result."""
    config = Configuration.from_args(args)
    planet = config.build_planet()
    print(f"Starting {planet!r}")

    repeat = config.record_every * planet.get_updates_per_time_unit()
    recorder = DataRecorder(planet, repeat=repeat)
    recorder.poll()
    run_updates(planet, config.time_units * planet.get_updates_per_time_unit(), recorder)

    print(f"Finished at t={planet.get_time():.0f}: {planet!r}")
    if planet.is_round_world():
        for species in ("white", "black"):
            low, mean, high = planet.get_latitude_stats(species)
            print(f"  {species}: bands {low} to {high}, mean {mean:.1f}")

    if config.output:
        recorder.to_csv(config.output)

    if config.plot:
        Visualizer().plot_run(recorder.to_dataset(), planet)
        plt.show()

    return planet


if __name__ == "__main__":
    main(sys.argv[1:])
