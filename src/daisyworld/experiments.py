"""Classic Daisyworld experiments.

Drivers that reproduce the runs of Watson & Lovelock's paper: populations
settling under constant luminosity (graphs b and d) and the hysteresis of
a slowly brightening then dimming sun (graphs a to d).
"""

import numpy as np
import xarray as xr
from typing import Iterable, List, Optional, Tuple

from .planet import Planet
from .recorder import DataRecorder


def run_updates(planet: Planet, updates: int,
                recorder: Optional[DataRecorder] = None) -> Planet:
    """Advance a planet a number of steps, polling the recorder after each.

    Args:
        planet: Planet to advance
        updates: Number of update() calls
        recorder: Optional recorder polled after every update

    Returns:
        The same planet
    """
    if updates < 0:
        raise ValueError(f"Number of updates cannot be negative, got {updates}")
    for _ in range(updates):
        planet.update()
        if recorder is not None:
            recorder.poll()
    return planet


def run_at_luminosity(planet: Planet, luminosity: float, updates: int,
                      recorder: Optional[DataRecorder] = None) -> Planet:
    """Switch to a new luminosity, reseed extinct daisies and let the planet settle."""
    planet.set_solar_luminosity(luminosity)
    planet.boost_if_extinct()
    return run_updates(planet, updates, recorder)


def sweep_luminosities(planet: Planet, luminosities: Iterable[float],
                       updates_per_luminosity: int,
                       recorder: Optional[DataRecorder] = None) -> DataRecorder:
    """Run a planet through a luminosity trajectory.

    One row is recorded at the end of each luminosity.

    Args:
        planet: Planet to drive
        luminosities: Luminosity values in the order they are applied
        updates_per_luminosity: Updates spent at each luminosity
        recorder: Recorder to append to; a new one is made if omitted

    Returns:
        The recorder holding one row per luminosity
    """
    if recorder is None:
        recorder = DataRecorder(planet)
    for luminosity in luminosities:
        run_at_luminosity(planet, luminosity, updates_per_luminosity)
        recorder.record()
    return recorder


def constant_luminosity_run(
        white: float = 0.5,
        black: float = 0.5,
        luminosity: float = 1.0,
        time_units: int = 100,
        white_enabled: bool = True,
        black_enabled: bool = True,
        gray: Optional[float] = None,
        round_world: bool = False
) -> Tuple[Planet, xr.Dataset]:
    """Let populations evolve under a constant sun.

    Records once per time unit, starting from the initial state.

    Returns:
        Tuple of (planet, recorded dataset)
    """
    if time_units < 0:
        raise ValueError(f"Run length cannot be negative, got {time_units}")
    planet = Planet(white, black, luminosity, gray=gray, round_world=round_world)
    planet.set_white_enabled(white_enabled)
    planet.set_black_enabled(black_enabled)

    recorder = DataRecorder(planet, repeat=planet.get_updates_per_time_unit())
    recorder.poll()
    run_updates(planet, time_units * planet.get_updates_per_time_unit() + 1, recorder)

    print(
        f"Constant luminosity run completed. Temperature = "
        f"{planet.get_global_temperature():.2f}; "
        f"black = {planet.get_proportion_black():.3f}; "
        f"white = {planet.get_proportion_white():.3f}"
    )
    return planet, recorder.to_dataset()


def sweep_values(min_luminosity: float, max_luminosity: float,
                 luminosity_step: float) -> List[float]:
    """Luminosities of a rising then falling sweep.

    Rises from the minimum in steps and then falls back from the maximum to
    the minimum, so the turning point is visited once on the way down.
    """
    if luminosity_step <= 0:
        raise ValueError(f"Luminosity step must be positive, got {luminosity_step}")
    if max_luminosity < min_luminosity:
        raise ValueError(
            f"Maximum luminosity {max_luminosity} is below minimum {min_luminosity}"
        )
    trials = int(round((max_luminosity - min_luminosity) / luminosity_step))
    rising = [min_luminosity + luminosity_step * trial for trial in range(trials)]
    falling = [min_luminosity + luminosity_step * trial for trial in range(trials, -1, -1)]
    return rising + falling


def luminosity_sweep(
        white_enabled: bool,
        black_enabled: bool,
        min_luminosity: float = 0.5,
        max_luminosity: float = 1.7,
        luminosity_step: float = 0.01,
        time_per_luminosity: int = 50,
        gray: Optional[float] = None,
        round_world: bool = False
) -> Tuple[Planet, xr.Dataset]:
    """Raise the sun's luminosity and lower it again.

    Daisies are reseeded whenever the luminosity changes, so populations can
    re-establish after going extinct. The dataset holds the state the planet
    settled at for every luminosity.

    Args:
        white_enabled: Whether white daisies may grow
        black_enabled: Whether black daisies may grow
        min_luminosity: Lowest luminosity of the sweep
        max_luminosity: Highest luminosity of the sweep
        luminosity_step: Change in luminosity between settling periods
        time_per_luminosity: Time units spent settling at each luminosity
        gray: Initial gray proportion; None leaves gray disabled
        round_world: Use the latitude-resolved model

    Returns:
        Tuple of (planet, recorded dataset)
    """
    if time_per_luminosity <= 0:
        raise ValueError(
            f"Time per luminosity must be positive, got {time_per_luminosity}"
        )
    luminosities = sweep_values(min_luminosity, max_luminosity, luminosity_step)

    planet = Planet(
        0.5 if white_enabled else 0.0,
        0.5 if black_enabled else 0.0,
        min_luminosity,
        gray=gray,
        round_world=round_world,
    )
    planet.set_white_enabled(white_enabled)
    planet.set_black_enabled(black_enabled)

    updates = time_per_luminosity * planet.get_updates_per_time_unit()
    recorder = sweep_luminosities(planet, luminosities, updates)

    dataset = recorder.to_dataset()
    temps = dataset["temp"].values
    print(
        f"Luminosity sweep completed over {len(luminosities)} luminosities. "
        f"Temperature range: {np.nanmin(temps):.1f} to {np.nanmax(temps):.1f} C"
    )
    return planet, dataset
