#!/usr/bin/env python3
"""Reproduce the graphs of Watson & Lovelock's Daisyworld paper.

(a) bare planet, (b) black daisies only, (c) white daisies only and
(d) both, each under a sun that brightens from 0.5 to 1.7 and dims again.
"""

import matplotlib.pyplot as plt

from src.daisyworld import constant_luminosity_run, luminosity_sweep
from src.utils import Visualizer


def demonstrate_constant_luminosity(visualizer):
    """Black-only and black-and-white planets under a constant sun."""
    print("\n=== Constant Luminosity ===")
    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(16, 6))

    # Expected: black settles near 0.15 at about 35 C
    _, black = constant_luminosity_run(white=0.0, black=0.5, white_enabled=False)
    visualizer.plot_time_series(black, ax=ax1, title="Black daisies only")

    # Expected: black near 0.3, white near 0.4, about 22 C
    _, both = constant_luminosity_run(white=0.5, black=0.5)
    visualizer.plot_time_series(both, ax=ax2, title="Black and white daisies")

    plt.tight_layout()
    plt.show()


def demonstrate_sweeps(visualizer, time_per_luminosity=50):
    """The four luminosity sweeps of the paper."""
    print("\n=== Luminosity Sweeps ===")
    cases = [
        (False, False, "(a) No daisies"),
        (False, True, "(b) Black daisies"),
        (True, False, "(c) White daisies"),
        (True, True, "(d) Black and white daisies"),
    ]
    fig, axes = plt.subplots(2, 2, figsize=(16, 12))
    for ax, (white, black, title) in zip(axes.flat, cases):
        print(f"Running sweep {title}...")
        _, dataset = luminosity_sweep(white, black, time_per_luminosity=time_per_luminosity)
        visualizer.plot_luminosity_sweep(dataset, ax=ax, title=title)

    plt.suptitle("Daisyworld under a changing sun", fontsize=16)
    plt.tight_layout()
    plt.show()


if __name__ == "__main__":
    visualizer = Visualizer()
    demonstrate_constant_luminosity(visualizer)
    demonstrate_sweeps(visualizer, time_per_luminosity=20)
    print("Simulation complete.")
