"""
Daisyworld simulation package.

This package contains the energy-balance physics, the flat and
latitude-resolved planet models, data recording and the classic
Daisyworld experiments.
"""

from .species import Species
from .planet import Planet
from .latitude import LatitudeBands
from .recorder import DataRecorder
from .experiments import constant_luminosity_run, luminosity_sweep

__all__ = [
    'Species', 'Planet', 'LatitudeBands', 'DataRecorder',
    'constant_luminosity_run', 'luminosity_sweep'
]
