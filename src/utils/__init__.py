"""
Utility functions and classes for Daisyworld runs.
"""

from .config import Configuration
from .visualization import Visualizer

__all__ = ['Configuration', 'Visualizer']
