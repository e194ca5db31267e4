"""Run configuration for Daisyworld.

Values come from the dataclass defaults, an optional YAML file and command
line flags, later sources overriding earlier ones. Range checks on user
input live here; the simulation core trusts its inputs.
"""

import argparse
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

import yaml

from src.daisyworld import Planet

_FLOAT_FIELDS = {"luminosity", "white", "black"}
_INT_FIELDS = {"time_units", "record_every"}
_BOOL_FIELDS = {"round_world", "growth", "white_enabled", "black_enabled", "plot"}


@dataclass(frozen=True)
class Configuration:
    """Settings for a single Daisyworld run."""

    luminosity: float = 1.0
    white: float = 0.5
    black: float = 0.5
    gray: Optional[float] = None
    white_enabled: bool = True
    black_enabled: bool = True
    round_world: bool = False
    growth: bool = True
    time_units: int = 100
    record_every: int = 1
    output: Optional[str] = None
    plot: bool = False

    def __post_init__(self):
        _validate(asdict(self))

    def with_updates(self, overrides: Dict[str, Any]) -> "Configuration":
        merged = asdict(self)
        merged.update(_normalise(overrides))
        return Configuration(**merged)

    @classmethod
    def from_file(cls, path) -> "Configuration":
        """Load a configuration from a YAML file.

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file holds unknown or invalid fields
        """
        return cls().with_updates(_read_config_file(Path(path)))

    @classmethod
    def from_args(cls, args: Optional[Sequence[str]] = None) -> "Configuration":
        """Build a configuration from command line flags.

        A --config file is applied first, then any explicit flags.
        """
        parser = build_parser()
        namespace = parser.parse_args(args)

        config = cls()
        if namespace.config is not None:
            config = cls.from_file(namespace.config)

        overrides = {
            name: value
            for name, value in vars(namespace).items()
            if name != "config" and value is not None
        }
        return config.with_updates(overrides)

    def build_planet(self) -> Planet:
        """Create a planet in the configured starting state."""
        planet = Planet(
            self.white,
            self.black,
            self.luminosity,
            gray=self.gray,
            round_world=self.round_world,
        )
        planet.set_white_enabled(self.white_enabled)
        planet.set_black_enabled(self.black_enabled)
        planet.set_daisy_growth_and_death(self.growth)
        return planet


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run a Daisyworld simulation")
    parser.add_argument("--config", type=Path, help="YAML configuration file")
    parser.add_argument("--luminosity", type=float, help="Dimensionless solar luminosity")
    parser.add_argument("--white", type=float, help="Initial white daisy proportion")
    parser.add_argument("--black", type=float, help="Initial black daisy proportion")
    parser.add_argument("--gray", type=float, help="Initial gray daisy proportion (enables gray)")
    parser.add_argument("--no-white", dest="white_enabled", action="store_const",
                        const=False, help="Disable white daisies")
    parser.add_argument("--no-black", dest="black_enabled", action="store_const",
                        const=False, help="Disable black daisies")
    parser.add_argument("--round-world", dest="round_world", action="store_const",
                        const=True, help="Use latitude bands")
    parser.add_argument("--no-growth", dest="growth", action="store_const",
                        const=False, help="Freeze daisy growth and death")
    parser.add_argument("--time-units", type=int, help="Length of the run in time units")
    parser.add_argument("--record-every", type=int, help="Time units between recorded rows")
    parser.add_argument("--output", help="CSV file to write recorded data to")
    parser.add_argument("--plot", action="store_const", const=True, help="Plot the run")
    return parser


def _read_config_file(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with path.open("r", encoding="utf-8") as handle:
        try:
            data = yaml.safe_load(handle) or {}
        except yaml.YAMLError as error:
            raise ValueError(f"Invalid YAML in config file {path}") from error
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping")
    return data


def _normalise(overrides: Dict[str, Any]) -> Dict[str, Any]:
    known = {field.name for field in fields(Configuration)}
    normalised = {}
    for key, value in overrides.items():
        name = str(key).replace("-", "_").lower()
        if name not in known:
            raise ValueError(f"Unknown config field: {key}")
        if value is not None:
            if name in _FLOAT_FIELDS or name == "gray":
                value = float(value)
            elif name in _INT_FIELDS:
                value = int(value)
            elif name in _BOOL_FIELDS:
                value = _parse_bool(value)
            elif name == "output":
                value = str(value)
        normalised[name] = value
    return normalised


def _parse_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)


def _validate(settings: Dict[str, Any]) -> None:
    if settings["luminosity"] <= 0:
        raise ValueError(f"Luminosity must be positive, got {settings['luminosity']}")

    proportions = {
        name: settings[name]
        for name in ("white", "black", "gray")
        if settings[name] is not None
    }
    for name, value in proportions.items():
        if not 0.0 <= value <= 1.0:
            raise ValueError(f"Proportion of {name} must be within [0, 1], got {value}")
    if sum(proportions.values()) > 1.0:
        raise ValueError("Daisy proportions cannot sum to more than 1")

    if settings["time_units"] < 0:
        raise ValueError(f"time_units cannot be negative, got {settings['time_units']}")
    if settings["record_every"] < 1:
        raise ValueError(f"record_every must be at least 1, got {settings['record_every']}")
