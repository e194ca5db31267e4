"""Daisy species for Daisyworld."""

from enum import Enum

from .constants import WHITE_ALBEDO, BLACK_ALBEDO, GRAY_ALBEDO


class Species(Enum):
    """The fixed set of daisy colors.

    Bare ground is not a species: its proportion is whatever the daisies
    leave uncovered.
    """

    WHITE = "white"
    BLACK = "black"
    GRAY = "gray"

    @property
    def albedo(self) -> float:
        return _ALBEDOS[self]

    @property
    def abbreviation(self) -> str:
        """Single letter used in recorded column names (a_w, a_b, a_g)."""
        return self.value[0]

    @classmethod
    def parse(cls, value) -> "Species":
        """Coerce a Species or a color name ('white', 'b', ...) to a Species.

        Raises:
            ValueError: If the value names no species
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for species in cls:
                if key in (species.value, species.abbreviation):
                    return species
        raise ValueError(f"Unknown daisy species: {value!r}")


_ALBEDOS = {
    Species.WHITE: WHITE_ALBEDO,
    Species.BLACK: BLACK_ALBEDO,
    Species.GRAY: GRAY_ALBEDO,
}

# Column order used for every per-species array
SPECIES_ORDER = (Species.WHITE, Species.BLACK, Species.GRAY)
SPECIES_ALBEDOS = tuple(species.albedo for species in SPECIES_ORDER)
