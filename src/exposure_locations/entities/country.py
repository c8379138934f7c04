"""Country domain entity."""

from enum import Enum


class Country(str, Enum):
    """Countries with an upstream exposure-location source."""

    NZ = "nz"
    AU = "au"
