"""Utility functions and constants for the galaxy dashboard."""

from .constants import (
    BASE_PRODUCTION_RATES,
    BELT_RESOURCE_TYPES,
    DEFAULT_SOLAR_SYSTEM_COUNT,
    MAX_ORBITAL_RADIUS_AU,
    MS_PER_HOUR,
    PLANET_RESOURCE_TYPES,
    RESOURCE_TYPES,
    STAR_TYPES,
)
from .rng import GalaxyRNG

__all__ = [
    "BASE_PRODUCTION_RATES",
    "BELT_RESOURCE_TYPES",
    "DEFAULT_SOLAR_SYSTEM_COUNT",
    "MAX_ORBITAL_RADIUS_AU",
    "MS_PER_HOUR",
    "PLANET_RESOURCE_TYPES",
    "RESOURCE_TYPES",
    "STAR_TYPES",
    "GalaxyRNG",
]
