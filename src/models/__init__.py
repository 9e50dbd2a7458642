"""Data models for the galaxy dashboard."""

from .galaxy import Galaxy, SolarSystem
from .planet import (
    OrbitalPosition,
    Planet,
    PlanetEnvironment,
    ResourceSource,
    ResourceType,
    empty_resource_map,
)
from .star import AnomalyImpact, AsteroidBelt, Star, StarAnomaly

__all__ = [
    "Galaxy",
    "SolarSystem",
    "Star",
    "StarAnomaly",
    "AnomalyImpact",
    "AsteroidBelt",
    "Planet",
    "OrbitalPosition",
    "PlanetEnvironment",
    "ResourceSource",
    "ResourceType",
    "empty_resource_map",
]
