"""Planet data model with resource inventory."""

import math
from dataclasses import dataclass, field
from typing import Dict, List, Literal

from ..utils.constants import RESOURCE_TYPES

ResourceType = Literal["metal", "minerals", "fuel", "energy", "research"]


def empty_resource_map() -> Dict[str, int]:
    """Return a mapping with every resource type set to 0."""
    return {resource: 0 for resource in RESOURCE_TYPES}


@dataclass(frozen=True)
class OrbitalPosition:
    """Where a planet sits around its star."""

    orbital_radius_au: float  # Distance from star in AU
    orbital_period_days: float  # Kepler: radius^1.5 * 365.25
    angle_radians: float  # [0, 2*pi)

    def __post_init__(self):
        """Validate orbital data after initialization."""
        if self.orbital_radius_au <= 0:
            raise ValueError(
                f"Invalid orbital_radius_au: {self.orbital_radius_au} (must be > 0)"
            )
        if not (0 <= self.angle_radians < 2 * math.pi):
            raise ValueError(
                f"Invalid angle_radians: {self.angle_radians} (must be in [0, 2*pi))"
            )


@dataclass(frozen=True)
class PlanetEnvironment:
    """Surface conditions of a planet. Attributes are independent."""

    gravity: float  # m/s^2
    atmosphere_density: float
    temperature_kelvin: float
    habitability_index: float  # 0.1-0.95


@dataclass(frozen=True)
class ResourceSource:
    """Hourly production of a single resource on a planet."""

    type: ResourceType
    production_rate_per_hour: float

    def __post_init__(self):
        """Validate resource source after initialization."""
        if self.type not in RESOURCE_TYPES:
            raise ValueError(f"Invalid resource type: {self.type}")
        if self.production_rate_per_hour < 0:
            raise ValueError(
                f"Invalid production_rate_per_hour: {self.production_rate_per_hour} (must be >= 0)"
            )


@dataclass
class Planet:
    """Represents a planet orbiting a star.

    Planets produce resources continuously. Production accumulates as whole
    units in resource_inventory, with the fractional part carried over in
    resource_remainder so that no production is lost between updates.
    Only the inventory, remainder and last_updated_ms fields change after
    generation, and only through the accrual engine.
    """

    id: str  # e.g., "planet-k3j9x0ab"
    name: str  # e.g., "Star-AB12-1"
    position: OrbitalPosition
    environment: PlanetEnvironment
    resource_sources: List[ResourceSource] = field(default_factory=list)
    resource_inventory: Dict[str, int] = field(default_factory=empty_resource_map)
    resource_remainder: Dict[str, float] = field(default_factory=empty_resource_map)
    last_updated_ms: int = 0  # Milliseconds since epoch
    is_controlled: bool = False  # Owned by the player

    def __post_init__(self):
        """Validate planet data after initialization."""
        for resource in RESOURCE_TYPES:
            if resource not in self.resource_inventory:
                raise ValueError(f"Invalid resource_inventory: missing '{resource}'")
            if resource not in self.resource_remainder:
                raise ValueError(f"Invalid resource_remainder: missing '{resource}'")

        for resource, amount in self.resource_inventory.items():
            if not isinstance(amount, int) or amount < 0:
                raise ValueError(
                    f"Invalid resource_inventory[{resource}]: {amount} (must be a non-negative integer)"
                )
        for resource, remainder in self.resource_remainder.items():
            if not (0 <= remainder < 1):
                raise ValueError(
                    f"Invalid resource_remainder[{resource}]: {remainder} (must be in [0, 1))"
                )

    def production_rates(self) -> Dict[str, float]:
        """Get hourly production rate per resource type.

        Returns:
            Mapping of resource type to rate (only types with a source)
        """
        return {
            source.type: source.production_rate_per_hour for source in self.resource_sources
        }
