"""Star data model with anomalies and asteroid belts."""

from dataclasses import dataclass, field
from typing import List, Literal, Optional

from ..utils.constants import BELT_RESOURCE_TYPES, RESOURCE_TYPES, STAR_TYPES
from .planet import Planet, ResourceType

StarType = Literal["O", "B", "A", "F", "G", "K", "M"]
AnomalyType = Literal["gravity-well", "radiation-storm", "temporal-distortion", "derelict"]
BeltRichness = Literal["sparse", "moderate", "rich"]


@dataclass(frozen=True)
class AnomalyImpact:
    """Effect of an anomaly on its system's economy."""

    modifier: float
    resource: Optional[ResourceType] = None  # Resource the modifier is biased towards

    def __post_init__(self):
        if self.resource is not None and self.resource not in RESOURCE_TYPES:
            raise ValueError(f"Invalid impact resource: {self.resource}")


@dataclass(frozen=True)
class StarAnomaly:
    """A notable phenomenon attached to a star."""

    id: str
    type: AnomalyType
    description: str
    impact: AnomalyImpact


@dataclass(frozen=True)
class AsteroidBelt:
    """An asteroid belt yielding metal or minerals."""

    id: str
    name: str  # e.g., "Belt-X7Q"
    richness: BeltRichness
    primary_resource: ResourceType  # "metal" or "minerals"
    yield_per_hour: int

    def __post_init__(self):
        """Validate belt data after initialization."""
        if self.richness not in ("sparse", "moderate", "rich"):
            raise ValueError(f"Invalid richness: {self.richness}")
        if self.primary_resource not in BELT_RESOURCE_TYPES:
            raise ValueError(
                f"Invalid primary_resource: {self.primary_resource} (must be 'metal' or 'minerals')"
            )
        if self.yield_per_hour < 0:
            raise ValueError(f"Invalid yield_per_hour: {self.yield_per_hour} (must be >= 0)")


@dataclass
class Star:
    """Represents the star at the heart of a solar system.

    Radius and luminosity follow from mass through fixed power laws.
    The planet list is the only part replaced after generation (when
    resources are advanced); everything else stays as generated.
    """

    id: str  # e.g., "star-0f3kz9qa"
    name: str  # e.g., "Star-AB12"
    type: StarType
    mass_solar: float
    radius_solar: float
    luminosity_solar: float
    planets: List[Planet] = field(default_factory=list)
    anomalies: List[StarAnomaly] = field(default_factory=list)  # 0 or 1
    asteroid_belts: List[AsteroidBelt] = field(default_factory=list)  # 0-2

    def __post_init__(self):
        """Validate star data after initialization."""
        if self.type not in STAR_TYPES:
            raise ValueError(f"Invalid type: {self.type} (must be one of {''.join(STAR_TYPES)})")
        if self.mass_solar <= 0:
            raise ValueError(f"Invalid mass_solar: {self.mass_solar} (must be > 0)")
        if len(self.anomalies) > 1:
            raise ValueError(f"Invalid anomalies: {len(self.anomalies)} (must be 0 or 1)")
        if len(self.asteroid_belts) > 2:
            raise ValueError(
                f"Invalid asteroid_belts: {len(self.asteroid_belts)} (must be 0-2)"
            )
