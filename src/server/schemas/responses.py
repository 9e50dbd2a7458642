"""Pydantic response schemas for API endpoints.

Field names match the JSON produced by utils.serialization.
"""

from pydantic import BaseModel


class OrbitalPositionSchema(BaseModel):
    orbitalRadiusAU: float  # noqa: N815
    orbitalPeriodDays: float  # noqa: N815
    angleRadians: float  # noqa: N815


class PlanetEnvironmentSchema(BaseModel):
    gravity: float
    atmosphereDensity: float  # noqa: N815
    temperatureKelvin: float  # noqa: N815
    habitabilityIndex: float  # noqa: N815


class ResourceSourceSchema(BaseModel):
    type: str
    productionRatePerHour: float  # noqa: N815


class PlanetSchema(BaseModel):
    """Planet with resources advanced to the response time."""

    id: str
    name: str
    position: OrbitalPositionSchema
    environment: PlanetEnvironmentSchema
    resourceSources: list[ResourceSourceSchema]  # noqa: N815
    resourceInventory: dict[str, int]  # noqa: N815
    resourceRemainder: dict[str, float]  # noqa: N815
    lastUpdatedMs: int  # noqa: N815
    isControlled: bool  # noqa: N815


class AnomalyImpactSchema(BaseModel):
    resource: str | None = None
    modifier: float


class StarAnomalySchema(BaseModel):
    id: str
    type: str
    description: str
    impact: AnomalyImpactSchema


class AsteroidBeltSchema(BaseModel):
    id: str
    name: str
    richness: str
    primaryResource: str  # noqa: N815
    yieldPerHour: int  # noqa: N815


class StarSchema(BaseModel):
    id: str
    name: str
    type: str
    massSolar: float  # noqa: N815
    radiusSolar: float  # noqa: N815
    luminositySolar: float  # noqa: N815
    planets: list[PlanetSchema]
    anomalies: list[StarAnomalySchema]
    asteroidBelts: list[AsteroidBeltSchema]  # noqa: N815


class SolarSystemSchema(BaseModel):
    id: str
    name: str
    star: StarSchema


class GalaxyResponse(BaseModel):
    """Response containing the full galaxy."""

    id: str
    name: str
    solarSystems: list[SolarSystemSchema]  # noqa: N815


class StatusResponse(BaseModel):
    """Server health check."""

    service: str
    status: str
    solarSystems: int  # noqa: N815
