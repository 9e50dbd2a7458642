"""Galaxy serialization to/from JSON-compatible dictionaries.

The dictionaries use the camelCase field names the dashboard frontend
reads (solarSystems, resourceInventory, lastUpdatedMs, ...), and contain
only strings, numbers, booleans, lists and dicts.
"""

from typing import Any

from ..models.galaxy import Galaxy, SolarSystem
from ..models.planet import OrbitalPosition, Planet, PlanetEnvironment, ResourceSource
from ..models.star import AnomalyImpact, AsteroidBelt, Star, StarAnomaly


def serialize_galaxy(galaxy: Galaxy) -> dict[str, Any]:
    """Convert Galaxy object to JSON-compatible dictionary.

    Args:
        galaxy: Galaxy to serialize

    Returns:
        Dictionary representation of the galaxy

    Example:
        json.dumps(serialize_galaxy(galaxy))
    """
    return {
        "id": galaxy.id,
        "name": galaxy.name,
        "solarSystems": [_serialize_solar_system(s) for s in galaxy.solar_systems],
    }


def deserialize_galaxy(data: dict[str, Any]) -> Galaxy:
    """Reconstruct Galaxy object from dictionary.

    Args:
        data: Dictionary produced by serialize_galaxy

    Returns:
        Reconstructed Galaxy object

    Raises:
        KeyError: If a required field is missing
        ValueError: If a field fails model validation
    """
    return Galaxy(
        id=data["id"],
        name=data["name"],
        solar_systems=[_deserialize_solar_system(s) for s in data.get("solarSystems", [])],
    )


def _serialize_solar_system(system: SolarSystem) -> dict[str, Any]:
    """Convert SolarSystem to dictionary."""
    return {
        "id": system.id,
        "name": system.name,
        "star": _serialize_star(system.star),
    }


def _deserialize_solar_system(data: dict[str, Any]) -> SolarSystem:
    """Reconstruct SolarSystem from dictionary."""
    return SolarSystem(
        id=data["id"],
        name=data["name"],
        star=_deserialize_star(data["star"]),
    )


def _serialize_star(star: Star) -> dict[str, Any]:
    """Convert Star to dictionary."""
    return {
        "id": star.id,
        "name": star.name,
        "type": star.type,
        "massSolar": star.mass_solar,
        "radiusSolar": star.radius_solar,
        "luminositySolar": star.luminosity_solar,
        "planets": [_serialize_planet(p) for p in star.planets],
        "anomalies": [_serialize_anomaly(a) for a in star.anomalies],
        "asteroidBelts": [_serialize_belt(b) for b in star.asteroid_belts],
    }


def _deserialize_star(data: dict[str, Any]) -> Star:
    """Reconstruct Star from dictionary."""
    return Star(
        id=data["id"],
        name=data["name"],
        type=data["type"],
        mass_solar=data["massSolar"],
        radius_solar=data["radiusSolar"],
        luminosity_solar=data["luminositySolar"],
        planets=[_deserialize_planet(p) for p in data.get("planets", [])],
        anomalies=[_deserialize_anomaly(a) for a in data.get("anomalies", [])],
        asteroid_belts=[_deserialize_belt(b) for b in data.get("asteroidBelts", [])],
    )


def _serialize_planet(planet: Planet) -> dict[str, Any]:
    """Convert Planet to dictionary."""
    return {
        "id": planet.id,
        "name": planet.name,
        "position": {
            "orbitalRadiusAU": planet.position.orbital_radius_au,
            "orbitalPeriodDays": planet.position.orbital_period_days,
            "angleRadians": planet.position.angle_radians,
        },
        "environment": {
            "gravity": planet.environment.gravity,
            "atmosphereDensity": planet.environment.atmosphere_density,
            "temperatureKelvin": planet.environment.temperature_kelvin,
            "habitabilityIndex": planet.environment.habitability_index,
        },
        "resourceSources": [
            {"type": s.type, "productionRatePerHour": s.production_rate_per_hour}
            for s in planet.resource_sources
        ],
        "resourceInventory": dict(planet.resource_inventory),
        "resourceRemainder": dict(planet.resource_remainder),
        "lastUpdatedMs": planet.last_updated_ms,
        "isControlled": planet.is_controlled,
    }


def _deserialize_planet(data: dict[str, Any]) -> Planet:
    """Reconstruct Planet from dictionary."""
    position = data["position"]
    environment = data["environment"]
    return Planet(
        id=data["id"],
        name=data["name"],
        position=OrbitalPosition(
            orbital_radius_au=position["orbitalRadiusAU"],
            orbital_period_days=position["orbitalPeriodDays"],
            angle_radians=position["angleRadians"],
        ),
        environment=PlanetEnvironment(
            gravity=environment["gravity"],
            atmosphere_density=environment["atmosphereDensity"],
            temperature_kelvin=environment["temperatureKelvin"],
            habitability_index=environment["habitabilityIndex"],
        ),
        resource_sources=[
            ResourceSource(type=s["type"], production_rate_per_hour=s["productionRatePerHour"])
            for s in data.get("resourceSources", [])
        ],
        resource_inventory=dict(data["resourceInventory"]),
        resource_remainder=dict(data["resourceRemainder"]),
        last_updated_ms=data["lastUpdatedMs"],
        is_controlled=data.get("isControlled", False),
    )


def _serialize_anomaly(anomaly: StarAnomaly) -> dict[str, Any]:
    """Convert StarAnomaly to dictionary. Omits impact.resource when unset."""
    impact: dict[str, Any] = {"modifier": anomaly.impact.modifier}
    if anomaly.impact.resource is not None:
        impact["resource"] = anomaly.impact.resource
    return {
        "id": anomaly.id,
        "type": anomaly.type,
        "description": anomaly.description,
        "impact": impact,
    }


def _deserialize_anomaly(data: dict[str, Any]) -> StarAnomaly:
    """Reconstruct StarAnomaly from dictionary."""
    return StarAnomaly(
        id=data["id"],
        type=data["type"],
        description=data["description"],
        impact=AnomalyImpact(
            modifier=data["impact"]["modifier"],
            resource=data["impact"].get("resource"),
        ),
    )


def _serialize_belt(belt: AsteroidBelt) -> dict[str, Any]:
    """Convert AsteroidBelt to dictionary."""
    return {
        "id": belt.id,
        "name": belt.name,
        "richness": belt.richness,
        "primaryResource": belt.primary_resource,
        "yieldPerHour": belt.yield_per_hour,
    }


def _deserialize_belt(data: dict[str, Any]) -> AsteroidBelt:
    """Reconstruct AsteroidBelt from dictionary."""
    return AsteroidBelt(
        id=data["id"],
        name=data["name"],
        richness=data["richness"],
        primary_resource=data["primaryResource"],
        yield_per_hour=data["yieldPerHour"],
    )
