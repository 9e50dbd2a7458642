"""Procedural galaxy generation.

Builds a complete galaxy (systems, stars, planets, anomalies and asteroid
belts) from a small configuration. The structure is fixed by the
configuration; the contents come from a GalaxyRNG, so a seeded RNG
reproduces the same galaxy.
"""

import logging
import math
from dataclasses import dataclass
from typing import List

from ..models import (
    AnomalyImpact,
    AsteroidBelt,
    Galaxy,
    OrbitalPosition,
    Planet,
    PlanetEnvironment,
    ResourceSource,
    SolarSystem,
    Star,
    StarAnomaly,
    empty_resource_map,
)
from ..utils import GalaxyRNG
from ..utils.constants import (
    ANOMALY_CHANCE,
    ANOMALY_TYPES,
    ASTEROID_BELT_CHANCE,
    ASTEROID_BELT_COUNT_RANGE,
    ATMOSPHERE_DENSITY_RANGE,
    BASE_PRODUCTION_RATES,
    BELT_BASE_YIELD,
    BELT_RESOURCE_TYPES,
    BELT_RICHNESS_FACTORS,
    BELT_RICHNESS_LEVELS,
    BELT_YIELD_VARIANCE_RANGE,
    DAYS_PER_YEAR,
    DEFAULT_SOLAR_SYSTEM_COUNT,
    FIRST_ORBIT_RANGE,
    GRAVITY_RANGE,
    HABITABILITY_RANGE,
    LUMINOSITY_EXPONENT,
    MAX_ORBITAL_RADIUS_AU,
    ORBIT_JITTER_RANGE,
    ORBIT_PRODUCTION_BIAS,
    ORBIT_SPACING_BASE,
    ORBIT_SPACING_RANGE,
    PLANET_COUNT_RANGE,
    PLANET_RESOURCE_TYPES,
    PRODUCTION_VARIANCE_RANGE,
    RADIUS_EXPONENT,
    STAR_MASS_RANGE,
    STAR_TYPES,
    TEMPERATURE_RANGE,
)
from .accrual import current_time_ms
from .errors import GalaxyConfigError

logger = logging.getLogger(__name__)

TWO_PI = 2 * math.pi


@dataclass(frozen=True)
class GalaxyConfig:
    """Galaxy generation settings.

    solar_system_count falls back to DEFAULT_SOLAR_SYSTEM_COUNT when None.
    seed is only used when generate_galaxy is not given an explicit RNG.
    """

    solar_system_count: int | None = None
    seed: int | None = None

    def __post_init__(self):
        count = self.solar_system_count
        if count is None:
            return
        if isinstance(count, bool) or not isinstance(count, int):
            raise GalaxyConfigError(
                f"Invalid solar_system_count: {count!r} (must be a non-negative integer)"
            )
        if count < 0:
            raise GalaxyConfigError(
                f"Invalid solar_system_count: {count} (must be a non-negative integer)"
            )

    @property
    def resolved_solar_system_count(self) -> int:
        """Solar system count with the default applied."""
        if self.solar_system_count is None:
            return DEFAULT_SOLAR_SYSTEM_COUNT
        return self.solar_system_count


def generate_galaxy(
    config: GalaxyConfig | None = None,
    rng: GalaxyRNG | None = None,
    now_ms: int | None = None,
) -> Galaxy:
    """Generate a fully populated galaxy.

    Algorithm:
    1. Create solar_system_count independent solar systems
    2. Each system wraps one star with 0-1 anomaly, 0-2 asteroid belts
       and 2-5 planets
    3. Mark the first planet of the first system as player-controlled

    Args:
        config: Generation settings (defaults to GalaxyConfig())
        rng: Random source (defaults to GalaxyRNG(config.seed))
        now_ms: Creation timestamp for every planet (defaults to wall clock)

    Returns:
        Galaxy with every planet's resources at zero

    Raises:
        GalaxyConfigError: If the configuration is invalid
    """
    if config is None:
        config = GalaxyConfig()
    elif not isinstance(config, GalaxyConfig):
        raise GalaxyConfigError(f"Invalid config: {config!r} (must be a GalaxyConfig)")

    if rng is None:
        rng = GalaxyRNG(config.seed)
    if now_ms is None:
        now_ms = current_time_ms()

    solar_systems: List[SolarSystem] = []
    for _ in range(config.resolved_solar_system_count):
        system = _create_solar_system(rng, now_ms)
        solar_systems.append(system)
        logger.debug(
            f"Generated {system.name}: type {system.star.type}, "
            f"{len(system.star.planets)} planets, {len(system.star.asteroid_belts)} belts"
        )

    # The only ownership flag ever set by generation
    if solar_systems and solar_systems[0].star.planets:
        solar_systems[0].star.planets[0].is_controlled = True

    galaxy = Galaxy(
        id=rng.random_id("galaxy"),
        name=f"Galaxy-{rng.base36(5).upper()}",
        solar_systems=solar_systems,
    )

    logger.info(
        f"Generated {galaxy.name}: {len(solar_systems)} systems, "
        f"{sum(1 for _ in galaxy.iter_planets())} planets (seed={rng.seed})"
    )

    return galaxy


def _create_solar_system(rng: GalaxyRNG, now_ms: int) -> SolarSystem:
    """Create a solar system around a freshly generated star."""
    star = _create_star(rng, now_ms)
    return SolarSystem(
        id=rng.random_id("system"),
        name=f"{star.name} System",
        star=star,
    )


def _create_star(rng: GalaxyRNG, now_ms: int) -> Star:
    """Create a star with its anomalies, asteroid belts and planets.

    Args:
        rng: Random number generator
        now_ms: Creation timestamp for the star's planets

    Returns:
        Star with 2-5 planets
    """
    star_type = rng.choice(STAR_TYPES)
    mass_solar = rng.uniform(*STAR_MASS_RANGE)
    luminosity_solar = mass_solar**LUMINOSITY_EXPONENT
    radius_solar = mass_solar**RADIUS_EXPONENT

    star_name = f"Star-{rng.base36(4).upper()}"
    star = Star(
        id=rng.random_id("star"),
        name=star_name,
        type=star_type,
        mass_solar=round(mass_solar, 2),
        radius_solar=round(radius_solar, 2),
        luminosity_solar=round(luminosity_solar, 2),
        anomalies=_create_star_anomalies(rng),
        asteroid_belts=_create_asteroid_belts(rng),
    )

    planet_count = math.floor(rng.uniform(*PLANET_COUNT_RANGE))
    for index in range(planet_count):
        star.planets.append(_create_planet(rng, star.name, index, now_ms))

    return star


def _create_star_anomalies(rng: GalaxyRNG) -> List[StarAnomaly]:
    """Roll for a single anomaly (60% chance)."""
    if rng.random() < ANOMALY_CHANCE:
        return [_create_anomaly(rng)]
    return []


def _create_anomaly(rng: GalaxyRNG) -> StarAnomaly:
    anomaly_type = rng.choice(list(ANOMALY_TYPES))
    anomaly_config = ANOMALY_TYPES[anomaly_type]
    modifier = round(rng.uniform(*anomaly_config["impact_range"]), 2)

    return StarAnomaly(
        id=rng.random_id("anomaly"),
        type=anomaly_type,
        description=anomaly_config["description"],
        impact=AnomalyImpact(modifier=modifier, resource=anomaly_config["resource_bias"]),
    )


def _create_asteroid_belts(rng: GalaxyRNG) -> List[AsteroidBelt]:
    """Roll for 0-2 asteroid belts (70% chance of at least one).

    Yield = 800 x richness factor x uniform(0.8, 1.3), rounded.
    """
    if rng.random() >= ASTEROID_BELT_CHANCE:
        return []

    belt_count = math.floor(rng.uniform(*ASTEROID_BELT_COUNT_RANGE))
    belts = []
    for _ in range(belt_count):
        richness = rng.choice(BELT_RICHNESS_LEVELS)
        primary_resource = rng.choice(BELT_RESOURCE_TYPES)
        yield_per_hour = _round_half_up(
            BELT_BASE_YIELD
            * BELT_RICHNESS_FACTORS[richness]
            * rng.uniform(*BELT_YIELD_VARIANCE_RANGE)
        )

        belts.append(
            AsteroidBelt(
                id=rng.random_id("belt"),
                name=f"Belt-{rng.base36(3).upper()}",
                richness=richness,
                primary_resource=primary_resource,
                yield_per_hour=yield_per_hour,
            )
        )

    return belts


def _create_planet(rng: GalaxyRNG, star_name: str, index: int, now_ms: int) -> Planet:
    """Create the planet at orbit `index` (0-based) of a star.

    Args:
        rng: Random number generator
        star_name: Name of the parent star (planet names derive from it)
        index: Orbit index, also biases production upwards
        now_ms: Creation timestamp

    Returns:
        Uncontrolled planet with empty inventory
    """
    orbital_radius_au = _create_orbital_radius(rng, index)
    orbital_period_days = orbital_radius_au**1.5 * DAYS_PER_YEAR

    resource_sources = [
        _create_planet_resource(rng, resource, index) for resource in PLANET_RESOURCE_TYPES
    ]

    gravity = rng.uniform(*GRAVITY_RANGE)
    atmosphere_density = rng.uniform(*ATMOSPHERE_DENSITY_RANGE)
    temperature_kelvin = rng.uniform(*TEMPERATURE_RANGE)
    habitability_index = round(rng.uniform(*HABITABILITY_RANGE), 2)

    # Rounding can land exactly on 2*pi
    angle_radians = round(rng.uniform(0, TWO_PI), 4)
    if angle_radians >= TWO_PI:
        angle_radians = 0.0

    return Planet(
        id=rng.random_id("planet"),
        name=f"{star_name}-{index + 1}",
        position=OrbitalPosition(
            orbital_radius_au=round(orbital_radius_au, 2),
            orbital_period_days=round(orbital_period_days, 1),
            angle_radians=angle_radians,
        ),
        environment=PlanetEnvironment(
            gravity=round(gravity, 2),
            atmosphere_density=round(atmosphere_density, 2),
            temperature_kelvin=round(temperature_kelvin, 2),
            habitability_index=habitability_index,
        ),
        resource_sources=resource_sources,
        resource_inventory=empty_resource_map(),
        resource_remainder=empty_resource_map(),
        last_updated_ms=now_ms,
        is_controlled=False,
    )


def _create_orbital_radius(rng: GalaxyRNG, index: int) -> float:
    """Pick an orbital radius in AU, capped at MAX_ORBITAL_RADIUS_AU.

    Orbits widen with index but are not forced to be strictly increasing.
    """
    if index == 0:
        return rng.uniform(*FIRST_ORBIT_RANGE)

    base = ORBIT_SPACING_BASE + index * rng.uniform(*ORBIT_SPACING_RANGE)
    return min(base + rng.uniform(*ORBIT_JITTER_RANGE), MAX_ORBITAL_RADIUS_AU)


def _create_planet_resource(rng: GalaxyRNG, resource: str, index: int) -> ResourceSource:
    """Create a resource source with variance and an outer-orbit bonus."""
    variance = rng.uniform(*PRODUCTION_VARIANCE_RANGE)
    orbit_bias = 1 + index * ORBIT_PRODUCTION_BIAS
    rate = _round_half_up(BASE_PRODUCTION_RATES[resource] * variance * orbit_bias)

    return ResourceSource(type=resource, production_rate_per_hour=max(0, rate))


def _round_half_up(value: float) -> int:
    """Round to the nearest integer, .5 rounding up (not banker's rounding)."""
    return math.floor(value + 0.5)
