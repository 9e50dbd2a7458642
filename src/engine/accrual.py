"""Time-based resource accrual.

Planets produce resources continuously at an hourly rate. Each update
converts the production since the last update into whole inventory units
and carries the fractional part forward in the planet's remainder:

    total     = remainder + rate x elapsed_hours
    whole     = floor(total)
    remainder = total - whole
    inventory = inventory + whole

Splitting an interval into several updates therefore yields the same
inventory + remainder as a single update over the whole interval.
"""

import dataclasses
import math
import time

from ..models.galaxy import Galaxy
from ..models.planet import Planet
from ..utils.constants import MS_PER_HOUR


def current_time_ms() -> int:
    """Wall-clock time in integer milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


def advance_planet(planet: Planet, now_ms: int) -> Planet:
    """Advance a planet's resources to `now_ms`.

    Resource types without a source (energy, for instance) are left
    untouched. A non-positive elapsed time (repeated call in the same
    millisecond, or a clock that went backwards) is a no-op.

    Args:
        planet: Planet to advance (not modified)
        now_ms: Current time in milliseconds since the epoch

    Returns:
        New Planet with updated inventory, remainder and last_updated_ms,
        or the same planet if no time has elapsed
    """
    elapsed_hours = (now_ms - planet.last_updated_ms) / MS_PER_HOUR
    if elapsed_hours <= 0:
        return planet

    inventory = dict(planet.resource_inventory)
    remainder = dict(planet.resource_remainder)

    for source in planet.resource_sources:
        produced = source.production_rate_per_hour * elapsed_hours
        total = remainder[source.type] + produced
        whole_units = math.floor(total)
        fraction = total - whole_units
        # Float error can leave a fraction of exactly 1.0
        if fraction >= 1:
            whole_units += 1
            fraction = 0.0
        remainder[source.type] = max(0.0, fraction)
        inventory[source.type] += whole_units

    return dataclasses.replace(
        planet,
        resource_sources=list(planet.resource_sources),
        resource_inventory=inventory,
        resource_remainder=remainder,
        last_updated_ms=now_ms,
    )


def advance_galaxy(galaxy: Galaxy, now_ms: int) -> Galaxy:
    """Advance every planet in the galaxy to the same instant.

    Each star's planet list is replaced with the advanced planets.

    Args:
        galaxy: Galaxy to update in place
        now_ms: Single time snapshot used for every planet

    Returns:
        The same galaxy, for chaining
    """
    for system in galaxy.solar_systems:
        star = system.star
        star.planets = [advance_planet(planet, now_ms) for planet in star.planets]
    return galaxy
