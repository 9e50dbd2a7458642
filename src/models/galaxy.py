"""Galaxy state container."""

from dataclasses import dataclass, field
from typing import Iterator

from .planet import Planet
from .star import Star


@dataclass
class SolarSystem:
    """A solar system wrapping exactly one star."""

    id: str
    name: str  # "{star name} System"
    star: Star


@dataclass
class Galaxy:
    """Main galaxy state container.

    A galaxy and its whole subtree are built at once by the generator and
    replaced wholesale on regeneration.
    """

    id: str  # e.g., "galaxy-1x9c0pde"
    name: str  # e.g., "Galaxy-4KQ2Z"
    solar_systems: list[SolarSystem] = field(default_factory=list)

    def iter_planets(self) -> Iterator[Planet]:
        """Yield every planet in system order, then orbit order."""
        for system in self.solar_systems:
            yield from system.star.planets

    def controlled_planets(self) -> list[Planet]:
        """Get planets controlled by the player."""
        return [planet for planet in self.iter_planets() if planet.is_controlled]

    def find_planet(self, planet_id: str) -> Planet | None:
        """Look up a planet by ID.

        Args:
            planet_id: Planet identifier

        Returns:
            Planet if found, None otherwise
        """
        for planet in self.iter_planets():
            if planet.id == planet_id:
                return planet
        return None
