"""Text rendering of galaxy dashboard panels.

Produces Rich markup strings for the three dashboard views: galaxy
overview, system intelligence and planet management.
"""

from typing import List

from ..models.galaxy import Galaxy, SolarSystem
from ..models.planet import Planet
from ..models.star import AsteroidBelt, Star, StarAnomaly

# Planned infrastructure per resource, plus orbital facilities
INFRASTRUCTURE_DETAILS = {
    "metal": ("Metal Mine", "Planning upgrades to increase metal extraction efficiency."),
    "minerals": ("Mineral Mine", "Future expansions will boost mineral output."),
    "fuel": ("Fuel Synthesizer", "Enhancements will refine fuel processing throughput soon."),
    "energy": ("Energy Grid", "Grid improvements will raise planetary energy capacity."),
    "research": ("Research Laboratory", "New wings will accelerate scientific breakthroughs later."),
    "shipyard": ("Orbital Shipyard", "Expansion will enable construction of larger hulls."),
    "spacedock": ("Space Dock", "Dock upgrades will support more concurrent vessel refits soon."),
}


def format_number(value: float) -> str:
    """Format a number with thousands separators and no fraction digits.

    Examples:
        >>> format_number(1234567.8)
        '1,234,568'
        >>> format_number(0)
        '0'
    """
    return f"{round(value):,}"


def capitalize(value: str) -> str:
    """Upper-case the first character only ("minerals" -> "Minerals")."""
    return value[:1].upper() + value[1:]


def format_label(value: str) -> str:
    """Turn a hyphenated identifier into a title ("gravity-well" -> "Gravity Well")."""
    return " ".join(capitalize(segment) for segment in value.split("-"))


class GalaxyRenderer:
    """Renders galaxy views as Rich markup."""

    def render_overview(self, galaxy: Galaxy) -> str:
        """Render galaxy summary with one line per solar system.

        Args:
            galaxy: Galaxy to render

        Returns:
            Multi-line markup string
        """
        if not galaxy.solar_systems:
            return "[dim]No solar systems found.[/dim]"

        planets = list(galaxy.iter_planets())
        lines = [
            f"[bold]{galaxy.name}[/bold]",
            f"ID: {galaxy.id}",
            f"{len(galaxy.solar_systems)} systems | {len(planets)} planets",
            "",
        ]
        for system in galaxy.solar_systems:
            star = system.star
            controlled = any(p.is_controlled for p in star.planets)
            marker = "[green]*[/green] " if controlled else "  "
            lines.append(
                f"{marker}{system.name:<18} {star.type}-type  "
                f"{len(star.planets)} planets  {len(star.asteroid_belts)} belts  "
                f"{len(star.anomalies)} anomalies"
            )

        controlled_planets = galaxy.controlled_planets()
        if controlled_planets:
            lines.append("")
            lines.append("[bold]Controlled[/bold]")
            for planet in controlled_planets:
                lines.append(f"  {planet.name}: {self._inventory_summary(planet)}")

        return "\n".join(lines)

    def render_system(self, system: SolarSystem) -> str:
        """Render star, anomalies, asteroid belts and planet roster of a system.

        Args:
            system: Solar system to render

        Returns:
            Multi-line markup string
        """
        star = system.star
        lines = [
            f"[bold]{system.name}[/bold]",
            f"Primary Star: {star.name} ({star.type}-type)",
            f"{len(star.planets)} Planets | {len(star.asteroid_belts)} Belts | "
            f"{len(star.anomalies)} Anomalies",
            "",
        ]
        lines.extend(self._star_card(star))
        lines.append("")
        lines.extend(self._anomalies_section(star.anomalies))
        lines.append("")
        lines.extend(self._belts_section(star.asteroid_belts))
        lines.append("")
        lines.append("[bold]Planetary Roster[/bold]")
        for index, planet in enumerate(star.planets):
            lines.extend(self._system_planet_card(planet, index))

        return "\n".join(lines)

    def render_planet_management(self, galaxy: Galaxy) -> str:
        """Render controlled planets with inventory and production rates.

        Args:
            galaxy: Galaxy to render

        Returns:
            Multi-line markup string
        """
        entries = [
            (planet, system)
            for system in galaxy.solar_systems
            for planet in system.star.planets
            if planet.is_controlled
        ]
        if not entries:
            return (
                "[bold]Planet Management[/bold]\n"
                "No controlled colonies yet. Establish a foothold to begin infrastructure planning."
            )

        lines = ["[bold]Planet Management[/bold]", ""]
        for planet, system in entries:
            lines.append(f"[bold]{planet.name}[/bold]  (System: {system.name})")
            lines.extend(self._environment_lines(planet))
            for source in planet.resource_sources:
                stored = planet.resource_inventory.get(source.type, 0)
                lines.append(
                    f"  {capitalize(source.type):<10} Total: {format_number(stored):>12}  "
                    f"Rate: {format_number(source.production_rate_per_hour)} / hr"
                )
            lines.append("  Infrastructure Planning:")
            for title, description in self._infrastructure(planet):
                lines.append(f"    {title} [dim](upgrades coming soon)[/dim]")
                lines.append(f"      [dim]{description}[/dim]")
            lines.append("")

        return "\n".join(lines)

    def _star_card(self, star: Star) -> List[str]:
        return [
            f"[bold]{star.name}[/bold] {star.type}-type",
            f"  Mass: {star.mass_solar} M☉ | Radius: {star.radius_solar} R☉ | "
            f"Luminosity: {star.luminosity_solar} L☉",
        ]

    def _anomalies_section(self, anomalies: List[StarAnomaly]) -> List[str]:
        lines = ["[bold]Anomalies[/bold]"]
        if not anomalies:
            lines.append("  No anomalies detected.")
            return lines
        for anomaly in anomalies:
            resource = capitalize(anomaly.impact.resource) if anomaly.impact.resource else "N/A"
            lines.append(
                f"  [yellow]{format_label(anomaly.type)}[/yellow] ({resource}) "
                f"Modifier: {anomaly.impact.modifier}x"
            )
            lines.append(f"    {anomaly.description}")
        return lines

    def _belts_section(self, belts: List[AsteroidBelt]) -> List[str]:
        lines = ["[bold]Asteroid Belts[/bold]"]
        if not belts:
            lines.append("  No significant belts charted.")
            return lines
        for belt in belts:
            lines.append(
                f"  {belt.name} ({capitalize(belt.richness)}) "
                f"{capitalize(belt.primary_resource)}: {format_number(belt.yield_per_hour)} / hr"
            )
        return lines

    def _system_planet_card(self, planet: Planet, index: int) -> List[str]:
        marker = " [green](controlled)[/green]" if planet.is_controlled else ""
        rates = ", ".join(
            f"{capitalize(s.type)} {format_number(s.production_rate_per_hour)}/hr"
            for s in planet.resource_sources
        )
        return [
            f"  {planet.name} - Orbit {index + 1}{marker}",
            f"    Grav: {planet.environment.gravity} m/s² · "
            f"Atmos: {planet.environment.atmosphere_density} · "
            f"Temp: {planet.environment.temperature_kelvin} K · "
            f"Habitability: {planet.environment.habitability_index}",
            f"    {rates}",
        ]

    def _environment_lines(self, planet: Planet) -> List[str]:
        env = planet.environment
        pos = planet.position
        return [
            f"  Gravity: {env.gravity} m/s² | Atmosphere Density: {env.atmosphere_density}",
            f"  Temperature: {env.temperature_kelvin} K | Habitability: {env.habitability_index}",
            f"  Orbit Radius: {pos.orbital_radius_au} AU | Period: {pos.orbital_period_days} days",
        ]

    def _infrastructure(self, planet: Planet) -> List[tuple[str, str]]:
        """Infrastructure cards for a planet's resources plus shipyard and space dock."""
        kinds = list(dict.fromkeys(s.type for s in planet.resource_sources))
        kinds += ["shipyard", "spacedock"]
        return [INFRASTRUCTURE_DETAILS[kind] for kind in kinds if kind in INFRASTRUCTURE_DETAILS]

    def _inventory_summary(self, planet: Planet) -> str:
        return ", ".join(
            f"{capitalize(resource)} {format_number(amount)}"
            for resource, amount in planet.resource_inventory.items()
        )
