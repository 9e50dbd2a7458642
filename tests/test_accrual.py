"""Tests for time-based resource accrual."""

import pytest

from src.engine import GalaxyConfig, advance_galaxy, advance_planet, generate_galaxy
from src.models import OrbitalPosition, Planet, PlanetEnvironment, ResourceSource, empty_resource_map
from src.utils import MS_PER_HOUR, GalaxyRNG

T0 = 1_700_000_000_000


def make_planet(sources, remainder=None, inventory=None, last_updated_ms=T0) -> Planet:
    """Build a planet with the given resource sources."""
    return Planet(
        id="planet-accrual1",
        name="Star-ACRL-1",
        position=OrbitalPosition(orbital_radius_au=0.5, orbital_period_days=129.1, angle_radians=1.0),
        environment=PlanetEnvironment(
            gravity=10.0, atmosphere_density=1.0, temperature_kelvin=300.0, habitability_index=0.5
        ),
        resource_sources=[
            ResourceSource(type=resource, production_rate_per_hour=rate)
            for resource, rate in sources.items()
        ],
        resource_inventory=inventory or empty_resource_map(),
        resource_remainder=remainder or empty_resource_map(),
        last_updated_ms=last_updated_ms,
    )


def combined(planet: Planet, resource: str) -> float:
    """Total produced quantity, whole units plus carried fraction."""
    return planet.resource_inventory[resource] + planet.resource_remainder[resource]


class TestAdvancePlanet:
    """Test advance_planet."""

    def test_one_hour_at_3600(self):
        """Test one hour at 3600/hr adds exactly 3600 units with no remainder."""
        planet = make_planet({"metal": 3600})

        updated = advance_planet(planet, T0 + MS_PER_HOUR)

        assert updated.resource_inventory["metal"] == 3600
        assert updated.resource_remainder["metal"] == 0
        assert updated.last_updated_ms == T0 + MS_PER_HOUR

    def test_fractional_production_carried(self):
        """Test production below one unit accumulates in the remainder."""
        planet = make_planet({"research": 100})

        # 100/hr for 18 seconds = 0.5 units
        updated = advance_planet(planet, T0 + 18_000)

        assert updated.resource_inventory["research"] == 0
        assert updated.resource_remainder["research"] == pytest.approx(0.5)

        # Another 36 seconds adds one unit on top of the carried half
        updated = advance_planet(updated, T0 + 54_000)
        assert updated.resource_inventory["research"] == 1
        assert updated.resource_remainder["research"] == pytest.approx(0.5)

    def test_existing_remainder_included(self):
        """Test inventory' = inventory + floor(r0 + R*h), remainder' = frac(r0 + R*h)."""
        remainder = empty_resource_map()
        remainder["fuel"] = 0.75
        inventory = empty_resource_map()
        inventory["fuel"] = 10
        planet = make_planet({"fuel": 1000}, remainder=remainder, inventory=inventory)

        # 1000/hr for 1.8 seconds = 0.5 units; 0.75 + 0.5 = 1.25
        updated = advance_planet(planet, T0 + 1800)

        assert updated.resource_inventory["fuel"] == 11
        assert updated.resource_remainder["fuel"] == pytest.approx(0.25)

    def test_non_positive_elapsed_is_noop(self):
        """Test same-instant and backwards clocks leave the planet unchanged."""
        remainder = empty_resource_map()
        remainder["metal"] = 0.4
        planet = make_planet({"metal": 3600}, remainder=remainder)

        assert advance_planet(planet, T0) is planet
        assert advance_planet(planet, T0 - 5 * MS_PER_HOUR) is planet
        assert planet.resource_inventory["metal"] == 0
        assert planet.resource_remainder["metal"] == 0.4
        assert planet.last_updated_ms == T0

    def test_types_without_source_untouched(self):
        """Test energy and source-less planet resources do not accrue."""
        planet = make_planet({"metal": 3600})

        updated = advance_planet(planet, T0 + 10 * MS_PER_HOUR)

        for resource in ("minerals", "fuel", "energy", "research"):
            assert updated.resource_inventory[resource] == 0
            assert updated.resource_remainder[resource] == 0

    def test_zero_rate_source(self):
        planet = make_planet({"minerals": 0})
        updated = advance_planet(planet, T0 + MS_PER_HOUR)
        assert updated.resource_inventory["minerals"] == 0
        assert updated.last_updated_ms == T0 + MS_PER_HOUR

    def test_returns_new_planet_without_aliasing(self):
        """Test the original planet and its maps are not modified."""
        planet = make_planet({"metal": 3600})
        original_inventory = planet.resource_inventory

        updated = advance_planet(planet, T0 + MS_PER_HOUR)

        assert updated is not planet
        assert updated.resource_inventory is not original_inventory
        assert updated.resource_remainder is not planet.resource_remainder
        assert planet.resource_inventory["metal"] == 0
        assert planet.last_updated_ms == T0
        assert updated.id == planet.id
        assert updated.position == planet.position

    def test_split_advance_matches_single_advance(self):
        """Test two half-interval advances equal one full advance."""
        planet = make_planet({"metal": 3731, "minerals": 4003, "fuel": 977, "research": 113})
        delta_ms = 7_777_777

        once = advance_planet(planet, T0 + delta_ms)
        twice = advance_planet(advance_planet(planet, T0 + delta_ms // 2), T0 + delta_ms)

        for resource in ("metal", "minerals", "fuel", "research"):
            assert combined(twice, resource) == pytest.approx(combined(once, resource), abs=1e-6)

    def test_many_small_advances_match_single_advance(self):
        """Test chained per-second updates don't drift from one large update."""
        planet = make_planet({"research": 137, "fuel": 1001})
        steps = 3600

        chained = planet
        for step in range(1, steps + 1):
            chained = advance_planet(chained, T0 + step * 1000)
        once = advance_planet(planet, T0 + steps * 1000)

        for resource in ("research", "fuel"):
            assert combined(chained, resource) == pytest.approx(combined(once, resource), abs=1e-6)
        assert chained.resource_inventory["research"] in (136, 137)
        assert chained.resource_inventory["fuel"] in (1000, 1001)

    def test_remainder_invariant(self):
        """Test remainder stays in [0, 1) across irregular updates."""
        planet = make_planet({"metal": 3600.7, "research": 99.3})
        now = T0
        for step_ms in (1, 7, 999, 12_345, 1, 3_600_001, 250):
            now += step_ms
            planet = advance_planet(planet, now)
            for value in planet.resource_remainder.values():
                assert 0 <= value < 1
            for value in planet.resource_inventory.values():
                assert isinstance(value, int)
                assert value >= 0


class TestAdvanceGalaxy:
    """Test advance_galaxy."""

    def test_all_planets_advanced_to_same_instant(self):
        galaxy = generate_galaxy(GalaxyConfig(solar_system_count=3), rng=GalaxyRNG(4), now_ms=T0)

        advance_galaxy(galaxy, T0 + MS_PER_HOUR)

        for planet in galaxy.iter_planets():
            assert planet.last_updated_ms == T0 + MS_PER_HOUR
            rates = planet.production_rates()
            # Integer hourly rates over exactly one hour produce exact whole units
            for resource, rate in rates.items():
                assert planet.resource_inventory[resource] == rate
                assert planet.resource_remainder[resource] == pytest.approx(0.0, abs=1e-9)
            assert planet.resource_inventory["energy"] == 0

    def test_same_instant_twice_no_double_accrual(self):
        galaxy = generate_galaxy(GalaxyConfig(solar_system_count=2), rng=GalaxyRNG(9), now_ms=T0)
        now = T0 + 1_234_567

        advance_galaxy(galaxy, now)
        first = [(dict(p.resource_inventory), dict(p.resource_remainder)) for p in galaxy.iter_planets()]
        advance_galaxy(galaxy, now)
        second = [(dict(p.resource_inventory), dict(p.resource_remainder)) for p in galaxy.iter_planets()]

        assert first == second

    def test_controlled_flag_preserved(self):
        galaxy = generate_galaxy(GalaxyConfig(solar_system_count=2), rng=GalaxyRNG(9), now_ms=T0)

        advance_galaxy(galaxy, T0 + MS_PER_HOUR)

        assert galaxy.solar_systems[0].star.planets[0].is_controlled is True
        assert len(galaxy.controlled_planets()) == 1

    def test_returns_same_galaxy(self):
        galaxy = generate_galaxy(GalaxyConfig(solar_system_count=1), rng=GalaxyRNG(9), now_ms=T0)
        assert advance_galaxy(galaxy, T0 + 1) is galaxy
