"""Tests for data models."""

import math

import pytest

from src.models import (
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


def make_planet(**overrides) -> Planet:
    """Build a planet with sensible defaults."""
    fields = dict(
        id="planet-test0001",
        name="Star-TEST-1",
        position=OrbitalPosition(orbital_radius_au=1.0, orbital_period_days=365.3, angle_radians=0.5),
        environment=PlanetEnvironment(
            gravity=9.81, atmosphere_density=1.0, temperature_kelvin=288.0, habitability_index=0.8
        ),
        resource_sources=[ResourceSource(type="metal", production_rate_per_hour=3600)],
        last_updated_ms=0,
    )
    fields.update(overrides)
    return Planet(**fields)


class TestPlanet:
    """Test Planet dataclass."""

    def test_create_planet_defaults(self):
        """Test inventory and remainder start at zero for all five resources."""
        planet = make_planet()
        assert planet.resource_inventory == {
            "metal": 0,
            "minerals": 0,
            "fuel": 0,
            "energy": 0,
            "research": 0,
        }
        assert planet.resource_remainder == empty_resource_map()
        assert planet.is_controlled is False

    def test_production_rates(self):
        """Test production_rates maps resource types to hourly rates."""
        planet = make_planet(
            resource_sources=[
                ResourceSource(type="metal", production_rate_per_hour=3600),
                ResourceSource(type="research", production_rate_per_hour=100),
            ]
        )
        assert planet.production_rates() == {"metal": 3600, "research": 100}

    def test_negative_inventory_rejected(self):
        """Test inventory must be non-negative."""
        inventory = empty_resource_map()
        inventory["metal"] = -1
        with pytest.raises(ValueError, match="Invalid resource_inventory"):
            make_planet(resource_inventory=inventory)

    def test_fractional_inventory_rejected(self):
        """Test inventory must hold whole units."""
        inventory = empty_resource_map()
        inventory["fuel"] = 1.5
        with pytest.raises(ValueError, match="Invalid resource_inventory"):
            make_planet(resource_inventory=inventory)

    def test_remainder_out_of_range_rejected(self):
        """Test remainder must stay in [0, 1)."""
        remainder = empty_resource_map()
        remainder["metal"] = 1.0
        with pytest.raises(ValueError, match="Invalid resource_remainder"):
            make_planet(resource_remainder=remainder)

    def test_missing_resource_type_rejected(self):
        """Test inventory must cover every resource type, including energy."""
        inventory = empty_resource_map()
        del inventory["energy"]
        with pytest.raises(ValueError, match="missing 'energy'"):
            make_planet(resource_inventory=inventory)

    def test_default_maps_not_shared(self):
        """Test each planet gets its own resource maps."""
        a = make_planet()
        b = make_planet()
        a.resource_inventory["metal"] = 5
        assert b.resource_inventory["metal"] == 0


class TestResourceSource:
    """Test ResourceSource dataclass."""

    def test_negative_rate_rejected(self):
        with pytest.raises(ValueError, match="Invalid production_rate_per_hour"):
            ResourceSource(type="metal", production_rate_per_hour=-1)

    def test_unknown_type_rejected(self):
        with pytest.raises(ValueError, match="Invalid resource type"):
            ResourceSource(type="gold", production_rate_per_hour=10)


class TestOrbitalPosition:
    """Test OrbitalPosition dataclass."""

    def test_angle_must_be_below_two_pi(self):
        with pytest.raises(ValueError, match="Invalid angle_radians"):
            OrbitalPosition(orbital_radius_au=1.0, orbital_period_days=365.3, angle_radians=2 * math.pi)

    def test_radius_must_be_positive(self):
        with pytest.raises(ValueError, match="Invalid orbital_radius_au"):
            OrbitalPosition(orbital_radius_au=0, orbital_period_days=0, angle_radians=0)


class TestStar:
    """Test Star dataclass."""

    def make_star(self, **overrides) -> Star:
        fields = dict(
            id="star-test0001",
            name="Star-TEST",
            type="G",
            mass_solar=1.0,
            radius_solar=1.0,
            luminosity_solar=1.0,
        )
        fields.update(overrides)
        return Star(**fields)

    def test_create_star(self):
        star = self.make_star()
        assert star.planets == []
        assert star.anomalies == []
        assert star.asteroid_belts == []

    def test_invalid_type(self):
        with pytest.raises(ValueError, match="Invalid type"):
            self.make_star(type="X")

    def test_too_many_anomalies(self):
        anomaly = StarAnomaly(
            id="anomaly-1",
            type="derelict",
            description="Wreck",
            impact=AnomalyImpact(modifier=1.2, resource="metal"),
        )
        with pytest.raises(ValueError, match="Invalid anomalies"):
            self.make_star(anomalies=[anomaly, anomaly])

    def test_too_many_belts(self):
        belt = AsteroidBelt(
            id="belt-1", name="Belt-ABC", richness="rich", primary_resource="metal", yield_per_hour=900
        )
        with pytest.raises(ValueError, match="Invalid asteroid_belts"):
            self.make_star(asteroid_belts=[belt, belt, belt])


class TestAsteroidBelt:
    """Test AsteroidBelt dataclass."""

    def test_primary_resource_restricted(self):
        with pytest.raises(ValueError, match="Invalid primary_resource"):
            AsteroidBelt(
                id="belt-1", name="Belt-ABC", richness="sparse", primary_resource="fuel", yield_per_hour=400
            )

    def test_invalid_richness(self):
        with pytest.raises(ValueError, match="Invalid richness"):
            AsteroidBelt(
                id="belt-1", name="Belt-ABC", richness="huge", primary_resource="metal", yield_per_hour=400
            )


class TestGalaxy:
    """Test Galaxy container helpers."""

    def test_iter_and_find_planets(self):
        controlled = make_planet(id="planet-a", is_controlled=True)
        other = make_planet(id="planet-b")
        star = Star(
            id="star-1",
            name="Star-ONE",
            type="K",
            mass_solar=0.8,
            radius_solar=0.84,
            luminosity_solar=0.46,
            planets=[controlled, other],
        )
        galaxy = Galaxy(
            id="galaxy-1",
            name="Galaxy-TEST",
            solar_systems=[SolarSystem(id="system-1", name="Star-ONE System", star=star)],
        )

        assert [p.id for p in galaxy.iter_planets()] == ["planet-a", "planet-b"]
        assert galaxy.controlled_planets() == [controlled]
        assert galaxy.find_planet("planet-b") is other
        assert galaxy.find_planet("planet-zzz") is None
