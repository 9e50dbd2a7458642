"""Galaxy generation and resource accrual constants."""

# Galaxy
DEFAULT_SOLAR_SYSTEM_COUNT = 4

# Stars
STAR_TYPES = ["O", "B", "A", "F", "G", "K", "M"]
STAR_MASS_RANGE = (0.5, 2.5)  # Solar masses
LUMINOSITY_EXPONENT = 3.5  # L = M^3.5
RADIUS_EXPONENT = 0.8  # R = M^0.8
PLANET_COUNT_RANGE = (2, 6)  # Truncated, gives 2-5 planets

# Resources
RESOURCE_TYPES = ["metal", "minerals", "fuel", "energy", "research"]
PLANET_RESOURCE_TYPES = ["metal", "minerals", "fuel", "research"]
BELT_RESOURCE_TYPES = ["metal", "minerals"]

BASE_PRODUCTION_RATES = {
    "metal": 3600,
    "minerals": 4000,
    "fuel": 1000,
    "energy": 3600,  # No planet carries an energy source
    "research": 100,
}
PRODUCTION_VARIANCE_RANGE = (0.6, 1.6)
ORBIT_PRODUCTION_BIAS = 0.05  # Per orbit index

# Anomalies
ANOMALY_CHANCE = 0.6
ANOMALY_TYPES = {
    "gravity-well": {
        "description": "Localized gravity disturbances affect orbital traffic patterns.",
        "impact_range": (0.8, 1.2),
        "resource_bias": "fuel",
    },
    "radiation-storm": {
        "description": "Charged particles bombard the system with high-energy storms.",
        "impact_range": (0.7, 0.95),
        "resource_bias": "minerals",
    },
    "temporal-distortion": {
        "description": "Chronal anomalies create unpredictable time dilation pockets.",
        "impact_range": (1.05, 1.3),
        "resource_bias": "research",
    },
    "derelict": {
        "description": "A derelict megastructure drifts in the system awaiting salvage.",
        "impact_range": (1.1, 1.5),
        "resource_bias": "metal",
    },
}

# Asteroid belts
ASTEROID_BELT_CHANCE = 0.7
ASTEROID_BELT_COUNT_RANGE = (1, 3)  # Truncated, gives 1-2 belts
BELT_RICHNESS_LEVELS = ["sparse", "moderate", "rich"]
BELT_RICHNESS_FACTORS = {
    "sparse": 0.5,
    "moderate": 1.0,
    "rich": 1.6,
}
BELT_BASE_YIELD = 800  # Units per hour at moderate richness
BELT_YIELD_VARIANCE_RANGE = (0.8, 1.3)

# Orbits
FIRST_ORBIT_RANGE = (0.3, 0.8)  # AU
ORBIT_SPACING_BASE = 0.4  # AU
ORBIT_SPACING_RANGE = (0.3, 0.8)  # AU per orbit index
ORBIT_JITTER_RANGE = (-0.1, 0.2)  # AU
MAX_ORBITAL_RADIUS_AU = 5.0
DAYS_PER_YEAR = 365.25

# Declared for habitability tuning, not consumed by generation
HABITABLE_ZONE_AU = (0.75, 1.5)

# Planet environment
GRAVITY_RANGE = (6.0, 22.0)  # m/s^2
ATMOSPHERE_DENSITY_RANGE = (0.2, 2.4)
TEMPERATURE_RANGE = (90.0, 900.0)  # Kelvin
HABITABILITY_RANGE = (0.1, 0.95)

# Identifiers
ID_SUFFIX_LENGTH = 8

# Time
MS_PER_HOUR = 1000 * 60 * 60
