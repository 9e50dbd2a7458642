"""Galaxy engine components."""

from .accrual import advance_galaxy, advance_planet, current_time_ms
from .errors import GalaxyConfigError
from .galaxy_generator import GalaxyConfig, generate_galaxy

__all__ = [
    "advance_galaxy",
    "advance_planet",
    "current_time_ms",
    "GalaxyConfig",
    "GalaxyConfigError",
    "generate_galaxy",
]
