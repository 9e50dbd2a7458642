"""Server settings loaded from the environment."""

import os
from dataclasses import dataclass
from typing import Mapping

from ..engine.errors import GalaxyConfigError
from ..engine.galaxy_generator import GalaxyConfig
from ..utils.constants import DEFAULT_SOLAR_SYSTEM_COUNT

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000


@dataclass
class ServerSettings:
    """Runtime settings for the dashboard server.

    Environment variables:
        PORT: HTTP port (default 3000)
        GALAXY_SOLAR_SYSTEMS: Solar systems per galaxy (default 4)
        GALAXY_SEED: Optional RNG seed for reproducible galaxies
        LOG_LEVEL: Logging level name (default INFO)
    """

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    solar_system_count: int = DEFAULT_SOLAR_SYSTEM_COUNT
    seed: int | None = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] = os.environ) -> "ServerSettings":
        """Build settings from environment variables.

        Args:
            environ: Environment mapping (defaults to os.environ)

        Returns:
            ServerSettings with defaults for unset variables

        Raises:
            GalaxyConfigError: If a numeric variable is not an integer
        """
        seed = environ.get("GALAXY_SEED")
        return cls(
            host=environ.get("HOST", DEFAULT_HOST),
            port=_parse_int("PORT", environ.get("PORT"), DEFAULT_PORT),
            solar_system_count=_parse_int(
                "GALAXY_SOLAR_SYSTEMS",
                environ.get("GALAXY_SOLAR_SYSTEMS"),
                DEFAULT_SOLAR_SYSTEM_COUNT,
            ),
            seed=_parse_int("GALAXY_SEED", seed, None) if seed else None,
            log_level=environ.get("LOG_LEVEL", "INFO").upper(),
        )

    def galaxy_config(self) -> GalaxyConfig:
        """Galaxy generation settings for these server settings."""
        return GalaxyConfig(solar_system_count=self.solar_system_count, seed=self.seed)


def _parse_int(name: str, value: str | None, default: int | None) -> int | None:
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError as e:
        raise GalaxyConfigError(f"Invalid {name}: {value!r} (must be an integer)") from e
