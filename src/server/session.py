"""Galaxy state management for the dashboard."""

import logging
import threading
from typing import Callable

from ..engine.accrual import advance_galaxy, current_time_ms
from ..engine.galaxy_generator import GalaxyConfig, generate_galaxy
from ..models.galaxy import Galaxy
from ..utils.rng import GalaxyRNG

logger = logging.getLogger(__name__)


class GalaxyStore:
    """Owns the current galaxy.

    Created once at startup; the galaxy is advanced in place on every
    query and replaced wholesale on regeneration. A lock serializes both
    operations so concurrent requests cannot lose accrual updates.

    The store keeps one RNG for its lifetime, so a seeded store produces a
    reproducible sequence of galaxies rather than the same galaxy again.
    """

    def __init__(
        self,
        config: GalaxyConfig | None = None,
        clock: Callable[[], int] = current_time_ms,
    ):
        """Initialize the store with a freshly generated galaxy.

        Args:
            config: Generation settings used for the initial galaxy and
                for regenerations that don't pass their own
            clock: Returns the current time in milliseconds
        """
        self._config = config or GalaxyConfig()
        self._clock = clock
        self._lock = threading.Lock()
        self._rng = GalaxyRNG(self._config.seed)
        self._galaxy = generate_galaxy(self._config, rng=self._rng, now_ms=self._clock())

    @property
    def config(self) -> GalaxyConfig:
        """Configuration of the current galaxy."""
        return self._config

    @property
    def seed(self) -> int:
        """Seed of the store's RNG."""
        return self._rng.seed

    def get_galaxy(self, now_ms: int | None = None) -> Galaxy:
        """Get the current galaxy with resources advanced to now.

        Args:
            now_ms: Snapshot time (defaults to the store's clock)

        Returns:
            The current galaxy
        """
        with self._lock:
            if now_ms is None:
                now_ms = self._clock()
            return advance_galaxy(self._galaxy, now_ms)

    def regenerate(self, config: GalaxyConfig | None = None, now_ms: int | None = None) -> Galaxy:
        """Discard the current galaxy and generate a new one.

        Args:
            config: Settings for the new galaxy (defaults to the current
                ones). A config with a seed restarts the RNG from that seed.
            now_ms: Creation time (defaults to the store's clock)

        Returns:
            The new galaxy
        """
        with self._lock:
            if config is not None:
                self._config = config
                if config.seed is not None:
                    self._rng = GalaxyRNG(config.seed)
            if now_ms is None:
                now_ms = self._clock()

            previous = self._galaxy.name
            self._galaxy = generate_galaxy(self._config, rng=self._rng, now_ms=now_ms)
            logger.info(f"Replaced {previous} with {self._galaxy.name}")

            return advance_galaxy(self._galaxy, now_ms)
