"""Engine exceptions."""


class GalaxyConfigError(ValueError):
    """Raised when a galaxy configuration value is invalid."""
