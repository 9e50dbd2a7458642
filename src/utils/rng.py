"""Seedable RNG wrapper for galaxy generation."""

import random

from .constants import ID_SUFFIX_LENGTH

BASE36_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"


class GalaxyRNG:
    """Wrapper around Python's random.Random for galaxy generation.

    All randomness in the generator goes through this class, so passing
    the same seed reproduces the same galaxy. Without a seed, one is drawn
    from the operating system and kept on the instance for later replay.
    """

    def __init__(self, seed: int | None = None):
        """Initialize RNG with given seed.

        Args:
            seed: Integer seed, or None to draw one from the OS
        """
        if seed is None:
            seed = random.SystemRandom().randrange(2**32)
        self.seed = seed
        self.rng = random.Random(seed)

    def random(self) -> float:
        """Return random float in [0.0, 1.0)."""
        return self.rng.random()

    def uniform(self, a: float, b: float) -> float:
        """Return random float in [a, b).

        Unlike random.Random.uniform, the upper bound is never returned,
        which keeps truncated ranges such as planet counts half-open.

        Args:
            a: Lower bound (inclusive)
            b: Upper bound (exclusive)

        Returns:
            Random float between a and b
        """
        return self.rng.random() * (b - a) + a

    def choice(self, seq):
        """Choose random element from non-empty sequence.

        Args:
            seq: Sequence to choose from

        Returns:
            Random element from sequence
        """
        return self.rng.choice(seq)

    def base36(self, length: int) -> str:
        """Return a random lowercase base36 string.

        Args:
            length: Number of characters

        Returns:
            String of `length` characters from [0-9a-z]
        """
        return "".join(self.rng.choice(BASE36_ALPHABET) for _ in range(length))

    def random_id(self, prefix: str) -> str:
        """Generate an identifier like "planet-k3j9x0ab".

        Uniqueness is probabilistic only; collisions are tolerated.

        Args:
            prefix: Entity prefix (e.g., "star", "planet")

        Returns:
            Identifier string
        """
        return f"{prefix}-{self.base36(ID_SUFFIX_LENGTH)}"

    def get_state(self):
        """Get the current state of the RNG.

        Returns:
            RNG state tuple that can be used with set_state
        """
        return self.rng.getstate()

    def set_state(self, state):
        """Restore a state captured with get_state."""
        self.rng.setstate(state)
