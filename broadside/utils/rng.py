"""Seedable RNG wrapper for deterministic fleet placement."""

import random


class GameRNG:
    """Wrapper around Python's random.Random for deterministic game behavior.

    Fleet placement and rock scattering go through this class so that two
    games built with the same seed start from the same board.
    """

    def __init__(self, seed: int | None = None):
        """Initialize RNG with given seed.

        Args:
            seed: Integer seed for deterministic randomness (None for entropy)
        """
        self.seed = seed
        self.rng = random.Random(seed)

    def randint(self, a: int, b: int) -> int:
        """Return random integer in range [a, b], inclusive."""
        return self.rng.randint(a, b)

    def choice(self, seq):
        """Choose random element from non-empty sequence."""
        return self.rng.choice(seq)

    def shuffle(self, seq):
        """Shuffle sequence in place."""
        self.rng.shuffle(seq)
