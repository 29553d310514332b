import random
import typing as t


class RandomStream:
    """
    Seeded source of random values used by the maze generator.

    Each stream owns its own `random.Random` instance, so draws made elsewhere
    in the hosting application (including through the `random` module) never
    shift the sequence a given seed produces.
    """

    def __init__(self, seed: int | None = None):
        self.seed = seed
        self._rng = random.Random(seed)
        self.draws = 0

    def uniform(self) -> float:
        """Returns a float in [0, 1)."""
        self.draws += 1
        return self._rng.random()

    def randint(self, low: int, high: int) -> int:
        """Returns an int in [low, high], both ends included."""
        self.draws += 1
        return self._rng.randint(low, high)

    def permutation(self, n: int) -> t.List[int]:
        indices = list(range(n))
        self.draws += 1
        self._rng.shuffle(indices)
        return indices
