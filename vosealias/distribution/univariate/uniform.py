"""Generator for standard uniform random variables

A numpy `Generator` is used here, the generator returns random floats in the half-open interval [low, high)
and random integers in the half-open interval [0, high).
The generator can be injected (or seeded) so that the draws are reproducible,
see https://numpy.org/doc/stable/reference/random/generator.html
"""

from typing import Optional

import numpy as np

from ..sampling import Sampling


class Uniform(Sampling):
    """Uniform random variate generator"""
    def __init__(self, low: float = 0.0, high: float = 1.0, rng: Optional[np.random.Generator] = None,
                 seed: Optional[int] = None) -> None:
        """
        :param low: lower bound (included)
        :param high: upper bound (excluded)
        :param rng: numpy random generator, a new one is created if not provided
        :param seed: seed of the new random generator (ignored if `rng` is given)
        """
        super().__init__()
        if not low < high:
            raise ValueError("Uniform: expected low < high")
        self.low = low
        self.high = high
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def sample(self, size: int = 1) -> np.array:
        self.sampling_cost += size
        return self.rng.uniform(low=self.low, high=self.high, size=size)

    def sample_one(self) -> float:
        self.sampling_cost += 1
        return self.rng.uniform(low=self.low, high=self.high)

    def integers(self, high: int, size: Optional[int] = None):
        """
        :param high: upper bound (excluded), the lower bound is 0
        :param size: number of integers to draw, a single integer is returned if None
        :return: uniform random integer(s) in [0, high)
        """
        self.sampling_cost += 1 if size is None else size
        return self.rng.integers(low=0, high=high, size=size)
