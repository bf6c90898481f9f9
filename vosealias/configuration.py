"""Configuration object for the random generation.

    :Example:
        - the seed for the random generator
        - the number of draws used for the statistical checks
"""

import logging
import os
import time
from typing import Optional

import numpy as np

from .distribution.univariate.uniform import Uniform
from .tools.parameter import optional_positive_integer, strictly_positive


class Configuration:
    """Random generation global configuration"""

    seed = optional_positive_integer("seed")
    nb_draws = strictly_positive("nb_draws")

    def __init__(self, seed: Optional[int] = None, nb_draws: int = 100_000):
        """
        :param seed: seed for the random generator
        :param nb_draws: number of draws for the statistical checks

            .. note:: if no seed is given, the seed is chosen from the process id and the current time
        """
        self.seed = seed
        self.nb_draws = nb_draws

    def initialisation_seed(self) -> int:
        """Random seed initialisation"""
        if self.seed is not None:
            return self.seed
        not_deterministic_seed = (os.getpid() * int(time.time())) % 123456789
        logging.info("no seed provided, using the random seed " + str(not_deterministic_seed))
        return not_deterministic_seed

    def random_generator(self) -> np.random.Generator:
        return np.random.default_rng(self.initialisation_seed())

    def uniform(self) -> Uniform:
        return Uniform(rng=self.random_generator())

    def __repr__(self) -> str:
        return "Configuration(seed={seed}, nb_draws={nb_draws})".format(seed=self.seed, nb_draws=self.nb_draws)
