"""Generic sampling class for discrete probability distributions

Every sampler keeps track of its computing cost, that is the number of uniform random variables it consumed.
"""


import abc

import numpy as np


class Sampling(abc.ABC):
    """Base class for sampling method"""
    def __init__(self):
        self.sampling_cost = 0

    def cost(self) -> int:
        """
        :return: the number of uniform random variables generated so far
        """
        return self.sampling_cost

    def reset_sampling_cost(self):
        """reset the simulation cost to 0"""
        self.sampling_cost = 0

    @abc.abstractmethod
    def sample(self, size: int = 1) -> np.array:
        """draw `size` variables from the distribution in scope

        :param size: size of the sampling vector
        :return: the array of simulated variables
        """
