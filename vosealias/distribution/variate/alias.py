"""ALIAS method (Vose's variant) to generate random variate from discrete probability distribution

The method splits each draw into a fair die roll (which column of the tables to inspect) and a biased coin toss
(the outcome of the column itself or its alias). After an O(n) initialisation, each draw costs O(1).

see "Darts, Dice, and Coins: Sampling from a Discrete Distribution" by Keith Schwarz
(http://www.keithschwarz.com/darts-dice-coins/) and "A linear algorithm for generating random numbers with a given
distribution" by Michael D. Vose (1991)

    :Example:
        >>> sampler = VoseAliasMethod([0.1, 0.2, 0.3, 0.4])
        >>> index = sampler.next()
"""

import logging
import math
from collections import deque
from collections.abc import Callable, Iterable
from numbers import Real
from typing import Any, Optional

import numpy as np
from numpy.typing import NDArray

from ..errors import EmptyWeights, MissingWeights, NegativeWeight, NonIterableWeights, NonNumericWeight
from ..sampling import Sampling
from ..univariate.uniform import Uniform


class VoseAliasMethod(Sampling):
    """Vose's alias method

    The probability and alias tables are built once in the constructor and are read-only afterwards.
    """

    def __init__(self, weights: Iterable[float], uniform: Optional[Uniform] = None,
                 states: Optional[Callable[[NDArray[np.int64]], Any]] = None):
        """
        :param weights: non-negative weights of the outcomes. If they sum to more than one they are scaled down,
                        if they sum to less than one an extra outcome holding the missing mass is appended
                        (see `scale_for_alias_method`)
        :param uniform: source of uniform random variables, a new unseeded one is created if not provided
        :param states: optional mapping from the drawn indices to the discrete states returned by `sample`

            .. note:: `size()` gives the effective number of outcomes, which can be one more than the number of
                      weights.
        """
        super().__init__()
        probabilities, self._size = scale_for_alias_method(validate_weights(weights))
        self._probability, self._alias = create_alias(probabilities)
        self._probability.setflags(write=False)
        self._alias.setflags(write=False)
        if uniform is not None and (uniform.low != 0.0 or uniform.high != 1.0):
            logging.error("alias method: the coin toss needs uniform variables in [0, 1)")
            raise ValueError("alias method: expected a uniform generator on [0, 1), got [{low}, {high})".format(
                low=uniform.low, high=uniform.high))
        self.uniform = uniform if uniform is not None else Uniform()
        self.states = states

    @property
    def probability(self) -> NDArray[np.float64]:
        """probability that the coin toss at each column favours the column itself (read-only)"""
        return self._probability

    @property
    def alias(self) -> NDArray[np.int64]:
        """outcome returned when the coin toss at each column fails (read-only)"""
        return self._alias

    def size(self) -> int:
        """
        :return: effective number of outcomes, the drawn indices lie in [0, size()-1]
        """
        return self._size

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return "VoseAliasMethod(size={size})".format(size=self._size)

    def cost(self) -> int:
        return self.uniform.cost()

    def reset_sampling_cost(self):
        return self.uniform.reset_sampling_cost()

    def next(self) -> int:
        """Draw one outcome index"""
        column = int(self.uniform.integers(self._size))
        coin_toss = self.uniform.sample_one() < self._probability[column]
        return column if coin_toss else int(self._alias[column])

    def sample(self, size: int = 1) -> np.array:
        columns = self.uniform.integers(self._size, size=size)
        us = self.uniform.sample(size=size)
        res = np.where(us < self._probability[columns], columns, self._alias[columns])
        if self.states is None:
            return res
        return self.states(res)

    def draw_with_u(self, uniform: float) -> int:
        """ALIAS sampling with a single pre-generated uniform variable

        The integer part of n*u gives the column and its fractional part is used for the coin toss.
        """
        ku = self._size * uniform
        x = min(int(ku), self._size - 1)
        v = ku - x
        if v < self._probability[x]:
            return x
        return int(self._alias[x])

    def probabilities(self) -> NDArray[np.float64]:
        """
        :return: the normalised distribution encoded by the probability and alias tables
        """
        res = self._probability.copy()
        np.add.at(res, self._alias, 1.0 - self._probability)
        return res / self._size


def validate_weights(weights: Optional[Iterable[float]]) -> NDArray[np.float64]:
    """Check the input weights

    :param weights: input weights
    :return: a copy of the weights as an array of floats
    :raise MissingWeights: if weights is None
    :raise EmptyWeights: if there is no weight
    :raise NonNumericWeight: if a weight is not a finite real number
    :raise NegativeWeight: if a weight is negative
    """
    if weights is None:
        logging.error("alias method: no weights provided")
        raise MissingWeights()

    try:
        weights = list(weights)
    except TypeError:
        logging.error("alias method: weights of type {t} are not a sequence".format(t=type(weights).__name__))
        raise NonIterableWeights(weights) from None
    if not weights:
        logging.error("alias method: empty weights")
        raise EmptyWeights()

    values = []
    for index, w in enumerate(weights):
        try:
            value = float(w) if isinstance(w, Real) else math.nan
        except OverflowError:
            value = math.inf
        if not math.isfinite(value):
            logging.error("alias method: weight {w!r} at index {index} is not a finite number".format(w=w, index=index))
            raise NonNumericWeight(index=index, value=w)
        if value < 0:
            logging.error("alias method: weight {w!r} at index {index} is negative".format(w=w, index=index))
            raise NegativeWeight(index=index, value=w)
        values.append(value)

    return np.array(values, dtype=float)


def scale_for_alias_method(weights: NDArray[np.float64]) -> tuple[NDArray[np.float64], int]:
    """Scale the weights so that they sum to one

    If the total is greater than one, the weights are divided by the total: [10, 20, 30, 40] becomes
    [.1, .2, .3, .4]. If the total is smaller than one, a final element equal to the missing mass is appended:
    [.1, .2, .3] becomes [.1, .2, .3, .4], so the number of outcomes grows by one.

    :param weights: validated non-negative weights
    :return: the scaled probabilities and their number
    """
    weights = np.asarray(weights, dtype=float)
    largest = float(np.max(weights))

    if largest > 1.0:
        # the total is then greater than one, summing the weights scaled by the largest one cannot overflow
        scaled = weights / largest
        probabilities = scaled / math.fsum(scaled)
        return probabilities, probabilities.size

    total = math.fsum(weights)

    if total > 1.0:
        probabilities = weights / total
    elif total < 1.0:
        logging.debug("alias method: weights sum to {total}, adding an outcome of probability {rest}".format(
            total=total, rest=1.0 - total))
        probabilities = np.append(np.asarray(weights, dtype=float), 1.0 - total)
    else:
        probabilities = np.array(weights, dtype=float)

    return probabilities, probabilities.size


def create_alias(probabilities: NDArray[np.float64]) -> tuple[NDArray[np.float64], NDArray[np.int64]]:
    """Initialisation of the ALIAS method (Vose's algorithm)

    :param probabilities: probabilities summing to one
    :return: the probability and alias tables
    """
    dim = len(probabilities)
    average = 1.0 / dim
    p = [float(pl) for pl in probabilities]
    q = np.zeros(shape=dim, dtype=float)
    j = np.arange(dim, dtype=np.int64)

    # sort the probabilities into <1/n and >=1/n, the worklists are consumed in FIFO order
    smaller = deque()
    greater = deque()

    for l in range(dim):
        if p[l] < average:
            smaller.append(l)
        else:
            greater.append(l)

    while smaller and greater:
        small = smaller.popleft()
        great = greater.popleft()

        # scale so that a probability of 1/n is given weight 1.0
        q[small] = p[small] * dim
        j[small] = great

        p[great] = (p[great] + p[small]) - average

        if p[great] < average:
            smaller.append(great)
        else:
            greater.append(great)

    # what is left should be of probability 1/n
    while greater:
        q[greater.popleft()] = 1.0

    # this case corresponds to p=1/n being converted to slightly less than 1/n by rounding errors and
    # being added into the 'smaller' list instead of the 'greater' list
    while smaller:
        q[smaller.popleft()] = 1.0

    return q, j
