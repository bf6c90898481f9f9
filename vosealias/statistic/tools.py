"""Useful tool for computing statistics of the drawn outcomes

"""

import logging

import numpy as np
import scipy.stats


def empirical_frequencies(draws: np.array, size: int) -> np.array:
    """
    :param draws: drawn indices
    :param size: number of possible outcomes
    :return: the frequency of each index in [0, size-1]
    """
    draws = np.asarray(draws, dtype=np.int64)
    if draws.size == 0:  # nothing to do here
        return np.zeros(shape=size)
    return np.bincount(draws, minlength=size) / draws.size


def max_abs_deviation(frequencies: np.array, expected: np.array) -> float:
    return float(np.max(np.abs(np.asarray(frequencies) - np.asarray(expected))))


def frequency_stddev(expected: np.array, nb_draws: int) -> np.array:
    """
    :return: standard deviation of the empirical frequencies, each count is binomial B(nb_draws, p)
    """
    expected = np.asarray(expected, dtype=float)
    return np.sqrt(expected * (1.0 - expected) / nb_draws)


def goodness_of_fit(draws: np.array, expected: np.array) -> float:
    """Pearson's chi-squared test of the draws against the expected distribution

    Outcomes with zero expected probability are left out of the test, they must not have been drawn.

    :return: the p-value of the test
    """
    expected = np.asarray(expected, dtype=float)
    counts = np.bincount(np.asarray(draws, dtype=np.int64), minlength=expected.size)
    support = expected > 0.0
    if np.any(counts[~support]):
        logging.warning("goodness of fit: outcomes of zero probability have been drawn")
        return 0.0
    f_exp = expected[support] * counts.sum()
    return float(scipy.stats.chisquare(f_obs=counts[support], f_exp=f_exp).pvalue)
