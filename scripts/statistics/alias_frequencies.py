"""Empirical frequencies of the alias method against the target distribution

The bar plot shows the target probabilities and the frequencies of the draws with their 3 standard deviations
confidence interval.
"""

import logging

import matplotlib.pyplot as plt
import numpy as np

from vosealias.configuration import Configuration
from vosealias.distribution.variate.alias import VoseAliasMethod
from vosealias.statistic.tools import empirical_frequencies, frequency_stddev, goodness_of_fit, max_abs_deviation
from vosealias.tools.timer import timer


@timer
def alias_frequencies(weights: list[float], configuration: Configuration):
    sampler = VoseAliasMethod(weights, uniform=configuration.uniform())
    expected = sampler.probabilities()
    draws = sampler.sample(size=configuration.nb_draws)
    frequencies = empirical_frequencies(draws, sampler.size())
    stddev = frequency_stddev(expected, configuration.nb_draws)

    print('max abs deviation = {:.6f}'.format(max_abs_deviation(frequencies, expected)))
    print('chi-squared p-value = {:.4f}'.format(goodness_of_fit(draws, expected)))

    outcomes = np.arange(sampler.size())
    width = 0.4
    fig, ax = plt.subplots()
    ax.bar(outcomes - 0.5*width, expected, width=width, color='grey', alpha=0.60, label='target')
    ax.bar(outcomes + 0.5*width, frequencies, width=width, yerr=3*stddev, color='green', alpha=0.40,
           label='empirical')
    ax.set_xlabel('outcome')
    ax.set_xticks(outcomes)
    ax.legend()
    plt.title(label='alias method, ' + str(configuration.nb_draws) + ' draws')
    plt.show()


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    alias_frequencies(weights=[0.1, 0.2, 0.3], configuration=Configuration(seed=123456, nb_draws=100_000))
