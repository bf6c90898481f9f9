"""Benchmark of the alias method: O(n) initialisation and O(1) draws

The timings are printed in a table for increasing numbers of outcomes.
"""

import logging
import time

import numpy as np
from tqdm import tqdm

from vosealias.configuration import Configuration
from vosealias.distribution.variate.alias import VoseAliasMethod
from vosealias.tools.timer import format_elapsed, timer


def time_it(func, *args, **kwargs) -> float:
    t0 = time.perf_counter()
    func(*args, **kwargs)
    return time.perf_counter() - t0


@timer
def benchmark_alias_sampling(sizes: list[int], configuration: Configuration):
    rng = configuration.random_generator()
    results = []
    for n in tqdm(sizes, desc="alias method"):
        weights = rng.exponential(size=n)
        setup_time = time_it(VoseAliasMethod, weights)
        sampler = VoseAliasMethod(weights, uniform=configuration.uniform())
        next_time = time_it(lambda: [sampler.next() for _ in range(configuration.nb_draws)])
        sample_time = time_it(sampler.sample, size=configuration.nb_draws)
        results.append((n, setup_time, next_time, sample_time))

    print('{:>10} {:>12} {:>12} {:>12}'.format('n', 'setup', 'next', 'sample'))
    for n, setup_time, next_time, sample_time in results:
        print('{:>10} {:>12} {:>12} {:>12}'.format(n, format_elapsed(setup_time), format_elapsed(next_time),
                                                    format_elapsed(sample_time)))
    return results


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    benchmark_alias_sampling(sizes=[10**k for k in range(1, 7)],
                             configuration=Configuration(seed=123456, nb_draws=100_000))
