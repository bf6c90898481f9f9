"""
Timer decorator inspired from "Fluent Python" p205

Adding this decorator to a function allows to time it, the elapsed time is reported through the logging module.
"""

import functools
import logging
import time


def format_elapsed(elapsed: float) -> str:
    hours, rem = divmod(elapsed, 3600)
    minutes, seconds = divmod(rem, 60)
    if hours > 0:
        return '{:0>2}h{:0>2}m{:0>2}s'.format(int(hours), int(minutes), int(seconds))
    if minutes > 0:
        return '{:0>2}m{:0>2}s'.format(int(minutes), int(seconds))
    return '{:02.5f}s'.format(seconds)


def timer(func):
    @functools.wraps(func)
    def timed(*args, **kwargs):
        t0 = time.perf_counter()
        result = func(*args, **kwargs)
        elapsed = time.perf_counter() - t0
        arg_lst = []
        if args:
            arg_lst.append(', '.join(repr(arg) for arg in args))
        if kwargs:
            arg_lst.append(', '.join('%s=%r' % (k, w) for k, w in sorted(kwargs.items())))
        logging.info('[%s] %s(%s)', format_elapsed(elapsed), func.__name__, ', '.join(arg_lst))
        return result

    return timed
