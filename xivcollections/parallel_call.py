"""
Wrapper around creating a parallel function call
"""

import itertools
from collections.abc import Callable, Iterable
from typing import Any

import gevent.pool


def parallel_call(
    function: Callable,
    args: Iterable[Any],
    fold_list: bool = False,
    pool_size: int = 32,
) -> list[Any]:
    """
    Execute a function in parallel, results come back in the order of args
    :param function: Function to execute
    :param args: Args to pass to the function
    :param fold_list: Compress the results into a 1D list
    :param pool_size: How large the gevent pool should be
    :return: Results from execution, with modifications if desired
    """
    pool = gevent.pool.Pool(max(1, pool_size))
    results = pool.map(function, args)

    if fold_list:
        return list(itertools.chain.from_iterable(results))

    return list(results)
