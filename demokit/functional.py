"""Closures and generators: a running adder, Fibonacci numbers and a
weighted random choice."""

import itertools
import random

MAX_INT16 = 32767
DEFAULT_WEIGHTS = {1: 50, 2: 20, 3: 30, 4: 50}


def adder():
    """Return a function that adds its argument to a running total and returns it."""
    total = 0

    def add(value):
        nonlocal total
        total += value
        return total

    return add


def fibonacci():
    """Yield the Fibonacci numbers 1, 1, 2, 3, 5, ... without end."""
    a, b = 0, 1
    while True:
        a, b = b, a + b
        yield a


def fibonacci_text(limit=10000):
    """The Fibonacci numbers not above ``limit``, one per line."""
    numbers = itertools.takewhile(lambda n: n <= limit, fibonacci())
    return "".join(f"{n}\n" for n in numbers)


def weighted_number(weights=None, rng=None):
    """Pick a key of ``weights`` with probability proportional to its weight.

    ``rng`` needs a ``randrange`` method and defaults to the ``random``
    module. Returns -1 if no key is chosen.
    """
    weights = DEFAULT_WEIGHTS if weights is None else weights
    rng = random if rng is None else rng
    total = sum(weights.values())
    if total <= 0:
        raise ValueError("weights must add up to a positive total")
    x = rng.randrange(MAX_INT16)
    cumulative = 0
    for key, weight in weights.items():
        cumulative += weight
        if x <= MAX_INT16 * cumulative // total:
            return key
    return -1