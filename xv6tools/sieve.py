"""Prime sieve built as a pipeline of filtering stages."""

import sys

DEFAULT_LIMIT = 35


def primes(limit=DEFAULT_LIMIT):
    """Yield the primes from 2 to ``limit`` inclusive.

    Each prime found becomes a stage that drops its multiples from the
    numbers flowing on to later stages.
    """
    stages = []
    for n in range(2, limit + 1):
        if all(n % p for p in stages):
            stages.append(n)
            yield n


def main(argv=None):
    """Command entry point: print ``prime N`` for every prime up to 35."""
    for p in primes(DEFAULT_LIMIT):
        sys.stdout.write(f"prime {p}\n")
    return 0