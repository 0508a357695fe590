"""
Reference Sieve of Eratosthenes.

Responsibility: an independent source of truth for cross-checking trial
division. Not used by collector; generation never depends on it.
"""

import numpy as np

from .collector import nth_prime_upper_bound


def prime_flags_upto(N: int) -> np.ndarray:
    """
    Return boolean array where flags[i] is True iff i is prime.

    Parameters
    ----------
    N : int
        Upper bound (inclusive).

    Returns
    -------
    np.ndarray
        Boolean array of length N+1.
    """
    flags = np.ones(N + 1, dtype=bool)
    flags[:2] = False
    for p in range(2, int(N**0.5) + 1):
        if flags[p]:
            flags[p*p::p] = False
    return flags


def primes_upto(N: int) -> np.ndarray:
    """Return array of all primes <= N."""
    return np.nonzero(prime_flags_upto(N))[0]


def first_n_primes(n: int) -> np.ndarray:
    """
    Return the first n primes, sieving up to nth_prime_upper_bound(n).

    Parameters
    ----------
    n : int
        Number of primes (>= 1).

    Returns
    -------
    np.ndarray
        Array of length n.
    """
    primes = primes_upto(nth_prime_upper_bound(n))
    return primes[:n]
