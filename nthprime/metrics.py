"""
Gap statistics for generated prime sequences.

By the prime number theorem the average gap near p is about ln p, so
mean_gap_over_log should approach 1 from below as N grows.
"""

import numpy as np
from typing import Dict, Union

from .collector import PrimeSequence


def prime_gaps(primes: np.ndarray) -> np.ndarray:
    """Differences between consecutive primes (length len(primes) - 1)."""
    return np.diff(np.asarray(primes, dtype=np.int64))


def mean_gap(primes: np.ndarray) -> float:
    """Mean gap, or nan for fewer than two primes."""
    gaps = prime_gaps(primes)
    if len(gaps) == 0:
        return np.nan
    return float(np.mean(gaps))


def max_gap(primes: np.ndarray) -> int:
    """Largest gap, or 0 for fewer than two primes."""
    gaps = prime_gaps(primes)
    if len(gaps) == 0:
        return 0
    return int(np.max(gaps))


def gap_summary(sequence: Union[PrimeSequence, np.ndarray]) -> Dict[str, float]:
    """
    Summarize a prime sequence.

    Parameters
    ----------
    sequence : PrimeSequence or np.ndarray
        Primes in increasing order.

    Returns
    -------
    dict
        count, last, mean_gap, max_gap and mean_gap_over_log.
    """
    if isinstance(sequence, PrimeSequence):
        primes = sequence.to_array()
    else:
        primes = np.asarray(sequence)

    last = int(primes[-1])
    mg = mean_gap(primes)

    return {
        'count': len(primes),
        'last': last,
        'mean_gap': mg,
        'max_gap': max_gap(primes),
        'mean_gap_over_log': mg / np.log(last) if len(primes) > 1 else np.nan,
    }
