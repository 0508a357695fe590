"""
Prime collection: the first N primes in increasing order.

Responsibility: owns the prime buffer, the candidate counter and the
termination condition. Primality itself is delegated to primality.is_prime.

Storage
-------
Primes are kept in a pre-allocated int32 buffer of length N, seeded with 2.
For N = 10^6 the largest prime is 15,485,863 < 2^24, far inside int32.
Larger capacities are checked up front against Rosser's bound

    p_n < n (ln n + ln ln n),   n >= 6

so a capacity whose N-th prime could overflow int32 is rejected at
construction instead of wrapping silently during generation.
"""

import math
import numpy as np
from numba import njit
from typing import Iterator

from .primality import is_prime


# p_1..p_5; Rosser's bound only holds from n = 6
_SMALL_PRIMES = (2, 3, 5, 7, 11)

INT32_MAX = int(np.iinfo(np.int32).max)


def nth_prime_upper_bound(n: int) -> int:
    """
    Upper bound on the n-th prime.

    Exact for n < 6, Rosser's bound n (ln n + ln ln n) otherwise.

    Parameters
    ----------
    n : int
        1-based index of the prime.

    Returns
    -------
    int
        Value p such that the n-th prime is <= p.
    """
    if n < 1:
        raise ValueError(f"n must be >= 1, got {n}")
    if n < 6:
        return _SMALL_PRIMES[n - 1]
    return math.ceil(n * (math.log(n) + math.log(math.log(n))))


def check_int32_capacity(n: int) -> None:
    """Raise ValueError if the n-th prime might not fit in int32 storage."""
    bound = nth_prime_upper_bound(n)
    if bound > INT32_MAX:
        raise ValueError(
            f"capacity {n:,} is too large: the {n:,}-th prime "
            f"may reach {bound:,}, beyond int32 max {INT32_MAX:,}"
        )


class PrimeSequence:
    """
    Fixed-capacity, strictly increasing sequence of primes.

    Seeded with 2. Filled by fill_sequence(); once len == capacity the
    sequence is complete and no longer changes.
    """

    dtype = np.int32

    def __init__(self, capacity: int):
        if isinstance(capacity, bool) or not isinstance(capacity, (int, np.integer)):
            raise TypeError(f"capacity must be an integer, got {type(capacity).__name__}")
        capacity = int(capacity)
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity}")

        check_int32_capacity(capacity)

        self._buffer = np.zeros(capacity, dtype=self.dtype)
        self._buffer[0] = 2
        self._length = 1

    @property
    def capacity(self) -> int:
        return len(self._buffer)

    @property
    def is_complete(self) -> bool:
        return self._length == self.capacity

    @property
    def last(self) -> int:
        """Most recently stored prime."""
        return int(self._buffer[self._length - 1])

    def __len__(self) -> int:
        return self._length

    def __getitem__(self, index):
        return self.to_array()[index]

    def __iter__(self) -> Iterator[int]:
        for p in self._buffer[:self._length]:
            yield int(p)

    def __repr__(self) -> str:
        return f"PrimeSequence(len={self._length:,}, capacity={self.capacity:,}, last={self.last:,})"

    def to_array(self) -> np.ndarray:
        """Read-only view of the stored primes."""
        view = self._buffer[:self._length]
        view.flags.writeable = False
        return view


@njit
def _trial_division_fill(buffer: np.ndarray, count: int, candidate: int):
    """Append primes >= candidate to buffer until it is full."""
    capacity = buffer.shape[0]
    while count < capacity:
        if is_prime(candidate):
            buffer[count] = candidate
            count += 1
        candidate += 1
    return count, candidate


def fill_sequence(sequence: PrimeSequence) -> PrimeSequence:
    """
    Fill sequence up to its capacity by trial division.

    The candidate counter starts just after the last stored prime (3 for a
    fresh sequence) and advances by one per test, prime or not. Filling a
    complete sequence does nothing.

    Parameters
    ----------
    sequence : PrimeSequence
        Sequence to fill in place.

    Returns
    -------
    PrimeSequence
        The same sequence, now complete.
    """
    if sequence.is_complete:
        return sequence

    count, _ = _trial_division_fill(sequence._buffer, len(sequence), sequence.last + 1)
    sequence._length = count
    return sequence


def collect_primes(n: int) -> PrimeSequence:
    """
    Return the first n primes.

    Parameters
    ----------
    n : int
        Number of primes (>= 1).

    Returns
    -------
    PrimeSequence
        Complete sequence of length n.
    """
    return fill_sequence(PrimeSequence(n))


def nth_prime(n: int) -> int:
    """Return the n-th prime (1-based): the last element of collect_primes(n)."""
    return collect_primes(n).last
