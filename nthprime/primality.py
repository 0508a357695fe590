"""
Primality testing by trial division.

Responsibility: deciding whether a single integer is prime. No state,
no generation logic.
"""

from numba import njit


@njit
def is_prime(x: int) -> bool:
    """
    Return True iff x is prime.

    Tests divisors i = 2, 3, 4, ... while i*i <= x, written as i <= x // i
    so the bound cannot overflow int64 for x near 2**63. Compiled with
    numba so the generation loop can call it without leaving native code;
    it is equally callable from Python.

    Parameters
    ----------
    x : int
        Integer to test. Anything below 2 (including negatives) is not prime.

    Returns
    -------
    bool
    """
    if x < 2:
        return False
    i = 2
    while i <= x // i:
        if x % i == 0:
            return False
        i += 1
    return True
