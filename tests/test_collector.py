"""
Tests for prime collection.

Covers the first-N-primes contract (length, ordering, primality, no gaps),
the int32 capacity precondition, and immutability of a complete sequence.
"""

import numpy as np
import pytest

from nthprime.collector import (
    INT32_MAX,
    PrimeSequence,
    check_int32_capacity,
    collect_primes,
    fill_sequence,
    nth_prime,
    nth_prime_upper_bound,
)
from nthprime.primality import is_prime
from nthprime.sieve import first_n_primes


class TestSmallSequences:
    """Exact values for small N."""

    def test_first_six_primes(self):
        seq = collect_primes(6)
        assert list(seq) == [2, 3, 5, 7, 11, 13]
        assert seq.last == 13

    def test_single_prime(self):
        """N=1 is complete at construction: just the seed 2."""
        seq = PrimeSequence(1)
        assert seq.is_complete
        assert list(fill_sequence(seq)) == [2]
        assert nth_prime(1) == 2

    def test_known_nth_primes(self):
        assert nth_prime(10) == 29
        assert nth_prime(100) == 541
        assert nth_prime(1_000) == 7_919
        assert nth_prime(10_000) == 104_729


class TestOneMillion:
    """Reference configuration."""

    def test_millionth_prime(self):
        seq = collect_primes(1_000_000)
        assert len(seq) == 1_000_000
        assert seq.last == 15_485_863, f"Expected 15485863, got {seq.last}"


class TestSequenceInvariants:
    """Properties that must hold for every N."""

    @pytest.mark.parametrize("N", [1, 2, 3, 7, 50, 1000])
    def test_length_equals_capacity(self, N):
        seq = collect_primes(N)
        assert len(seq) == N
        assert seq.capacity == N
        assert seq.is_complete

    @pytest.mark.parametrize("N", [2, 25, 1000])
    def test_strictly_increasing(self, N):
        arr = collect_primes(N).to_array()
        assert np.all(np.diff(arr) > 0), "Sequence must be strictly increasing"

    def test_every_element_prime(self):
        for p in collect_primes(500):
            assert is_prime(p), f"{p} in sequence is not prime"

    def test_no_prime_skipped(self):
        """No integer strictly between consecutive elements is prime."""
        arr = collect_primes(500).to_array()
        for a, b in zip(arr[:-1], arr[1:]):
            for x in range(int(a) + 1, int(b)):
                assert not is_prime(x), f"Prime {x} skipped between {a} and {b}"

    def test_matches_reference_sieve(self):
        N = 20_000
        np.testing.assert_array_equal(collect_primes(N).to_array(), first_n_primes(N))

    def test_idempotent(self):
        first = collect_primes(2_000).to_array().copy()
        second = collect_primes(2_000).to_array()
        np.testing.assert_array_equal(first, second)


class TestPrimeSequence:
    """Container behaviour and construction-time checks."""

    def test_fresh_sequence_seeded_with_two(self):
        seq = PrimeSequence(10)
        assert len(seq) == 1
        assert seq.last == 2
        assert seq[0] == 2
        assert not seq.is_complete

    def test_fill_returns_same_object(self):
        seq = PrimeSequence(5)
        assert fill_sequence(seq) is seq
        assert list(seq) == [2, 3, 5, 7, 11]

    def test_fill_complete_sequence_is_noop(self):
        seq = collect_primes(5)
        before = seq.to_array().copy()
        fill_sequence(seq)
        np.testing.assert_array_equal(seq.to_array(), before)

    def test_exported_array_read_only(self):
        arr = collect_primes(5).to_array()
        with pytest.raises(ValueError):
            arr[0] = 4

    def test_slicing(self):
        seq = collect_primes(6)
        assert seq[-1] == 13
        assert list(seq[1:3]) == [3, 5]

    def test_int32_storage(self):
        assert collect_primes(3).to_array().dtype == np.int32

    @pytest.mark.parametrize("capacity", [0, -1])
    def test_rejects_non_positive_capacity(self, capacity):
        with pytest.raises(ValueError):
            PrimeSequence(capacity)

    @pytest.mark.parametrize("capacity", [2.5, "10", True, None])
    def test_rejects_non_integer_capacity(self, capacity):
        with pytest.raises(TypeError):
            PrimeSequence(capacity)

    def test_accepts_numpy_integer(self):
        assert len(collect_primes(np.int64(4))) == 4

    def test_rejects_capacity_beyond_int32(self):
        """The 200,000,000-th prime can exceed 2^31 - 1."""
        assert nth_prime_upper_bound(200_000_000) > INT32_MAX
        with pytest.raises(ValueError, match="int32"):
            PrimeSequence(200_000_000)


class TestUpperBound:
    """nth_prime_upper_bound must never undershoot."""

    def test_exact_for_small_n(self):
        assert [nth_prime_upper_bound(n) for n in range(1, 6)] == [2, 3, 5, 7, 11]

    def test_bounds_actual_primes(self):
        primes = first_n_primes(5_000)
        for n in range(1, 5_001):
            assert primes[n - 1] <= nth_prime_upper_bound(n), f"Bound fails at n={n}"

    def test_bounds_millionth_prime(self):
        assert nth_prime_upper_bound(1_000_000) >= 15_485_863

    def test_rejects_zero(self):
        with pytest.raises(ValueError):
            nth_prime_upper_bound(0)


class TestInt32CapacityCheck:
    """check_int32_capacity is the single source of the int32 precondition."""

    def test_reference_capacity_accepted(self):
        check_int32_capacity(1_000_000)

    def test_oversized_capacity_rejected(self):
        with pytest.raises(ValueError, match="beyond int32 max"):
            check_int32_capacity(200_000_000)

    def test_sequence_uses_same_message(self):
        with pytest.raises(ValueError) as direct:
            check_int32_capacity(200_000_000)
        with pytest.raises(ValueError) as via_sequence:
            PrimeSequence(200_000_000)
        assert str(direct.value) == str(via_sequence.value)
