"""Elementary vector arithmetic over prime-exponent vectors.

Vectors are plain sequences of numbers.  Ragged lengths are allowed
everywhere: a shorter vector is treated as if it were right-padded with
zeros, which is made explicit with :func:`pad` before any comparison.
"""

from __future__ import annotations

import math
from typing import List, Sequence


def pad(vector: Sequence[float], length: int) -> List[float]:
    """Return a copy of *vector* right-padded with zeros to *length*.

    Longer vectors are copied unchanged (never truncated).
    """
    result = list(vector)
    if len(result) < length:
        result.extend([0] * (length - len(result)))
    return result


def dot(vector: Sequence[float], coefficients: Sequence[float]) -> float:
    """Dot product over the common prefix of two vectors."""
    return sum(a * b for a, b in zip(vector, coefficients))


def sub(a: Sequence[float], b: Sequence[float]) -> List[float]:
    """Element-wise difference ``a - b`` over the padded union of lengths."""
    length = max(len(a), len(b))
    return [x - y for x, y in zip(pad(a, length), pad(b, length))]


def vectors_equal(a: Sequence[float], b: Sequence[float]) -> bool:
    """Exact equality with implicit zero-padding (``[1, 0] == [1]``)."""
    length = max(len(a), len(b))
    return pad(a, length) == pad(b, length)


def mmod(x: float, modulus: float) -> float:
    """Modulo that always lands in ``[0, modulus)`` for positive *modulus*."""
    return x % modulus


def round_half_up(x: float) -> int:
    """Round to the nearest integer with halves going towards +infinity.

    Python's :func:`round` rounds halves to even, which would make step
    tables depend on representation accidents of ``.5`` values.
    """
    return math.floor(x + 0.5)


def first_primes(count: int) -> List[int]:
    """Return the first *count* primes in ascending order."""
    primes: List[int] = []
    candidate = 2
    while len(primes) < count:
        limit = math.isqrt(candidate)
        if all(candidate % p for p in primes if p <= limit):
            primes.append(candidate)
        candidate += 1
    return primes


PRIMES: List[int] = first_primes(100)
"""The first 100 primes (2, 3, 5, 7, …)."""

LOG_PRIMES: List[float] = [math.log(p) for p in PRIMES]
"""Natural logarithms of :data:`PRIMES`."""
