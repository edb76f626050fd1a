"""Secure randomness utilities."""

from __future__ import annotations

import os
from typing import Callable

from ..errors import RngUnavailableError

RandomSource = Callable[[int], bytes]
"""A callable returning ``length`` random bytes.

Key generation takes one of these as a parameter so tests can pass a
deterministic source. Production code always uses :func:`random_bytes`.
"""


def random_bytes(length: int) -> bytes:
    """Return ``length`` cryptographically secure random bytes."""

    if length < 0:
        raise ValueError("length must be non-negative")
    return os.urandom(length)


def draw(rng: RandomSource, length: int) -> bytes:
    """Draw exactly ``length`` bytes from ``rng``.

    Raises:
        RngUnavailableError: If the source fails or returns a short read.
    """

    try:
        data = rng(length)
    except (OSError, NotImplementedError) as e:
        raise RngUnavailableError("secure random source unavailable", source=e) from e

    if len(data) != length:
        raise RngUnavailableError(f"random source returned {len(data)} bytes, expected {length}")
    return bytes(data)
