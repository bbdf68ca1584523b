"""Cryptographically secure random integers in an inclusive range."""

from __future__ import annotations

import secrets
import time

MAX_RETRIES = 1000
_USIZE_MAX = (1 << 64) - 1


class RandomNumberError(ValueError):
    """Raised when a random number cannot be produced for the given range."""


def _range_size(minimum: int, maximum: int) -> int:
    if minimum > maximum:
        raise RandomNumberError(
            f"The minimum value {minimum} is greater than the maximum value {maximum}"
        )
    if minimum < 0 or maximum > _USIZE_MAX:
        raise RandomNumberError("Bounds must lie between 0 and 2**64 - 1")
    size = maximum - minimum + 1
    if size > _USIZE_MAX:
        raise RandomNumberError("Range too large: would cause overflow or inefficiency")
    return size


def generate_secure_random_number(minimum: int, maximum: int) -> int:
    """Return a uniformly chosen integer in ``[minimum, maximum]``."""
    size = _range_size(minimum, maximum)
    return minimum + secrets.randbelow(size)


def generate_random_number(minimum: int, maximum: int) -> int:
    """Like ``generate_secure_random_number`` but retries if the entropy source fails."""
    _range_size(minimum, maximum)
    for attempt in range(1, MAX_RETRIES + 1):
        try:
            return generate_secure_random_number(minimum, maximum)
        except OSError as exc:
            if attempt == MAX_RETRIES:
                raise RandomNumberError(
                    f"Value outside acceptable range after {attempt} attempts"
                ) from exc
            time.sleep(0.001)
    raise RandomNumberError(f"Value outside acceptable range after {MAX_RETRIES} attempts")