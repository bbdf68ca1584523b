"""Generation and checking of word-based wallet seed phrases."""

from __future__ import annotations

from .hashing import Hash
from .randomness import RandomNumberError, generate_random_number
from .wordlist import WORDLIST

SEED_WORD_COUNT = 24


class GenerateRandomNumbersError(Exception):
    """Raised when random numbers for a seed cannot be produced."""


def generate_random_numbers(count: int, minimum: int, maximum: int) -> list[int]:
    """Return ``count`` random integers in ``[minimum, maximum]``."""
    try:
        return [generate_random_number(minimum, maximum) for _ in range(count)]
    except RandomNumberError as exc:
        raise GenerateRandomNumbersError(f"RandomNumberError error: {exc}") from exc


def _checksum(words: str) -> int:
    return Hash.compute(words.strip().encode("utf-8")).data[-1]


def generate_seed() -> str:
    """Return 24 random words followed by a checksum word."""
    entropy = generate_random_numbers(SEED_WORD_COUNT, 0, len(WORDLIST) - 1)
    phrase = " ".join(WORDLIST[index] for index in entropy)
    return f"{phrase} {WORDLIST[_checksum(phrase)]}"


def check_seed(seed: str) -> bool:
    """Return True if the last word of ``seed`` is the checksum of the others."""
    words = seed.split()
    if not words:
        return False
    try:
        checksum_index = WORDLIST.index(words[-1])
    except ValueError:
        return False
    body = " ".join(words[:-1]) if len(words) > 1 else ""
    return _checksum(body) == checksum_index