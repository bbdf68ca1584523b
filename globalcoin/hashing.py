"""Fixed-size 32-byte hash values built on SHA3-256."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass

HASH_SIZE = 32


class HashError(ValueError):
    """Raised when bytes of the wrong length are used as a hash."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f"Invalid hash length: expected {expected}, got {actual}")
        self.expected = expected
        self.actual = actual


@dataclass(frozen=True)
class Hash:
    """An immutable 32-byte hash."""

    data: bytes

    def __post_init__(self) -> None:
        raw = bytes(self.data)
        if len(raw) != HASH_SIZE:
            raise HashError(HASH_SIZE, len(raw))
        object.__setattr__(self, "data", raw)

    @classmethod
    def from_bytes(cls, data: bytes) -> Hash:
        """Build a hash from exactly 32 bytes."""
        return cls(data)

    @classmethod
    def compute(cls, data: bytes) -> Hash:
        """Return the SHA3-256 digest of ``data``."""
        return cls(hashlib.sha3_256(data).digest())

    @classmethod
    def empty(cls) -> Hash:
        """Return the all-zero hash."""
        return cls(bytes(HASH_SIZE))

    def hex(self) -> str:
        """Return the lower-case hexadecimal form."""
        return self.data.hex()

    def __bytes__(self) -> bytes:
        return self.data

    def __str__(self) -> str:
        return self.hex()