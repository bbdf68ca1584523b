"""Hierarchical key derivation over secp256k1 using HMAC-SHA512."""

from __future__ import annotations

import hashlib
import hmac
from dataclasses import dataclass, field

HARDENED_OFFSET = 0x80000000
PBKDF2_ITERATIONS = 2000
SALT = b"eva_dawnley_global_wallet_salt"
SECRET_KEY_SIZE = 32
CHAIN_CODE_SIZE = 32
_MASTER_HMAC_KEY = b"Crypto seed"
_U32_MAX = 0xFFFFFFFF

# secp256k1 domain parameters
_P = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F
_N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
_G = (
    0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798,
    0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8,
)

_Point = "tuple[int, int] | None"


class KeyDerivationError(ValueError):
    """Raised when a key cannot be derived."""


def _point_add(a, b):
    if a is None:
        return b
    if b is None:
        return a
    x1, y1 = a
    x2, y2 = b
    if x1 == x2:
        if (y1 + y2) % _P == 0:
            return None
        slope = 3 * x1 * x1 * pow(2 * y1, -1, _P) % _P
    else:
        slope = (y2 - y1) * pow(x2 - x1, -1, _P) % _P
    x3 = (slope * slope - x1 - x2) % _P
    y3 = (slope * (x1 - x3) - y1) % _P
    return (x3, y3)


def _point_mul(k: int, point):
    result = None
    addend = point
    while k:
        if k & 1:
            result = _point_add(result, addend)
        addend = _point_add(addend, addend)
        k >>= 1
    return result


def _compress(point) -> bytes:
    x, y = point
    return bytes([2 + (y & 1)]) + x.to_bytes(32, "big")


def _on_curve(x: int, y: int) -> bool:
    return (y * y - (x * x * x + 7)) % _P == 0


def _decompress(data: bytes):
    data = bytes(data)
    if len(data) == 33 and data[0] in (2, 3):
        x = int.from_bytes(data[1:], "big")
        if x >= _P:
            raise KeyDerivationError("Invalid public key")
        y_squared = (pow(x, 3, _P) + 7) % _P
        y = pow(y_squared, (_P + 1) // 4, _P)
        if y * y % _P != y_squared:
            raise KeyDerivationError("Invalid public key")
        if (y & 1) != (data[0] & 1):
            y = _P - y
        return (x, y)
    if len(data) == 65 and data[0] == 4:
        x = int.from_bytes(data[1:33], "big")
        y = int.from_bytes(data[33:], "big")
        if x >= _P or y >= _P or not _on_curve(x, y):
            raise KeyDerivationError("Invalid public key")
        return (x, y)
    raise KeyDerivationError("Invalid public key")


def _secret_scalar(secret: bytes) -> int:
    value = int.from_bytes(secret, "big")
    if not 0 < value < _N:
        raise KeyDerivationError("Invalid secret key derived")
    return value


def _tweak_scalar(data: bytes) -> int:
    value = int.from_bytes(data, "big")
    if value >= _N:
        raise KeyDerivationError("Invalid tweak value")
    return value


def _check_index(index: int) -> None:
    if not 0 <= index <= _U32_MAX:
        raise KeyDerivationError(f"Index {index} does not fit in 32 bits")


@dataclass(frozen=True)
class ExtendedSecretKey:
    """A secret key together with its chain code."""

    secret_key: bytes = field(repr=False)
    chain_code: bytes = field(repr=False)

    def __post_init__(self) -> None:
        secret = bytes(self.secret_key)
        chain = bytes(self.chain_code)
        if len(secret) != SECRET_KEY_SIZE:
            raise KeyDerivationError("Secret key must be exactly 32 bytes")
        if len(chain) != CHAIN_CODE_SIZE:
            raise KeyDerivationError("Chain code must be exactly 32 bytes")
        object.__setattr__(self, "secret_key", secret)
        object.__setattr__(self, "chain_code", chain)

    def public_key(self) -> bytes:
        """Return the 33-byte compressed public key for this secret key."""
        return _compress(_point_mul(_secret_scalar(self.secret_key), _G))


def _split(digest: bytes) -> tuple[bytes, bytes]:
    return digest[:SECRET_KEY_SIZE], digest[SECRET_KEY_SIZE:]


def derive_master_extended_secret_key(seed: str) -> ExtendedSecretKey:
    """Stretch the seed phrase with PBKDF2 and derive the master key from it."""
    master_seed = hashlib.pbkdf2_hmac(
        "sha512", seed.encode("utf-8"), SALT, PBKDF2_ITERATIONS, 64
    )
    if len(master_seed) != 64:
        raise KeyDerivationError("Seed must be exactly 64 bytes")
    digest = hmac.new(_MASTER_HMAC_KEY, master_seed, hashlib.sha512).digest()
    secret, chain = _split(digest)
    _secret_scalar(secret)
    return ExtendedSecretKey(secret, chain)


def derive_child_extended_secret_key(
    parent: ExtendedSecretKey, index: int, hardened: bool
) -> ExtendedSecretKey:
    """Derive the child secret key at ``index``."""
    _check_index(index)
    if hardened and index < HARDENED_OFFSET:
        raise KeyDerivationError("Hardened derivation requires index >= 0x80000000")

    mac = hmac.new(parent.chain_code, digestmod=hashlib.sha512)
    if hardened:
        mac.update(b"\x00")
        mac.update(parent.secret_key)
    else:
        mac.update(parent.public_key())
    mac.update(index.to_bytes(4, "big"))
    tweak_bytes, chain = _split(mac.digest())

    tweak = _tweak_scalar(tweak_bytes)
    parent_scalar = _secret_scalar(parent.secret_key)
    child = (parent_scalar + tweak) % _N
    if child == 0:
        raise KeyDerivationError("Invalid resulting secret key")
    return ExtendedSecretKey(child.to_bytes(SECRET_KEY_SIZE, "big"), chain)


def derive_child_public_key(parent_pubkey: bytes, chain_code: bytes, index: int) -> bytes:
    """Derive a non-hardened child public key; returns it compressed."""
    _check_index(index)
    if index >= HARDENED_OFFSET:
        raise KeyDerivationError("Cannot derive hardened key from public key")
    parent_point = _decompress(parent_pubkey)

    mac = hmac.new(bytes(chain_code), digestmod=hashlib.sha512)
    mac.update(_compress(parent_point))
    mac.update(index.to_bytes(4, "big"))
    tweak_bytes, _ = _split(mac.digest())
    if len(tweak_bytes) != SECRET_KEY_SIZE:
        raise KeyDerivationError("Invalid tweak size")

    tweak = _tweak_scalar(tweak_bytes)
    child = _point_add(parent_point, _point_mul(tweak, _G))
    if child is None:
        raise KeyDerivationError("Invalid resulting public key")
    return _compress(child)