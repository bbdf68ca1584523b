"""Password hashing with Argon2id and authenticated encryption with ChaCha20-Poly1305."""

from __future__ import annotations

import base64
import os

from cryptography.exceptions import InvalidTag, UnsupportedAlgorithm
from cryptography.hazmat.primitives.ciphers.aead import ChaCha20Poly1305
from cryptography.hazmat.primitives.kdf.argon2 import Argon2id

MIN_PASSWORD_LENGTH = 32
NONCE_SIZE = 12
KEY_SIZE = 32

_ARGON2_MEMORY_KIB = 64 * 1024
_ARGON2_ITERATIONS = 3
_ARGON2_LANES = 4
_ARGON2_OUTPUT = 32


class EncryptionError(Exception):
    """Raised when hashing, encryption or decryption fails."""


def _salt() -> bytes:
    return base64.b64encode(os.urandom(16)).rstrip(b"=")


def hash_password(password: str | bytes) -> bytes:
    """Return a 32-byte Argon2id hash of ``password`` with a fresh random salt."""
    material = password.encode("utf-8") if isinstance(password, str) else bytes(password)
    try:
        kdf = Argon2id(
            salt=_salt(),
            length=_ARGON2_OUTPUT,
            iterations=_ARGON2_ITERATIONS,
            lanes=_ARGON2_LANES,
            memory_cost=_ARGON2_MEMORY_KIB,
        )
        return kdf.derive(material)
    except (UnsupportedAlgorithm, ValueError) as exc:
        raise EncryptionError(f"Password hashing failed: {exc}") from exc


def ask_user_for_password() -> bytes:
    """Prompt until a long enough password is entered and return its hash."""
    while True:
        try:
            entered = input("Enter a password: ")
        except EOFError as exc:
            raise EncryptionError("IO error: no password entered") from exc
        entered = entered.strip()
        if len(entered) < MIN_PASSWORD_LENGTH:
            print(f"Password must be at least {MIN_PASSWORD_LENGTH} characters.")
            continue
        return hash_password(entered)


def _cipher(key: bytes) -> ChaCha20Poly1305:
    if len(key) != KEY_SIZE:
        raise EncryptionError(f"Key must be exactly {KEY_SIZE} bytes")
    return ChaCha20Poly1305(bytes(key))


def encrypt(cleartext: str, key: bytes) -> bytes:
    """Encrypt text; the result is the nonce followed by the ciphertext."""
    cipher = _cipher(key)
    nonce = os.urandom(NONCE_SIZE)
    return nonce + cipher.encrypt(nonce, cleartext.encode("utf-8"), None)


def decrypt(ciphertext: bytes, key: bytes) -> str:
    """Decrypt data produced by ``encrypt`` and return the text."""
    cipher = _cipher(key)
    if len(ciphertext) < NONCE_SIZE:
        raise EncryptionError("Decryption failed: Ciphertext too short")
    nonce, encrypted = ciphertext[:NONCE_SIZE], ciphertext[NONCE_SIZE:]
    try:
        plaintext = cipher.decrypt(nonce, encrypted, None)
    except InvalidTag as exc:
        raise EncryptionError("Decryption failed: aead::Error") from exc
    try:
        return plaintext.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise EncryptionError(f"UTF-8 conversion error: {exc}") from exc