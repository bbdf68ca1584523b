"""Wallet building blocks: hashes, Merkle roots, buffers, key derivation, seeds, encryption and storage."""

__version__ = "0.1.0"