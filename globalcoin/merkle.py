"""Merkle root computation over hashes."""

from __future__ import annotations

from collections.abc import Sequence

from .hashing import Hash


def _branch(left: Hash, right: Hash) -> Hash:
    return Hash.compute(left.data + right.data)


def compute_root(hashes: Sequence[Hash]) -> Hash:
    """Return the Merkle root; an odd node is paired with itself."""
    if not hashes:
        return Hash.empty()
    level = list(hashes)
    while len(level) > 1:
        if len(level) % 2:
            level.append(level[-1])
        pairs = zip(level[::2], level[1::2])
        level = [_branch(left, right) for left, right in pairs]
    return level[0]