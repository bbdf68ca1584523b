"""Spendable wallet resources and their spent/unspent status."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from .hashing import Hash


class ResourceStatus(IntEnum):
    """Whether a resource has been spent."""

    UNSPENT = 1
    SPENT = 2


@dataclass
class Resource:
    """An output owned by the wallet: transaction hash, output index and value."""

    hash: Hash
    index: int
    value: int
    key_index: int
    available: bool = True
    status: ResourceStatus = ResourceStatus.UNSPENT

    def mark_spent(self) -> None:
        """Record that this resource has been spent."""
        self.status = ResourceStatus.SPENT

    def is_unspent(self) -> bool:
        return self.status is ResourceStatus.UNSPENT


def new_unspent_resource(hash_: Hash, index: int, value: int, key_index: int) -> Resource:
    """Return an available, unspent resource."""
    return Resource(hash=hash_, index=index, value=value, key_index=key_index)