"""Configuration values for a wallet."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from typing import Any

DEFAULT_CHANNEL_SIZE = 128


@dataclass
class WalletSettings:
    """Settings that control how a wallet runs."""

    channel_size: int = DEFAULT_CHANNEL_SIZE

    def __post_init__(self) -> None:
        if isinstance(self.channel_size, bool) or not isinstance(self.channel_size, int):
            raise TypeError("channel_size must be an integer")
        if self.channel_size < 0:
            raise ValueError("channel_size must not be negative")

    @classmethod
    def default(cls) -> WalletSettings:
        """Return the settings used when nothing else is configured."""
        return cls(channel_size=DEFAULT_CHANNEL_SIZE)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> WalletSettings:
        """Build settings from a mapping; every field must be present."""
        try:
            return cls(channel_size=data["channel_size"])
        except KeyError as exc:
            raise ValueError(f"missing field {exc.args[0]!r}") from exc

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, text: str) -> WalletSettings:
        data = json.loads(text)
        if not isinstance(data, dict):
            raise ValueError("wallet settings must be a JSON object")
        return cls.from_dict(data)