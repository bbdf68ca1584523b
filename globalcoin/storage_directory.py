"""A directory of numbered chunk files sharing a common name prefix."""

from __future__ import annotations

import asyncio
import logging
import os
import re
from pathlib import Path

logger = logging.getLogger(__name__)

_U32_MAX = 0xFFFFFFFF
_INDEX_PATTERN = re.compile(r"\+?[0-9]+")


class StorageDirectoryError(Exception):
    """Raised when a storage directory operation fails."""


class StorageFileNotFoundError(StorageDirectoryError):
    """Raised when a file to be loaded does not exist."""

    def __init__(self, path: str | os.PathLike) -> None:
        super().__init__(f"File not found: {os.fspath(path)}")
        self.path = os.fspath(path)


def _parse_index(text: str) -> int | None:
    if not _INDEX_PATTERN.fullmatch(text):
        return None
    value = int(text)
    return value if value <= _U32_MAX else None


class StorageDirectory:
    """Stores chunks as files named ``<category><index>`` inside one directory."""

    def __init__(self, path: str | os.PathLike, category: str) -> None:
        self._path = Path(path)
        self._category = category
        self._last_index: int | None = None

    @classmethod
    async def create(cls, path: str | os.PathLike, category: str) -> StorageDirectory:
        """Return a storage directory, creating the directory if needed."""
        directory = Path(path)
        if not directory.exists():
            try:
                await asyncio.to_thread(directory.mkdir, parents=True, exist_ok=True)
            except OSError as exc:
                raise StorageDirectoryError(f"I/O error occurred: {exc}") from exc
        logger.debug("StorageDirectory path=%s category=%s", directory, category)
        return cls(directory, category)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def category(self) -> str:
        return self._category

    @property
    def last_index(self) -> int:
        """Highest chunk index present; ``init`` must have been awaited first."""
        if self._last_index is None:
            raise StorageDirectoryError(
                "Invalid operation: storage files last index is not initialised"
            )
        return self._last_index

    def _file_name(self, index: int) -> str:
        return f"{self._category}{index}"

    async def list_files(self) -> list[Path]:
        """Return the paths of the regular files in the directory."""

        def scan() -> list[Path]:
            return [entry for entry in self._path.iterdir() if entry.is_file()]

        try:
            return await asyncio.to_thread(scan)
        except OSError as exc:
            raise StorageDirectoryError(f"I/O error occurred: {exc}") from exc

    async def load_bytes_from_file(self, filename: str) -> bytes:
        """Return the contents of ``filename`` in the directory."""
        file_path = self._path / filename

        def load() -> bytes:
            try:
                with open(file_path, "rb") as handle:
                    return handle.read()
            except FileNotFoundError as exc:
                raise StorageFileNotFoundError(file_path) from exc
            except OSError as exc:
                raise StorageDirectoryError(f"I/O error occurred: {exc}") from exc

        return await asyncio.to_thread(load)

    async def save_bytes_to_file(self, filename: str, data: bytes) -> None:
        """Create or truncate ``filename`` in the directory and write ``data``."""
        file_path = self._path / filename
        payload = bytes(data)
        logger.debug("StorageDirectory saving %s", filename)

        def save() -> None:
            try:
                handle = open(file_path, "wb")
            except OSError as exc:
                raise StorageDirectoryError(f"File creation failed: {exc}") from exc
            with handle:
                try:
                    handle.write(payload)
                except OSError as exc:
                    raise StorageDirectoryError(f"I/O error occurred: {exc}") from exc

        await asyncio.to_thread(save)

    async def file_exists(self, filename: str) -> bool:
        """Return True if anything named ``filename`` exists in the directory."""
        return await asyncio.to_thread((self._path / filename).exists)

    async def init(self) -> None:
        """Find the highest chunk index already stored (0 when there is none)."""

        def scan() -> int | None:
            try:
                names = [entry.name for entry in self._path.iterdir()]
            except OSError:
                return None
            indexes = [
                index
                for name in names
                if name.startswith(self._category)
                and (index := _parse_index(name[len(self._category):])) is not None
            ]
            return max(indexes, default=0)

        found = await asyncio.to_thread(scan)
        if found is not None:
            self._last_index = found

    async def add_chunk(self, chunk: bytes) -> None:
        """Store ``chunk`` under the next index."""
        index = self.last_index + 1
        await self.save_bytes_to_file(self._file_name(index), chunk)
        self._last_index = index

    async def get_chunk(self, height: int) -> bytes:
        """Return the chunk stored under ``height``."""
        return await self.load_bytes_from_file(self._file_name(height))

    async def load_bytes_from_file_with_index(self, index: int) -> bytes:
        """Return the contents of the chunk file with ``index``."""
        return await self.load_bytes_from_file(self._file_name(index))

    async def load_bytes_from_last_file(self) -> bytes:
        """Return the contents of the chunk with the highest index."""
        return await self.load_bytes_from_file(self._file_name(self.last_index))