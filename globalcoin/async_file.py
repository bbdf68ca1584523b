"""Asynchronous helpers for whole-file and partial-file byte access."""

from __future__ import annotations

import asyncio
import os

PathLike = str | os.PathLike

_U32_MAX = 0xFFFFFFFF


class AsyncFileError(Exception):
    """Raised when a file operation fails."""


class AsyncFileNotFoundError(AsyncFileError):
    """Raised when a file to be loaded does not exist."""

    def __init__(self, path: PathLike) -> None:
        super().__init__(f"File not found: {os.fspath(path)}")
        self.path = os.fspath(path)


def _save(data: bytes, path: PathLike) -> None:
    try:
        handle = open(path, "wb")
    except OSError as exc:
        raise AsyncFileError(f"File creation failed: {exc}") from exc
    with handle:
        try:
            handle.write(data)
        except OSError as exc:
            raise AsyncFileError(f"I/O error: {exc}") from exc


def _load(path: PathLike) -> bytes:
    try:
        with open(path, "rb") as handle:
            return handle.read()
    except FileNotFoundError as exc:
        raise AsyncFileNotFoundError(path) from exc
    except OSError as exc:
        raise AsyncFileError(f"I/O error: {exc}") from exc


def _read_portion(path: PathLike, start: int, end: int) -> bytes:
    if start < 0 or end < start:
        raise ValueError("start must be non-negative and not after end")
    try:
        handle = open(path, "rb")
    except OSError as exc:
        raise AsyncFileError(f"I/O error: {exc}") from exc
    with handle:
        try:
            handle.seek(start)
            chunk = handle.read(end - start)
        except OSError as exc:
            raise AsyncFileError(f"I/O error: {exc}") from exc
    if len(chunk) != end - start:
        raise AsyncFileError(
            "Failed to read a portion of the file: failed to fill whole buffer"
        )
    return chunk


def _append(path: PathLike, data: bytes, create_file: bool, add_bytes_size: bool) -> None:
    if add_bytes_size and len(data) > _U32_MAX:
        raise ValueError("data is too long for a 32-bit size prefix")
    flags = os.O_WRONLY | os.O_APPEND
    if create_file:
        flags |= os.O_CREAT
    try:
        descriptor = os.open(path, flags, 0o666)
    except OSError as exc:
        raise AsyncFileError(f"I/O error: {exc}") from exc
    with os.fdopen(descriptor, "ab") as handle:
        try:
            if add_bytes_size:
                handle.write(len(data).to_bytes(4, "little"))
            handle.write(data)
        except OSError as exc:
            raise AsyncFileError(f"I/O error: {exc}") from exc


def _size(path: PathLike) -> int:
    try:
        return os.stat(path).st_size
    except OSError:
        return 0


def _exists(path: PathLike) -> bool:
    try:
        os.stat(path)
    except OSError:
        return False
    return True


async def save_bytes_to_file(data: bytes, path: PathLike) -> None:
    """Create or truncate ``path`` and write ``data`` to it."""
    await asyncio.to_thread(_save, bytes(data), path)


async def load_bytes_from_file(path: PathLike) -> bytes:
    """Return the whole contents of ``path``."""
    return await asyncio.to_thread(_load, path)


async def read_portion_of_file(path: PathLike, start: int, end: int) -> bytes:
    """Return exactly the bytes in ``[start, end)`` of the file."""
    return await asyncio.to_thread(_read_portion, path, start, end)


async def file_exists(path: PathLike) -> bool:
    """Return True if anything exists at ``path``."""
    return await asyncio.to_thread(_exists, path)


async def get_file_size(path: PathLike) -> int:
    """Return the file size in bytes, or 0 if it cannot be read."""
    return await asyncio.to_thread(_size, path)


async def append_to_file(
    path: PathLike, data: bytes, create_file: bool, add_bytes_size: bool
) -> None:
    """Append ``data``, optionally creating the file and prefixing a u32 LE length."""
    await asyncio.to_thread(_append, path, bytes(data), create_file, add_bytes_size)