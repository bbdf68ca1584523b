"""Small filesystem directory helpers."""

from __future__ import annotations

import os
import shutil
from pathlib import Path

PathLike = str | os.PathLike


def does_directory_exist(path: PathLike) -> bool:
    """Return True if anything exists at ``path``."""
    return Path(path).exists()


def create_directory(path: PathLike) -> None:
    """Create a single directory; the parent must exist and the path must not."""
    Path(path).mkdir()


def remove_directory(path: PathLike) -> None:
    """Remove a directory and everything inside it."""
    shutil.rmtree(path)


def remove_directory_all(path: PathLike) -> None:
    """Remove a directory and everything inside it."""
    shutil.rmtree(path)