"""Filesystem probes used by language handlers."""

from __future__ import annotations

import os
from pathlib import Path, PurePath
from typing import Collection, Iterator, List

from .logging import get_logger

_logger = get_logger("probes")


def file_exists(root: Path | str, name: str) -> bool:
    """Return True when ``root/name`` exists as any filesystem entry."""
    try:
        return (Path(root) / name).exists()
    except OSError:
        return False


def any_file_with_extension(root: Path | str, extension: str) -> bool:
    """Return True on the first regular file under ``root`` with ``extension``."""
    for _ in iter_files_with_extensions(root, (extension,)):
        return True
    return False


def iter_files_with_extensions(
    root: Path | str, extensions: Collection[str]
) -> Iterator[Path]:
    """Yield regular files below ``root`` whose suffix is one of ``extensions``.

    Suffixes compare case-sensitively and include the leading dot. Symlinked
    directories are not followed and unreadable subtrees are skipped.
    """
    for dirpath, _dirnames, filenames in os.walk(
        root, onerror=_log_walk_error, followlinks=False
    ):
        for filename in filenames:
            if PurePath(filename).suffix not in extensions:
                continue
            path = Path(dirpath) / filename
            if path.is_file():
                yield path


def top_level_files(root: Path | str) -> List[str]:
    """Return the names of regular files directly inside ``root``."""
    try:
        with os.scandir(root) as entries:
            return [entry.name for entry in entries if _is_regular_file(entry)]
    except OSError as exc:
        _log_walk_error(exc)
        return []


def _is_regular_file(entry: os.DirEntry) -> bool:
    try:
        return entry.is_file()
    except OSError:
        return False


def _log_walk_error(exc: OSError) -> None:
    _logger.debug("Skipping unreadable path %s: %s", exc.filename, exc.strerror or exc)


__all__ = [
    "any_file_with_extension",
    "file_exists",
    "iter_files_with_extensions",
    "top_level_files",
]
