"""Persists generated Dockerfiles."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from .errors import ArtifactWriteError
from .logging import get_logger

DEFAULT_FILENAME = "Dockerfile"


class ArtifactWriter:
    """Writes artifact text into a directory, replacing any previous file atomically."""

    def __init__(self, filename: str = DEFAULT_FILENAME) -> None:
        self.filename = filename
        self.logger = get_logger("writer")

    def target(self, directory: Path | str) -> Path:
        return Path(directory) / self.filename

    def write(self, directory: Path | str, content: str) -> Path:
        target = self.target(directory)
        tmp_path: str | None = None
        try:
            fd, tmp_path = tempfile.mkstemp(
                prefix=f".{self.filename}.", suffix=".tmp", dir=str(target.parent)
            )
            with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as handle:
                handle.write(content)
                handle.flush()
                os.fsync(handle.fileno())
            os.chmod(tmp_path, 0o644)
            os.replace(tmp_path, target)
        except OSError as exc:
            if tmp_path is not None:
                self._discard(tmp_path)
            raise ArtifactWriteError(target, exc.strerror or str(exc)) from exc
        self.logger.info("%s written to %s", self.filename, target)
        return target

    def _discard(self, tmp_path: str) -> None:
        try:
            os.unlink(tmp_path)
        except FileNotFoundError:
            pass
        except OSError as exc:
            self.logger.warning("Could not remove temporary file %s: %s", tmp_path, exc)


__all__ = ["ArtifactWriter", "DEFAULT_FILENAME"]
