"""Base class for language handler plugins."""

import re
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Sequence, Set, Tuple

from ..logging import get_logger
from ..probes import file_exists, iter_files_with_extensions
from ..rendering import TemplateRenderer, default_renderer

_logger = get_logger("handlers")


class LanguageHandler(ABC):
    """Contract for handlers that detect a language and render its Dockerfile.

    Subclasses describe themselves declaratively: ``manifests`` are marker
    files checked at the project root, ``extensions`` select source files, and
    ``patterns`` pairs each compiled regex with the capture group holding the
    dependency name. Only the first matching pattern on a line counts.
    """

    key: str = ""
    name: str = ""
    manifests: Tuple[str, ...] = ()
    extensions: Tuple[str, ...] = ()
    patterns: Tuple[Tuple[re.Pattern[str], int], ...] = ()
    image: str = ""
    workdir: str = "/app"

    @property
    def template_name(self) -> str:
        return f"{self.key}.Dockerfile.j2"

    def detect(self, root: Path) -> bool:
        """Return True when the directory looks like a project in this language."""
        if any(file_exists(root, manifest) for manifest in self.manifests):
            return True
        return next(iter_files_with_extensions(root, self.extensions), None) is not None

    def extract_dependencies(self, root: Path) -> Set[str]:
        """Collect dependency names referenced by source files under ``root``."""
        dependencies: Set[str] = set()
        if not self.patterns:
            return dependencies
        for path in iter_files_with_extensions(root, self.extensions):
            dependencies.update(self._scan_file(path))
        return dependencies

    def generate(
        self,
        root: Path,
        dependencies: Iterable[str],
        renderer: Optional[TemplateRenderer] = None,
    ) -> str:
        """Render the Dockerfile for this language."""
        ordered = sorted(set(dependencies))
        values: Dict[str, Any] = {
            "image": self.image,
            "workdir": self.workdir,
            "dependencies": ordered,
        }
        values.update(self.context(Path(root), ordered))
        return (renderer or default_renderer()).render(self.template_name, **values)

    @abstractmethod
    def context(self, root: Path, dependencies: Sequence[str]) -> Dict[str, Any]:
        """Return template variables specific to this language."""

    def accept(self, dependency: str) -> bool:
        """Return False to discard a captured dependency name."""
        return True

    def match_line(self, line: str) -> Optional[str]:
        for pattern, group in self.patterns:
            match = pattern.search(line)
            if match:
                return match.group(group)
        return None

    def _scan_file(self, path: Path) -> Set[str]:
        found: Set[str] = set()
        try:
            with path.open(encoding="utf-8", errors="replace") as handle:
                for line in handle:
                    dependency = self.match_line(line.rstrip("\n"))
                    if dependency and self.accept(dependency):
                        found.add(dependency)
        except OSError as exc:
            _logger.debug("Skipping unreadable source file %s: %s", path, exc)
            return set()
        return found

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
