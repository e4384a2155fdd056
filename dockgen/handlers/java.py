"""Java language handler."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from .base import LanguageHandler
from ..probes import file_exists


class JavaHandler(LanguageHandler):
    """Detects Java projects and picks Maven or Gradle for the build step."""

    key = "java"
    name = "Java"
    manifests = ("pom.xml", "build.gradle")
    extensions = (".java",)
    patterns = ((re.compile(r"^\s*import\s+([\w.]+)"), 1),)
    image = "openjdk:11"

    def context(self, root: Path, dependencies: Sequence[str]) -> Dict[str, Any]:
        return {"build_tool": self._build_tool(root)}

    @staticmethod
    def _build_tool(root: Path) -> Optional[str]:
        if file_exists(root, "pom.xml"):
            return "maven"
        if file_exists(root, "build.gradle"):
            return "gradle"
        return None
