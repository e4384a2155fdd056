"""Ruby language handler."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Dict, Sequence

from .base import LanguageHandler
from ..probes import file_exists


class RubyHandler(LanguageHandler):
    """Detects Ruby projects and gems pulled in with ``require``."""

    key = "ruby"
    name = "Ruby"
    manifests = ("Gemfile",)
    extensions = (".rb",)
    patterns = ((re.compile(r"require\s+['\"]([^'\"]+)['\"]"), 1),)
    image = "ruby:2.7"

    def accept(self, dependency: str) -> bool:
        return not dependency.startswith(".")

    def context(self, root: Path, dependencies: Sequence[str]) -> Dict[str, Any]:
        return {"has_gemfile": file_exists(root, "Gemfile")}
