"""Python language handler."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Dict, Sequence

from .base import LanguageHandler
from ..probes import file_exists


class PythonHandler(LanguageHandler):
    """Detects Python projects and installs imported top-level modules."""

    key = "python"
    name = "Python"
    manifests = ("requirements.txt",)
    extensions = (".py",)
    patterns = ((re.compile(r"^\s*(import|from)\s+(\w+)"), 2),)
    image = "python:3.9"

    def context(self, root: Path, dependencies: Sequence[str]) -> Dict[str, Any]:
        manifest = "requirements.txt" if file_exists(root, "requirements.txt") else None
        return {"manifest": manifest}
