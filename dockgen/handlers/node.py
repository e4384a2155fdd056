"""Node.js language handler."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Dict, Sequence

from .base import LanguageHandler
from ..probes import file_exists


class NodeHandler(LanguageHandler):
    """Detects JavaScript/TypeScript projects and their non-relative imports."""

    key = "node"
    name = "Node.js"
    manifests = ("package.json",)
    extensions = (".js", ".ts")
    # require() wins over import when both appear on one line.
    patterns = (
        (re.compile(r"require\(['\"]([^.][^'\"]*)['\"]\)"), 1),
        (re.compile(r"import\s+.*?['\"]([^.][^'\"]*)['\"]"), 1),
    )
    image = "node:14"

    def context(self, root: Path, dependencies: Sequence[str]) -> Dict[str, Any]:
        return {"has_package_json": file_exists(root, "package.json")}
