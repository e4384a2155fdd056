"""Go language handler."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Dict, Sequence

from .base import LanguageHandler
from ..probes import file_exists


class GoHandler(LanguageHandler):
    """Detects Go projects; only single-line ``import "pkg"`` forms are captured."""

    key = "go"
    name = "Go"
    manifests = ("go.mod",)
    extensions = (".go",)
    patterns = ((re.compile(r'^\s*import\s+"([^"]+)"'), 1),)
    image = "golang:1.16"

    def context(self, root: Path, dependencies: Sequence[str]) -> Dict[str, Any]:
        return {"has_go_mod": file_exists(root, "go.mod")}
