"""C++ language handler."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Sequence

from .base import LanguageHandler


class CppHandler(LanguageHandler):
    key = "cpp"
    name = "C++"
    extensions = (".cpp", ".cc", ".cxx")
    image = "gcc:latest"

    def context(self, root: Path, dependencies: Sequence[str]) -> Dict[str, Any]:
        return {}
