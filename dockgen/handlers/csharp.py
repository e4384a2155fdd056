"""C# (.NET) language handler."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Sequence

from .base import LanguageHandler
from ..probes import top_level_files


class CSharpHandler(LanguageHandler):
    """Detects .NET projects from sources or top-level project/solution files."""

    key = "csharp"
    name = "C# (.NET)"
    extensions = (".cs",)
    image = "mcr.microsoft.com/dotnet/sdk:5.0"

    _PROJECT_SUFFIXES = (".csproj", ".sln")

    def detect(self, root: Path) -> bool:
        if super().detect(root):
            return True
        return any(name.endswith(self._PROJECT_SUFFIXES) for name in top_level_files(root))

    def context(self, root: Path, dependencies: Sequence[str]) -> Dict[str, Any]:
        return {}
