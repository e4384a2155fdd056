"""PHP language handler."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Dict, Sequence

from .base import LanguageHandler
from ..probes import file_exists


class PHPHandler(LanguageHandler):
    """Detects PHP projects served by Apache."""

    key = "php"
    name = "PHP"
    manifests = ("composer.json",)
    extensions = (".php",)
    patterns = ((re.compile(r"(require|include)\s*\(?\s*['\"]([^'\"]+)['\"]"), 2),)
    image = "php:7.4-apache"
    workdir = "/var/www/html"

    def context(self, root: Path, dependencies: Sequence[str]) -> Dict[str, Any]:
        return {"has_composer_json": file_exists(root, "composer.json")}
