"""Rust language handler."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Sequence

from .base import LanguageHandler
from ..probes import file_exists


class RustHandler(LanguageHandler):
    """Detects Cargo projects.

    The binary name lives in Cargo.toml, so the run command keeps a placeholder.
    """

    key = "rust"
    name = "Rust"
    manifests = ("Cargo.toml",)
    extensions = (".rs",)
    image = "rust:latest"

    def context(self, root: Path, dependencies: Sequence[str]) -> Dict[str, Any]:
        return {
            "has_cargo_toml": file_exists(root, "Cargo.toml"),
            "binary": "<your_binary>",
        }
