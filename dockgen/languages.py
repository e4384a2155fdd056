"""Flat list of language names the tool knows about."""

from __future__ import annotations

from pathlib import Path
from typing import List

from .handlers import handler_names
from .logging import get_logger

DEFAULT_LANGUAGES_FILE = "langlist.txt"


class LanguageList:
    """Append-only text file holding one language display name per line.

    The list is informational; detection never reads it.
    """

    def __init__(self, path: Path | str = DEFAULT_LANGUAGES_FILE) -> None:
        self.path = Path(path)
        self.logger = get_logger("languages")

    def ensure(self) -> bool:
        """Create the file seeded with the built-in languages; True when created."""
        if self.path.exists():
            return False
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text("".join(f"{name}\n" for name in handler_names()), encoding="utf-8")
        self.logger.info("Created %s with the default languages", self.path.resolve())
        return True

    def names(self) -> List[str]:
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        return [line.strip() for line in text.splitlines() if line.strip()]

    def add(self, name: str) -> str:
        cleaned = name.strip()
        if not cleaned:
            raise ValueError("Language name must not be empty")
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(f"{cleaned}\n")
        self.logger.info("Added language %s", cleaned)
        return cleaned


__all__ = ["DEFAULT_LANGUAGES_FILE", "LanguageList"]
