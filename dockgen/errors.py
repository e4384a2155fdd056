"""Named failures surfaced by the dockgen pipeline."""

from __future__ import annotations

from pathlib import Path


class DockgenError(RuntimeError):
    """Base class for failures reported to dockgen callers."""


class NoLanguageDetected(DockgenError):
    """Raised when no handler recognises the inspected directory."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        super().__init__(f"No supported language detected in {self.path}")


class ArtifactWriteError(DockgenError):
    """Raised when the generated Dockerfile cannot be persisted."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        super().__init__(f"Failed to write {self.path}: {reason}")


class TemplateNotFoundError(DockgenError):
    """Raised when a handler template is missing from every template directory."""


class TemplateRenderError(DockgenError):
    """Raised when a template cannot be compiled or rendered."""

    def __init__(self, template_name: str, reason: str) -> None:
        self.template_name = template_name
        super().__init__(f"Failed to render {template_name}: {reason}")


__all__ = [
    "ArtifactWriteError",
    "DockgenError",
    "NoLanguageDetected",
    "TemplateNotFoundError",
    "TemplateRenderError",
]
