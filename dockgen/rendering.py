"""Jinja2 rendering for Dockerfile templates."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, TemplateError, TemplateNotFound

from .errors import TemplateNotFoundError, TemplateRenderError

DEFAULT_TEMPLATES_DIR = Path(__file__).with_name("templates")


class TemplateRenderer:
    """Renders handler templates, preferring a project-supplied directory."""

    def __init__(self, templates_dir: Path | None = None) -> None:
        self.templates_dir = templates_dir
        self._env = self._create_env(templates_dir)

    def render(self, template_name: str, **context: Any) -> str:
        try:
            template = self._env.get_template(template_name)
        except TemplateNotFound as exc:
            raise TemplateNotFoundError(f"Template not found: {template_name}") from exc
        except TemplateError as exc:
            raise TemplateRenderError(template_name, str(exc)) from exc
        try:
            return template.render(**context)
        except TemplateError as exc:
            raise TemplateRenderError(template_name, str(exc)) from exc

    @staticmethod
    def _create_env(templates_dir: Path | None) -> Environment:
        directories = []
        if templates_dir:
            directories.append(str(templates_dir))
        default_dir = str(DEFAULT_TEMPLATES_DIR)
        if default_dir not in directories:
            directories.append(default_dir)
        loader = FileSystemLoader(directories)
        return Environment(
            loader=loader,
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )


@lru_cache(maxsize=1)
def default_renderer() -> TemplateRenderer:
    """Return a shared renderer over the built-in templates."""
    return TemplateRenderer()


__all__ = ["DEFAULT_TEMPLATES_DIR", "TemplateRenderer", "default_renderer"]
