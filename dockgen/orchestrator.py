"""Pipeline orchestration: detect languages, harvest dependencies, render Dockerfiles."""

from __future__ import annotations

import os
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Sequence, TypeVar

from .config import ConfigError, DockgenConfig, load_config
from .errors import NoLanguageDetected
from .handlers import LanguageHandler, discover_handlers
from .logging import get_logger
from .models import GeneratedArtifact, GenerateOutcome, Stage
from .rendering import TemplateRenderer, default_renderer
from .writer import ArtifactWriter

_T = TypeVar("_T")
_R = TypeVar("_R")


class Orchestrator:
    """Coordinates handler detection and Dockerfile generation for a directory."""

    STAGE_HEADER = "# ===== {name} Stage ====="

    def __init__(
        self,
        handlers: Optional[Iterable[LanguageHandler]] = None,
        renderer: TemplateRenderer | None = None,
        writer: ArtifactWriter | None = None,
        *,
        parallel: bool | None = None,
        max_workers: int | None = None,
    ) -> None:
        self._handler_overrides = list(handlers) if handlers is not None else None
        self.renderer = renderer
        self.writer = writer or ArtifactWriter()
        self.parallel = parallel
        self.max_workers = max_workers
        self.logger = get_logger("orchestrator")

    def detect(self, path: str | Path) -> List[LanguageHandler]:
        """Return every handler whose detection predicate matches, in registry order."""
        root = self._resolve_root(path)
        config = self._load_config(root)
        return self._detect(root, self._select_handlers(config), self._use_parallel(config))

    def resolve(self, path: str | Path) -> GeneratedArtifact:
        """Generate the Dockerfile text for a directory without writing it."""
        root = self._resolve_root(path)
        self.logger.info("Inspecting %s", root)
        config = self._load_config(root)
        handlers = self._select_handlers(config)
        parallel = self._use_parallel(config)

        candidates = self._detect(root, handlers, parallel)
        if not candidates:
            raise NoLanguageDetected(root)
        self.logger.info(
            "Detected language%s: %s",
            "s" if len(candidates) > 1 else "",
            ", ".join(handler.name for handler in candidates),
        )

        renderer = self._resolve_renderer(config)
        stages = self._map(
            lambda handler: self._build_stage(root, handler, renderer),
            candidates,
            parallel,
        )
        for stage in stages:
            self._report(stage)

        return GeneratedArtifact(root=str(root), content=self._compose(stages), stages=stages)

    def run(self, path: str | Path, *, dry_run: bool = False) -> GenerateOutcome:
        """Generate the Dockerfile and persist it inside the inspected directory."""
        artifact = self.resolve(path)
        if dry_run:
            target = self.writer.target(artifact.root)
            self.logger.info("Dry run; %s not written", target)
            return GenerateOutcome(artifact=artifact, path=target, written=False)
        written = self.writer.write(artifact.root, artifact.content)
        return GenerateOutcome(artifact=artifact, path=written, written=True)

    def _detect(
        self, root: Path, handlers: Sequence[LanguageHandler], parallel: bool
    ) -> List[LanguageHandler]:
        # Every handler runs; several languages can share one tree.
        matches = self._map(lambda handler: handler.detect(root), handlers, parallel)
        for handler, matched in zip(handlers, matches):
            self.logger.debug("%s detection: %s", handler.name, "match" if matched else "no match")
        return [handler for handler, matched in zip(handlers, matches) if matched]

    @staticmethod
    def _build_stage(root: Path, handler: LanguageHandler, renderer: TemplateRenderer) -> Stage:
        dependencies = sorted(handler.extract_dependencies(root))
        content = handler.generate(root, dependencies, renderer)
        return Stage(language=handler.name, dependencies=dependencies, content=content)

    def _compose(self, stages: Sequence[Stage]) -> str:
        if len(stages) == 1:
            return stages[0].content
        parts = []
        for stage in stages:
            header = self.STAGE_HEADER.format(name=stage.language)
            parts.append(f"\n{header}\n{stage.content}\n")
        return "".join(parts)

    def _report(self, stage: Stage) -> None:
        if stage.dependencies:
            self.logger.debug(
                "Detected libraries (%s): %s", stage.language, ", ".join(stage.dependencies)
            )
        else:
            self.logger.debug("No libraries detected automatically (%s)", stage.language)

    def _map(
        self, func: Callable[[_T], _R], items: Sequence[_T], parallel: bool
    ) -> List[_R]:
        if not parallel or len(items) < 2:
            return [func(item) for item in items]
        # Executor.map yields in submission order, which keeps registry order.
        with ThreadPoolExecutor(
            max_workers=self.max_workers, thread_name_prefix="dockgen"
        ) as executor:
            return list(executor.map(func, items))

    @staticmethod
    def _resolve_root(path: str | Path) -> Path:
        root = Path(path).expanduser().resolve()
        if not root.exists():
            raise FileNotFoundError(f"Project path not found: {path}")
        if not root.is_dir():
            raise NotADirectoryError(f"Project path is not a directory: {path}")
        # Subtree errors are skipped during the walk; the root itself must be listable.
        with os.scandir(root):
            pass
        return root

    def _load_config(self, root: Path) -> DockgenConfig:
        try:
            return load_config(root)
        except ConfigError as exc:
            self.logger.warning("Ignoring invalid configuration in %s: %s", root, exc)
            return DockgenConfig(root=root)

    def _select_handlers(self, config: DockgenConfig) -> List[LanguageHandler]:
        if self._handler_overrides is not None:
            return list(self._handler_overrides)
        try:
            return discover_handlers(config.handlers.enabled or None)
        except ValueError as exc:
            raise ConfigError(str(exc)) from exc

    def _use_parallel(self, config: DockgenConfig) -> bool:
        if self.parallel is not None:
            return self.parallel
        return config.parallel

    def _resolve_renderer(self, config: DockgenConfig) -> TemplateRenderer:
        if self.renderer is not None:
            return self.renderer
        if config.templates_dir is not None:
            self.logger.debug("Using custom templates from %s", config.templates_dir)
            return TemplateRenderer(config.templates_dir)
        return default_renderer()


__all__ = ["Orchestrator"]
