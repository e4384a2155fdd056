"""Language handler implementations and the ordered handler registry."""

from __future__ import annotations

from importlib import metadata
from typing import Callable, Iterable, List, Sequence, Set

from .base import LanguageHandler
from .cpp import CppHandler
from .csharp import CSharpHandler
from .go import GoHandler
from .java import JavaHandler
from .node import NodeHandler
from .php import PHPHandler
from .python import PythonHandler
from .ruby import RubyHandler
from .rust import RustHandler

_ENTRY_POINT_GROUP = "dockgen.handlers"

# Registry order is the stage order of multi-language Dockerfiles.
_BUILTIN_FACTORIES: dict[str, Callable[[], LanguageHandler]] = {
    "python": PythonHandler,
    "node": NodeHandler,
    "java": JavaHandler,
    "ruby": RubyHandler,
    "php": PHPHandler,
    "go": GoHandler,
    "csharp": CSharpHandler,
    "cpp": CppHandler,
    "rust": RustHandler,
}


def discover_handlers(enabled: Sequence[str] | None = None) -> List[LanguageHandler]:
    """Return fresh handler instances in registry order, honoring optional enabled keys."""

    enabled_set: Set[str] | None = None
    if enabled is not None:
        enabled_set = {name.lower() for name in enabled}

    handlers: List[LanguageHandler] = []
    seen: Set[str] = set()

    def _add(name: str, factory: Callable[[], LanguageHandler]) -> None:
        key = name.lower()
        if enabled_set is not None and key not in enabled_set:
            return
        if key in seen:
            return
        instance = factory()
        if not isinstance(instance, LanguageHandler):
            raise TypeError(f"Handler factory for '{name}' did not return a LanguageHandler instance")
        handlers.append(instance)
        seen.add(key)
        if enabled_set is not None:
            enabled_set.discard(key)

    for name, factory in _BUILTIN_FACTORIES.items():
        _add(name, factory)

    for entry in _iter_entry_points():
        name = entry.name
        try:
            loaded = entry.load()
        except Exception as exc:  # pragma: no cover - broken third-party plugin
            raise RuntimeError(f"Failed to load handler entry point '{name}': {exc}") from exc

        def _factory(obj: object = loaded) -> LanguageHandler:
            return _coerce_handler(obj)

        _add(name, _factory)

    if enabled_set:
        missing = ", ".join(sorted(enabled_set))
        raise ValueError(f"Unknown handlers requested: {missing}")

    return handlers


def handler_names() -> List[str]:
    """Return the display names of the built-in handlers in registry order."""
    return [factory().name for factory in _BUILTIN_FACTORIES.values()]


def _coerce_handler(obj: object) -> LanguageHandler:
    if isinstance(obj, LanguageHandler):
        return obj
    if isinstance(obj, type) and issubclass(obj, LanguageHandler):
        return obj()
    if callable(obj):
        instance = obj()
        if isinstance(instance, LanguageHandler):
            return instance
    raise TypeError("Handler entry point must be a LanguageHandler subclass or factory")


def _iter_entry_points() -> Iterable[metadata.EntryPoint]:
    return metadata.entry_points().select(group=_ENTRY_POINT_GROUP)


__all__ = [
    "CSharpHandler",
    "CppHandler",
    "GoHandler",
    "JavaHandler",
    "LanguageHandler",
    "NodeHandler",
    "PHPHandler",
    "PythonHandler",
    "RubyHandler",
    "RustHandler",
    "discover_handlers",
    "handler_names",
]
