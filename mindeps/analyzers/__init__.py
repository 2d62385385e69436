"""Dependency reporter implementations and discovery utilities."""

from __future__ import annotations

from importlib import metadata
from typing import Any, Callable, Dict, Iterable, List

from ..errors import ConfigurationError
from .base import DependencyReporter
from .jdeps import JdepsReporter

_ENTRY_POINT_GROUP = "mindeps.reporters"

_BUILTIN_FACTORIES: Dict[str, Callable[..., DependencyReporter]] = {
    "jdeps": JdepsReporter,
}


def available_reporters() -> List[str]:
    """Return the names of built-in and installed reporters."""
    names = {name.lower() for name in _BUILTIN_FACTORIES}
    names.update(entry.name.lower() for entry in _iter_entry_points())
    return sorted(names)


def create_reporter(name: str, home: Any, **options: Any) -> DependencyReporter:
    """Instantiate the reporter registered under ``name``.

    ``home`` is the tool's installation directory; ``options`` are passed
    through as keyword arguments (``runner``, ``include_self``, ...).
    """
    key = name.lower()
    factory = _BUILTIN_FACTORIES.get(key)
    if factory is None:
        for entry in _iter_entry_points():
            if entry.name.lower() != key:
                continue
            try:
                factory = entry.load()
            except Exception as exc:  # pragma: no cover - depends on installed plugins
                raise ConfigurationError(
                    f"Failed to load reporter entry point '{entry.name}': {exc}"
                ) from exc
            break
    if factory is None:
        known = ", ".join(available_reporters())
        raise ConfigurationError(f"Unknown analyzer '{name}' (available: {known})")

    try:
        instance = factory(home, **options)
    except TypeError as exc:
        raise ConfigurationError(f"Failed to create reporter '{name}': {exc}") from exc
    if not isinstance(instance, DependencyReporter):
        raise ConfigurationError(
            f"Reporter factory for '{name}' did not return a DependencyReporter instance"
        )
    return instance


def _iter_entry_points() -> Iterable[metadata.EntryPoint]:
    return metadata.entry_points(group=_ENTRY_POINT_GROUP)


__all__ = [
    "DependencyReporter",
    "JdepsReporter",
    "available_reporters",
    "create_reporter",
]
