"""Pipeline orchestration for a minimal dependency run."""

from __future__ import annotations

from pathlib import Path
from typing import List

from .analyzers.base import DependencyReporter
from .closure import ClosureAggregator
from .errors import ConfigurationError
from .logging import get_logger
from .manifest import load_resources, read_manifest


class MinDeps:
    """Checks the inputs, loads the manifests and computes the closure."""

    def __init__(
        self,
        reporter: DependencyReporter,
        *,
        max_workers: int = 1,
        aggregator: ClosureAggregator | None = None,
    ) -> None:
        self.reporter = reporter
        self.aggregator = aggregator or ClosureAggregator(reporter, max_workers=max_workers)
        self.logger = get_logger("orchestrator")

    def run(
        self,
        class_path: str,
        classes_file: Path,
        resources_file: Path | None = None,
    ) -> List[str]:
        """Return the sorted dependency manifest for the classes in ``classes_file``."""
        self.reporter.check()

        classes_path = Path(classes_file)
        if not classes_path.exists():
            raise ConfigurationError(f"File with class names does not exist: {classes_path}")
        if classes_path.is_dir():
            raise ConfigurationError(f"File with class names points to directory: {classes_path}")

        entries = read_manifest(classes_path)
        resources = load_resources(resources_file)
        self.logger.debug(
            "Loaded %d entry classes and %d resources", len(entries), len(resources)
        )

        return self.aggregator.compute(entries, class_path, resources)


__all__ = ["MinDeps"]
