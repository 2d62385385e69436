"""Aggregation of per-class dependency reports into one closure."""

from __future__ import annotations

import os
from concurrent.futures import FIRST_EXCEPTION, Future, ThreadPoolExecutor, wait
from typing import Dict, FrozenSet, Iterable, List, Sequence

from .analyzers.base import DependencyReporter
from .logging import get_logger
from .models import DependencyReport

_MAX_DEFAULT_WORKERS = 4


def default_worker_count() -> int:
    """Return a small pool size bounded by the available cores."""
    return max(1, min(_MAX_DEFAULT_WORKERS, os.cpu_count() or 1))


class ClosureAggregator:
    """Unions the reports of every entry class with the declared resources.

    Reports are produced independently, one analyzer run per distinct entry
    class, and folded by the calling thread only. The first analyzer
    failure aborts the whole computation.
    """

    def __init__(self, reporter: DependencyReporter, *, max_workers: int = 1) -> None:
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        self.reporter = reporter
        self.max_workers = max_workers
        self.logger = get_logger("closure")

    def compute(
        self,
        entries: Iterable[str],
        class_path: str,
        resources: Iterable[str] = (),
    ) -> List[str]:
        """Return the sorted, duplicate-free manifest for ``entries``."""
        reports = self.collect(entries, class_path)
        closure = self.merge(reports, resources)
        self.logger.debug(
            "Closure holds %d identifiers from %d entry classes", len(closure), len(reports)
        )
        return sorted(closure)

    def collect(self, entries: Iterable[str], class_path: str) -> List[DependencyReport]:
        """Analyse each distinct entry class exactly once."""
        unique = list(dict.fromkeys(entries))
        if not unique:
            return []
        if self.max_workers == 1 or len(unique) == 1:
            return [self.reporter.report(entry, class_path) for entry in unique]
        return self._collect_concurrently(unique, class_path)

    @staticmethod
    def merge(
        reports: Iterable[DependencyReport], resources: Iterable[str] = ()
    ) -> FrozenSet[str]:
        closure: set[str] = set()
        for report in reports:
            closure.update(report.dependencies)
        closure.update(resources)
        return frozenset(closure)

    def _collect_concurrently(
        self, entries: Sequence[str], class_path: str
    ) -> List[DependencyReport]:
        workers = min(self.max_workers, len(entries))
        self.logger.debug("Analyzing %d classes with %d workers", len(entries), workers)
        executor = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="mindeps")
        try:
            futures: Dict[Future[DependencyReport], str] = {
                executor.submit(self.reporter.report, entry, class_path): entry
                for entry in entries
            }
            done, _pending = wait(futures, return_when=FIRST_EXCEPTION)
            failed = [future for future in done if future.exception() is not None]
            if failed:
                # Queued entries are dropped; running processes finish on shutdown.
                executor.shutdown(wait=True, cancel_futures=True)
                self.logger.debug("Analysis of %s failed; discarding results", futures[failed[0]])
                raise failed[0].exception()  # type: ignore[misc]
            by_entry = {futures[future]: future.result() for future in futures}
        finally:
            executor.shutdown(wait=True)
        return [by_entry[entry] for entry in entries]


__all__ = ["ClosureAggregator", "default_worker_count"]
