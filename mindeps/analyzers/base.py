"""Base class for external class dependency reporters."""

from __future__ import annotations

import subprocess
from abc import ABC, abstractmethod
from fnmatch import fnmatchcase
from typing import Callable, FrozenSet, Iterable, List, Optional, Sequence

from ..errors import AnalysisExecutionError, AnalysisInvocationError
from ..logging import get_logger
from ..models import DependencyReport, InvocationResult

Runner = Callable[..., InvocationResult]


class DependencyReporter(ABC):
    """Contract for tools that report the dependencies of one class.

    Subclasses describe how to launch their tool and how to read its
    output; invoking, error mapping and filtering are shared.
    """

    name = "reporter"

    def __init__(
        self,
        *,
        runner: Runner | None = None,
        include_self: bool = False,
        timeout: Optional[float] = None,
        extra_args: Iterable[str] = (),
        exclude: Iterable[str] = (),
    ) -> None:
        self._runner = runner or self._default_runner
        self.include_self = include_self
        self.timeout = timeout
        self.extra_args = list(extra_args)
        self.exclude = tuple(exclude)
        self.logger = get_logger(f"analyzers.{self.name}")

    def check(self) -> None:
        """Raise ``AnalysisInvocationError`` when the tool cannot be run."""

    @abstractmethod
    def command(self, entry: str, class_path: str) -> List[str]:
        """Return the argument vector analysing ``entry`` against ``class_path``."""

    @abstractmethod
    def parse(self, output: str, entry: str) -> FrozenSet[str]:
        """Extract every dependency identifier reported in ``output``."""

    def invoke(self, entry: str, class_path: str) -> InvocationResult:
        """Run the tool once for ``entry`` and return its captured output."""
        args = self.command(entry, class_path)
        self.logger.info("Analyzing %s", entry)
        self.logger.debug("Running %s", " ".join(args))
        try:
            result = self._runner(args, timeout=self.timeout)
        except subprocess.TimeoutExpired as exc:
            raise AnalysisExecutionError(
                args,
                None,
                _as_text(exc.stderr),
                reason=f"timed out after {exc.timeout}s",
            ) from exc
        except OSError as exc:
            raise AnalysisInvocationError(args, exc) from exc
        if not result.succeeded:
            raise AnalysisExecutionError(args, result.returncode, result.stderr)
        return result

    def report(self, entry: str, class_path: str) -> DependencyReport:
        """Invoke the tool for ``entry`` and return its filtered dependencies."""
        result = self.invoke(entry, class_path)
        found = self.parse(result.stdout, entry)
        dependencies = frozenset(dep for dep in found if self._keep(dep, entry))
        self.logger.debug(
            "%s: %d dependencies (%d reported)", entry, len(dependencies), len(found)
        )
        return DependencyReport(entry=entry, dependencies=dependencies)

    def _keep(self, identifier: str, entry: str) -> bool:
        if identifier == entry and not self.include_self:
            return False
        return not any(fnmatchcase(identifier, pattern) for pattern in self.exclude)

    @staticmethod
    def _default_runner(
        args: Sequence[str], *, timeout: Optional[float] = None
    ) -> InvocationResult:
        completed = subprocess.run(
            list(args),
            check=False,
            capture_output=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout,
        )
        return InvocationResult(
            command=tuple(args),
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )


def _as_text(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)
