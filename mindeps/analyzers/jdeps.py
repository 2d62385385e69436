"""Dependency reporter backed by the JDK's jdeps tool."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import FrozenSet, Iterable, List, Optional, Set

from ..errors import AnalysisInvocationError
from .base import DependencyReporter, Runner

# -verbose:class output, JDK 9 and later:
#    com.example.App                 -> com.example.Util              app.jar
_FLAT_LINE = re.compile(r"^\s+(?P<origin>\S+)\s+->\s+(?P<target>\S+)(?:\s+(?P<location>.*))?$")
# JDK 8 groups dependencies under "   com.example.App (app.jar)":
#       -> com.example.Util                                   app.jar
_GROUPED_LINE = re.compile(r"^\s+->\s+(?P<target>\S+)(?:\s+(?P<location>.*))?$")


class JdepsReporter(DependencyReporter):
    """Runs ``jdeps -recursive -verbose:class`` for one class at a time."""

    name = "jdeps"

    def __init__(
        self,
        java_home: Path | str,
        *,
        runner: Runner | None = None,
        include_self: bool = False,
        timeout: Optional[float] = None,
        extra_args: Iterable[str] = (),
        exclude: Iterable[str] = (),
    ) -> None:
        super().__init__(
            runner=runner,
            include_self=include_self,
            timeout=timeout,
            extra_args=extra_args,
            exclude=exclude,
        )
        self.java_home = Path(java_home)

    @property
    def binary(self) -> Path:
        executable = "jdeps.exe" if os.name == "nt" else "jdeps"
        return self.java_home / "bin" / executable

    def check(self) -> None:
        binary = self.binary
        if not binary.is_file():
            raise AnalysisInvocationError(
                [str(binary)], f"jdeps binary does not exist: {binary}"
            )
        if not os.access(binary, os.X_OK):
            raise AnalysisInvocationError(
                [str(binary)], f"jdeps binary is not executable: {binary}"
            )

    def command(self, entry: str, class_path: str) -> List[str]:
        return [
            str(self.binary.absolute()),
            "-cp",
            class_path,
            "-recursive",
            "-verbose:class",
            *self.extra_args,
            entry,
        ]

    def parse(self, output: str, entry: str) -> FrozenSet[str]:
        """Collect the target of every per-class dependency line.

        Archive summaries (``app.jar -> java.base``) start at column 0 and
        grouping lines carry no arrow, so neither shape matches.
        """
        targets: Set[str] = set()
        for line in output.splitlines():
            match = _GROUPED_LINE.match(line) or _FLAT_LINE.match(line)
            if match is None:
                continue
            targets.add(match.group("target"))
        return frozenset(targets)


__all__ = ["JdepsReporter"]
