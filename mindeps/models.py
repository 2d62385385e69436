"""Core data models shared across mindeps components."""

from dataclasses import dataclass, field
from typing import FrozenSet, Tuple


@dataclass(frozen=True)
class InvocationResult:
    """Captured outcome of one external analyzer process."""

    command: Tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str = ""

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0


@dataclass(frozen=True)
class DependencyReport:
    """Dependencies the analyzer reported for a single entry class."""

    entry: str
    dependencies: FrozenSet[str] = field(default_factory=frozenset)
