"""Error types raised while computing a dependency closure."""

from __future__ import annotations

from typing import Sequence


class MinDepsError(RuntimeError):
    """Base class for failures that abort a run without emitting a manifest."""

    exit_code = 2


class ConfigurationError(MinDepsError):
    """Raised for missing or invalid settings, files or directories."""


class ManifestReadError(MinDepsError):
    """Raised when a classes or resources manifest cannot be read."""

    def __init__(self, path: object, cause: BaseException) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to read file: {path}\n{cause}")


class AnalysisFailure(MinDepsError):
    """Raised when the external analyzer could not produce a report."""

    def __init__(self, message: str, command: Sequence[str]) -> None:
        self.command = tuple(command)
        super().__init__(message)


class AnalysisInvocationError(AnalysisFailure):
    """The analyzer binary is missing, not executable or failed to launch."""

    def __init__(self, command: Sequence[str], cause: BaseException | str) -> None:
        self.cause = cause
        super().__init__(f"Failed to execute: {_format_command(command)}\n{cause}", command)


class AnalysisExecutionError(AnalysisFailure):
    """The analyzer ran but did not finish successfully."""

    def __init__(
        self,
        command: Sequence[str],
        returncode: int | None,
        stderr: str = "",
        *,
        reason: str | None = None,
    ) -> None:
        self.returncode = returncode
        self.stderr = stderr
        detail = reason or f"exit code {returncode}"
        message = f"Analyzer failed ({detail}): {_format_command(command)}"
        if stderr.strip():
            message += f"\n{stderr.strip()}"
        super().__init__(message, command)


def _format_command(command: Sequence[str]) -> str:
    return " ".join(command)


__all__ = [
    "AnalysisExecutionError",
    "AnalysisFailure",
    "AnalysisInvocationError",
    "ConfigurationError",
    "ManifestReadError",
    "MinDepsError",
]
