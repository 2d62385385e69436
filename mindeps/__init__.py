"""Minimal dependency closure for a set of entry classes."""

from .analyzers import DependencyReporter, JdepsReporter, create_reporter
from .closure import ClosureAggregator
from .errors import (
    AnalysisExecutionError,
    AnalysisFailure,
    AnalysisInvocationError,
    ConfigurationError,
    ManifestReadError,
    MinDepsError,
)
from .models import DependencyReport, InvocationResult
from .orchestrator import MinDeps

__version__ = "0.1.0"

__all__ = [
    "AnalysisExecutionError",
    "AnalysisFailure",
    "AnalysisInvocationError",
    "ClosureAggregator",
    "ConfigurationError",
    "DependencyReport",
    "DependencyReporter",
    "InvocationResult",
    "JdepsReporter",
    "ManifestReadError",
    "MinDeps",
    "MinDepsError",
    "create_reporter",
]
