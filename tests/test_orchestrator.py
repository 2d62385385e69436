"""Tests for mindeps.orchestrator."""

from __future__ import annotations

from pathlib import Path

import pytest

from mindeps.analyzers.jdeps import JdepsReporter
from mindeps.errors import (
    AnalysisExecutionError,
    AnalysisInvocationError,
    ConfigurationError,
    ManifestReadError,
)
from mindeps.orchestrator import MinDeps
from tests._fixtures.fake_jdeps import FakeJdeps


def test_run_produces_sorted_manifest(java_home: Path, write_manifest) -> None:
    classes = write_manifest("classes.txt", "# entry points\ncom.example.App\n\ncom.example.Tool\n")
    resources = write_manifest("resources.txt", "props/app.properties\n")
    runner = FakeJdeps({"com.example.App": ["A", "B"], "com.example.Tool": ["B", "C"]})

    result = MinDeps(JdepsReporter(java_home, runner=runner)).run("app.jar", classes, resources)

    assert result == ["A", "B", "C", "props/app.properties"]
    assert all(call[1:3] == ["-cp", "app.jar"] for call in runner.calls)


def test_run_without_resources_file(java_home: Path, write_manifest) -> None:
    classes = write_manifest("classes.txt", "com.example.App\n")
    runner = FakeJdeps({"com.example.App": ["B", "A"]})

    result = MinDeps(JdepsReporter(java_home, runner=runner), max_workers=2).run(
        "app.jar", classes, Path(".")
    )

    assert result == ["A", "B"]


def test_run_checks_reporter_before_reading_manifests(tmp_path: Path) -> None:
    home = tmp_path / "jre"
    home.mkdir()
    runner = FakeJdeps({})

    with pytest.raises(AnalysisInvocationError):
        MinDeps(JdepsReporter(home, runner=runner)).run("app.jar", tmp_path / "missing.txt")

    assert runner.calls == []


def test_run_rejects_missing_classes_file(java_home: Path, tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="does not exist"):
        MinDeps(JdepsReporter(java_home, runner=FakeJdeps({}))).run(
            "app.jar", tmp_path / "classes.txt"
        )


def test_run_rejects_classes_directory(java_home: Path, tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="points to directory"):
        MinDeps(JdepsReporter(java_home, runner=FakeJdeps({}))).run("app.jar", tmp_path)


def test_run_rejects_missing_resources_file(java_home: Path, write_manifest, tmp_path: Path) -> None:
    classes = write_manifest("classes.txt", "com.example.App\n")
    runner = FakeJdeps({})

    with pytest.raises(ManifestReadError):
        MinDeps(JdepsReporter(java_home, runner=runner)).run(
            "app.jar", classes, tmp_path / "resources.txt"
        )

    assert runner.calls == []


def test_run_propagates_analysis_failure(java_home: Path, write_manifest) -> None:
    classes = write_manifest("classes.txt", "com.example.App\ncom.example.Broken\n")
    runner = FakeJdeps({"com.example.App": ["A"]}, failing={"com.example.Broken"})

    with pytest.raises(AnalysisExecutionError):
        MinDeps(JdepsReporter(java_home, runner=runner)).run("app.jar", classes)
