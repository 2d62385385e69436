"""Tests for manifest loading and rendering."""

from __future__ import annotations

from pathlib import Path

import pytest

from mindeps.errors import ManifestReadError
from mindeps.manifest import load_resources, read_manifest, render_manifest


def test_read_manifest_skips_blank_and_comment_lines(write_manifest) -> None:
    path = write_manifest("classes.txt", "com.example.App\n# comment\n\n")

    assert read_manifest(path) == ["com.example.App"]


def test_read_manifest_strips_whitespace_and_keeps_duplicates(write_manifest) -> None:
    path = write_manifest(
        "classes.txt", "  com.example.App  \r\n\t\n   # indented comment\ncom.example.App\nB\n"
    )

    assert read_manifest(path) == ["com.example.App", "com.example.App", "B"]


def test_read_manifest_reports_missing_file(tmp_path: Path) -> None:
    missing = tmp_path / "nope.txt"

    with pytest.raises(ManifestReadError) as excinfo:
        read_manifest(missing)

    assert excinfo.value.path == missing
    assert str(missing) in str(excinfo.value)


def test_read_manifest_reports_undecodable_file(tmp_path: Path) -> None:
    path = tmp_path / "binary.txt"
    path.write_bytes(b"\xff\xfe\x00bad")

    with pytest.raises(ManifestReadError):
        read_manifest(path)


def test_load_resources_treats_directory_as_none(tmp_path: Path) -> None:
    assert load_resources(tmp_path) == []
    assert load_resources(Path(".")) == []
    assert load_resources(None) == []


def test_load_resources_reads_file(write_manifest) -> None:
    path = write_manifest("resources.txt", "props/app.properties\n#x\nlog4j.xml\n")

    assert load_resources(path) == ["props/app.properties", "log4j.xml"]


def test_load_resources_rejects_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ManifestReadError):
        load_resources(tmp_path / "resources.txt")


def test_render_manifest_writes_one_identifier_per_line() -> None:
    assert render_manifest(["A", "B"]) == "A\nB\n"
    assert render_manifest([]) == ""
