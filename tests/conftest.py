from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterator

import pytest

from tests._fixtures.fake_jdeps import make_java_home


@pytest.fixture(autouse=True)
def _reset_mindeps_logger() -> Iterator[None]:
    """Drop handlers installed by configure_logging between tests."""
    yield
    logger = logging.getLogger("mindeps")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def java_home(tmp_path: Path) -> Path:
    """Provide a JDK directory with an executable jdeps stand-in."""
    return make_java_home(tmp_path)


@pytest.fixture
def write_manifest(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write a manifest file under tmp_path and return its path."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
