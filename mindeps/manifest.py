"""Reading line-oriented manifests and rendering the resolved manifest."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

from .errors import ManifestReadError

COMMENT_PREFIX = "#"


def read_manifest(path: Path) -> List[str]:
    """Return the significant lines of ``path`` in file order.

    Blank lines and lines starting with ``#`` are skipped; surrounding
    whitespace is stripped. Duplicates are kept, callers treat the result
    as a set.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ManifestReadError(path, exc) from exc
    return list(_significant_lines(text.splitlines()))


def load_resources(path: Path | None) -> List[str]:
    """Load the optional resources manifest.

    ``None`` or a directory (the ``.`` default) means no resources.
    """
    if path is None:
        return []
    resource_path = Path(path)
    if resource_path.is_dir():
        return []
    if not resource_path.exists():
        raise ManifestReadError(resource_path, FileNotFoundError("No such file"))
    return read_manifest(resource_path)


def render_manifest(identifiers: Iterable[str]) -> str:
    """Return the manifest text, one identifier per line."""
    lines = list(identifiers)
    if not lines:
        return ""
    return "\n".join(lines) + "\n"


def _significant_lines(lines: Iterable[str]) -> Iterable[str]:
    for raw in lines:
        stripped = raw.strip()
        if not stripped or stripped.startswith(COMMENT_PREFIX):
            continue
        yield stripped


__all__ = ["load_resources", "read_manifest", "render_manifest"]
