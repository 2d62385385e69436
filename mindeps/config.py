"""Configuration loading for mindeps (.mindeps.yml)."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence

import yaml

from .errors import ConfigurationError

CONFIG_FILENAME = ".mindeps.yml"
JAVA_HOME_ENV = "JAVA_HOME"


@dataclass
class AnalyzerConfig:
    """Settings for the external class dependency reporter."""

    name: str = "jdeps"
    include_self: bool = False
    timeout: Optional[float] = None
    extra_args: List[str] = field(default_factory=list)
    exclude: List[str] = field(default_factory=list)


@dataclass
class MinDepsConfig:
    """Represents the settings defined in .mindeps.yml."""

    root: Path
    java_home: Optional[Path] = None
    class_path: Optional[str] = None
    workers: Optional[int] = None
    analyzer: AnalyzerConfig = field(default_factory=AnalyzerConfig)


def load_config(config_path: Path, *, required: bool = False) -> MinDepsConfig:
    """Load configuration from disk.

    A missing file yields defaults unless ``required`` is set.
    """
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        if required:
            raise ConfigurationError(f"Configuration file does not exist: {config_file}")
        return MinDepsConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigurationError(f"{config_file.name} must contain a mapping at the root")

    java_home_str = _as_str(data.get("java_home"))
    java_home = (root / Path(java_home_str).expanduser()) if java_home_str else None

    workers = _as_int(data.get("workers"))
    if workers is not None and workers < 1:
        raise ConfigurationError("workers must be a positive integer")

    analyzer_data = _as_dict(data.get("analyzer"))
    analyzer = AnalyzerConfig()
    if analyzer_data:
        analyzer.name = _as_str(analyzer_data.get("name")) or analyzer.name
        analyzer.include_self = _as_bool(analyzer_data.get("include_self")) or False
        analyzer.timeout = _as_float(analyzer_data.get("timeout"))
        analyzer.extra_args = _as_str_list(analyzer_data.get("extra_args"))
        analyzer.exclude = _as_str_list(analyzer_data.get("exclude"))

    return MinDepsConfig(
        root=root,
        java_home=java_home,
        class_path=_as_str(data.get("class_path")),
        workers=workers,
        analyzer=analyzer,
    )


def default_java_home(environ: Mapping[str, str] | None = None) -> Optional[Path]:
    """Return the JDK directory named by ``JAVA_HOME``, if set."""
    env = os.environ if environ is None else environ
    value = env.get(JAVA_HOME_ENV, "").strip()
    return Path(value) if value else None


def validate_java_home(path: Path | None) -> Path:
    """Ensure the analyzer home points at an existing directory."""
    if path is None:
        raise ConfigurationError(
            f"No analyzer home given; pass --java-home or set {JAVA_HOME_ENV}"
        )
    if not path.exists():
        raise ConfigurationError(f"Java home directory does not exist: {path}")
    if not path.is_dir():
        raise ConfigurationError(f"Java home does not point to a directory: {path}")
    return path


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"Failed to read {path}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_float(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []
