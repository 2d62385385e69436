"""CLI entrypoint for computing minimal class dependencies."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import NoReturn

from .analyzers import available_reporters, create_reporter
from .closure import default_worker_count
from .config import (
    CONFIG_FILENAME,
    JAVA_HOME_ENV,
    MinDepsConfig,
    default_java_home,
    load_config,
    validate_java_home,
)
from .errors import MinDepsError
from .logging import configure_logging, get_logger
from .manifest import render_manifest
from .orchestrator import MinDeps

EXIT_USAGE = 1


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports usage errors with exit code 1."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(EXIT_USAGE, f"{self.prog}: error: {message}\n")


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from exc
    if number < 1:
        raise argparse.ArgumentTypeError("must be at least 1")
    return number


def _build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="mindeps",
        description=(
            "Determine the minimal set of classes (and extra resources) required "
            "to run the given entry classes."
        ),
    )
    parser.add_argument(
        "--java-home",
        "--analyzer-home",
        dest="java_home",
        type=Path,
        default=None,
        help=(
            "The java home directory of the JDK that includes the jdeps binary, "
            f"default is taken from the {JAVA_HOME_ENV} environment variable."
        ),
    )
    parser.add_argument(
        "--class-path",
        "-cp",
        dest="class_path",
        default=None,
        help="The CLASSPATH to use for the analyzer.",
    )
    parser.add_argument(
        "--classes",
        type=Path,
        required=True,
        help=(
            "The file containing the classes to determine the dependencies for. "
            "Empty lines and lines starting with # get ignored."
        ),
    )
    parser.add_argument(
        "--resources",
        type=Path,
        default=Path("."),
        help="The file with resources to include (eg .props files).",
    )
    parser.add_argument(
        "--analyzer",
        default=None,
        help=f"Dependency reporter to use (available: {', '.join(available_reporters())}).",
    )
    parser.add_argument(
        "--include-self",
        action="store_true",
        default=None,
        help="Keep an entry class when the analyzer reports it as its own dependency.",
    )
    parser.add_argument(
        "--exclude",
        action="append",
        default=[],
        metavar="PATTERN",
        help="Drop reported classes matching this glob pattern (repeatable), e.g. 'java.*'.",
    )
    parser.add_argument(
        "-j",
        "--workers",
        type=_positive_int,
        default=None,
        help=f"Number of concurrent analyzer runs (1 = sequential, suggested: {default_worker_count()}).",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"Path to a {CONFIG_FILENAME} file (defaults to ./{CONFIG_FILENAME} when present).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write diagnostic messages (with timestamps) to this file.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint; prints the manifest to stdout."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        configure_logging(verbose=bool(args.verbose), log_file=args.log_file)
    except OSError as exc:
        parser.exit(MinDepsError.exit_code, f"Failed to open log file: {args.log_file}\n{exc}\n")
    logger = get_logger("cli")

    try:
        config = _load_config(args.config)
    except MinDepsError as exc:
        _fail(parser, exc)

    java_home = args.java_home or config.java_home or default_java_home()
    if java_home is None:
        parser.error(f"--java-home is required when {JAVA_HOME_ENV} is not set")
    class_path = args.class_path if args.class_path is not None else config.class_path
    if class_path is None:
        parser.error("the following arguments are required: --class-path")

    analyzer = config.analyzer
    include_self = analyzer.include_self if args.include_self is None else args.include_self
    workers = args.workers or config.workers or 1

    try:
        reporter = create_reporter(
            args.analyzer or analyzer.name,
            validate_java_home(java_home),
            include_self=include_self,
            timeout=analyzer.timeout,
            extra_args=analyzer.extra_args,
            exclude=[*analyzer.exclude, *args.exclude],
        )
        dependencies = MinDeps(reporter, max_workers=workers).run(
            class_path, args.classes, args.resources
        )
    except MinDepsError as exc:
        _fail(parser, exc)

    logger.debug("Emitting %d identifiers", len(dependencies))
    sys.stdout.write(render_manifest(dependencies))
    sys.stdout.flush()


def run() -> None:
    """Console script wrapper."""
    main(sys.argv[1:])


def _load_config(path: Path | None) -> MinDepsConfig:
    if path is not None:
        return load_config(path, required=True)
    return load_config(Path.cwd())


def _fail(parser: argparse.ArgumentParser, exc: MinDepsError) -> NoReturn:
    parser.exit(exc.exit_code, f"{exc}\n")


if __name__ == "__main__":
    main(sys.argv[1:])
