#!/usr/bin/env python3
"""Command-line entry point: ``jdeps-runner [options] DESTINATION``.

Exit status is 0 on success, jdeps' own exit code when it fails, and 2
when jdeps cannot be found, configured or started.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from jdeps_runner.assembler.grammar import GRAMMARS
from jdeps_runner.core.config import settings
from jdeps_runner.core.containers import build_jdeps_service
from jdeps_runner.core.errors import JdepsRunnerError
from jdeps_runner.core.logging import setup_logging
from jdeps_runner.domain.schemas import InvocationConfig

logger = logging.getLogger(__name__)

ERROR_EXIT = 2


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="jdeps-runner", description="Run jdeps against compiled classes.")
    ap.add_argument("destination", type=Path, help="classes directory or archive to analyze")

    ap.add_argument("--summary", action="store_true")
    ap.add_argument("--verbose", action="store_true")
    ap.add_argument("--verbose-level", choices=["package", "class"])
    ap.add_argument("--api-only", action="store_true")
    ap.add_argument("--jdk-internals", action="store_true")
    ap.add_argument("--profile", action="store_true")
    ap.add_argument("--recursive", action="store_true")
    ap.add_argument("--print-version", action="store_true")

    ap.add_argument("--package", dest="packages", action="append", default=[], metavar="NAME")
    ap.add_argument("--regex")
    ap.add_argument("--include")
    ap.add_argument("--filter", dest="filter_pattern", metavar="PATTERN")
    ap.add_argument("--filter-mode", metavar="MODE", help="package, archive or none")
    ap.add_argument("--classpath", action="append", default=[], type=Path, metavar="ENTRY")
    ap.add_argument("--dot-output", type=Path, metavar="DIR")

    ap.add_argument("--jdeps", default=settings.JDEPS_EXECUTABLE, help="jdeps executable or its directory")
    ap.add_argument("--toolchain-jdk", default=settings.JDEPS_TOOLCHAIN_JDK, metavar="HOME")
    ap.add_argument("--grammar", default=settings.JDEPS_FLAG_GRAMMAR, choices=sorted(GRAMMARS))
    ap.add_argument("--timeout", type=float, default=settings.JDEPS_TIMEOUT_SEC, metavar="SECONDS")
    ap.add_argument("--report-dir", type=Path, metavar="DIR", help="also write the output to DIR/jdeps.txt")
    return ap


def config_from_args(args: argparse.Namespace) -> InvocationConfig:
    return InvocationConfig(
        summary=args.summary,
        verbose=args.verbose,
        verbose_level=args.verbose_level,
        api_only=args.api_only,
        jdk_internals=args.jdk_internals,
        profile=args.profile,
        recursive=args.recursive,
        print_version=args.print_version,
        packages=args.packages,
        regex=args.regex,
        include=args.include,
        filter_pattern=args.filter_pattern,
        filter_mode=args.filter_mode,
        classpath=args.classpath,
        dot_output=args.dot_output,
        destination=args.destination,
    )


def main(argv: list[str] | None = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    # stdout is reserved for the report so it can be redirected to a file
    setup_logging(stream=sys.stderr)

    try:
        config = config_from_args(args)
    except ValidationError as e:
        ap.error(str(e))

    cfg = settings.model_copy(
        update={
            "JDEPS_EXECUTABLE": args.jdeps,
            "JDEPS_TOOLCHAIN_JDK": args.toolchain_jdk,
            "JDEPS_FLAG_GRAMMAR": args.grammar,
            "JDEPS_TIMEOUT_SEC": args.timeout,
            "JDEPS_REPORT_DIR": str(args.report_dir) if args.report_dir else settings.JDEPS_REPORT_DIR,
        }
    )
    service = build_jdeps_service(cfg, write_report=args.report_dir is not None)

    try:
        result = service.run(config)
    except JdepsRunnerError as e:
        logger.error("%s", e)
        return ERROR_EXIT

    if result.ok:
        print(result.stdout)
        return 0
    print(result.message, file=sys.stderr)
    # Negative codes mean killed by a signal
    return result.exit_code if 0 < result.exit_code < 256 else 1


if __name__ == "__main__":
    sys.exit(main())
