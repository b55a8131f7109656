#!/usr/bin/env python3
"""Command line front end for the regex tester.

Usage:
    re-tester PATTERN [SUBJECT]
    re-tester --interactive [PATTERN]

    or

    python -m re_tester.run_tester [options]

Example:
    # One match block per match, every capture group listed
    re-tester '(a)(b)?' 'a'

    # Subject read from stdin when omitted
    printf 'foo\\nbar\\n' | re-tester '^(\\w+)$' --engine re

    # Live session: each :p / :s edit prints the updated report
    re-tester --interactive
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path
from typing import Optional, Sequence, TextIO

from loguru import logger

from re_tester.engine import get_engine
from re_tester.errors import ReTesterError
from re_tester.evaluation import evaluate
from re_tester.reactive import ReactiveController
from re_tester.reference import format_reference
from re_tester.tester_config import ENGINE_NAMES, TesterConfig, parse_timeout

INTERACTIVE_HELP = """Commands:
  :p TEXT   set the pattern
  :s TEXT   set the subject
  :a TEXT   append a line to the subject
  :c        clear the subject
  :r        show the syntax reference
  :h        show this help
  :q        quit
"""


def parse_arguments(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Arguments without the program name (default: sys.argv[1:])

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        prog="re-tester",
        description="Evaluate a regular expression and show every match with its capture groups",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment:
  RE_TESTER_ENGINE   default engine (regex, re, re2)
  RE_TESTER_TIMEOUT  default time budget in seconds ('none' disables it)

Example:
  re-tester '(a)(b)?' 'a'
        """
    )

    parser.add_argument(
        "pattern",
        nargs="?",
        default=None,
        help="Regular expression to evaluate"
    )
    parser.add_argument(
        "subject",
        nargs="?",
        default=None,
        help="Text to search (default: read from stdin)"
    )
    parser.add_argument(
        "--engine",
        type=str,
        default=None,
        choices=list(ENGINE_NAMES),
        help="Regex engine (default: $RE_TESTER_ENGINE or regex)"
    )
    parser.add_argument(
        "--timeout",
        type=parse_timeout,
        default=argparse.SUPPRESS,
        metavar="SECONDS",
        help="Time budget per evaluation for the regex engine, 'none' to disable "
             "(default: $RE_TESTER_TIMEOUT or 1.0)"
    )
    parser.add_argument(
        "--interactive", "-i",
        action="store_true",
        help="Start a live session reading edit commands from stdin"
    )
    parser.add_argument(
        "--reference",
        action="store_true",
        help="Print the syntax reference and exit"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose debug logging"
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Suppress all logs except warnings and errors"
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Also write detailed logs to this file"
    )

    args = parser.parse_args(argv)
    if args.pattern is None and not (args.interactive or args.reference):
        parser.error("a PATTERN is required unless --interactive or --reference is given")
    return args


def setup_logging(verbose: bool = False, quiet: bool = False, log_file: Optional[str] = None) -> None:
    """Configure logging for the tester.

    Args:
        verbose: Whether to enable verbose debug logging
        quiet: Whether to suppress all logs below WARNING
        log_file: Optional path of a detailed log file
    """
    # Remove default logger
    logger.remove()

    if quiet:
        level = "WARNING"
    elif verbose:
        level = "DEBUG"
    else:
        level = "INFO"

    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>",
        level=level,
        colorize=True
    )

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{line} | {message}",
            level="DEBUG",
            rotation="10 MB",
            retention="7 days"
        )


def build_config(args: argparse.Namespace) -> TesterConfig:
    """Environment defaults, overridden by command line flags."""
    overrides: dict = {}
    if args.engine is not None:
        overrides["engine"] = args.engine
    if hasattr(args, "timeout"):
        overrides["timeout_seconds"] = args.timeout
    return replace(TesterConfig.from_env(), **overrides)


def write_report(report: str, out: TextIO) -> None:
    out.write(report)
    if not report.endswith("\n"):
        out.write("\n")
    out.flush()


def run_interactive(controller: ReactiveController, stdin: TextIO, stdout: TextIO) -> int:
    """Read edit commands from ``stdin`` and print each new report.

    Returns:
        Exit code
    """
    unsubscribe = controller.subscribe(lambda report: write_report(report, stdout))
    stdout.write(INTERACTIVE_HELP)
    try:
        for raw_line in stdin:
            line = raw_line.rstrip("\r\n")
            command, _, text = line.partition(" ")

            if command == ":q":
                break
            elif command == ":p":
                before = controller.recompute_count
                controller.set_pattern(text)
                _log_unchanged(controller, before)
            elif command == ":s":
                before = controller.recompute_count
                controller.set_subject(text)
                _log_unchanged(controller, before)
            elif command == ":a":
                subject = controller.subject
                controller.set_subject(f"{subject}\n{text}" if subject else text)
            elif command == ":c":
                controller.set_subject("")
            elif command == ":r":
                stdout.write(format_reference())
            elif command == ":h":
                stdout.write(INTERACTIVE_HELP)
            elif line.strip():
                logger.warning(f"Unknown command: {line!r} (':h' for help)")
    finally:
        unsubscribe()
    return 0


def _log_unchanged(controller: ReactiveController, recompute_count_before: int) -> None:
    if controller.recompute_count == recompute_count_before:
        logger.info("Input unchanged")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the tester.

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    args = parse_arguments(argv)

    setup_logging(verbose=args.verbose, quiet=args.quiet, log_file=args.log_file)

    if args.reference:
        sys.stdout.write(format_reference())
        return 0

    try:
        config = build_config(args)
        engine = get_engine(config.engine, config.timeout_seconds)
    except (ReTesterError, ValueError) as e:
        logger.error(f"Failed to initialize engine: {e}")
        return 1
    logger.debug(f"Using engine {engine.name} (timeout: {config.timeout_seconds})")

    if args.interactive:
        controller = ReactiveController(engine=engine, pattern=args.pattern or "", subject=args.subject or "")
        if controller.current_report():
            write_report(controller.current_report(), sys.stdout)
        try:
            return run_interactive(controller, sys.stdin, sys.stdout)
        except KeyboardInterrupt:
            logger.info("Session interrupted by user")
            return 130  # Standard exit code for SIGINT

    subject = args.subject if args.subject is not None else sys.stdin.read()
    write_report(evaluate(args.pattern, subject, engine), sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
