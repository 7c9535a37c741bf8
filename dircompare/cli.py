"""Command line front end.

Parses arguments, runs the comparison, reports it and applies the chosen
actions. ``main`` returns the process exit status instead of exiting, so it
can be driven from tests with an injected prompt.
"""

import argparse
import sys
from pathlib import Path
from typing import Callable, List, Optional

from pydantic import ValidationError

from dircompare.actions import run_actions
from dircompare.compare import compare_directories
from dircompare.config import reload_config
from dircompare.errors import PathUnreadable
from dircompare.report import action_prompt, print_action_outcome, print_comparison
from dircompare.utils.logger import configure_logging, log_error, log_info, log_warning

USAGE = (
    "usage: dircompare <source_dir> <target_dir> [actions]\n"
    "actions:\n"
    "  [y] delete duplicates in target\n"
    "  [o] write duplicate list\n"
    "  [u] write list of files unique to target"
)

EXIT_OK = 0
EXIT_FAILURE = 1

Prompt = Callable[[str], str]


class UsageError(Exception):
    """Command line arguments were missing or malformed."""


class _Parser(argparse.ArgumentParser):
    def error(self, message):
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(prog="dircompare", description="Compare two directory trees by file content.")
    parser.add_argument("source", type=Path, help="Directory A (reference tree).")
    parser.add_argument("target", type=Path, help="Directory B (tree to check against A).")
    parser.add_argument("actions", nargs="?", default=None, help="Any combination of y, o, u.")
    parser.add_argument("--workers", type=int, help="Parallel fingerprint workers per directory.")
    parser.add_argument("--algorithm", type=str, help="hashlib algorithm for fingerprints (default: md5).")
    parser.add_argument("--output-dir", type=Path, help="Directory for the duplicate/unique list files.")
    parser.add_argument("--no-progress", dest="show_progress", action="store_false", default=None,
                        help="Disable the progress bar.")
    parser.add_argument("--log-level", type=str, help="Logging level (DEBUG, INFO, WARNING, ...).")
    return parser


def _overrides(args: argparse.Namespace) -> dict:
    overrides = {}
    if args.workers is not None:
        overrides["max_workers"] = args.workers
    if args.algorithm is not None:
        overrides["hash_algorithm"] = args.algorithm
    if args.output_dir is not None:
        overrides["output_dir"] = args.output_dir
    if args.show_progress is not None:
        overrides["show_progress"] = args.show_progress
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    return overrides


def main(argv: Optional[List[str]] = None, prompt: Optional[Prompt] = None) -> int:
    """Run a comparison from command line arguments.

    Args:
        argv: Arguments without the program name; ``sys.argv[1:]`` by default
        prompt: Supplies the action selector when none was given on the
            command line; defaults to reading one line from stdin

    Returns:
        Process exit status
    """
    argv = sys.argv[1:] if argv is None else argv
    prompt = prompt or input

    try:
        args, ignored = build_parser().parse_known_args(argv)
    except UsageError as e:
        print(f"❌ {e}\n{USAGE}", file=sys.stderr)
        return EXIT_FAILURE

    try:
        config = reload_config(**_overrides(args))
    except ValidationError as e:
        print(f"❌ Invalid configuration:\n{e}", file=sys.stderr)
        return EXIT_FAILURE

    configure_logging(config.log_level, config.log_format)
    config.log_configuration()

    if ignored:
        log_warning("Ignoring extra arguments", arguments=ignored)

    issues = config.validate_configuration()
    if issues:
        log_error("Configuration validation failed", issues=issues)
        print("❌ Configuration issues found:", file=sys.stderr)
        for issue in issues:
            print(f"  - {issue}", file=sys.stderr)
        return EXIT_FAILURE

    try:
        comparison = compare_directories(args.source, args.target, config=config)
    except PathUnreadable as e:
        log_error("Comparison aborted", error=e.message)
        print(f"❌ {e.message}", file=sys.stderr)
        return EXIT_FAILURE

    print_comparison(comparison)

    selector = args.actions
    if selector is None:
        try:
            selector = prompt(action_prompt(args.target))
        except EOFError:
            selector = ""

    outcome = run_actions(selector, comparison.result, config=config)
    print_action_outcome(outcome)
    log_info("Run finished", actions=outcome.actions, ok=outcome.ok)
    return EXIT_OK
