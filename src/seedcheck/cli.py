"""Command line entry point."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from seedcheck.core import ReconcilerConfig, SeedCheckError, configure_logging, get_logger
from seedcheck.models import load_compiled_model
from seedcheck.processing import LocalFileSystem, ModelIndex, Reconciler
from seedcheck.reporting import render_report

logger = get_logger(__name__)

COMMANDS = {
    "validatecsv-filenames": "validate_filenames",
    "validatecsv-headers": "validate_headers",
    "validatecsv": "validate_all",
}


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="seedcheck",
        description="Validate CSV seed files against a compiled CDS model.",
    )
    parser.add_argument(
        "command",
        nargs="?",
        choices=sorted(COMMANDS),
        default="validatecsv",
        help="Check to run (default: validatecsv, both filenames and headers)",
    )
    parser.add_argument(
        "--model",
        required=True,
        help="Compiled model (output of: cds compile '*' --to json), relative to --root",
    )
    parser.add_argument(
        "--root",
        default=".",
        help="Project root holding the data folders; relative paths resolve against it",
    )
    parser.add_argument(
        "--tracelevel",
        type=int,
        choices=[0, 1, 2],
        default=None,
        help="0=errors only, 1=errors and warnings, 2=everything (default: 1)",
    )
    parser.add_argument(
        "--output-json",
        default=None,
        help="Optional path to write the findings as JSON, relative to --root",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Log level for diagnostics (default: WARNING)",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Append logs to this file instead of stdout, relative to --root",
    )
    parser.add_argument("--json-logs", action="store_true", default=False, help="Emit logs as JSON")
    return parser.parse_args(argv)


def run_cli(argv: Optional[List[str]] = None) -> int:
    """Run a check and return the process exit status.

    Returns 0 when no errors were found, 1 when the report holds errors and 2
    when the run could not start (bad settings or unreadable model).
    """
    args = parse_args(argv)
    root = Path(args.root)
    log_file = str(root / args.log_file) if args.log_file else None
    configure_logging(args.log_level, json_format=args.json_logs, log_file=log_file)

    try:
        config = ReconcilerConfig.from_env()
        if args.tracelevel is not None:
            config = config.with_verbosity(args.tracelevel)
        model = load_compiled_model(root / args.model)
        index = ModelIndex.from_compiled(model, config)
    except SeedCheckError as exc:
        logger.error("run_failed", error=str(exc), **exc.details)
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2

    reconciler = Reconciler(index, LocalFileSystem(root), config)
    report = getattr(reconciler, COMMANDS[args.command])()

    print(render_report(report, config.verbosity))
    if args.output_json:
        with open(root / args.output_json, "w", encoding="utf-8") as handle:
            json.dump(report.to_dict(), handle, indent=2, sort_keys=True)

    return 1 if report.has_errors else 0


def main() -> None:
    raise SystemExit(run_cli())


__all__ = ["parse_args", "run_cli", "main"]
