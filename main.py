#!/usr/bin/env python3
"""CLI for the policy-engine decision matrix."""

import argparse
import json
import logging
import os
import sys
from pathlib import Path

import jsonschema
from dotenv import load_dotenv

from decision_matrix import ScoreCalculator, audit_log, setup_app_logging
from src.matrix import load_table
from src.run_report import build_run_report, write_run_report
from src.scoring import WeightMismatchError, format_totals
from src.utils import new_run_id

load_dotenv()

log = logging.getLogger("decision_matrix.cli")


def _fail(message: str, **audit) -> None:
    print(f"Error: {message}", file=sys.stderr)
    audit_log("calculate", "error", error=message, **audit)
    sys.exit(1)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Compute weighted decision-matrix totals for the compared policy engines."
    )
    parser.add_argument(
        "table_file",
        type=Path,
        nargs="?",
        default=None,
        help="Markdown table file (default: DECISION_MATRIX_TABLE, else the embedded table)",
    )
    parser.add_argument("--json", action="store_true", help="Output totals and diagnostics as JSON")
    parser.add_argument(
        "--report-dir",
        type=Path,
        default=os.environ.get("DECISION_MATRIX_REPORTS_DIR") or None,
        help="Write score_report_<run_id>.json here (or set DECISION_MATRIX_REPORTS_DIR)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit 1 if any row was skipped or any cell failed to parse",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log skipped rows (DEBUG)")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = _build_parser().parse_args(argv)
    setup_app_logging(verbose=args.verbose)

    table_path = args.table_file or os.environ.get("DECISION_MATRIX_TABLE")
    if table_path:
        try:
            calculator = ScoreCalculator(load_table(table_path), source=str(table_path))
        except (OSError, UnicodeDecodeError) as e:
            # missing file, directory, unreadable or non-UTF-8 bytes
            _fail(str(e), table_source=str(table_path))
    else:
        calculator = ScoreCalculator()

    try:
        result = calculator.calculate()
    except WeightMismatchError as e:
        _fail(str(e), table_source=calculator.source)

    parsed = result["parsed"]
    run_id = new_run_id()

    if args.json:
        out = {
            "run_id": run_id,
            "table_source": result["table_source"],
            "table_hash": result["table_hash"],
            "criteria_count": result["criteria_count"],
            "totals": result["totals"],
            "skipped_rows": parsed["skipped_rows"],
            "parse_failures": parsed["parse_failures"],
        }
        print(json.dumps(out, indent=2))
    else:
        for line in format_totals(result):
            print(line)

    skipped = result["skipped_row_count"]
    failed = result["parse_failure_count"]
    if skipped or failed:
        print(
            f"Warning: {skipped} malformed row(s) skipped, {failed} cell(s) could not be parsed",
            file=sys.stderr,
        )

    if args.report_dir:
        report = build_run_report(run_id, result["table_hash"], result["table_source"], parsed, result)
        try:
            report_path = write_run_report(Path(args.report_dir) / f"score_report_{run_id}.json", report)
        except jsonschema.ValidationError as e:
            _fail(f"Score report failed schema validation: {e.message}", table_source=result["table_source"])
        except OSError as e:
            _fail(f"Could not write score report: {e}", table_source=result["table_source"])
        log.info("Score report: %s", report_path)

    audit_log(
        "calculate",
        "ok" if not (skipped or failed) else "partial",
        table_source=result["table_source"],
        table_hash=result["table_hash"],
        criteria_count=result["criteria_count"],
        totals=result["totals"],
        skipped_row_count=skipped,
        parse_failure_count=failed,
        extra={"run_id": run_id},
    )

    if args.strict and (skipped or failed):
        print("Error: --strict set and the table was not clean", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
