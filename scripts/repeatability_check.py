#!/usr/bin/env python3
"""
Repeatability harness: run the same table calculation N times; assert identical totals.
Exits 0 if stable, 1 if unstable. Prints variance report on failure.
Prints provenance (table_source, table_hash) so you can verify you're scoring the same table
as earlier runs.

Usage: python scripts/repeatability_check.py [--runs 10] [--table path]
"""

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from decision_matrix import ScoreCalculator
from src.matrix import load_table

DEFAULT_RUNS = 10


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--runs", type=int, default=DEFAULT_RUNS)
    parser.add_argument("--table", default=None, help="Table file (default: embedded table)")
    args = parser.parse_args()

    if args.table:
        try:
            calculator = ScoreCalculator(load_table(args.table), source=args.table)
        except FileNotFoundError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
    else:
        calculator = ScoreCalculator()

    print(f"Running calculation {args.runs} times...")
    results = []
    for _ in range(args.runs):
        result = calculator.calculate()
        results.append({
            "totals": [(t["option"], t["total"]) for t in result["totals"]],
            "criteria_count": result["criteria_count"],
            "table_hash": result["table_hash"],
        })

    first = results[0]
    variances = []
    for i, r in enumerate(results[1:], start=1):
        run_num = i + 1
        if r["totals"] != first["totals"]:
            diff = [(a, b) for a, b in zip(r["totals"], first["totals"]) if a != b]
            variances.append(("totals", run_num, f"first diffs: {diff[:5]}"))
        if r["criteria_count"] != first["criteria_count"]:
            variances.append(("criteria_count", run_num, f"{r['criteria_count']} != {first['criteria_count']}"))

    if variances:
        print("\n=== VARIANCE REPORT ===\n")
        print(f"Runs: {args.runs}")
        for stage, run, detail in variances:
            print(f"  Run {run} - {stage}: {detail}")
        print("\nRepeatability check FAILED.")
        sys.exit(1)

    print("\nPASS: Repeatability check passed.")
    print("\n--- Provenance ---")
    print(f"  table_source: {calculator.source}")
    print(f"  table_hash: {first['table_hash']}")
    print("\n--- Run metrics ---")
    print(f"  runs: {args.runs}")
    print(f"  criteria_count: {first['criteria_count']}")
    for option, total in first["totals"]:
        print(f"  {option}: {total}")
    sys.exit(0)


if __name__ == "__main__":
    main()
