"""Generate score_report.json for auditability."""

import json
from pathlib import Path

from src.utils import iso_now
from src.validation import validate_score_report


def build_run_report(
    run_id: str,
    table_hash: str,
    table_source: str,
    parsed: dict,
    score_result: dict,
) -> dict:
    """Assemble the report document: hashes, counts, totals, and what was dropped."""
    return {
        "run_id": run_id,
        "timestamp": iso_now(),
        "table_hash": table_hash,
        "table_source": table_source,
        "criteria_count": score_result["criteria_count"],
        "totals": score_result["totals"],
        "skipped_row_count": score_result["skipped_row_count"],
        "parse_failure_count": score_result["parse_failure_count"],
        "skipped_rows": parsed.get("skipped_rows", []),
        "parse_failures": parsed.get("parse_failures", []),
    }


def write_run_report(output_path: Path, report: dict) -> Path:
    """
    Validate and write the report. Nothing is written if validation fails.
    Raises jsonschema.ValidationError.
    """
    validate_score_report(report)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(report, indent=2), encoding="utf-8")
    return output_path
