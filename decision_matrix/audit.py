"""Audit trail and application logging for scoring runs."""

import json
import logging
import os
from pathlib import Path

from src.utils import iso_now

DEFAULT_LOG_DIR = Path(__file__).resolve().parent.parent / "logs"
AUDIT_FILENAME = "audit.log"
APP_LOG_FILENAME = "app.log"
APP_LOGGER = "decision_matrix"


def log_dir() -> Path:
    """Log directory: DECISION_MATRIX_LOG_DIR or <project>/logs."""
    configured = os.environ.get("DECISION_MATRIX_LOG_DIR")
    return Path(configured) if configured else DEFAULT_LOG_DIR


def _ensure_log_dir() -> Path:
    d = log_dir()
    d.mkdir(parents=True, exist_ok=True)
    return d


def audit_log(
    action: str,
    status: str,
    *,
    table_source: str | None = None,
    table_hash: str | None = None,
    criteria_count: int | None = None,
    totals: list[dict] | None = None,
    skipped_row_count: int | None = None,
    parse_failure_count: int | None = None,
    error: str | None = None,
    extra: dict | None = None,
) -> Path:
    """Append a structured audit entry to the audit log (JSONL)."""
    path = _ensure_log_dir() / AUDIT_FILENAME
    entry = {
        "timestamp": iso_now(),
        "action": action,
        "status": status,
    }
    if table_source:
        entry["table_source"] = table_source
    if table_hash:
        entry["table_hash"] = table_hash
    if criteria_count is not None:
        entry["criteria_count"] = criteria_count
    if totals is not None:
        entry["totals"] = {t["option"]: t["total"] for t in totals}
    if skipped_row_count is not None:
        entry["skipped_row_count"] = skipped_row_count
    if parse_failure_count is not None:
        entry["parse_failure_count"] = parse_failure_count
    if error:
        entry["error"] = error
    if extra:
        entry.update(extra)

    with open(path, "a", encoding="utf-8") as f:
        f.write(json.dumps(entry, default=str) + "\n")
    return path


def setup_app_logging(verbose: bool = False):
    """Configure application logging to console (stderr) and file."""
    d = _ensure_log_dir()
    logger = logging.getLogger(APP_LOGGER)
    if logger.handlers:
        return logger
    logger.setLevel(logging.DEBUG)

    fmt = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
    datefmt = "%Y-%m-%d %H:%M:%S"

    # Console
    ch = logging.StreamHandler()
    ch.setLevel(logging.DEBUG if verbose else logging.INFO)
    ch.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    logger.addHandler(ch)

    # File
    fh = logging.FileHandler(d / APP_LOG_FILENAME, encoding="utf-8")
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    logger.addHandler(fh)

    return logger
