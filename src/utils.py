"""Run metadata helpers: content hashes, timestamps, run IDs."""

import hashlib
import uuid
from datetime import datetime, timezone


def hash_text(text: str) -> str:
    """SHA256 hex digest of text (utf-8)."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def iso_now() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"


def new_run_id() -> str:
    """Short run ID for report filenames and audit entries."""
    return uuid.uuid4().hex[:8]
