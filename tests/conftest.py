"""Shared fixtures: tables in the three-line-header layout the parser expects."""

import logging

import pytest

HEADER = (
    "# Sample decision table\n"
    "| Consideration Point | OPA/Gatekeeper | Kyverno | Kubewarden | JsPolicy | Weight |\n"
    "|---------------------|----------------|---------|------------|----------|--------|\n"
)


def make_table(*rows: str) -> str:
    return HEADER + "\n".join(rows) + "\n"


@pytest.fixture
def two_row_table():
    return make_table(
        "| Sample criterion | 3 | 2 | 3 | 3 | 3 |",
        "| Another | 1 | 3 | 3 | 3 | 2 |",
    )


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep logs out of the repo and ignore any developer .env table override."""
    monkeypatch.setenv("DECISION_MATRIX_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.delenv("DECISION_MATRIX_TABLE", raising=False)
    monkeypatch.delenv("DECISION_MATRIX_REPORTS_DIR", raising=False)


@pytest.fixture(autouse=True)
def reset_app_logging():
    """Each test configures the app logger from scratch (handlers bind the test's log dir)."""
    yield
    logger = logging.getLogger("decision_matrix")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
