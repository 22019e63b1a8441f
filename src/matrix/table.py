"""Decision table parsing: markdown rows -> per-option score sequences + weight vector."""

import logging
from pathlib import Path

log = logging.getLogger("decision_matrix.table")

# Column order of the score cells (positions 1-4); position 5 is the weight.
OPTIONS = ["OPA/Gatekeeper", "Kyverno", "Kubewarden", "JsPolicy"]
HEADER_LINES = 3  # title, column headers, separator; skipped without inspection
EXPECTED_CELLS = 6
WEIGHT_FIELD = "Weight"

POLICY_ENGINE_TABLE = """
| Consideration Point                   | OPA/Gatekeeper | Kyverno | Kubewarden | JsPolicy | Weight |
|---------------------------------------|----------------|---------|------------|----------|--------|
| Security and Isolation                | 3              | 2       | 3          | 3        | 3      |
| Flexibility in Policy Development     | 3              | 2       | 3          | 3        | 3      |
| Performance Efficiency                | 2              | 2       | 3          | 2        | 3      |
| Scalability                           | 3              | 2       | 3          | 2        | 3      |
| Community and Ecosystem Growth       | 3              | 2       | 2          | 1        | 1      |
| Alignment with Organizational Practices| 2             | 3       | 3          | 3        | 3      |
| Ease of Policy Management             | 1              | 3       | 3          | 3        | 2      |
| Learning Curve                        | 1              | 3       | 3          | 3        | 2      |
| Resource Utilization                  | 2              | 2       | 2          | 2        | 3      |
| Policy Language Compatibility         | 1              | 3       | 2          | 3        | 2      |
| High Availability and Fault Tolerance | 3              | 2       | 2          | 2        | 3      |
| Integration with Existing Tools       | 3              | 3       | 3          | 2        | 3      |
| Upgrade and Maintenance Path          | 3              | 1       | 3          | 2        | 2      |
| Support and Documentation             | 3              | 2       | 2          | 2        | 2      |
| Cost Implications                     | 3              | 3       | 3          | 3        | 1      |
| Compliance and Audit Capabilities     | 3              | 3       | 3          | 2        | 3      |
| Policy Execution Transparency         | 2              | 3       | 3          | 3        | 2      |
| Testing Capapabilities\t            | 2              | 1       | 3          | 3        | 2      |
"""


def split_row(line: str) -> list[str]:
    """Strip outer pipes, then whitespace, then split on the pipe delimiter."""
    return line.strip("|").strip().split("|")


def _parse_int(cell: str) -> int:
    """Base-10 integer parse of a trimmed cell. Raises ValueError."""
    text = cell.strip()
    # int() also accepts "1_000" and non-ASCII digits; a table cell should be plain digits
    if not text.lstrip("+-").isascii() or not text.lstrip("+-").isdigit():
        raise ValueError(f"invalid literal for int() with base 10: {text!r}")
    return int(text, 10)


def parse_table(table_text: str) -> dict:
    """
    Parse a markdown decision table.

    The first HEADER_LINES lines are skipped unconditionally. Each remaining line must split
    into exactly EXPECTED_CELLS cells (label, four option scores, weight); other lines are
    skipped without being reported. A cell that is not an integer is logged, recorded in
    parse_failures and stored as None so every sequence stays parallel to the weight vector.

    Returns dict with criteria, scores (ordered list of {option, scores}), weights,
    skipped_rows and parse_failures.
    """
    lines = table_text.split("\n")
    criteria: list[str] = []
    scores = [{"option": name, "scores": []} for name in OPTIONS]
    weights: list[int | None] = []
    skipped_rows: list[dict] = []
    parse_failures: list[dict] = []

    for line_no, line in enumerate(lines[HEADER_LINES:], start=HEADER_LINES + 1):
        cells = split_row(line)
        if len(cells) != EXPECTED_CELLS:
            if line.strip():
                log.debug("Skipping line %d: %d cells, expected %d", line_no, len(cells), EXPECTED_CELLS)
                skipped_rows.append({"line": line_no, "text": line.strip()})
            continue

        label = cells[0].strip()
        criteria.append(label)
        values: list[int | None] = []
        for position, cell in enumerate(cells[1:], start=1):
            field = OPTIONS[position - 1] if position <= len(OPTIONS) else WEIGHT_FIELD
            try:
                values.append(_parse_int(cell))
            except ValueError as e:
                log.warning("Error converting cell to integer: %s (line %d, %s)", e, line_no, field)
                parse_failures.append({
                    "line": line_no,
                    "criterion": label,
                    "field": field,
                    "value": cell.strip(),
                })
                values.append(None)

        for accumulator, value in zip(scores, values[: len(OPTIONS)]):
            accumulator["scores"].append(value)
        weights.append(values[len(OPTIONS)])

    return {
        "criteria": criteria,
        "scores": scores,
        "weights": weights,
        "skipped_rows": skipped_rows,
        "parse_failures": parse_failures,
    }


def load_table(path) -> str:
    """Read a table file. FAILS (raises FileNotFoundError) if missing."""
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Decision table not found: {p}")
    return p.read_text(encoding="utf-8")
