"""Weighted decision-matrix scoring. Pure code, no I/O."""


class WeightMismatchError(ValueError):
    """Raised when an option's score sequence and the weight vector differ in length."""


def weighted_total(scores: list, weights: list) -> int:
    """
    Sum of score[i] * weight[i].
    Indices where either value is None (unparseable cell) contribute nothing.
    Raises WeightMismatchError if the sequences are not parallel.
    """
    if len(scores) != len(weights):
        raise WeightMismatchError(
            f"{len(scores)} scores but {len(weights)} weights; sequences must be parallel"
        )
    return sum(s * w for s, w in zip(scores, weights) if s is not None and w is not None)


def compute_totals(parsed: dict) -> dict:
    """
    Total score per option from a parsed table (see src.matrix.parse_table).
    Totals keep the table's option order.
    """
    weights = parsed.get("weights", [])
    totals = []
    for accumulator in parsed.get("scores", []):
        option = accumulator["option"]
        try:
            total = weighted_total(accumulator["scores"], weights)
        except WeightMismatchError as e:
            raise WeightMismatchError(f"Option {option}: {e}") from e
        totals.append({"option": option, "total": total})

    return {
        "totals": totals,
        "criteria_count": len(weights),
        "skipped_row_count": len(parsed.get("skipped_rows", [])),
        "parse_failure_count": len(parsed.get("parse_failures", [])),
    }


def format_totals(score_result: dict) -> list[str]:
    """One '<option>: <total>' line per option."""
    return [f"{t['option']}: {t['total']}" for t in score_result["totals"]]
