"""Weighted scoring: sum of score x weight per option, fail-fast on non-parallel input."""

import pytest

from conftest import make_table
from src.matrix import POLICY_ENGINE_TABLE, parse_table
from src.scoring import WeightMismatchError, compute_totals, format_totals, weighted_total

GOLDEN_TOTALS = {
    "OPA/Gatekeeper": 104,
    "Kyverno": 100,
    "Kubewarden": 118,
    "JsPolicy": 105,
}


def _totals(result: dict) -> dict:
    return {t["option"]: t["total"] for t in result["totals"]}


def test_weighted_total():
    assert weighted_total([3, 1], [3, 2]) == 11
    assert weighted_total([], []) == 0


def test_weighted_total_skips_missing_values():
    assert weighted_total([3, None, 2], [3, 2, None]) == 9


def test_weighted_total_length_mismatch_raises():
    with pytest.raises(WeightMismatchError) as exc_info:
        weighted_total([1, 2, 3], [1, 2])
    assert "3 scores but 2 weights" in str(exc_info.value)


def test_two_row_scenario(two_row_table):
    result = compute_totals(parse_table(two_row_table))
    assert _totals(result) == {
        "OPA/Gatekeeper": 11,
        "Kyverno": 12,
        "Kubewarden": 15,
        "JsPolicy": 15,
    }
    assert result["criteria_count"] == 2
    assert result["skipped_row_count"] == 0
    assert result["parse_failure_count"] == 0


def test_embedded_table_golden_totals():
    result = compute_totals(parse_table(POLICY_ENGINE_TABLE))
    assert _totals(result) == GOLDEN_TOTALS
    assert result["criteria_count"] == 18


def test_output_lines_in_fixed_order(two_row_table):
    result = compute_totals(parse_table(two_row_table))
    assert format_totals(result) == [
        "OPA/Gatekeeper: 11",
        "Kyverno: 12",
        "Kubewarden: 15",
        "JsPolicy: 15",
    ]


def test_bad_score_cell_drops_only_that_contribution():
    table = make_table(
        "| Sample criterion | 3 | 2 | 3 | 3 | 3 |",
        "| Another | oops | 3 | 3 | 3 | 2 |",
    )
    result = compute_totals(parse_table(table))
    assert _totals(result) == {
        "OPA/Gatekeeper": 9,
        "Kyverno": 12,
        "Kubewarden": 15,
        "JsPolicy": 15,
    }
    assert result["parse_failure_count"] == 1


def test_bad_weight_cell_drops_row_for_every_option():
    table = make_table(
        "| Sample criterion | 3 | 2 | 3 | 3 | 3 |",
        "| Another | 1 | 3 | 3 | 3 | ? |",
    )
    result = compute_totals(parse_table(table))
    assert _totals(result) == {
        "OPA/Gatekeeper": 9,
        "Kyverno": 6,
        "Kubewarden": 9,
        "JsPolicy": 9,
    }


def test_malformed_rows_contribute_nothing(two_row_table):
    noisy = two_row_table + "| Broken | 9 | 9 |\n| Also broken |\n"
    clean = compute_totals(parse_table(two_row_table))
    result = compute_totals(parse_table(noisy))
    assert result["totals"] == clean["totals"]
    assert result["skipped_row_count"] == 2


def test_hand_built_mismatch_names_the_option():
    parsed = {
        "weights": [1, 2],
        "scores": [{"option": "Kyverno", "scores": [1]}],
    }
    with pytest.raises(WeightMismatchError) as exc_info:
        compute_totals(parsed)
    assert "Kyverno" in str(exc_info.value)


def test_empty_table_totals_zero():
    result = compute_totals(parse_table(""))
    assert _totals(result) == {option: 0 for option in GOLDEN_TOTALS}
    assert result["criteria_count"] == 0
    assert result["skipped_row_count"] == 0


def test_header_only_table_totals_zero():
    result = compute_totals(parse_table(make_table()))
    assert [t["total"] for t in result["totals"]] == [0, 0, 0, 0]
    assert result["criteria_count"] == 0
