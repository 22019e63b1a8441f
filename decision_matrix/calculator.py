"""Weighted decision-matrix calculator over a markdown comparison table."""

import sys

from src.matrix import POLICY_ENGINE_TABLE, parse_table
from src.scoring import compute_totals, format_totals
from src.utils import hash_text


class ScoreCalculator:
    """Parses a decision table and totals score x weight per option."""

    def __init__(self, table_text: str | None = None, source: str | None = None):
        self.table_text = POLICY_ENGINE_TABLE if table_text is None else table_text
        self.source = source or ("embedded" if table_text is None else "inline")

    def calculate(self) -> dict:
        """
        Parse the table and compute one total per option.

        Returns:
            dict with the score result (totals, counts), the parsed table under "parsed"
            and the SHA256 of the table text under "table_hash".

        Raises:
            WeightMismatchError: if a score sequence is not parallel to the weights.
        """
        parsed = parse_table(self.table_text)
        result = compute_totals(parsed)
        result["parsed"] = parsed
        result["table_hash"] = hash_text(self.table_text)
        result["table_source"] = self.source
        return result

    def print_totals(self, stream=None) -> dict:
        """Write '<option>: <total>' lines to stream (stdout by default). Returns the result."""
        stream = sys.stdout if stream is None else stream
        result = self.calculate()
        for line in format_totals(result):
            print(line, file=stream)
        return result
