"""Deterministic weighted scoring."""

from src.scoring.engine import WeightMismatchError, compute_totals, format_totals, weighted_total

__all__ = ["WeightMismatchError", "compute_totals", "format_totals", "weighted_total"]
