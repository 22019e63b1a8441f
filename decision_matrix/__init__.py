"""Decision Matrix - weighted scoring of policy-engine options."""

from decision_matrix.calculator import ScoreCalculator
from decision_matrix.audit import audit_log, setup_app_logging

__all__ = ["ScoreCalculator", "audit_log", "setup_app_logging"]
