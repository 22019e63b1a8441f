"""Decision table: embedded policy-engine comparison and its parser."""

from src.matrix.table import OPTIONS, POLICY_ENGINE_TABLE, load_table, parse_table

__all__ = ["OPTIONS", "POLICY_ENGINE_TABLE", "load_table", "parse_table"]
