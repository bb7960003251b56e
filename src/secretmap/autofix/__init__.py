"""Remediation suggestions derived from a ScanResult (text only, never executed)."""

from .planner import FixSuggestion, generate_fix_suggestions, format_fix_suggestions

__all__ = ["FixSuggestion", "generate_fix_suggestions", "format_fix_suggestions"]
