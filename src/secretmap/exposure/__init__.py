"""Exposure checks: ignore-file coverage, permissions and git tracking."""
