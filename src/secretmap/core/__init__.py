"""Core data structures, errors and redaction helpers."""
