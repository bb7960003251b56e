"""Risk scoring for credential findings."""
