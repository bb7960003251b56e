"""Renderers for ScanResult: human text, JSON and SARIF."""
