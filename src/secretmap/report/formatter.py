# SPDX-License-Identifier: MIT
"""
Human and JSON rendering of scan results.

Colors live only here; the ScanResult itself carries plain severity and
risk values.
"""
from __future__ import annotations

import json
from typing import Dict, List, Optional

from secretmap.autofix.planner import FixSuggestion
from secretmap.core.models import CredentialEntry, ScanResult
from secretmap.risk.score import AGING_AFTER_DAYS, RiskLevel, get_risk_level

RESET = "\x1b[0m"
BOLD = "\x1b[1m"
DIM = "\x1b[2m"

SEVERITY_COLORS = {
    "critical": "\x1b[91m",  # bright red
    "high": "\x1b[31m",  # red
    "medium": "\x1b[33m",  # yellow
    "low": "\x1b[32m",  # green
}

# Credentials below this risk are hidden unless verbose output is requested.
VERBOSE_ONLY_BELOW = 4


class _Style:
    def __init__(self, color: bool):
        self.color = color

    def __call__(self, text: str, code: str) -> str:
        if not self.color or not code:
            return text
        return f"{code}{text}{RESET}"


def _risk_marker(risk: int, style: _Style) -> str:
    level = get_risk_level(risk)
    if level is RiskLevel.LOW:
        return style("○", DIM)
    return style("●", SEVERITY_COLORS[level.value])


def format_human(result: ScanResult, verbose: bool = False, color: bool = True) -> str:
    style = _Style(color)
    lines: List[str] = []

    lines.append("")
    lines.append(style("SecretMap Scan Results", BOLD))
    lines.append("=" * 50)
    lines.append(style(f"Scanned: {result.root_dir}", DIM))
    lines.append(style(f"Time: {result.scan_time} ({result.scan_duration_ms}ms)", DIM))
    lines.append("")

    high_code = SEVERITY_COLORS["critical"] if result.high_risk else SEVERITY_COLORS["low"]
    lines.append(
        f"{style('Summary:', BOLD)} {result.total_found} credentials found, "
        f"{style(str(result.high_risk), high_code)} high-risk"
    )
    if result.exposures:
        lines.append(style(f"{len(result.exposures)} exposure(s) detected", BOLD))
    lines.append("")

    if result.exposures:
        lines.append(style("--- Exposures ---", BOLD))
        for exp in result.exposures:
            tag = style(f"[{exp.severity.upper()}]", SEVERITY_COLORS.get(exp.severity, ""))
            lines.append(f"  {tag} {exp.description}")
            lines.append(f"  {style(exp.location, DIM)}")
            lines.append("")

    shown = [c for c in result.credentials if verbose or c.risk >= VERBOSE_ONLY_BELOW]
    hidden = len(result.credentials) - len(shown)

    if shown:
        lines.append(style("--- Credentials Inventory ---", BOLD))
        lines.append("")

        by_source: Dict[str, List[CredentialEntry]] = {}
        for cred in shown:
            by_source.setdefault(cred.source, []).append(cred)

        for source, creds in by_source.items():
            lines.append(f"  {style(f'[{source}]', BOLD)}")
            for c in creds:
                if not c.has_value:
                    value = style("(empty/placeholder)", DIM)
                elif c.masked_value:
                    value = style(c.masked_value, DIM)
                else:
                    value = "(has value)"
                age = style(f" ({c.age_days}d old)", DIM) if c.age_days > AGING_AFTER_DAYS else ""
                lines.append(f"    {_risk_marker(c.risk, style)} {c.name} {value}{age}")
                lines.append(f"      {style(c.location, DIM)}")
            lines.append("")

    if hidden:
        lines.append(style(f"{hidden} low-risk finding(s) hidden (use --verbose to show)", DIM))
        lines.append("")

    return "\n".join(lines)


def format_json(result: ScanResult, suggestions: Optional[List[FixSuggestion]] = None) -> str:
    output = result.to_dict()
    if suggestions is not None:
        output["suggestions"] = [s.to_dict() for s in suggestions]
    return json.dumps(output, indent=2)
