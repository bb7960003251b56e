# SPDX-License-Identifier: MIT
"""
Aggregation of credentials and exposures into the final ScanResult.
"""
from __future__ import annotations

from datetime import datetime
from typing import Iterable

from secretmap.core.models import CredentialEntry, Exposure, ScanResult
from secretmap.risk.score import is_high_risk

SEVERITY_ORDER = {"critical": 0, "high": 1, "medium": 2, "low": 3}
UNKNOWN_SEVERITY_RANK = 4


def severity_rank(severity: str) -> int:
    return SEVERITY_ORDER.get(severity, UNKNOWN_SEVERITY_RANK)


def build_scan_result(
    credentials: Iterable[CredentialEntry],
    exposures: Iterable[Exposure],
    root_dir: str,
    started_at: datetime,
    finished_at: datetime,
) -> ScanResult:
    """
    Sort and count findings.

    Credentials are ordered by descending risk and exposures by severity;
    both sorts are stable so discovery order is kept on ties.
    """
    ordered_credentials = tuple(sorted(credentials, key=lambda c: -c.risk))
    ordered_exposures = tuple(sorted(exposures, key=lambda e: severity_rank(e.severity)))
    duration_ms = int((finished_at - started_at).total_seconds() * 1000)

    return ScanResult(
        scan_time=finished_at.isoformat(),
        scan_duration_ms=max(0, duration_ms),
        root_dir=root_dir,
        total_found=len(ordered_credentials),
        high_risk=sum(1 for c in ordered_credentials if is_high_risk(c.risk)),
        credentials=ordered_credentials,
        exposures=ordered_exposures,
    )


def has_critical(result: ScanResult) -> bool:
    """True when at least one exposure is critical."""
    return any(e.severity == "critical" for e in result.exposures)
