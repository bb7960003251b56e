# SPDX-License-Identifier: MIT
"""
Risk scoring for credential findings.

Provides deterministic 1-10 scoring based on:
- Base risk of the matched key pattern
- Whether a real (non-placeholder) value is present
- File age (credentials not rotated for over a year)

Every parser funnels key-pattern findings through :func:`score` so a
credential scores the same no matter which file format it came from.
"""
from __future__ import annotations

import math
from datetime import datetime, timezone
from enum import Enum
from typing import Tuple

MIN_RISK = 1
MAX_RISK = 10
PLACEHOLDER_PENALTY = 4
STALE_AFTER_DAYS = 365
AGING_AFTER_DAYS = 180
HIGH_RISK_THRESHOLD = 7
GIT_TRACKED_BOOST = 2
PLACEHOLDER_REASON = "Placeholder/empty value"


class RiskLevel(Enum):
    """Risk level categories."""

    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


def clamp(risk: int) -> int:
    return max(MIN_RISK, min(MAX_RISK, risk))


def score(base_risk: int, has_value: bool, age_days: int, cred_type: str) -> Tuple[int, str]:
    """
    Score a credential.

    Args:
        base_risk: Base risk from the matched key pattern
        has_value: Whether a real value is present
        age_days: Whole days since the file was last modified
        cred_type: Credential type, used in the reason text

    Returns:
        Tuple of (risk, reason)
    """
    if not has_value:
        return max(MIN_RISK, base_risk - PLACEHOLDER_PENALTY), PLACEHOLDER_REASON

    risk = base_risk
    if age_days > STALE_AFTER_DAYS:
        risk = min(MAX_RISK, risk + 1)

    return clamp(risk), build_risk_reason(cred_type, has_value, age_days)


def build_risk_reason(cred_type: str, has_value: bool, age_days: int) -> str:
    if not has_value:
        return PLACEHOLDER_REASON
    parts = [f"{cred_type} with real value"]
    if age_days > STALE_AFTER_DAYS:
        parts.append(f"not rotated in {age_days} days")
    elif age_days > AGING_AFTER_DAYS:
        parts.append(f"{age_days} days old")
    return ", ".join(parts)


def escalate(risk: int, boost: int = GIT_TRACKED_BOOST) -> int:
    """Raise *risk* by *boost*, capped at 10."""
    return min(MAX_RISK, risk + boost)


def age_in_days(modified: datetime, now: datetime) -> int:
    """Whole days (floored) between *modified* and *now*, never negative."""
    if modified.tzinfo is None:
        modified = modified.replace(tzinfo=timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    seconds = (now - modified).total_seconds()
    return max(0, math.floor(seconds / 86400))


def is_high_risk(risk: int) -> bool:
    return risk >= HIGH_RISK_THRESHOLD


def get_risk_level(risk: int) -> RiskLevel:
    """Convert a 1-10 risk score to a risk level."""
    if risk >= 8:
        return RiskLevel.CRITICAL
    elif risk >= 6:
        return RiskLevel.HIGH
    elif risk >= 4:
        return RiskLevel.MEDIUM
    else:
        return RiskLevel.LOW
