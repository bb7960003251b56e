# SPDX-License-Identifier: MIT
"""
Classification rules for credential candidates.

Rules (first applicable wins):
1. Key name matches a KEY_PATTERNS rule => type and base risk from the rule.
2. Fallback (structured configs only): value matches a known secret shape
   => type inferred from the shape, fixed risk 8.
3. Otherwise the candidate is not a credential.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from secretmap.core.redaction import mask_value
from .patterns import find_key_pattern, match_value_shape, is_placeholder

VALUE_SHAPE_RISK = 8
VALUE_SHAPE_REASON = "Value matches known secret pattern"


@dataclass(frozen=True)
class Classification:
    """Outcome of classifying one key/value candidate."""

    type: str
    base_risk: int
    has_value: bool
    masked_value: Optional[str] = None
    # Set when the verdict came from the value shape rather than the key;
    # such findings carry a fixed risk and bypass age-based scoring.
    value_shape: Optional[str] = None

    @property
    def from_value_shape(self) -> bool:
        return self.value_shape is not None


def is_real_value(value: str) -> bool:
    """False for empty values and placeholder sentinels."""
    stripped = value.strip()
    return bool(stripped) and not is_placeholder(stripped)


def classify(
    key: str, value: str, *, allow_value_fallback: bool = False
) -> Optional[Classification]:
    """
    Classify a key/value candidate.

    Args:
        key: Variable name or last path segment of the key
        value: Raw (unquoted) value
        allow_value_fallback: Test the value against known secret shapes
            when no key rule matches

    Returns:
        Classification, or None when the candidate is not a credential
    """
    pattern = find_key_pattern(key)
    if pattern is not None:
        has_value = is_real_value(value)
        return Classification(
            type=pattern.type,
            base_risk=pattern.base_risk,
            has_value=has_value,
            masked_value=mask_value(value) if has_value else None,
        )

    if not allow_value_fallback:
        return None

    shape = match_value_shape(value)
    if shape is None:
        return None

    return Classification(
        type=shape.type,
        base_risk=VALUE_SHAPE_RISK,
        has_value=True,
        masked_value=mask_value(value),
        value_shape=shape.name,
    )
