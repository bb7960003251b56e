# SPDX-License-Identifier: MIT
"""
Central redaction utilities for SecretMap.

Every masked preview shown in text, JSON or SARIF output comes from
:func:`mask_value`, so the same value always renders the same way.
"""

from __future__ import annotations

MASK = "****"
SHORT_SECRET_LIMIT = 8


def mask_value(value: str) -> str:
    """
    Mask a secret showing first 4 + last 4 characters.

    For values <= 8 characters, shows only ****.
    For longer values, shows first4****last4.

    Args:
        value: The secret string to mask

    Returns:
        Masked string
    """
    if len(value) <= SHORT_SECRET_LIMIT:
        return MASK
    return value[:4] + MASK + value[-4:]
