# SPDX-License-Identifier: MIT
"""
Credential classification.

Turns a key/value candidate into a credential type, a real-value verdict
and a masked preview, using the static tables in :mod:`.patterns`.
"""

from .rules import classify, is_real_value, Classification

__all__ = ["classify", "is_real_value", "Classification"]
