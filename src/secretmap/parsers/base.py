# SPDX-License-Identifier: MIT
"""
Shared parser plumbing: the per-file context and entry construction.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional

from secretmap.classify.rules import Classification, VALUE_SHAPE_REASON
from secretmap.core.models import CredentialEntry
from secretmap.risk.score import score


@dataclass(frozen=True)
class FileContext:
    """Metadata shared by every candidate extracted from one file."""

    path: str
    source: str
    last_modified: str  # ISO-8601
    age_days: int


# Type alias for parser functions
Parser = Callable[[str, FileContext], List[CredentialEntry]]


def entry_from_classification(
    name: str, classification: Classification, ctx: FileContext
) -> CredentialEntry:
    """Build a scored CredentialEntry for a classified candidate."""
    if classification.from_value_shape:
        risk, reason = classification.base_risk, VALUE_SHAPE_REASON
    else:
        risk, reason = score(
            classification.base_risk,
            classification.has_value,
            ctx.age_days,
            classification.type,
        )
    return CredentialEntry(
        name=name,
        location=ctx.path,
        type=classification.type,
        source=ctx.source,
        risk=risk,
        risk_reason=reason,
        last_modified=ctx.last_modified,
        age_days=ctx.age_days,
        has_value=classification.has_value,
        masked_value=classification.masked_value,
    )


def fixed_entry(
    name: str,
    ctx: FileContext,
    *,
    cred_type: str,
    risk: int,
    reason: str,
    has_value: bool = True,
    masked_value: Optional[str] = None,
) -> CredentialEntry:
    """Build an entry whose risk is fixed by the file format, not the scorer."""
    return CredentialEntry(
        name=name,
        location=ctx.path,
        type=cred_type,
        source=ctx.source,
        risk=risk,
        risk_reason=reason,
        last_modified=ctx.last_modified,
        age_days=ctx.age_days,
        has_value=has_value,
        masked_value=masked_value if has_value else None,
    )
