# SPDX-License-Identifier: MIT
"""
Env-style parser: .env files, shell rc files and ini-like configs.

Only key names are trusted here. Unlabeled values are not tested against
secret shapes because arbitrary shell variables would produce too much noise.
"""
from __future__ import annotations

import re
from typing import List, Optional, Tuple

from secretmap.classify.rules import classify
from secretmap.core.models import CredentialEntry
from .base import FileContext, entry_from_classification

ASSIGNMENT = re.compile(r"^(?:export\s+)?([A-Za-z_][A-Za-z0-9_]*)\s*=\s*(.*)")
COMMENT_PREFIXES = ("#", "//")


def strip_quotes(value: str) -> str:
    """Remove one layer of matching single or double quotes."""
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        value = value[1:-1]
    return value.strip()


def parse_assignment(line: str) -> Optional[Tuple[str, str]]:
    """Split ``[export ]KEY=VALUE`` into (key, value); None for other lines."""
    trimmed = line.strip()
    if not trimmed or trimmed.startswith(COMMENT_PREFIXES):
        return None
    match = ASSIGNMENT.match(trimmed)
    if not match:
        return None
    return match.group(1), strip_quotes(match.group(2))


def parse_env_like(content: str, ctx: FileContext) -> List[CredentialEntry]:
    results = []
    for line in content.splitlines():
        pair = parse_assignment(line)
        if pair is None:
            continue
        key, value = pair
        classification = classify(key, value)
        if classification is None:
            continue
        results.append(entry_from_classification(key, classification, ctx))
    return results
