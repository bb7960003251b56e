# SPDX-License-Identifier: MIT
"""
Structured config parser: JSON and YAML documents.

The parsed tree is walked over mappings only (lists are not descended).
Leaf strings are classified by key name first and fall back to known
secret value shapes, since a config leaf is rarely free-form text.
"""
from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional

import yaml

from secretmap.classify.rules import classify
from secretmap.core.models import CredentialEntry
from .base import FileContext, entry_from_classification

logger = logging.getLogger(__name__)

MAX_DEPTH = 10
YAML_SUFFIXES = (".yml", ".yaml")


def load_document(content: str, ctx: FileContext) -> Optional[Dict[str, Any]]:
    """Parse *content* as YAML or JSON depending on the source; None if malformed."""
    use_yaml = ctx.source == "yaml-config" or ctx.path.lower().endswith(YAML_SUFFIXES)
    try:
        data = yaml.safe_load(content) if use_yaml else json.loads(content)
    except (ValueError, yaml.YAMLError) as e:
        logger.debug("Skipping malformed config %s: %s", ctx.path, e)
        return None
    if not isinstance(data, dict):
        return None
    return data


def extract_from_mapping(
    obj: Dict[Any, Any],
    prefix: str,
    ctx: FileContext,
    results: List[CredentialEntry],
    depth: int = 0,
) -> None:
    if depth > MAX_DEPTH:
        return
    for raw_key, value in obj.items():
        key = str(raw_key)
        full_key = f"{prefix}.{key}" if prefix else key

        if isinstance(value, dict):
            extract_from_mapping(value, full_key, ctx, results, depth + 1)
            continue

        if not isinstance(value, str):
            continue

        classification = classify(key, value, allow_value_fallback=True)
        if classification is None:
            continue
        results.append(entry_from_classification(full_key, classification, ctx))


def parse_structured(content: str, ctx: FileContext) -> List[CredentialEntry]:
    data = load_document(content, ctx)
    if data is None:
        return []
    results: List[CredentialEntry] = []
    extract_from_mapping(data, "", ctx, results)
    return results
