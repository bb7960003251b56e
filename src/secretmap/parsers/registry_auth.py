# SPDX-License-Identifier: MIT
"""Package-registry auth lines (.npmrc style ``//host/:_authToken=...``)."""
from __future__ import annotations

import re
from typing import List

from secretmap.classify.rules import is_real_value
from secretmap.core.models import CredentialEntry
from secretmap.core.redaction import mask_value
from .base import FileContext, fixed_entry

AUTH_MARKERS = ("_authToken", "_password", "_auth")
AUTH_VALUE = re.compile(r"(?:_authToken|_password|_auth)\s*=\s*(.*)")

# Registry tokens do not age-scale: risk depends on presence only.
REAL_TOKEN_RISK = 7
PLACEHOLDER_TOKEN_RISK = 3


def parse_registry_auth(content: str, ctx: FileContext) -> List[CredentialEntry]:
    results = []
    for line in content.splitlines():
        if not any(marker in line for marker in AUTH_MARKERS):
            continue
        match = AUTH_VALUE.search(line)
        value = match.group(1).strip() if match else ""
        has_value = is_real_value(value)
        results.append(
            fixed_entry(
                line.split("=")[0].strip(),
                ctx,
                cred_type="token",
                risk=REAL_TOKEN_RISK if has_value else PLACEHOLDER_TOKEN_RISK,
                reason="NPM auth token",
                has_value=has_value,
                masked_value=mask_value(value) if has_value else None,
            )
        )
    return results
