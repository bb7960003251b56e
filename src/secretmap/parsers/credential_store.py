# SPDX-License-Identifier: MIT
"""
Plaintext credential stores: git-credentials URL lines and netrc files.

These formats only ever hold live credentials, so presence alone counts as
a real exposure and placeholder heuristics are not applied.
"""
from __future__ import annotations

import re
from typing import List

from secretmap.core.models import CredentialEntry
from secretmap.core.redaction import mask_value
from .base import FileContext, fixed_entry

CREDENTIAL_URL = re.compile(r"https?://([^:]+):([^@]+)@(.+)")
PLAINTEXT_RISK = 8


def parse_git_credentials(content: str, ctx: FileContext) -> List[CredentialEntry]:
    results = []
    for line in content.splitlines():
        match = CREDENTIAL_URL.search(line)
        if not match:
            continue
        password, host = match.group(2), match.group(3).strip()
        results.append(
            fixed_entry(
                f"git-credentials:{host}",
                ctx,
                cred_type="password",
                risk=PLAINTEXT_RISK,
                reason="Plaintext git credentials",
                masked_value=mask_value(password),
            )
        )
    return results


def parse_netrc(content: str, ctx: FileContext) -> List[CredentialEntry]:
    """
    Parse ``machine <host> login <user> password <pw>`` token streams.

    ``default`` entries are reported under the host name "default"; macdef
    bodies are skipped up to the next blank line.
    """
    results = []
    host = None
    password = None

    def flush():
        if host is not None and password:
            results.append(
                fixed_entry(
                    f"netrc:{host}",
                    ctx,
                    cred_type="password",
                    risk=PLAINTEXT_RISK,
                    reason="Plaintext netrc credentials",
                    masked_value=mask_value(password),
                )
            )

    lines = iter(content.splitlines())
    for line in lines:
        tokens = line.split()
        if tokens and tokens[0].startswith("#"):
            continue
        i = 0
        while i < len(tokens):
            token = tokens[i]
            if token == "macdef":
                for body in lines:
                    if not body.strip():
                        break
                break
            if token in ("machine", "default"):
                flush()
                if token == "machine" and i + 1 < len(tokens):
                    host = tokens[i + 1]
                    i += 1
                else:
                    host = "default"
                password = None
            elif token in ("password", "login", "account") and i + 1 < len(tokens):
                if token == "password":
                    password = tokens[i + 1]
                i += 1
            i += 1
    flush()
    return results
