# SPDX-License-Identifier: MIT
"""Key files whose presence alone is the finding; content is never read."""
from __future__ import annotations

import os
from typing import List

from secretmap.core.models import CredentialEntry
from .base import FileContext, fixed_entry

SSH_KEY_RISK = 5
ENCRYPTED_FILE_RISK = 3


def ssh_key_marker(content: str, ctx: FileContext) -> List[CredentialEntry]:
    return [
        fixed_entry(
            os.path.basename(ctx.path),
            ctx,
            cred_type="ssh-key",
            risk=SSH_KEY_RISK,
            reason="SSH private key on disk",
        )
    ]


def encrypted_file_marker(content: str, ctx: FileContext) -> List[CredentialEntry]:
    return [
        fixed_entry(
            os.path.basename(ctx.path),
            ctx,
            cred_type="unknown",
            risk=ENCRYPTED_FILE_RISK,
            reason="Encrypted credential file (lower risk if encryption is strong)",
        )
    ]
