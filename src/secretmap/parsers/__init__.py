# SPDX-License-Identifier: MIT
"""
Source parsers and their registry.

Each parser turns the text of one file into zero or more classified
CredentialEntry records. PARSERS maps a source classification to its parser.
"""
from __future__ import annotations

import logging
from typing import Dict, List

from secretmap.core.models import CredentialEntry
from .base import FileContext, Parser
from .credential_store import parse_git_credentials, parse_netrc
from .env import parse_env_like
from .markers import encrypted_file_marker, ssh_key_marker
from .registry_auth import parse_registry_auth
from .structured import parse_structured

logger = logging.getLogger(__name__)

PARSERS: Dict[str, Parser] = {
    "env-file": parse_env_like,
    "shell-config": parse_env_like,
    "pypirc": parse_env_like,
    "toml-config": parse_env_like,
    "json-config": parse_structured,
    "yaml-config": parse_structured,
    "ai-agent-config": parse_structured,
    "npmrc": parse_registry_auth,
    "git-credentials": parse_git_credentials,
    "netrc": parse_netrc,
    "ssh-directory": ssh_key_marker,
    "encrypted-file": encrypted_file_marker,
}


def parse_content(content: str, ctx: FileContext) -> List[CredentialEntry]:
    """Run the parser registered for ``ctx.source``; unknown sources yield nothing."""
    parser = PARSERS.get(ctx.source)
    if parser is None:
        logger.debug("No parser for source %s (%s)", ctx.source, ctx.path)
        return []
    return parser(content, ctx)


__all__ = ["FileContext", "PARSERS", "parse_content"]
