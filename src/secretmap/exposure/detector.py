# SPDX-License-Identifier: MIT
"""
Exposure checks.

Each check is stateless and returns Exposure records:

- no-gitignore: env file not covered by an ignore rule
- world-readable: SSH key readable by group/other
- git-tracked: credential file committed to the repository; the matching
  credentials come back as escalated copies
"""
from __future__ import annotations

import logging
import os
from typing import Iterable, List, Optional, Tuple

from secretmap.core.models import CredentialEntry, Exposure
from secretmap.risk.score import GIT_TRACKED_BOOST

logger = logging.getLogger(__name__)

IGNORE_FILE = ".gitignore"
VCS_MARKER = ".git"
ENV_PATTERN = ".env"
GROUP_OTHER_READ = 0o044
GIT_TRACKED_MIN_RISK = 5


def check_ignore_coverage(env_path: str) -> Optional[Exposure]:
    """Flag an env file whose directory does not ignore ``.env`` files."""
    directory = os.path.dirname(env_path)
    ignore_path = os.path.join(directory, IGNORE_FILE)

    try:
        with open(ignore_path, "r", encoding="utf-8", errors="ignore") as f:
            ignore_rules = f.read()
    except FileNotFoundError:
        if os.path.isdir(os.path.join(directory, VCS_MARKER)):
            return Exposure(
                type="no-gitignore",
                location=env_path,
                description="No .gitignore found in git repo root, .env may be tracked",
                severity="high",
            )
        return None
    except OSError as e:
        logger.debug("Cannot read %s: %s", ignore_path, e)
        return None

    if ENV_PATTERN not in ignore_rules:
        return Exposure(
            type="no-gitignore",
            location=env_path,
            description=".env file found but .gitignore doesn't include .env pattern",
            severity="high",
        )
    return None


def check_world_readable(path: str, mode: int) -> Optional[Exposure]:
    """Flag a key file whose permission bits allow group or other reads."""
    perms = mode & 0o777
    if not perms & GROUP_OTHER_READ:
        return None
    return Exposure(
        type="world-readable",
        location=path,
        description=f"SSH key is world-readable (mode: {perms:o})",
        severity="critical",
    )


def _should_escalate(cred: CredentialEntry) -> bool:
    return cred.has_value and cred.risk >= GIT_TRACKED_MIN_RISK


def check_git_tracked(
    root_dir: str,
    credentials: Iterable[CredentialEntry],
    tracked_files: Optional[Iterable[str]],
) -> Tuple[List[CredentialEntry], List[Exposure]]:
    """
    Cross-reference credentials with the repository's tracked files.

    Args:
        root_dir: Repository root the tracked paths are relative to
        credentials: Credentials collected by the scan (not mutated)
        tracked_files: Output of ``git ls-files``, or None if unavailable

    Returns:
        Tuple of (credentials with escalated copies substituted, exposures)
    """
    credentials = list(credentials)
    if not tracked_files:
        return credentials, []

    tracked = {os.path.normpath(p) for p in tracked_files}
    updated: List[CredentialEntry] = []
    exposures: List[Exposure] = []

    for cred in credentials:
        rel = os.path.relpath(cred.location, root_dir)
        if rel in tracked and _should_escalate(cred):
            exposures.append(
                Exposure(
                    type="git-tracked",
                    location=cred.location,
                    description=f"{cred.name} in {rel} is tracked by git with a real value",
                    severity="critical",
                )
            )
            updated.append(cred.escalated(GIT_TRACKED_BOOST))
        else:
            updated.append(cred)

    return updated, exposures
