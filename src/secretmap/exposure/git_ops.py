# SPDX-License-Identifier: MIT
"""Version-control queries used by the git-tracked exposure check."""
from __future__ import annotations

import logging
import subprocess
from typing import List, Optional

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 5.0


def list_tracked_files(root_dir: str, timeout: float = DEFAULT_TIMEOUT) -> Optional[List[str]]:
    """
    List files tracked by git under *root_dir*, relative to it.

    Paths are returned verbatim (``-z``), never C-quoted.

    Returns None when the directory is not a repository, git is missing,
    the command fails or it does not finish within *timeout* seconds.
    """
    try:
        result = subprocess.run(
            ["git", "ls-files", "-z"],
            cwd=root_dir,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="surrogateescape",
            timeout=timeout,
        )
    except (OSError, subprocess.TimeoutExpired) as e:
        logger.debug("git ls-files unavailable in %s: %s", root_dir, e)
        return None

    if result.returncode != 0:
        logger.debug("git ls-files failed in %s: %s", root_dir, result.stderr.strip())
        return None

    return [path for path in result.stdout.split("\0") if path]
