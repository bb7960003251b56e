# SPDX-License-Identifier: MIT
"""
Filesystem traversal: project walk, home known-locations and file reads.
"""
from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import FrozenSet, Iterator, Optional, Tuple

from secretmap.classify.patterns import KNOWN_LOCATIONS, SKIP_DIRS
from secretmap.parsers import FileContext
from secretmap.risk.score import age_in_days

logger = logging.getLogger(__name__)

ENV_FILE_RE = re.compile(r"^\.env(\..+)?$")
JSON_CONFIG_RE = re.compile(r"\.(json|jsonc)$")
ENC_FILE_RE = re.compile(r"\.enc\.(json|yaml|yml|toml)$")
CONFIG_NAME_HINTS = ("credential", "secret", "auth", "token", "config", "mcp")
# Presence is the finding for these; their content is never read.
PRESENCE_ONLY_SOURCES = frozenset({"ssh-directory", "encrypted-file"})


@dataclass(frozen=True)
class HomeLocation:
    """A known home location that exists on disk."""

    path: str
    source: str
    mode: int
    description: str


def classify_file(name: str) -> Optional[str]:
    """Source classification for a file found during the project walk."""
    if ENV_FILE_RE.match(name):
        return "env-file"
    if name == ".npmrc":
        return "npmrc"
    if name == ".pypirc":
        return "pypirc"
    if ENC_FILE_RE.search(name):
        return "encrypted-file"
    if JSON_CONFIG_RE.search(name) and is_config_like(name):
        return "json-config"
    return None


def is_config_like(name: str) -> bool:
    lower = name.lower()
    return any(hint in lower for hint in CONFIG_NAME_HINTS)


def _skip_dir(name: str, skip_dirs: FrozenSet[str]) -> bool:
    return name in skip_dirs or name.startswith(".git")


def walk_project(
    root_dir: str, max_depth: int, skip_dirs: FrozenSet[str] = SKIP_DIRS
) -> Iterator[Tuple[str, str]]:
    """
    Yield ``(path, source)`` for candidate credential files under *root_dir*.

    The root itself is depth 0; directories deeper than *max_depth* are not
    entered. Unreadable directories are skipped.
    """

    def walk(directory: str, depth: int) -> Iterator[Tuple[str, str]]:
        if depth > max_depth:
            return
        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as e:
            logger.debug("Skipping unreadable directory %s: %s", directory, e)
            return

        for entry in entries:
            try:
                if entry.is_dir(follow_symlinks=False):
                    if not _skip_dir(entry.name, skip_dirs):
                        yield from walk(entry.path, depth + 1)
                elif entry.is_file():
                    source = classify_file(entry.name)
                    if source:
                        yield entry.path, source
            except OSError as e:
                logger.debug("Skipping %s: %s", entry.path, e)

    yield from walk(root_dir, 0)


def iter_home_locations(home_dir: str) -> Iterator[HomeLocation]:
    """Yield the home known-locations that exist, with their permission bits."""
    for loc in KNOWN_LOCATIONS:
        if not loc.is_home:
            continue
        full_path = os.path.join(home_dir, loc.path)
        try:
            st = os.stat(full_path)
        except OSError:
            continue
        yield HomeLocation(full_path, loc.source, st.st_mode, loc.description)


def read_file(
    path: str, source: str, max_file_size: int, now: datetime
) -> Optional[Tuple[FileContext, str]]:
    """
    Stat and read one file.

    Returns None when the file cannot be read. Files above *max_file_size*
    bytes come back with empty content.
    """
    try:
        st = os.stat(path)
        if source in PRESENCE_ONLY_SOURCES:
            content = ""
        elif st.st_size > max_file_size:
            logger.debug("Treating oversized file as empty: %s (%d bytes)", path, st.st_size)
            content = ""
        else:
            with open(path, "r", encoding="utf-8", errors="replace") as f:
                content = f.read()
    except OSError as e:
        logger.debug("Skipping unreadable file %s: %s", path, e)
        return None

    modified = datetime.fromtimestamp(st.st_mtime, tz=timezone.utc)
    ctx = FileContext(
        path=path,
        source=source,
        last_modified=modified.isoformat(),
        age_days=age_in_days(modified, now),
    )
    return ctx, content
