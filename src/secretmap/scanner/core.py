# SPDX-License-Identifier: MIT
"""
Scan orchestration.

Collects candidate files (home known-locations, then the project walk),
parses them in a bounded worker pool, merges the per-file results in the
calling thread, runs the git-tracked check once and aggregates.
"""
from __future__ import annotations

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, List, Optional, Tuple

from secretmap.aggregate import build_scan_result
from secretmap.classify.patterns import SKIP_DIRS
from secretmap.core.exceptions import ScanSetupError
from secretmap.core.models import CredentialEntry, Exposure, ScanOptions, ScanResult
from secretmap.exposure.detector import (
    check_git_tracked,
    check_ignore_coverage,
    check_world_readable,
)
from secretmap.exposure.git_ops import list_tracked_files
from secretmap.parsers import parse_content
from .walk import iter_home_locations, read_file, walk_project

logger = logging.getLogger(__name__)

TrackedFilesProvider = Callable[[str, float], Optional[List[str]]]


@dataclass(frozen=True)
class ScanJob:
    """One file to scan. ``mode`` is set for home known-locations only."""

    path: str
    source: str
    mode: Optional[int] = None


def collect_jobs(options: ScanOptions, root_dir: str) -> List[ScanJob]:
    """Candidate files in discovery order, each path at most once."""
    jobs: List[ScanJob] = []
    seen = set()

    def add(job: ScanJob) -> None:
        key = os.path.realpath(job.path)
        if key in seen:
            return
        seen.add(key)
        jobs.append(job)

    if options.include_home:
        home_dir = options.home_dir or os.path.expanduser("~")
        for loc in iter_home_locations(home_dir):
            add(ScanJob(loc.path, loc.source, loc.mode))

    skip_dirs = SKIP_DIRS | frozenset(options.skip_dirs)
    for path, source in walk_project(root_dir, options.max_depth, skip_dirs):
        add(ScanJob(path, source))

    return jobs


def scan_job(
    job: ScanJob, options: ScanOptions, now: datetime
) -> Tuple[List[CredentialEntry], List[Exposure]]:
    """Parse one file and run the per-file exposure checks."""
    credentials: List[CredentialEntry] = []
    exposures: List[Exposure] = []

    loaded = read_file(job.path, job.source, options.max_file_size, now)
    if loaded is not None:
        ctx, content = loaded
        credentials.extend(parse_content(content, ctx))

    if job.mode is not None and job.source == "ssh-directory":
        exposure = check_world_readable(job.path, job.mode)
        if exposure:
            exposures.append(exposure)

    if job.mode is None and job.source == "env-file":
        exposure = check_ignore_coverage(job.path)
        if exposure:
            exposures.append(exposure)

    return credentials, exposures


def scan(
    options: ScanOptions,
    tracked_files_provider: Optional[TrackedFilesProvider] = None,
) -> ScanResult:
    """
    Run a full scan.

    Args:
        options: Scan options
        tracked_files_provider: Returns the tracked files of a repository
            root, or None when unavailable (default: ``git ls-files``)

    Returns:
        ScanResult

    Raises:
        ScanSetupError: If the root directory does not exist
    """
    started_at = datetime.now(timezone.utc)
    root_dir = os.path.realpath(options.root_dir)
    if not os.path.isdir(root_dir):
        raise ScanSetupError("Scan root is not a directory", root_dir=root_dir)

    jobs = collect_jobs(options, root_dir)
    logger.debug("Scanning %d candidate files with %d workers", len(jobs), options.workers)

    credentials: List[CredentialEntry] = []
    exposures: List[Exposure] = []

    with ThreadPoolExecutor(max_workers=max(1, options.workers)) as pool:
        futures = [(job, pool.submit(scan_job, job, options, started_at)) for job in jobs]
        # Merge in submission order so discovery order is deterministic.
        for job, future in futures:
            try:
                job_credentials, job_exposures = future.result()
            except Exception as e:
                logger.warning("Failed to scan %s: %s", job.path, e)
                continue
            credentials.extend(job_credentials)
            exposures.extend(job_exposures)

    provider = tracked_files_provider or list_tracked_files
    tracked = provider(root_dir, options.git_timeout)
    credentials, git_exposures = check_git_tracked(root_dir, credentials, tracked)
    exposures.extend(git_exposures)

    return build_scan_result(
        credentials,
        exposures,
        root_dir=root_dir,
        started_at=started_at,
        finished_at=datetime.now(timezone.utc),
    )
