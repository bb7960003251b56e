# SPDX-License-Identifier: MIT
"""Shared fixtures for the SecretMap test suite."""

import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from secretmap.core.models import ScanOptions  # noqa: E402
from secretmap.parsers import FileContext  # noqa: E402
from secretmap.scanner import scan  # noqa: E402


@pytest.fixture
def make_ctx():
    """Factory for FileContext objects with sensible defaults."""

    def _make(path="/project/.env", source="env-file", age_days=0,
              last_modified="2024-01-01T00:00:00+00:00"):
        return FileContext(path=path, source=source, last_modified=last_modified, age_days=age_days)

    return _make


@pytest.fixture
def run_scan():
    """Scan a directory without home locations, with a fixed tracked-file list."""

    def _run(root, tracked=None, **kwargs):
        kwargs.setdefault("include_home", False)
        options = ScanOptions(root_dir=str(root), **kwargs)
        return scan(options, tracked_files_provider=lambda root_dir, timeout: tracked)

    return _run
