# SPDX-License-Identifier: MIT
"""
Tests for exposure checks: ignore coverage, key permissions and git tracking.
"""

import os

from secretmap.core.models import EXPOSURE_TYPES, GIT_TRACKED_MARKER, CredentialEntry
from secretmap.exposure.detector import (
    check_git_tracked,
    check_ignore_coverage,
    check_world_readable,
)


def _cred(location, name="API_KEY", risk=7, has_value=True):
    return CredentialEntry(
        name=name,
        location=location,
        type="api-key",
        source="env-file",
        risk=risk,
        risk_reason="api-key with real value",
        last_modified="2024-01-01T00:00:00+00:00",
        age_days=0,
        has_value=has_value,
        masked_value="sk-1****cdef" if has_value else None,
    )


class TestIgnoreCoverage:
    def test_gitignore_without_env_pattern(self, tmp_path):
        (tmp_path / ".gitignore").write_text("node_modules/\n")
        env = tmp_path / ".env"
        env.write_text("API_KEY=x\n")
        exposure = check_ignore_coverage(str(env))
        assert exposure.type == "no-gitignore"
        assert exposure.severity == "high"
        assert exposure.location == str(env)
        assert exposure.type in EXPOSURE_TYPES
        assert exposure.description == ".env file found but .gitignore doesn't include .env pattern"

    def test_gitignore_with_env_pattern(self, tmp_path):
        (tmp_path / ".gitignore").write_text("node_modules/\n.env*\n")
        env = tmp_path / ".env"
        env.write_text("API_KEY=x\n")
        assert check_ignore_coverage(str(env)) is None

    def test_repo_without_gitignore(self, tmp_path):
        (tmp_path / ".git").mkdir()
        env = tmp_path / ".env"
        env.write_text("API_KEY=x\n")
        exposure = check_ignore_coverage(str(env))
        assert exposure.severity == "high"
        assert "No .gitignore found" in exposure.description

    def test_plain_directory_without_gitignore(self, tmp_path):
        env = tmp_path / ".env"
        env.write_text("API_KEY=x\n")
        assert check_ignore_coverage(str(env)) is None


class TestWorldReadable:
    def test_group_or_other_readable(self):
        exposure = check_world_readable("/home/u/.ssh/id_rsa", 0o100644)
        assert exposure.type == "world-readable"
        assert exposure.severity == "critical"
        assert exposure.description == "SSH key is world-readable (mode: 644)"

    def test_group_readable_only(self):
        assert check_world_readable("/k", 0o640) is not None

    def test_owner_only(self):
        assert check_world_readable("/home/u/.ssh/id_rsa", 0o100600) is None


class TestGitTracked:
    def test_tracked_real_value_escalated(self, tmp_path):
        root = str(tmp_path)
        cred = _cred(os.path.join(root, ".env"), risk=7)
        updated, exposures = check_git_tracked(root, [cred], [".env", "README.md"])

        assert len(exposures) == 1
        assert exposures[0].type == "git-tracked"
        assert exposures[0].severity == "critical"
        assert exposures[0].description == "API_KEY in .env is tracked by git with a real value"

        assert updated[0].risk == 9
        assert updated[0].risk_reason.endswith(GIT_TRACKED_MARKER)
        # The original entry is not mutated.
        assert cred.risk == 7

    def test_escalation_capped(self, tmp_path):
        root = str(tmp_path)
        cred = _cred(os.path.join(root, ".env"), risk=9)
        updated, _ = check_git_tracked(root, [cred], [".env"])
        assert updated[0].risk == 10

    def test_placeholder_not_escalated(self, tmp_path):
        root = str(tmp_path)
        cred = _cred(os.path.join(root, ".env"), risk=3, has_value=False)
        updated, exposures = check_git_tracked(root, [cred], [".env"])
        assert exposures == []
        assert updated == [cred]

    def test_low_risk_real_value_not_escalated(self, tmp_path):
        root = str(tmp_path)
        cred = _cred(os.path.join(root, ".env"), risk=4)
        _, exposures = check_git_tracked(root, [cred], [".env"])
        assert exposures == []

    def test_nested_path_and_untracked(self, tmp_path):
        root = str(tmp_path)
        tracked = _cred(os.path.join(root, "services", "api", ".env"))
        untracked = _cred(os.path.join(root, ".env.local"))
        updated, exposures = check_git_tracked(root, [tracked, untracked], ["services/api/.env"])
        assert [e.location for e in exposures] == [tracked.location]
        assert updated[1] is untracked

    def test_tracked_files_unavailable(self, tmp_path):
        root = str(tmp_path)
        cred = _cred(os.path.join(root, ".env"))
        assert check_git_tracked(root, [cred], None) == ([cred], [])
        assert check_git_tracked(root, [cred], []) == ([cred], [])
