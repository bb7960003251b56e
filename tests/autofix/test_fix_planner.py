# SPDX-License-Identifier: MIT
"""Tests for fix suggestion planning."""

from datetime import datetime, timezone

from secretmap.aggregate import build_scan_result
from secretmap.autofix import format_fix_suggestions, generate_fix_suggestions
from secretmap.core.models import CredentialEntry, Exposure

NOW = datetime(2024, 6, 1, tzinfo=timezone.utc)


def _cred(location, name="API_KEY", source="env-file", has_value=True, age_days=0):
    return CredentialEntry(
        name=name,
        location=location,
        type="api-key",
        source=source,
        risk=7 if has_value else 3,
        risk_reason="r",
        last_modified="2024-01-01T00:00:00+00:00",
        age_days=age_days,
        has_value=has_value,
    )


def _result(credentials=(), exposures=()):
    return build_scan_result(credentials, exposures, "/proj", NOW, NOW)


def test_no_findings_no_suggestions():
    assert generate_fix_suggestions(_result()) == []
    assert format_fix_suggestions([]) == ""


def test_gitignore_suggestion():
    exposure = Exposure("no-gitignore", "/proj/api/.env", "d", "high")
    (s,) = generate_fix_suggestions(_result(exposures=[exposure]))
    assert s.type == "gitignore"
    assert s.description == "Add .env pattern to .gitignore in api"
    assert s.command == "echo '.env*' >> /proj/api/.gitignore"


def test_permission_suggestion():
    exposure = Exposure("world-readable", "/home/u/.ssh/id_rsa", "d", "critical")
    (s,) = generate_fix_suggestions(_result(exposures=[exposure]))
    assert s.type == "permission"
    assert s.command == "chmod 600 /home/u/.ssh/id_rsa"


def test_git_tracked_suggestion():
    exposure = Exposure("git-tracked", "/proj/.env", "d", "critical")
    (s,) = generate_fix_suggestions(_result(exposures=[exposure]))
    assert s.command == "git rm --cached .env && echo .env >> .gitignore"


def test_env_example_once_per_file():
    creds = [
        _cred("/proj/.env", "API_KEY"),
        _cred("/proj/.env", "DB_PASSWORD"),
        _cred("/proj/.env.local", "SECRET", has_value=False),
        _cred("/proj/config.json", "apiKey", source="json-config"),
    ]
    suggestions = generate_fix_suggestions(_result(creds))
    examples = [s for s in suggestions if s.type == "env-example"]
    assert [s.location for s in examples] == ["/proj/.env"]
    assert examples[0].command == "sed 's/=.*/=/' /proj/.env > /proj/.env.example"


def test_rotation_for_stale_real_values():
    creds = [
        _cred("/proj/config.json", "old", source="json-config", age_days=400),
        _cred("/proj/config.json", "placeholder", source="json-config", has_value=False, age_days=900),
        _cred("/proj/config.json", "fresh", source="json-config", age_days=365),
    ]
    rotation = [s for s in generate_fix_suggestions(_result(creds)) if s.type == "rotation"]
    assert [s.description for s in rotation] == ["Rotate old, last modified 400 days ago"]
    assert rotation[0].command is None
    assert "command" not in rotation[0].to_dict()


def test_paths_with_spaces_are_quoted():
    exposure = Exposure("world-readable", "/home/my user/.ssh/id_rsa", "d", "critical")
    (s,) = generate_fix_suggestions(_result(exposures=[exposure]))
    assert s.command == "chmod 600 '/home/my user/.ssh/id_rsa'"


def test_format_groups_by_kind():
    exposures = [
        Exposure("no-gitignore", "/proj/.env", "d", "high"),
        Exposure("world-readable", "/home/u/.ssh/id_rsa", "d", "critical"),
    ]
    text = format_fix_suggestions(generate_fix_suggestions(_result(exposures=exposures)))
    assert "Fix Suggestions:" in text
    assert "[.gitignore]" in text
    assert "[Permissions]" in text
    assert "$ chmod 600 /home/u/.ssh/id_rsa" in text
