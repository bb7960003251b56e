# SPDX-License-Identifier: MIT
"""Tests for .npmrc auth line parsing."""

from secretmap.parsers.registry_auth import parse_registry_auth


def _ctx(make_ctx):
    return make_ctx(path="/home/u/.npmrc", source="npmrc", age_days=1000)


def test_auth_token_line(make_ctx):
    content = "registry=https://registry.npmjs.org/\n//registry.npmjs.org/:_authToken=npm_abcdefghijklmnop\n"
    (entry,) = parse_registry_auth(content, _ctx(make_ctx))
    assert entry.name == "//registry.npmjs.org/:_authToken"
    assert entry.type == "token"
    assert entry.risk == 7
    assert entry.risk_reason == "NPM auth token"
    assert entry.masked_value == "npm_****mnop"


def test_risk_does_not_scale_with_age(make_ctx):
    """Registry tokens keep their fixed risk regardless of file age."""
    content = "//registry.npmjs.org/:_authToken=npm_abcdefghijklmnop\n"
    (entry,) = parse_registry_auth(content, _ctx(make_ctx))
    assert entry.risk == 7


def test_env_reference_is_placeholder(make_ctx):
    content = "//registry.npmjs.org/:_authToken=${NPM_TOKEN}\n"
    (entry,) = parse_registry_auth(content, _ctx(make_ctx))
    assert entry.has_value is False
    assert entry.risk == 3
    assert entry.masked_value is None


def test_password_and_auth_markers(make_ctx):
    content = "_auth=dXNlcjpwYXNzd29yZA==\n//npm.internal/:_password=c2VjcmV0cGFzcw==\nemail=a@b.c\n"
    entries = parse_registry_auth(content, _ctx(make_ctx))
    assert [e.name for e in entries] == ["_auth", "//npm.internal/:_password"]


def test_no_auth_lines(make_ctx):
    assert parse_registry_auth("registry=https://registry.npmjs.org/\n", _ctx(make_ctx)) == []
