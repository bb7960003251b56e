# SPDX-License-Identifier: MIT
"""
Static credential pattern tables.

Everything here is immutable data loaded once at import time:

- KEY_PATTERNS: ordered key-name rules, first match wins. The table is
  built from three tiers (provider names, qualified names, generic
  suffixes) so every rule precedes the more general rules it overlaps with
  (AUTH_TOKEN before TOKEN, SECRET_KEY before SECRET, ...).
- PLACEHOLDER: prefix-anchored sentinel values that are not real secrets.
- VALUE_SHAPES: value formats that identify a secret even when the key name
  says nothing about it.
- KNOWN_LOCATIONS: well-known credential files relative to a project or home.

Adding a provider means appending a record to PROVIDER_PATTERNS (and optionally
VALUE_SHAPES); no control flow needs to change.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Pattern, Tuple


@dataclass(frozen=True)
class CredentialPattern:
    """Key-name rule mapping a variable name to a credential type."""

    key_pattern: Pattern[str]
    type: str
    base_risk: int


@dataclass(frozen=True)
class ValueShape:
    """Named value-format matcher."""

    name: str
    pattern: Pattern[str]
    type: str


@dataclass(frozen=True)
class KnownLocation:
    """Well-known credential file location."""

    path: str  # relative to the scan root or the home directory
    source: str
    is_home: bool
    description: str


def _rule(regex: str, cred_type: str, base_risk: int) -> CredentialPattern:
    return CredentialPattern(re.compile(regex, re.IGNORECASE), cred_type, base_risk)


# Tier 1: provider-specific names.
PROVIDER_PATTERNS: Tuple[CredentialPattern, ...] = (
    _rule(r"OPENAI[_-]?API[_-]?KEY", "api-key", 8),
    _rule(r"ANTHROPIC[_-]?API[_-]?KEY", "api-key", 8),
    _rule(r"ELEVENLABS[_-]?API[_-]?KEY", "api-key", 7),
    _rule(r"BRAVE[_-]?SEARCH[_-]?API[_-]?KEY", "api-key", 6),
    _rule(r"STRIPE[_-]?(?:SECRET|KEY)", "api-key", 9),
    _rule(r"GITHUB[_-]?TOKEN", "token", 8),
    _rule(r"NPM[_-]?TOKEN", "token", 7),
    _rule(r"VERCEL[_-]?TOKEN", "token", 7),
    _rule(r"NETLIFY[_-]?(?:TOKEN|AUTH)", "token", 7),
    _rule(r"RAILWAY[_-]?TOKEN", "token", 7),
    _rule(r"SUPABASE[_-]?(?:KEY|SECRET|URL)", "api-key", 7),
    _rule(r"FIREBASE[_-]?(?:KEY|TOKEN|SECRET)", "api-key", 7),
    _rule(r"(?:^|_)AWS[_-]?SECRET", "secret", 9),
    _rule(r"(?:^|_)GCP[_-]?(?:KEY|CREDENTIALS)", "api-key", 8),
    _rule(r"(?:^|_)AZURE[_-]?(?:KEY|SECRET)", "secret", 8),
)

# Tier 2: qualified names (a qualifier in front of KEY/TOKEN/SECRET/...).
QUALIFIED_PATTERNS: Tuple[CredentialPattern, ...] = (
    _rule(r"(?:^|_)PRIVATE[_-]?KEY", "secret", 9),
    _rule(r"(?:^|_)CLIENT[_-]?SECRET", "secret", 8),
    _rule(r"(?:^|_)REFRESH[_-]?TOKEN", "oauth-token", 8),
    _rule(r"(?:^|_)ACCESS[_-]?TOKEN", "oauth-token", 8),
    _rule(r"(?:^|_)AUTH[_-]?TOKEN$", "token", 8),
    _rule(r"(?:^|_)SECRET[_-]?KEY$", "secret", 8),
    _rule(r"(?:^|_)SIGNING[_-]?(?:KEY|SECRET)", "secret", 9),
    _rule(r"(?:^|_)ENCRYPTION[_-]?KEY", "secret", 9),
    _rule(r"(?:^|_)JWT[_-]?SECRET", "secret", 9),
    _rule(r"(?:^|_)SMTP[_-]?PASS", "password", 7),
    _rule(r"(?:^|_)WEBHOOK[_-]?(?:URL|SECRET)", "secret", 6),
    _rule(r"(?:^|_)DATABASE[_-]?URL$", "connection-string", 9),
    _rule(r"(?:^|_)REDIS[_-]?URL$", "connection-string", 7),
    _rule(r"(?:^|_)MONGODB[_-]?URI$", "connection-string", 8),
    _rule(r"(?:^|_)CONNECTION[_-]?STRING$", "connection-string", 8),
)

# Tier 3: generic suffixes. These overlap most of the rules above.
GENERIC_PATTERNS: Tuple[CredentialPattern, ...] = (
    _rule(r"(?:^|_)API[_-]?KEY$", "api-key", 7),
    _rule(r"(?:^|_)ACCESS[_-]?KEY", "api-key", 7),
    _rule(r"(?:^|_)TOKEN$", "token", 6),
    _rule(r"(?:^|_)PASSWORD$", "password", 9),
    _rule(r"(?:^|_)PASSWD$", "password", 9),
    _rule(r"(?:^|_)SECRET$", "secret", 8),
)

KEY_PATTERNS: Tuple[CredentialPattern, ...] = PROVIDER_PATTERNS + QUALIFIED_PATTERNS + GENERIC_PATTERNS

PLACEHOLDER: Pattern[str] = re.compile(
    r"^(?:xxx|your[_-]|changeme|TODO|FIXME|replace|<|dummy|test|example"
    r"|null|undefined|none|false|true|\$\{)",
    re.IGNORECASE,
)

PRIVATE_KEY_BLOCK: Pattern[str] = re.compile(
    r"-----BEGIN (?:RSA |EC |OPENSSH )?PRIVATE KEY-----"
)

# Shapes used by the fallback for unlabeled values, in priority order.
VALUE_SHAPES: Tuple[ValueShape, ...] = (
    ValueShape("aws_access_key", re.compile(r"^AKIA[0-9A-Z]{16}$"), "api-key"),
    ValueShape("github_token", re.compile(r"^gh[ps]_[A-Za-z0-9_]{36,}$"), "token"),
    ValueShape("npm_token", re.compile(r"^npm_[A-Za-z0-9]{36,}$"), "token"),
    ValueShape("jwt", re.compile(r"^eyJ[A-Za-z0-9_-]+\.eyJ[A-Za-z0-9_-]+"), "oauth-token"),
    ValueShape("private_key_block", PRIVATE_KEY_BLOCK, "ssh-key"),
)

# Too noisy to drive the fallback on their own.
INFORMATIONAL_SHAPES: Tuple[ValueShape, ...] = (
    ValueShape("base64_long", re.compile(r"^[A-Za-z0-9+/=]{40,}$"), "secret"),
    ValueShape(
        "uuid",
        re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$", re.IGNORECASE),
        "secret",
    ),
    ValueShape("hex_key", re.compile(r"^[0-9a-f]{32,}$", re.IGNORECASE), "secret"),
)

SKIP_DIRS = frozenset({
    "node_modules", ".git", "dist", "build", "__pycache__",
    ".next", ".nuxt", ".output", "vendor", ".cache",
    "coverage", ".turbo", ".vercel",
})

KNOWN_LOCATIONS: Tuple[KnownLocation, ...] = (
    # Project-level
    KnownLocation(".env", "env-file", False, "Environment variables"),
    KnownLocation(".env.local", "env-file", False, "Local env overrides"),
    KnownLocation(".env.development", "env-file", False, "Dev environment"),
    KnownLocation(".env.production", "env-file", False, "Production environment"),
    KnownLocation(".env.staging", "env-file", False, "Staging environment"),
    KnownLocation(".env.test", "env-file", False, "Test environment"),
    # Home-level configs
    KnownLocation(".npmrc", "npmrc", True, "NPM config (may contain auth tokens)"),
    KnownLocation(".pypirc", "pypirc", True, "PyPI config (may contain passwords)"),
    KnownLocation(".netrc", "netrc", True, "Network credentials"),
    KnownLocation(".git-credentials", "git-credentials", True, "Git stored credentials"),
    KnownLocation(".docker/config.json", "json-config", True, "Docker auth"),
    KnownLocation(".kube/config", "yaml-config", True, "Kubernetes config"),
    KnownLocation(".aws/credentials", "toml-config", True, "AWS credentials"),
    # SSH
    KnownLocation(".ssh/id_rsa", "ssh-directory", True, "RSA private key"),
    KnownLocation(".ssh/id_ed25519", "ssh-directory", True, "Ed25519 private key"),
    KnownLocation(".ssh/id_ecdsa", "ssh-directory", True, "ECDSA private key"),
    # AI agent configs
    KnownLocation(".openclaw/openclaw.json", "ai-agent-config", True, "OpenClaw config"),
    KnownLocation(".cursor/mcp.json", "ai-agent-config", True, "Cursor MCP config"),
    KnownLocation(".config/claude/config.json", "ai-agent-config", True, "Claude config"),
    KnownLocation(".claude/settings.json", "ai-agent-config", True, "Claude settings"),
    KnownLocation(".config/gh/hosts.yml", "ai-agent-config", True, "GitHub CLI auth"),
    # Shell configs (may export secrets)
    KnownLocation(".zshrc", "shell-config", True, "Zsh config"),
    KnownLocation(".bashrc", "shell-config", True, "Bash config"),
    KnownLocation(".bash_profile", "shell-config", True, "Bash profile"),
    KnownLocation(".zshenv", "shell-config", True, "Zsh environment"),
    KnownLocation(".profile", "shell-config", True, "Shell profile"),
)


def find_key_pattern(key: str) -> Optional[CredentialPattern]:
    """Return the first key rule matching *key*, or None."""
    for pattern in KEY_PATTERNS:
        if pattern.key_pattern.search(key):
            return pattern
    return None


def match_value_shape(value: str) -> Optional[ValueShape]:
    """Return the first fallback value shape matching *value*, or None."""
    for shape in VALUE_SHAPES:
        if shape.pattern.search(value):
            return shape
    return None


def is_placeholder(value: str) -> bool:
    return PLACEHOLDER.search(value) is not None
