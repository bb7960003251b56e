"""Credential inventory data structures for SecretMap."""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Optional, Dict, Any, Tuple, FrozenSet

from secretmap.risk.score import escalate


CREDENTIAL_TYPES = (
    "api-key",
    "token",
    "password",
    "secret",
    "certificate",
    "ssh-key",
    "oauth-token",
    "connection-string",
    "env-var",
    "unknown",
)

SOURCE_TYPES = (
    "env-file",
    "json-config",
    "yaml-config",
    "toml-config",
    "ssh-directory",
    "npmrc",
    "pypirc",
    "git-credentials",
    "netrc",
    "ai-agent-config",
    "encrypted-file",
    "keychain-ref",
    "shell-config",
)

EXPOSURE_TYPES = (
    "git-tracked",
    "world-readable",
    "no-gitignore",
    "plaintext-password",
    "expired-token",
)

SEVERITIES = ("critical", "high", "medium", "low")

GIT_TRACKED_MARKER = "[GIT-TRACKED]"


@dataclass(frozen=True)
class CredentialEntry:
    """A single credential candidate found in a file."""

    name: str  # key name, dot path or synthesized label
    location: str  # absolute file path
    type: str  # one of CREDENTIAL_TYPES
    source: str  # one of SOURCE_TYPES
    risk: int  # 1-10
    risk_reason: str
    last_modified: str  # ISO-8601 timestamp of the file mtime
    age_days: int
    has_value: bool
    masked_value: Optional[str] = None

    def escalated(self, boost: int, marker: str = GIT_TRACKED_MARKER) -> "CredentialEntry":
        """Return a copy with risk raised by *boost* (capped at 10) and *marker* appended."""
        return replace(
            self,
            risk=escalate(self.risk, boost),
            risk_reason=f"{self.risk_reason} {marker}",
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert CredentialEntry to dictionary format."""
        result = {
            "name": self.name,
            "location": self.location,
            "type": self.type,
            "source": self.source,
            "risk": self.risk,
            "riskReason": self.risk_reason,
            "lastModified": self.last_modified,
            "ageDays": self.age_days,
            "hasValue": self.has_value,
        }

        if self.masked_value is not None:
            result["maskedValue"] = self.masked_value

        return result


@dataclass(frozen=True)
class Exposure:
    """A filesystem or version-control condition that raises leak risk."""

    type: str  # one of EXPOSURE_TYPES
    location: str
    description: str
    severity: str  # one of SEVERITIES

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "location": self.location,
            "description": self.description,
            "severity": self.severity,
        }


@dataclass(frozen=True)
class ScanOptions:
    """Options controlling a single scan."""

    root_dir: str
    max_depth: int = 8
    include_home: bool = True
    verbose: bool = False
    max_file_size: int = 512 * 1024
    workers: int = 4
    git_timeout: float = 5.0
    skip_dirs: FrozenSet[str] = field(default_factory=frozenset)
    home_dir: Optional[str] = None  # defaults to the user's home directory


@dataclass(frozen=True)
class ScanResult:
    """Aggregate output of a scan. Built once, read-only afterwards."""

    scan_time: str
    scan_duration_ms: int
    root_dir: str
    total_found: int
    high_risk: int
    credentials: Tuple[CredentialEntry, ...]
    exposures: Tuple[Exposure, ...]

    def to_dict(self) -> Dict[str, Any]:
        """Convert ScanResult to its structured (JSON-ready) form."""
        return {
            "scanTime": self.scan_time,
            "scanDurationMs": self.scan_duration_ms,
            "rootDir": self.root_dir,
            "totalFound": self.total_found,
            "highRisk": self.high_risk,
            "credentials": [c.to_dict() for c in self.credentials],
            "exposures": [e.to_dict() for e in self.exposures],
        }
