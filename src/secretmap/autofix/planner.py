from __future__ import annotations

import os
import shlex
from dataclasses import dataclass
from typing import Dict, List, Optional

from secretmap.core.models import ScanResult
from secretmap.risk.score import STALE_AFTER_DAYS


@dataclass(frozen=True)
class FixSuggestion:
    type: str  # "gitignore" | "permission" | "env-example" | "rotation"
    location: str
    description: str
    command: Optional[str] = None

    def to_dict(self) -> Dict[str, str]:
        result = {
            "type": self.type,
            "location": self.location,
            "description": self.description,
        }
        if self.command:
            result["command"] = self.command
        return result


SUGGESTION_LABELS = {
    "gitignore": ".gitignore",
    "permission": "Permissions",
    "env-example": ".env.example",
    "rotation": "Rotation",
}


def generate_fix_suggestions(result: ScanResult) -> List[FixSuggestion]:
    suggestions: List[FixSuggestion] = []
    root = result.root_dir

    for exposure in result.exposures:
        if exposure.type == "no-gitignore":
            rel_dir = os.path.dirname(os.path.relpath(exposure.location, root)) or "."
            ignore_file = os.path.join(os.path.dirname(exposure.location), ".gitignore")
            suggestions.append(
                FixSuggestion(
                    type="gitignore",
                    location=exposure.location,
                    description=f"Add .env pattern to .gitignore in {rel_dir}",
                    command=f"echo '.env*' >> {shlex.quote(ignore_file)}",
                )
            )
        elif exposure.type == "world-readable":
            suggestions.append(
                FixSuggestion(
                    type="permission",
                    location=exposure.location,
                    description=f"Fix permissions on {os.path.basename(exposure.location)} (should be 600)",
                    command=f"chmod 600 {shlex.quote(exposure.location)}",
                )
            )
        elif exposure.type == "git-tracked":
            rel = os.path.relpath(exposure.location, root)
            quoted = shlex.quote(rel)
            suggestions.append(
                FixSuggestion(
                    type="gitignore",
                    location=exposure.location,
                    description=f"Remove {rel} from git tracking and add to .gitignore",
                    command=f"git rm --cached {quoted} && echo {quoted} >> .gitignore",
                )
            )

    # One .env.example per env file that holds real values
    env_files: List[str] = []
    for cred in result.credentials:
        if cred.source == "env-file" and cred.has_value and cred.location not in env_files:
            env_files.append(cred.location)
    for env_file in env_files:
        rel = os.path.relpath(env_file, root)
        quoted = shlex.quote(env_file)
        suggestions.append(
            FixSuggestion(
                type="env-example",
                location=env_file,
                description=f"Create {rel}.example with placeholder values for safe sharing",
                command=f"sed 's/=.*/=/' {quoted} > {shlex.quote(env_file + '.example')}",
            )
        )

    for cred in result.credentials:
        if cred.has_value and cred.age_days > STALE_AFTER_DAYS:
            suggestions.append(
                FixSuggestion(
                    type="rotation",
                    location=cred.location,
                    description=f"Rotate {cred.name}, last modified {cred.age_days} days ago",
                )
            )

    return suggestions


def format_fix_suggestions(suggestions: List[FixSuggestion]) -> str:
    if not suggestions:
        return ""
    lines = ["", "Fix Suggestions:", ""]

    by_type: Dict[str, List[FixSuggestion]] = {}
    for s in suggestions:
        by_type.setdefault(s.type, []).append(s)

    for kind, group in by_type.items():
        lines.append(f"  [{SUGGESTION_LABELS.get(kind, kind)}]")
        for s in group:
            lines.append(f"    {s.description}")
            if s.command:
                lines.append(f"    $ {s.command}")
            lines.append("")
    return "\n".join(lines)
