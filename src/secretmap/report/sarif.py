from __future__ import annotations

import os
from typing import Dict, Any, List

from secretmap import __version__
from secretmap.core.models import ScanResult
from secretmap.risk.score import RiskLevel, get_risk_level

SARIF_SCHEMA = "https://json.schemastore.org/sarif-2.1.0.json"

RISK_LEVELS = {
    RiskLevel.CRITICAL: "error",
    RiskLevel.HIGH: "error",
    RiskLevel.MEDIUM: "warning",
    RiskLevel.LOW: "note",
}

SEVERITY_LEVELS = {
    "critical": "error",
    "high": "error",
    "medium": "warning",
    "low": "note",
}


def _artifact_uri(location: str, root: str) -> str:
    rel = os.path.relpath(location, root)
    # Files outside the root (home locations) keep their absolute path
    if rel.startswith(os.pardir):
        return location
    return rel.replace(os.sep, "/")


def build_sarif(result: ScanResult) -> Dict[str, Any]:
    rule_ids: Dict[str, int] = {}
    rules: List[Dict[str, Any]] = []

    def rule_index(rule_id: str, description: str) -> int:
        if rule_id not in rule_ids:
            rule_ids[rule_id] = len(rules)
            rules.append(
                {
                    "id": rule_id,
                    "name": rule_id,
                    "shortDescription": {"text": description},
                }
            )
        return rule_ids[rule_id]

    results = []
    for cred in result.credentials:
        rule_id = f"credential/{cred.type}"
        ridx = rule_index(rule_id, f"Credential of type {cred.type}")
        results.append(
            {
                "ruleId": rule_id,
                "ruleIndex": ridx,
                "level": RISK_LEVELS[get_risk_level(cred.risk)],
                "message": {"text": f"{cred.name}: {cred.risk_reason}"},
                "locations": [
                    {
                        "physicalLocation": {
                            "artifactLocation": {"uri": _artifact_uri(cred.location, result.root_dir)},
                        }
                    }
                ],
                "properties": {
                    "risk": cred.risk,
                    "source": cred.source,
                    "hasValue": cred.has_value,
                    "ageDays": cred.age_days,
                },
            }
        )

    for exposure in result.exposures:
        rule_id = f"exposure/{exposure.type}"
        ridx = rule_index(rule_id, f"Exposure: {exposure.type}")
        results.append(
            {
                "ruleId": rule_id,
                "ruleIndex": ridx,
                "level": SEVERITY_LEVELS.get(exposure.severity, "warning"),
                "message": {"text": exposure.description},
                "locations": [
                    {
                        "physicalLocation": {
                            "artifactLocation": {"uri": _artifact_uri(exposure.location, result.root_dir)},
                        }
                    }
                ],
                "properties": {"severity": exposure.severity},
            }
        )

    return {
        "version": "2.1.0",
        "$schema": SARIF_SCHEMA,
        "runs": [
            {
                "tool": {
                    "driver": {
                        "name": "SecretMap",
                        "version": __version__,
                        "rules": rules,
                    }
                },
                "results": results,
            }
        ],
    }
