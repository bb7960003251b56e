# SPDX-License-Identifier: MIT
"""
Scanner configuration loader for SecretMap.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Any, Optional

import yaml

from secretmap.core.exceptions import SecretMapConfigError
from secretmap.core.models import ScanOptions

logger = logging.getLogger(__name__)

CONFIG_NAMES = (".secretmap.yml", ".secretmap.yaml")

# Expected type for every recognised key.
CONFIG_TYPES = {
    "max_depth": int,
    "include_home": bool,
    "max_file_size": int,
    "workers": int,
    "git_timeout": (int, float),
    "skip_dirs": list,
    "home_dir": str,
}


def load_scanner_config(config_path: Optional[str] = None, root_dir: str = ".") -> Dict[str, Any]:
    """
    Load scanner configuration following the search order.

    Args:
        config_path: Explicit config path from the --config CLI flag
        root_dir: Scan root searched for .secretmap.yml/.secretmap.yaml

    Returns:
        Dictionary containing scanner configuration

    Raises:
        SecretMapConfigError: If a config file is malformed or an explicitly
            provided config is missing
    """
    root_path = Path(root_dir).resolve()

    # 1. If CLI --config provided → load it
    if config_path:
        config_abs_path = Path(config_path).resolve()
        if not config_abs_path.exists():
            raise SecretMapConfigError(
                f"Specified config file not found: {config_abs_path}",
                config_path=str(config_abs_path),
            )
        config = _load_yaml_config(config_abs_path)
        logger.info("Loaded config: %s", config_abs_path)
        return config

    # 2. Look for .secretmap.yml or .secretmap.yaml at the scan root
    for config_name in CONFIG_NAMES:
        config_file = root_path / config_name
        if config_file.exists():
            config = _load_yaml_config(config_file)
            logger.info("Loaded config: %s", config_file)
            return config

    # 3. Use built-in defaults
    logger.debug("Using default scanner config")
    return get_default_scanner_config()


def _load_yaml_config(config_path: Path) -> Dict[str, Any]:
    """Load and validate a YAML config file."""
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise SecretMapConfigError(
            f"Failed to parse config file: {e}",
            config_path=str(config_path),
        )

    if config is None:
        config = {}

    if not isinstance(config, dict):
        raise SecretMapConfigError("Config must be a dictionary", config_path=str(config_path))

    _validate_scanner_config(config, str(config_path))
    return _apply_scanner_defaults(config)


def _validate_scanner_config(config: Dict[str, Any], config_path: str) -> None:
    for key, expected in CONFIG_TYPES.items():
        if key not in config:
            continue
        value = config[key]
        # bool is an int subclass; reject it where a number is expected
        if isinstance(value, bool) and expected is not bool:
            raise SecretMapConfigError(
                f"Invalid value for {key}: {value!r}", config_path=config_path, section=key
            )
        if not isinstance(value, expected):
            raise SecretMapConfigError(
                f"Invalid value for {key}: {value!r}", config_path=config_path, section=key
            )

    for key in ("max_depth", "max_file_size", "workers", "git_timeout"):
        if key in config and config[key] < (1 if key == "workers" else 0):
            raise SecretMapConfigError(
                f"{key} is out of range: {config[key]!r}", config_path=config_path, section=key
            )

    if any(not isinstance(name, str) for name in config.get("skip_dirs", [])):
        raise SecretMapConfigError(
            "skip_dirs must be a list of directory names",
            config_path=config_path,
            section="skip_dirs",
        )


def _apply_scanner_defaults(config: Dict[str, Any]) -> Dict[str, Any]:
    """Apply default values to scanner configuration."""
    defaults = get_default_scanner_config()
    for key, value in defaults.items():
        if key not in config:
            config[key] = value
    return config


def get_default_scanner_config() -> Dict[str, Any]:
    """
    Get the default scanner configuration.

    Returns:
        Dictionary with default scanner settings
    """
    return {
        "max_depth": 8,
        "include_home": True,
        "max_file_size": 512 * 1024,
        "workers": 4,
        "git_timeout": 5.0,
        "skip_dirs": [],
    }


def create_default_config_template() -> str:
    """
    Create a minimal .secretmap.yml template with commented examples.

    Returns:
        YAML string with default configuration template
    """
    return """# SecretMap Scanner Configuration

# Maximum directory depth below the scan root
max_depth: 8

# Also check well-known credential files in the home directory
include_home: true

# Files larger than this many bytes are treated as empty
max_file_size: 524288

# Parallel file readers
workers: 4

# Seconds to wait for `git ls-files`
git_timeout: 5

# Extra directory names to skip (added to the built-in list)
skip_dirs: []
  # Examples:
  # - "fixtures"
  # - "third_party"

# Home directory for known-location checks (default: the current user's)
# home_dir: /home/ci
"""


def build_scan_options(root_dir: str, config: Dict[str, Any], **overrides: Any) -> ScanOptions:
    """
    Combine loaded configuration with CLI overrides into ScanOptions.

    Overrides whose value is None are ignored so unset CLI flags fall back
    to the configuration.
    """
    merged = dict(get_default_scanner_config())
    merged.update(config)
    merged.update({k: v for k, v in overrides.items() if v is not None})

    return ScanOptions(
        root_dir=root_dir,
        max_depth=merged["max_depth"],
        include_home=merged["include_home"],
        verbose=bool(merged.get("verbose", False)),
        max_file_size=merged["max_file_size"],
        workers=merged["workers"],
        git_timeout=float(merged["git_timeout"]),
        skip_dirs=frozenset(merged["skip_dirs"]),
        home_dir=merged.get("home_dir"),
    )
