"""SecretMap custom exceptions."""

from __future__ import annotations


class SecretMapError(Exception):
    """Base class for all SecretMap errors."""


class SecretMapConfigError(SecretMapError):
    """Raised when configuration is missing or invalid."""

    def __init__(self, message: str, config_path: str = None, section: str = None):
        self.config_path = config_path
        self.section = section
        super().__init__(message)

    def __str__(self):
        msg = super().__str__()
        if self.config_path:
            msg += f" (config: {self.config_path})"
        if self.section:
            msg += f" (section: {self.section})"
        return msg


class ScanSetupError(SecretMapError):
    """Raised when a scan cannot start at all (e.g. missing root directory)."""

    def __init__(self, message: str, root_dir: str = None):
        self.root_dir = root_dir
        super().__init__(message)

    def __str__(self):
        msg = super().__str__()
        if self.root_dir:
            msg += f" (root: {self.root_dir})"
        return msg
