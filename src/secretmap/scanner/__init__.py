"""Public scanning API.

    from secretmap.scanner import scan, ScanOptions

    result = scan(ScanOptions(root_dir="."))
"""

from secretmap.core.models import ScanOptions
from .config import build_scan_options, load_scanner_config
from .core import scan

__all__ = ["scan", "ScanOptions", "build_scan_options", "load_scanner_config"]
