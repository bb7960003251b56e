#!/usr/bin/env python3
"""
Allow running secretmap as a module: python -m secretmap
"""

from secretmap.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
