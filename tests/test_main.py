"""Test the python -m entry point."""

import os
import subprocess
import sys


def test_main_module_importable():
    import secretmap.__main__  # noqa: F401


def test_main_module_executable():
    """python -m secretmap --help runs without import errors."""
    env = dict(os.environ)
    src = os.path.join(os.path.dirname(__file__), "..", "src")
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [src, env.get("PYTHONPATH")]))
    result = subprocess.run(
        [sys.executable, "-m", "secretmap", "--help"],
        capture_output=True,
        text=True,
        timeout=30,
        env=env,
    )
    assert result.returncode == 0
    assert "usage: secretmap" in result.stdout
    assert "ModuleNotFoundError" not in result.stderr
