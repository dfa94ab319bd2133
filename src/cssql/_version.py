"""Package version lookup."""

import re
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version
from pathlib import Path

PYPROJECT = Path(__file__).parent.parent.parent / "pyproject.toml"


def get_version() -> str:
    """Version from pyproject.toml in a source checkout, else the installed metadata."""
    if PYPROJECT.exists():
        content = PYPROJECT.read_text(encoding="utf-8")
        if match := re.search(r'^version\s*=\s*["\']([^"\']+)["\']', content, re.MULTILINE):
            return match.group(1)
    try:
        return _metadata_version("cssql")
    except PackageNotFoundError:
        return "0.0.0"
