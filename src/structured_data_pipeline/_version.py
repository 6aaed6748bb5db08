"""
Version information for the structured data pipeline package.

The version is read from the latest ``v*.*.*`` Git tag when the package runs
from a checkout, falling back to a default otherwise.
"""

import subprocess
from pathlib import Path

DEFAULT_VERSION = "0.1.0"


def get_version_from_git():
    """
    Read the version from the latest Git tag.

    Returns:
        str: Version string (e.g., "0.1.0") or None if not available
    """
    current_dir = Path(__file__).parent
    repo_root = None
    for parent in [current_dir] + list(current_dir.parents):
        if (parent / ".git").exists():
            repo_root = parent
            break

    if repo_root is None:
        return None

    try:
        result = subprocess.run(
            ["git", "tag", "-l", "v*.*.*", "--sort=-version:refname"],
            cwd=repo_root,
            capture_output=True,
            text=True,
            timeout=5,
        )
    except (subprocess.TimeoutExpired, FileNotFoundError, subprocess.SubprocessError):
        return None

    if result.returncode == 0 and result.stdout.strip():
        return result.stdout.strip().split("\n")[0].lstrip("v")
    return None


def get_version():
    """Get the current version, preferring Git tags over the default."""
    return get_version_from_git() or DEFAULT_VERSION


__version__ = get_version()
