"""Synthetic transaction chains from conditional distributions of a source log."""

import os
import subprocess

__version__ = "0.1.0"


# Reproducibility: env > git describe > fallback
def _git_version() -> str | None:
    try:
        rev = subprocess.run(
            ["git", "describe", "--always", "--dirty"],
            capture_output=True,
            text=True,
            timeout=5,
            cwd=os.path.dirname(os.path.abspath(__file__)),
        )
        if rev.returncode == 0 and rev.stdout:
            return rev.stdout.strip()
    except (FileNotFoundError, subprocess.TimeoutExpired):
        pass
    return None


GENERATOR_VERSION = os.environ.get("TXN_SYNTH_VERSION") or _git_version() or __version__
