"""Optional external tool checker.

None of these tools is required to create a project; a missing one only
reduces what the new project gets (no secret scanning, no git hooks, no
markdown linting).
"""

from __future__ import annotations

import platform
import shutil
import subprocess

OPTIONAL_TOOLS = ("git", "git-secrets", "lefthook", "markdownlint")

_PURPOSE = {
    "git": "version control (--git)",
    "git-secrets": "blocks commits containing secrets",
    "lefthook": "git hook manager",
    "markdownlint": "lints rule and workflow markdown",
}


def check_dependency(name: str) -> tuple[bool, str]:
    """Check whether *name* is installed and return its version string.

    Returns ``(True, version)`` when the tool is found, or
    ``(False, "not found")`` otherwise.
    """
    if shutil.which(name) is None:
        return (False, "not found")
    # git-secrets has no --version flag; it prints usage and exits non-zero
    if name == "git-secrets":
        return (True, "installed")
    try:
        result = subprocess.run(
            [name, "--version"],
            capture_output=True,
            text=True,
            timeout=3,
        )
        version = result.stdout.strip() or result.stderr.strip()
        return (True, version.splitlines()[0] if version else "unknown")
    except (subprocess.SubprocessError, OSError):
        return (True, "unknown")


def check_all() -> dict[str, tuple[bool, str]]:
    """Check availability of all optional external tools."""
    return {name: check_dependency(name) for name in OPTIONAL_TOOLS}


def purpose(name: str) -> str:
    return _PURPOSE.get(name, "")


def get_install_instructions(name: str) -> str:
    """Return platform-specific install instructions for *name*."""
    system = platform.system()
    if name == "lefthook":
        return "npm install -g @evilmartians/lefthook  (or)  brew install lefthook"
    if name == "markdownlint":
        return "npm install -g markdownlint-cli"
    if system == "Darwin":
        return f"brew install {name}"
    if system == "Linux":
        return f"apt install {name}  (or)  pacman -S {name}"
    return f"Install {name} via your system package manager"
