"""Git repository initialization with optional git-secrets registration."""

from __future__ import annotations

import dataclasses
import logging
import shutil
import subprocess
from typing import TYPE_CHECKING

import aitemplates.console
import aitemplates.errors

if TYPE_CHECKING:
    import pathlib

logger = logging.getLogger("aitemplates.project.gitinit")

SECRET_PATTERNS = (
    "private_key",
    "api[_-]?key",
    "api[_-]?secret",
    "access[_-]?token",
    r"[a-zA-Z0-9_-]*password[a-zA-Z0-9_-]*\s*[:=]",
)

# Starts with dashes, so it is registered after a ``--`` separator.
PRIVATE_KEY_PATTERN = "-----BEGIN (RSA|DSA|EC|OPENSSH|PGP) PRIVATE KEY"


@dataclasses.dataclass
class GitResult:
    initialized: bool = False
    secrets_configured: bool = False
    committed: bool = False


def git_available() -> bool:
    return shutil.which("git") is not None


def secrets_available() -> bool:
    return shutil.which("git-secrets") is not None


def _git(project_path: pathlib.Path, *args: str) -> subprocess.CompletedProcess:
    cmd = ["git", *args]
    logger.debug("Running %s in %s", " ".join(cmd), project_path)
    return subprocess.run(
        cmd,
        cwd=str(project_path),
        check=True,
        capture_output=True,
        text=True,
    )


def secrets_commands() -> list[list[str]]:
    """Return the ``git secrets`` argument lists, in registration order."""
    commands = [
        ["secrets", "--install", "--force"],
        ["secrets", "--register-aws"],
    ]
    commands.extend(["secrets", "--add", pattern] for pattern in SECRET_PATTERNS)
    commands.append(["secrets", "--add", "--", PRIVATE_KEY_PATTERN])
    return commands


def configure_secrets(project_path: pathlib.Path) -> bool:
    """Register AWS and custom secret patterns.

    Returns ``False`` (after a warning) when git-secrets is not installed
    or one of its commands fails.
    """
    if not secrets_available():
        aitemplates.console.warning(
            "git-secrets not found - install with: brew install git-secrets"
        )
        aitemplates.console.warning(
            "Secrets scanning will be skipped until installed"
        )
        return False

    aitemplates.console.info("Configuring git-secrets...")
    try:
        for args in secrets_commands():
            _git(project_path, *args)
    except (subprocess.CalledProcessError, OSError) as exc:
        logger.debug("git-secrets failed", exc_info=True)
        aitemplates.console.warning(f"git-secrets configuration failed: {exc}")
        return False

    aitemplates.console.success("git-secrets configured with AWS and custom patterns")
    return True


def init_repo(project_path: pathlib.Path, commit_message: str) -> GitResult:
    """Run ``git init``, register secret patterns, and make a first commit.

    A failing ``git init`` raises :class:`~aitemplates.errors.GitError`.
    A failing add or commit (for example, no configured identity) is
    reported as a warning and otherwise ignored.
    """
    result = GitResult()
    aitemplates.console.info("Initializing git repository...")
    try:
        _git(project_path, "init")
    except (subprocess.CalledProcessError, OSError) as exc:
        raise aitemplates.errors.GitError(f"git init failed: {exc}") from exc
    result.initialized = True

    result.secrets_configured = configure_secrets(project_path)

    try:
        _git(project_path, "add", ".")
        _git(project_path, "commit", "-m", commit_message)
        result.committed = True
    except (subprocess.CalledProcessError, OSError) as exc:
        logger.debug("Initial commit failed", exc_info=True)
        aitemplates.console.warning(f"Initial commit skipped: {exc}")

    aitemplates.console.success("Git repository initialized")
    return result
