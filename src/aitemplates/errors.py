"""Errors raised while bootstrapping a project.

Every user-facing failure derives from :class:`SetupError`; the CLI layer
turns these into an error line and exit code 1.
"""

from __future__ import annotations


class SetupError(Exception):
    """Base class for project setup failures."""


class MissingArgumentError(SetupError):
    """A required value (project name or tool list) was not supplied."""


class InvalidToolError(SetupError):
    def __init__(self, tool: str) -> None:
        super().__init__(f"Invalid tool: {tool}")
        self.tool = tool


class TargetExistsError(SetupError):
    def __init__(self, path: object) -> None:
        super().__init__(f"Directory already exists: {path}")
        self.path = path


class TemplateNotFoundError(SetupError):
    def __init__(self, name: str, root: object) -> None:
        super().__init__(f"Template not found for {name} in {root}")
        self.name = name
        self.root = root


class GitError(SetupError):
    """git is missing or ``git init`` failed."""


class InvalidNameError(SetupError):
    def __init__(self, name: str) -> None:
        super().__init__(
            f"Invalid project name: {name} (must be a single directory name)"
        )
        self.name = name
