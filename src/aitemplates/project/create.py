"""Create a project directory from the selected tool templates.

Validation happens in :func:`plan_project`, before anything is written:
a missing name, an existing target, a missing template, or ``--git``
without git all stop the run with the filesystem untouched.
"""

from __future__ import annotations

import dataclasses
import logging
import os
import pathlib
from typing import TYPE_CHECKING

import aitemplates.console
import aitemplates.errors
import aitemplates.project.gitinit
import aitemplates.project.templates

if TYPE_CHECKING:
    from importlib.resources.abc import Traversable

    from aitemplates.project.gitinit import GitResult
    from aitemplates.project.tools import ToolSpec

logger = logging.getLogger("aitemplates.project.create")


@dataclasses.dataclass
class ProjectOptions:
    name: str
    tools: list[ToolSpec]
    path: pathlib.Path = dataclasses.field(default_factory=lambda: pathlib.Path("."))
    init_git: bool = False
    dry_run: bool = False
    commit_message: str = "Initial commit: AI coding templates setup"

    @property
    def project_path(self) -> pathlib.Path:
        return self.path / self.name


@dataclasses.dataclass
class CopyStep:
    tool: ToolSpec
    source: Traversable
    dest: pathlib.Path


@dataclasses.dataclass
class ProjectPlan:
    project_path: pathlib.Path
    steps: list[CopyStep]
    gitignore: Traversable | None = None


@dataclasses.dataclass
class ProjectResult:
    plan: ProjectPlan
    files_copied: int = 0
    created: list[str] = dataclasses.field(default_factory=list)
    git: GitResult | None = None
    dry_run: bool = False


def _check_name(name: str) -> None:
    """Reject names that would escape the parent directory."""
    separators = {"/", os.sep, os.altsep} - {None}
    if (
        name in (".", "..")
        or pathlib.PurePath(name).is_absolute()
        or any(sep in name for sep in separators)
    ):
        raise aitemplates.errors.InvalidNameError(name)


def plan_project(options: ProjectOptions, root: Traversable) -> ProjectPlan:
    """Validate *options* against *root* and return the copy steps."""
    if not options.name or not options.name.strip():
        raise aitemplates.errors.MissingArgumentError("Project name is required")
    if not options.tools:
        raise aitemplates.errors.MissingArgumentError("Tools selection is required")

    _check_name(options.name)
    project_path = options.project_path
    if os.path.lexists(project_path):
        raise aitemplates.errors.TargetExistsError(project_path)

    steps = [
        CopyStep(
            tool=tool,
            source=aitemplates.project.templates.template_for(tool, root),
            dest=project_path / tool.dirname,
        )
        for tool in options.tools
    ]

    if options.init_git and not aitemplates.project.gitinit.git_available():
        raise aitemplates.errors.GitError("git executable not found in PATH")

    return ProjectPlan(
        project_path=project_path,
        steps=steps,
        gitignore=aitemplates.project.templates.shared_gitignore(root),
    )


def _describe(plan: ProjectPlan, options: ProjectOptions) -> None:
    prefix = "[dry-run] "
    aitemplates.console.info(f"{prefix}Would create project directory: {plan.project_path}")
    if plan.gitignore is not None:
        aitemplates.console.info(f"{prefix}Would add {plan.project_path / '.gitignore'}")
    for step in plan.steps:
        files = aitemplates.project.templates.list_files(step.source)
        aitemplates.console.info(
            f"{prefix}Would add {step.tool.dirname}/ ({len(files)} files)"
        )
    aitemplates.console.info(f"{prefix}Would write {plan.project_path / 'README.md'}")
    if options.init_git:
        aitemplates.console.info(f"{prefix}Would initialize git repository")


def create_project(options: ProjectOptions, root: Traversable) -> ProjectResult:
    """Create the project described by *options* from templates in *root*."""
    plan = plan_project(options, root)
    result = ProjectResult(plan=plan, dry_run=options.dry_run)

    if options.dry_run:
        _describe(plan, options)
        return result

    project_path = plan.project_path
    aitemplates.console.info(f"Creating project directory: {project_path}")
    project_path.mkdir(parents=True)

    if plan.gitignore is not None:
        aitemplates.console.info("Adding shared configuration...")
        aitemplates.project.templates.copy_file(
            plan.gitignore, project_path / ".gitignore"
        )
        result.created.append(".gitignore")

    for step in plan.steps:
        aitemplates.console.info(f"Adding {step.tool.label} configuration...")
        result.files_copied += aitemplates.project.templates.copy_template(
            step.source, step.dest
        )
        result.created.append(f"{step.tool.dirname}/")
        aitemplates.console.success(f"Added {step.tool.dirname}/")

    aitemplates.project.templates.write_readme(project_path)
    result.created.append("README.md")
    aitemplates.console.success("Created README.md")
    logger.debug("Copied %d template files into %s", result.files_copied, project_path)

    if options.init_git:
        result.git = aitemplates.project.gitinit.init_repo(
            project_path, options.commit_message
        )

    return result
