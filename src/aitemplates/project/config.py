"""Configuration for project bootstrap."""

from __future__ import annotations

import dataclasses

import aitemplates.config


@aitemplates.config.configurable("project")
@dataclasses.dataclass
class ProjectConfig:
    default_path: str = "."
    template_root: str = ""
    init_git: bool = False
    commit_message: str = "Initial commit: AI coding templates setup"
