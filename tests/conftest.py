"""Shared test fixtures for aitemplates tests."""

from __future__ import annotations

import pathlib

import pytest

import aitemplates.config


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: pathlib.Path, monkeypatch: pytest.MonkeyPatch):
    """Keep tests away from the real global config and the real cwd."""
    global_toml = tmp_path / "global_config" / "config.toml"
    monkeypatch.setattr(aitemplates.config, "_global_path", lambda: global_toml)
    monkeypatch.chdir(tmp_path)
    return global_toml


@pytest.fixture
def template_root(tmp_path: pathlib.Path) -> pathlib.Path:
    """Create a checkout-style template root with dotted directories."""
    root = tmp_path / "ai-coding-templates"
    files = {
        ".claude/config.json": '{"plugins": {}}\n',
        ".claude/rules/naming.md": "# Naming\n",
        ".cursor/rules/general.mdc": "---\nalwaysApply: true\n---\n",
        ".agent/workflows/release.md": "# Release\n",
        ".gemini/GEMINI.md": "# Context\n",
        ".gitignore": "node_modules/\n",
    }
    for rel, content in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
    return root


@pytest.fixture
def projects_dir(tmp_path: pathlib.Path) -> pathlib.Path:
    """Parent directory for projects created by a test."""
    path = tmp_path / "projects"
    path.mkdir()
    return path
