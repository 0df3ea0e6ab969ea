"""Tests for template lookup, copying and the README."""

from __future__ import annotations

import os
import pathlib
import stat

import pytest

import aitemplates.errors
import aitemplates.project.templates
import aitemplates.project.tools

_TOOLS = aitemplates.project.tools.TOOLS


class TestResolveRoot:
    def test_bundled_when_unset(self) -> None:
        root = aitemplates.project.templates.resolve_root("")
        assert root.is_dir()
        assert (root / "claude").is_dir()

    def test_configured_path(self, template_root: pathlib.Path) -> None:
        root = aitemplates.project.templates.resolve_root(str(template_root))
        assert root == template_root


class TestTemplateFor:
    def test_dotted_layout(self, template_root: pathlib.Path) -> None:
        src = aitemplates.project.templates.template_for(_TOOLS["claude"], template_root)
        assert src == template_root / ".claude"

    @pytest.mark.parametrize("name", ["claude", "cursor", "antigravity", "gemini"])
    def test_bundled_has_every_tool(self, name: str) -> None:
        root = aitemplates.project.templates.bundled_root()
        src = aitemplates.project.templates.template_for(_TOOLS[name], root)
        assert src.is_dir()
        assert aitemplates.project.templates.list_files(src)

    def test_missing(self, tmp_path: pathlib.Path) -> None:
        empty = tmp_path / "empty"
        empty.mkdir()
        with pytest.raises(aitemplates.errors.TemplateNotFoundError, match=".cursor"):
            aitemplates.project.templates.template_for(_TOOLS["cursor"], empty)


class TestSharedGitignore:
    def test_dotted(self, template_root: pathlib.Path) -> None:
        found = aitemplates.project.templates.shared_gitignore(template_root)
        assert found == template_root / ".gitignore"

    def test_bundled(self) -> None:
        root = aitemplates.project.templates.bundled_root()
        found = aitemplates.project.templates.shared_gitignore(root)
        assert found is not None
        assert "node_modules/" in found.read_text()

    def test_absent(self, tmp_path: pathlib.Path) -> None:
        assert aitemplates.project.templates.shared_gitignore(tmp_path) is None


class TestCopyTemplate:
    def test_copies_nested_tree(
        self, template_root: pathlib.Path, tmp_path: pathlib.Path
    ) -> None:
        dest = tmp_path / "out" / ".claude"
        count = aitemplates.project.templates.copy_template(
            template_root / ".claude", dest
        )
        assert count == 2
        assert (dest / "config.json").read_text() == '{"plugins": {}}\n'
        assert (dest / "rules" / "naming.md").read_text() == "# Naming\n"

    def test_bytes_unchanged(self, tmp_path: pathlib.Path) -> None:
        src = tmp_path / "src"
        src.mkdir()
        payload = b"\x00\xffbinary\r\n"
        (src / "blob.bin").write_bytes(payload)
        dest = tmp_path / "dest"
        aitemplates.project.templates.copy_template(src, dest)
        assert (dest / "blob.bin").read_bytes() == payload

    def test_bundled_copy_matches_listing(self, tmp_path: pathlib.Path) -> None:
        root = aitemplates.project.templates.bundled_root()
        src = aitemplates.project.templates.template_for(_TOOLS["claude"], root)
        dest = tmp_path / ".claude"
        aitemplates.project.templates.copy_template(src, dest)
        assert aitemplates.project.templates.list_files(
            dest
        ) == aitemplates.project.templates.list_files(src)

    def test_keeps_executable_bit(self, tmp_path: pathlib.Path) -> None:
        src = tmp_path / "src"
        (src / "hooks").mkdir(parents=True)
        script = src / "hooks" / "pre-commit.sh"
        script.write_text("#!/bin/sh\nexit 0\n")
        script.chmod(0o755)
        dest = tmp_path / "dest"
        aitemplates.project.templates.copy_template(src, dest)
        mode = (dest / "hooks" / "pre-commit.sh").stat().st_mode
        assert mode & stat.S_IXUSR
        assert stat.S_IMODE(mode) == 0o755

    def test_symlink_recreated_not_followed(
        self, template_root: pathlib.Path, tmp_path: pathlib.Path
    ) -> None:
        src = template_root / ".claude"
        os.symlink("rules/naming.md", src / "shared.md")
        dest = tmp_path / "out" / ".claude"
        count = aitemplates.project.templates.copy_template(src, dest)
        assert count == 2
        link = dest / "shared.md"
        assert link.is_symlink()
        assert os.readlink(link) == "rules/naming.md"
        assert link.read_text() == "# Naming\n"

    def test_self_referencing_dir_link(
        self, template_root: pathlib.Path, tmp_path: pathlib.Path
    ) -> None:
        src = template_root / ".claude"
        os.symlink(".", src / "rules" / "loop")
        dest = tmp_path / "out" / ".claude"
        aitemplates.project.templates.copy_template(src, dest)
        assert (dest / "rules" / "loop").is_symlink()
        assert aitemplates.project.templates.list_files(src) == [
            "config.json",
            "rules/loop",
            "rules/naming.md",
        ]


class TestListFiles:
    def test_relative_sorted(self, template_root: pathlib.Path) -> None:
        files = aitemplates.project.templates.list_files(template_root / ".claude")
        assert files == ["config.json", "rules/naming.md"]


class TestWriteReadme:
    def test_writes_fixed_text(self, tmp_path: pathlib.Path) -> None:
        path = aitemplates.project.templates.write_readme(tmp_path)
        assert path == tmp_path / "README.md"
        text = path.read_text()
        assert text == aitemplates.project.templates.README_TEMPLATE
        assert text.startswith("# Project Setup\n")
        assert "Generated with [ai-coding-templates]" in text
