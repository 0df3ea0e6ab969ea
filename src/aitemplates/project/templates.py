"""Template lookup and copying.

Templates come either from the directory named by ``project.template_root``
(an ai-coding-templates checkout, laid out with ``.claude/``, ``.cursor/``
and so on) or from the copies bundled in ``aitemplates/bundled`` where the
directories are stored without their leading dot.
"""

from __future__ import annotations

import importlib.resources
import logging
import pathlib
import shutil
from typing import TYPE_CHECKING

import aitemplates.errors

if TYPE_CHECKING:
    from importlib.resources.abc import Traversable

    from aitemplates.project.tools import ToolSpec

logger = logging.getLogger("aitemplates.project.templates")

README_TEMPLATE = """\
# Project Setup

This project was created using [ai-coding-templates](https://github.com/your-org/ai-coding-templates).

## AI Coding Assistant Setup

This project includes configuration for AI coding assistants. Configure the following as needed:

### Claude Code
- Location: `.claude/`
- **config.json** - Enable/disable plugins for this project
- **rules/** - Coding standards and linting rules
- **instructions.md** - Project-specific guidelines (edit as needed)
- **skills/** - Optional project-specific skills (n8n workflows)

### Cursor
- Location: `.cursor/`
- **rules/** - Rules for Cursor (use `.mdc` format)
- **commands/** - Custom commands for Cursor

### Antigravity
- Location: `.agent/`
- **rules/** - AI agent rules
- **workflows/** - Automated workflows

## Getting Started

1. Edit project-specific configuration:
   - `.claude/instructions.md` - Add your project guidelines
   - `.claude/config.json` - Add project-specific plugins
   - `.cursor/rules/` - Customize rules as needed
   - `.agent/rules/` - Customize agent rules

2. Initialize version control:
   ```bash
   git init
   git add .
   git commit -m "Initial commit with AI coding templates"
   ```

3. Start developing with your favorite AI coding assistant!

## Documentation

- **Claude Code**: See `.claude/rules/` for standards
- **Cursor**: See `.cursor/rules/` for configuration
- **Antigravity**: See `.agent/rules/` for workflows

## Template Updates

To update templates or sync with latest:
```bash
# Review changes from ai-coding-templates
cp -r /path/to/ai-coding-templates/[tool]/project-config/.* ./
```

---

Generated with [ai-coding-templates](https://github.com/your-org/ai-coding-templates)
"""


def bundled_root() -> Traversable:
    """Return the templates shipped inside the package."""
    return importlib.resources.files("aitemplates") / "bundled"


def resolve_root(template_root: str = "") -> Traversable:
    """Return the configured template root, or the bundled one when unset."""
    if template_root:
        return pathlib.Path(template_root).expanduser()
    return bundled_root()


def _first_dir(root: Traversable, names: tuple[str, ...]) -> Traversable | None:
    for name in names:
        candidate = root / name
        if candidate.is_dir():
            return candidate
    return None


def template_for(tool: ToolSpec, root: Traversable) -> Traversable:
    """Return the template directory for *tool* under *root*.

    Raises :class:`~aitemplates.errors.TemplateNotFoundError` when neither
    the dotted nor the bundled directory name exists.
    """
    found = _first_dir(root, (tool.dirname, tool.bundled_name))
    if found is None:
        raise aitemplates.errors.TemplateNotFoundError(tool.dirname, root)
    return found


def shared_gitignore(root: Traversable) -> Traversable | None:
    """Return the shared ignore file under *root*, if it has one."""
    for name in (".gitignore", "gitignore"):
        candidate = root / name
        if candidate.is_file():
            return candidate
    return None


def _is_link(entry: Traversable) -> bool:
    return isinstance(entry, pathlib.Path) and entry.is_symlink()


def copy_file(src: Traversable, dest: pathlib.Path) -> None:
    """Copy a single file, keeping its mode when *src* is on disk."""
    if isinstance(src, pathlib.Path):
        shutil.copy2(src, dest)
    else:
        dest.write_bytes(src.read_bytes())
    logger.debug("Copied %s", dest)


def copy_template(src: Traversable, dest: pathlib.Path) -> int:
    """Copy the tree at *src* into *dest* verbatim.

    On-disk sources keep permission bits, and symlinks are recreated as
    symlinks. Resources inside a zip or other loader are copied byte for
    byte. Returns the number of regular files written.
    """
    if isinstance(src, pathlib.Path):
        copied = 0

        def _copy(s: str, d: str) -> None:
            nonlocal copied
            copy_file(pathlib.Path(s), pathlib.Path(d))
            copied += 1

        shutil.copytree(
            src, dest, symlinks=True, copy_function=_copy, dirs_exist_ok=True
        )
        return copied

    dest.mkdir(parents=True, exist_ok=True)
    copied = 0
    for entry in src.iterdir():
        target = dest / entry.name
        if entry.is_dir():
            copied += copy_template(entry, target)
        elif entry.is_file():
            copy_file(entry, target)
            copied += 1
    return copied


def list_files(src: Traversable, prefix: str = "") -> list[str]:
    """Return the relative paths of every file under *src*, sorted.

    Symlinks are listed as entries and never followed.
    """
    out: list[str] = []
    for entry in src.iterdir():
        rel = f"{prefix}{entry.name}"
        if _is_link(entry):
            out.append(rel)
        elif entry.is_dir():
            out.extend(list_files(entry, rel + "/"))
        elif entry.is_file():
            out.append(rel)
    return sorted(out)


def write_readme(project_path: pathlib.Path) -> pathlib.Path:
    readme = project_path / "README.md"
    readme.write_text(README_TEMPLATE)
    return readme
