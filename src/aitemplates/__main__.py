"""aitemplates CLI: bootstrap projects with AI coding assistant templates.

Usage:
    aitemplates new [opts]      Create a project (see: aitemplates new --help)
    aitemplates tools           List supported tools and their templates
    aitemplates doctor          Check optional external tools (git-secrets, ...)
    aitemplates config <cmd>    Configuration (get/set/reset/list/show/edit)
"""

from __future__ import annotations

import sys

import aitemplates.config
import aitemplates.deps
import aitemplates.errors
import aitemplates.project.config
import aitemplates.project.templates
import aitemplates.project.tools


def _cmd_new(args: list[str]) -> int:
    """Create a project from the selected templates."""
    import aitemplates.project.__main__

    return aitemplates.project.__main__.main(args, prog="aitemplates new")


def _cmd_tools() -> int:
    """Print each known tool with its template location and file count."""
    cfg = aitemplates.config.load("project")
    root = aitemplates.project.templates.resolve_root(cfg.template_root)
    print(f"Templates: {root}")
    for spec in aitemplates.project.tools.TOOLS.values():
        try:
            src = aitemplates.project.templates.template_for(spec, root)
        except aitemplates.errors.TemplateNotFoundError:
            print(f"  {spec.name:<12} {spec.dirname:<9} (missing)")
            continue
        count = len(aitemplates.project.templates.list_files(src))
        print(f"  {spec.name:<12} {spec.dirname:<9} {count} files")
    return 0


def _cmd_doctor() -> int:
    """Report optional tools; missing ones only reduce functionality."""
    results = aitemplates.deps.check_all()
    for name, (found, version) in results.items():
        mark = "ok" if found else "missing"
        print(f"  {name:<13} {mark:<8} {version}")
        if not found:
            print(f"      {aitemplates.deps.purpose(name)}")
            print(f"      install: {aitemplates.deps.get_install_instructions(name)}")
    return 0


def _cmd_config(args: list[str]) -> int:
    import aitemplates.config_cli

    return aitemplates.config_cli.main(args)


def main() -> None:
    args = sys.argv[1:]
    if not args:
        print(__doc__)
        sys.exit(1)

    cmd = args[0]
    rest = args[1:]

    if cmd == "new":
        sys.exit(_cmd_new(rest))
    elif cmd == "tools":
        sys.exit(_cmd_tools())
    elif cmd == "doctor":
        sys.exit(_cmd_doctor())
    elif cmd == "config":
        sys.exit(_cmd_config(rest))
    else:
        print(__doc__)
        sys.exit(1)


if __name__ == "__main__":
    main()
