"""Bootstrap a new project with AI coding templates.

Usage:
    aitemplates new --name my-project --tools claude,cursor,antigravity
    aitemplates new --name my-project --tools all --git
    aitemplates new --name my-project --tools claude --path ~/projects
    aitemplates new                (interactive mode when run from a terminal)

Also installed as the standalone ``setup-project`` command.
"""

from __future__ import annotations

import argparse
import logging
import pathlib
import sys

import rich.markup
import rich.prompt

import aitemplates.config
import aitemplates.console
import aitemplates.errors
import aitemplates.project.config
import aitemplates.project.create
import aitemplates.project.templates
import aitemplates.project.tools

logger = logging.getLogger("aitemplates.project")

_MENU = {
    "1": ("Claude only", "claude"),
    "2": ("Cursor only", "cursor"),
    "3": ("Antigravity only", "antigravity"),
    "4": ("Gemini only", "gemini"),
    "5": ("All (Claude + Cursor + Antigravity + Gemini)", "all"),
}

_EPILOG = """\
examples:
  # Setup with Claude only
  %(prog)s --name my-project --tools claude

  # Setup with all tools
  %(prog)s --name my-project --tools all --git

  # Setup in specific directory
  %(prog)s --name my-project --tools claude,cursor --path ~/projects

  # Interactive mode
  %(prog)s
"""


def build_parser(prog: str | None = None) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=prog,
        description="AI Coding Templates - Project Setup",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--name", help="Project name (required)")
    parser.add_argument(
        "--tools",
        help="Tools to setup, comma-separated or 'all' "
        "(options: claude,cursor,antigravity,gemini,all)",
    )
    parser.add_argument(
        "--path",
        type=pathlib.Path,
        default=None,
        help="Directory to create project in (default: current)",
    )
    parser.add_argument(
        "--git", action="store_true", help="Initialize git repository"
    )
    parser.add_argument(
        "--dry-run", action="store_true", help="Show what would be created"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    return parser


def _stdin_is_tty() -> bool:
    return sys.stdin.isatty()


def _interactive(args: argparse.Namespace) -> None:
    """Prompt for name, tools and git, filling in *args*."""
    aitemplates.console.header("AI Coding Templates - Interactive Setup")

    while not args.name:
        args.name = rich.prompt.Prompt.ask("Project name").strip()
        if not args.name:
            aitemplates.console.error("Project name cannot be empty")

    while not args.tools:
        print()
        print("Select tools to include:")
        for key, (label, _tools) in _MENU.items():
            print(f"  {key}) {label}")
        choice = rich.prompt.Prompt.ask("Choice [1-5]").strip()
        if choice in _MENU:
            args.tools = _MENU[choice][1]
        else:
            aitemplates.console.error("Invalid choice")

    reply = rich.prompt.Prompt.ask(
        rich.markup.escape("Initialize git repository? [y/N]"),
        default="",
        show_default=False,
    )
    args.git = reply.strip() in ("y", "Y")


def _print_summary(
    options: aitemplates.project.create.ProjectOptions,
    root: object,
) -> None:
    project_path = options.project_path
    print()
    aitemplates.console.header("Project Created Successfully!")
    print()
    aitemplates.console.success(f"Project: {options.name}")
    aitemplates.console.success(f"Location: {project_path}")
    aitemplates.console.success(
        f"Tools: {','.join(tool.name for tool in options.tools)}"
    )
    print()

    aitemplates.console.section(
        "Next Steps:",
        [
            f"1. cd {project_path}",
            "2. Install git-secrets: brew install git-secrets (if not installed)",
            "3. lefthook install (set up git hooks)",
            "4. Edit .claude/instructions.md (Claude users)",
            "5. Customize .claude/config.json to add plugins",
            "6. Review and edit tool-specific rules",
            "7. git add . && git commit -m 'Customize AI settings'",
        ],
    )
    aitemplates.console.section(
        "Security Setup (Secrets Protection):",
        [
            "• Install git-secrets: brew install git-secrets",
            "• git-secrets auto-configured in new projects (if installed)",
            "• Blocks commits with AWS keys, API keys, passwords",
            "• See docs/GIT_HOOKS.md for secrets scanning details",
        ],
    )
    aitemplates.console.section(
        "Git Hooks (Lefthook):",
        [
            "1. Install lefthook:",
            "   npm install -g @evilmartians/lefthook",
            "   or: brew install lefthook",
            "2. Setup hooks: lefthook install",
            "3. See docs/GIT_HOOKS.md for details",
        ],
    )
    aitemplates.console.section(
        "Quick Reference:",
        [f"{tool.label}: {tool.quick_reference}" for tool in options.tools],
    )
    aitemplates.console.section(
        "Documentation:",
        [
            f"• Template Repo: {root}",
            f"• README.md: {project_path / 'README.md'}",
        ],
        style="blue",
    )


def run(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    """Validate *args*, create the project, and print the summary."""
    cfg = aitemplates.config.load("project")
    try:
        if not args.name or not args.name.strip():
            raise aitemplates.errors.MissingArgumentError("Project name is required")
        tools = aitemplates.project.tools.parse_tools(args.tools)
    except aitemplates.errors.MissingArgumentError as exc:
        aitemplates.console.error(str(exc))
        sys.stderr.write(parser.format_help())
        return 1
    except aitemplates.errors.SetupError as exc:
        aitemplates.console.error(str(exc))
        return 1

    options = aitemplates.project.create.ProjectOptions(
        name=args.name.strip(),
        tools=tools,
        path=args.path if args.path is not None else pathlib.Path(cfg.default_path),
        init_git=args.git or cfg.init_git,
        dry_run=args.dry_run,
        commit_message=cfg.commit_message,
    )
    root = aitemplates.project.templates.resolve_root(cfg.template_root)
    logger.debug("Using templates from %s", root)

    aitemplates.console.header(f"Setting up: {options.name}")
    try:
        result = aitemplates.project.create.create_project(options, root)
    except aitemplates.errors.SetupError as exc:
        aitemplates.console.error(str(exc))
        return 1

    if not result.dry_run:
        _print_summary(options, root)
    return 0


def main(argv: list[str] | None = None, prog: str | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    parser = build_parser(prog)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(message)s",
    )

    if not argv and _stdin_is_tty():
        try:
            _interactive(args)
        except (EOFError, KeyboardInterrupt):
            print()
            aitemplates.console.error("Setup cancelled")
            return 1

    return run(args, parser)


if __name__ == "__main__":
    sys.exit(main())
