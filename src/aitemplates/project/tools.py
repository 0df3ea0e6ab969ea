"""Registry of supported AI coding assistants and tool-list parsing."""

from __future__ import annotations

import dataclasses

import aitemplates.errors


@dataclasses.dataclass(frozen=True)
class ToolSpec:
    name: str
    label: str
    dirname: str
    quick_reference: str

    @property
    def bundled_name(self) -> str:
        """Directory name inside the bundled template root (no leading dot)."""
        return self.dirname.lstrip(".")


TOOLS: dict[str, ToolSpec] = {
    "claude": ToolSpec(
        name="claude",
        label="Claude",
        dirname=".claude",
        quick_reference=".claude/config.json (plugins) | .claude/rules/ (standards)",
    ),
    "cursor": ToolSpec(
        name="cursor",
        label="Cursor",
        dirname=".cursor",
        quick_reference=".cursor/rules/ | .cursor/commands/",
    ),
    "antigravity": ToolSpec(
        name="antigravity",
        label="Antigravity",
        dirname=".agent",
        quick_reference=".agent/rules/ | .agent/workflows/",
    ),
    "gemini": ToolSpec(
        name="gemini",
        label="Gemini",
        dirname=".gemini",
        quick_reference=".gemini/GEMINI.md | .gemini/settings.json",
    ),
}

ALL = "all"


def parse_tools(value: str | None) -> list[ToolSpec]:
    """Parse a comma-separated tool list (or ``all``) into tool specs.

    Entries are trimmed; duplicates keep their first position. Raises
    :class:`~aitemplates.errors.MissingArgumentError` for an empty value
    and :class:`~aitemplates.errors.InvalidToolError` for any unknown or
    empty entry.
    """
    if value is None or not value.strip():
        raise aitemplates.errors.MissingArgumentError("Tools selection is required")

    if value.strip() == ALL:
        return list(TOOLS.values())

    selected: list[ToolSpec] = []
    for raw in value.split(","):
        name = raw.strip()
        spec = TOOLS.get(name)
        if spec is None:
            raise aitemplates.errors.InvalidToolError(name)
        if spec not in selected:
            selected.append(spec)
    return selected


def expand_tools(value: str | None) -> str:
    """Return the canonical comma-joined names for *value*."""
    return ",".join(spec.name for spec in parse_tools(value))
