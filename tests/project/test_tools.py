"""Tests for the tool registry and tool-list parsing."""

from __future__ import annotations

import pytest

import aitemplates.errors
import aitemplates.project.tools


def _names(specs) -> list[str]:
    return [s.name for s in specs]


class TestParseTools:
    def test_single_tool(self) -> None:
        specs = aitemplates.project.tools.parse_tools("claude")
        assert _names(specs) == ["claude"]
        assert specs[0].dirname == ".claude"

    def test_all_expands_in_canonical_order(self) -> None:
        specs = aitemplates.project.tools.parse_tools("all")
        assert _names(specs) == ["claude", "cursor", "antigravity", "gemini"]

    def test_trims_whitespace(self) -> None:
        specs = aitemplates.project.tools.parse_tools(" cursor , antigravity ")
        assert _names(specs) == ["cursor", "antigravity"]

    def test_preserves_given_order(self) -> None:
        specs = aitemplates.project.tools.parse_tools("gemini,claude")
        assert _names(specs) == ["gemini", "claude"]

    def test_duplicates_collapsed(self) -> None:
        specs = aitemplates.project.tools.parse_tools("claude,cursor,claude")
        assert _names(specs) == ["claude", "cursor"]

    def test_antigravity_uses_agent_dir(self) -> None:
        (spec,) = aitemplates.project.tools.parse_tools("antigravity")
        assert spec.dirname == ".agent"
        assert spec.bundled_name == "agent"

    def test_unknown_tool(self) -> None:
        with pytest.raises(aitemplates.errors.InvalidToolError, match="bogus"):
            aitemplates.project.tools.parse_tools("claude,bogus")

    def test_case_sensitive(self) -> None:
        with pytest.raises(aitemplates.errors.InvalidToolError):
            aitemplates.project.tools.parse_tools("Claude")

    def test_empty_entry_is_invalid(self) -> None:
        with pytest.raises(aitemplates.errors.InvalidToolError):
            aitemplates.project.tools.parse_tools("claude,")

    def test_all_mixed_with_names_is_invalid(self) -> None:
        with pytest.raises(aitemplates.errors.InvalidToolError, match="all"):
            aitemplates.project.tools.parse_tools("all,claude")

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_missing(self, value) -> None:
        with pytest.raises(
            aitemplates.errors.MissingArgumentError, match="Tools selection"
        ):
            aitemplates.project.tools.parse_tools(value)


class TestExpandTools:
    def test_all(self) -> None:
        assert (
            aitemplates.project.tools.expand_tools("all")
            == "claude,cursor,antigravity,gemini"
        )

    def test_normalizes(self) -> None:
        assert aitemplates.project.tools.expand_tools("cursor , claude") == "cursor,claude"
