"""Unit tests for context_budget.skills.workspace module."""

from context_budget.skills.frontmatter import SkillRouting
from context_budget.skills.workspace import build_enriched_description


class TestBuildEnrichedDescription:
    """Tests for build_enriched_description function."""

    def test_appends_use_when(self):
        result = build_enriched_description(
            "A cool skill.", SkillRouting(use_when=["user asks about X"])
        )
        assert result == "A cool skill.\nUse when: user asks about X"

    def test_appends_dont_use_when(self):
        result = build_enriched_description(
            "A cool skill.", SkillRouting(dont_use_when=["user wants Y"])
        )
        assert result == "A cool skill.\nDon't use when: user wants Y"

    def test_appends_both(self):
        routing = SkillRouting(
            use_when=["working with repos", "PRs"], dont_use_when=["local git operations"]
        )
        result = build_enriched_description("A cool skill.", routing)
        assert result == (
            "A cool skill.\nUse when: working with repos; PRs\nDon't use when: local git operations"
        )

    def test_missing_description(self):
        result = build_enriched_description(None, SkillRouting(use_when=["always"]))
        assert result == "Use when: always"

    def test_empty_routing(self):
        assert build_enriched_description("desc", SkillRouting()) == "desc"
        assert build_enriched_description("desc", None) == "desc"

    def test_joins_conditions_with_semicolons(self):
        result = build_enriched_description(
            "desc", SkillRouting(use_when=["cond A", "cond B", "cond C"])
        )
        assert result == "desc\nUse when: cond A; cond B; cond C"
