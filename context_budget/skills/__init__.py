"""Skills - frontmatter routing hints and description enrichment."""

from .frontmatter import (
    SkillInvocationPolicy,
    SkillRouting,
    parse_frontmatter,
    parse_frontmatter_bool,
    resolve_skill_invocation_policy,
    resolve_skill_routing,
)
from .workspace import build_enriched_description

__all__ = [
    "SkillInvocationPolicy",
    "SkillRouting",
    "build_enriched_description",
    "parse_frontmatter",
    "parse_frontmatter_bool",
    "resolve_skill_invocation_policy",
    "resolve_skill_routing",
]
