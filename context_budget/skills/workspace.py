"""Skill descriptions as presented to the model."""

from __future__ import annotations

from .frontmatter import SkillRouting


def build_enriched_description(description: str | None, routing: SkillRouting | None) -> str:
    """Append routing hints to a skill description.

    Example:
        "A cool skill.\\nUse when: repos; PRs\\nDon't use when: local git"
    """
    lines: list[str] = []
    if description:
        lines.append(description)
    if routing is not None:
        if routing.use_when:
            lines.append("Use when: " + "; ".join(routing.use_when))
        if routing.dont_use_when:
            lines.append("Don't use when: " + "; ".join(routing.dont_use_when))
    return "\n".join(lines)
