"""Skill frontmatter parsing: invocation policy and routing hints."""

from __future__ import annotations

import json
import re
from typing import Any

import yaml
from pydantic import BaseModel

from ..exceptions import SkillFrontmatterError

FRONTMATTER_PATTERN = re.compile(r"^---\s*\n(.*?)\n---\s*(?:\n|$)", re.DOTALL)

_TRUE_VALUES = {"true", "yes", "on", "1"}
_FALSE_VALUES = {"false", "no", "off", "0"}


class SkillInvocationPolicy(BaseModel):
    """Who may invoke a skill."""

    user_invocable: bool = True
    disable_model_invocation: bool = False


class SkillRouting(BaseModel):
    """Conditions under which a skill should or should not be used."""

    use_when: list[str] | None = None
    dont_use_when: list[str] | None = None


def parse_frontmatter(content: str, file_path: str | None = None) -> dict[str, Any]:
    """Parse the YAML frontmatter of a SKILL.md file.

    Args:
        content: Raw file content
        file_path: Optional path used in error messages

    Returns:
        The frontmatter mapping, or an empty dict when the file has no
        ``---`` delimited header

    Raises:
        SkillFrontmatterError: If the header is not valid YAML or is not a mapping
    """
    match = FRONTMATTER_PATTERN.match(content)
    if not match:
        return {}

    try:
        frontmatter = yaml.safe_load(match.group(1))
    except yaml.YAMLError as e:
        raise SkillFrontmatterError(f"Invalid YAML frontmatter: {e}", file_path) from e

    if frontmatter is None:
        return {}
    if not isinstance(frontmatter, dict):
        raise SkillFrontmatterError("YAML frontmatter must be a mapping", file_path)
    return frontmatter


def parse_frontmatter_bool(value: object, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in _TRUE_VALUES:
            return True
        if normalized in _FALSE_VALUES:
            return False
    return default


def _parse_list(value: object) -> list[str]:
    items: list[object]
    if isinstance(value, list):
        items = value
    elif isinstance(value, str):
        stripped = value.strip()
        items = stripped.split(",")
        if stripped.startswith("["):
            try:
                parsed = json.loads(stripped)
            except json.JSONDecodeError:
                parsed = None
            if isinstance(parsed, list):
                items = parsed
    else:
        return []
    return [str(item).strip() for item in items if item is not None and str(item).strip()]


def resolve_skill_invocation_policy(frontmatter: dict[str, object]) -> SkillInvocationPolicy:
    return SkillInvocationPolicy(
        user_invocable=parse_frontmatter_bool(frontmatter.get("user-invocable"), True),
        disable_model_invocation=parse_frontmatter_bool(
            frontmatter.get("disable-model-invocation"), False
        ),
    )


def resolve_skill_routing(frontmatter: dict[str, object]) -> SkillRouting | None:
    """Read ``use-when`` / ``dont-use-when`` hints.

    Values may be YAML lists, JSON array strings or comma-separated
    strings. Returns None when neither hint yields any entry.
    """
    use_when = _parse_list(frontmatter.get("use-when"))
    dont_use_when = _parse_list(frontmatter.get("dont-use-when"))
    if not use_when and not dont_use_when:
        return None
    return SkillRouting(
        use_when=use_when or None,
        dont_use_when=dont_use_when or None,
    )
