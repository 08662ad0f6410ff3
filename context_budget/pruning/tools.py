"""Allow/deny matching of tool names for pruning."""

from __future__ import annotations

from collections.abc import Callable
from fnmatch import fnmatchcase

from .settings import ToolPruningSettings


def _matches_any(name: str, patterns: tuple[str, ...]) -> bool:
    return any(fnmatchcase(name, pattern.lower()) for pattern in patterns)


def make_tool_prunable_predicate(tools: ToolPruningSettings) -> Callable[[str], bool]:
    """Build a predicate telling whether results of a tool may be pruned.

    Matching is case-insensitive glob matching. A tool matching ``deny`` is
    never prunable; otherwise it is prunable when ``allow`` is empty or the
    tool matches one of its patterns.
    """
    allow = tools.allow
    deny = tools.deny

    def is_prunable(tool_name: str) -> bool:
        name = tool_name.strip().lower()
        if not name:
            return not allow
        if deny and _matches_any(name, deny):
            return False
        if not allow:
            return True
        return _matches_any(name, allow)

    return is_prunable
