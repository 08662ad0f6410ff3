"""Selection of the tool results that may be pruned.

Recent tool output is still in play for the model's next decision, so every
tool result at or after the k-th most recent assistant message is protected.
Older results have already been acted upon.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from ..types.messages import AssistantMessage, Message, ToolResultMessage
from .settings import ContextPruningSettings
from .text import is_pruned_text, tool_result_text, tool_result_text_size
from .tools import make_tool_prunable_predicate

logger = logging.getLogger(__name__)


def find_assistant_cutoff_index(
    messages: Sequence[Message], keep_last_assistants: int
) -> int | None:
    """Find the index where the protected recency window begins.

    Returns ``len(messages)`` when ``keep_last_assistants`` is 0, the index of
    the k-th most recent assistant message otherwise, or None when the
    transcript holds fewer than k assistant messages.
    """
    if keep_last_assistants <= 0:
        return len(messages)

    remaining = keep_last_assistants
    for i in range(len(messages) - 1, -1, -1):
        if isinstance(messages[i], AssistantMessage):
            remaining -= 1
            if remaining == 0:
                return i
    return None


def is_pruned_tool_result(msg: ToolResultMessage, settings: ContextPruningSettings) -> bool:
    """Check whether a tool result already holds a pruning replacement."""
    return is_pruned_text(msg.tool_name, tool_result_text(msg), settings.hard_clear.placeholder)


def collect_prunable_indexes(
    messages: Sequence[Message],
    settings: ContextPruningSettings,
    is_tool_prunable: Callable[[str], bool] | None = None,
) -> list[int]:
    """Return indexes of the tool results eligible for eviction, oldest first.

    A tool result is eligible when it lies strictly before the recency
    cutoff, its tool passes the allow/deny filter, it is not already a
    pruning replacement, and it holds at least ``min_prunable_tool_chars``
    characters of text.
    """
    cutoff = find_assistant_cutoff_index(messages, settings.keep_last_assistants)
    if cutoff is None:
        return []

    if is_tool_prunable is None:
        is_tool_prunable = make_tool_prunable_predicate(settings.tools)

    indexes: list[int] = []
    for i in range(cutoff):
        msg = messages[i]
        if not isinstance(msg, ToolResultMessage):
            continue
        if not is_tool_prunable(msg.tool_name):
            continue
        if tool_result_text_size(msg) < settings.min_prunable_tool_chars:
            continue
        if is_pruned_tool_result(msg, settings):
            continue
        indexes.append(i)

    logger.debug(
        "Prunable tool results: %d of %d messages (cutoff=%d)", len(indexes), len(messages), cutoff
    )
    return indexes
