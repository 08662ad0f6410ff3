"""Context pruning engine.

Runs once per turn over the live transcript: selects the tool results old
and large enough to prune, then soft-trims or hard-clears each one in place.
Pure string operations, no LLM calls.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from pydantic import BaseModel

from ..types.messages import Message, ToolResultMessage
from .eligibility import collect_prunable_indexes
from .eviction import evict_tool_result
from .settings import DEFAULT_CONTEXT_PRUNING_SETTINGS, ContextPruningSettings
from .text import tool_result_text_size

logger = logging.getLogger(__name__)


class PruningContext(BaseModel):
    """What the engine needs from the host: the model's context window."""

    context_window: int | None = None


def prune_context_messages(
    messages: list[Message],
    settings: ContextPruningSettings = DEFAULT_CONTEXT_PRUNING_SETTINGS,
    ctx: PruningContext | None = None,
    is_tool_prunable: Callable[[str], bool] | None = None,
) -> list[Message]:
    """Shrink old, oversized tool results in place.

    Running twice with the same settings gives the same transcript as
    running once: replacements are recognised and skipped.

    Args:
        messages: Transcript, oldest first. Mutated in place.
        settings: Resolved pruning settings
        ctx: Host context carrying the model context window. Without a
            positive context window nothing is pruned.
        is_tool_prunable: Optional override of the tool allow/deny filter

    Returns:
        The same list object that was passed in
    """
    context_window = ctx.context_window if ctx is not None else None
    if not context_window or context_window <= 0:
        logger.debug("No context window available, skipping pruning")
        return messages

    indexes = collect_prunable_indexes(messages, settings, is_tool_prunable)
    if not indexes:
        return messages

    trimmed = 0
    cleared = 0
    chars_saved = 0
    for i in indexes:
        msg = messages[i]
        if not isinstance(msg, ToolResultMessage):
            continue
        before = tool_result_text_size(msg)
        action = evict_tool_result(msg, settings, context_window)
        if action is None:
            continue
        if action == "hard_clear":
            cleared += 1
        else:
            trimmed += 1
        chars_saved += before - tool_result_text_size(msg)

    if trimmed or cleared:
        logger.debug(
            "Pruned tool results: %d soft-trimmed, %d hard-cleared, %d chars saved",
            trimmed,
            cleared,
            chars_saved,
        )
    return messages
