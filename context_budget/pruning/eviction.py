"""Two-tier eviction of oversized tool results.

Each eligible tool result is measured by its text size and then:
1. Hard-cleared when hard clear is enabled and the size exceeds the
   hard-clear threshold. Terminal for that message.
2. Otherwise soft-trimmed (head + tail kept) when the size exceeds the
   soft-trim threshold and ``soft_trim.max_chars``.
3. Otherwise left alone.

Only text blocks are rewritten. Non-text blocks and the message identity
(``tool_call_id``, ``tool_name``, ``is_error``, ``timestamp``) are untouched,
so tool calls still pair with their results.
"""

from __future__ import annotations

from typing import Literal

from ..memory.budget import resolve_threshold
from ..types.messages import TextContent, ToolResultMessage
from .settings import ContextPruningSettings
from .text import format_hard_clear, format_soft_trim, tool_result_text, tool_result_text_size

EvictionAction = Literal["hard_clear", "soft_trim"]


def replace_text_content(msg: ToolResultMessage, text: str) -> None:
    """Replace every text block of ``msg`` with a single block holding ``text``.

    The new block takes the position of the first text block; other blocks
    keep their relative order.
    """
    new_content = []
    inserted = False
    for block in msg.content:
        if isinstance(block, TextContent):
            if not inserted:
                new_content.append(TextContent(text=text))
                inserted = True
            continue
        new_content.append(block)
    if not inserted:
        new_content.insert(0, TextContent(text=text))
    msg.content = new_content


def hard_clear_tool_result(msg: ToolResultMessage, placeholder: str) -> None:
    """Replace the text of a tool result with its hard-clear placeholder."""
    replace_text_content(msg, format_hard_clear(msg.tool_name, placeholder))


def soft_trim_tool_result(msg: ToolResultMessage, head_chars: int, tail_chars: int) -> bool:
    """Keep only the head and tail of a tool result's text.

    Returns:
        True if the message was trimmed, False when trimming would not
        shrink it (``head_chars + tail_chars`` covers the whole text).
    """
    text = tool_result_text(msg)
    if head_chars + tail_chars >= len(text):
        return False
    replace_text_content(msg, format_soft_trim(msg.tool_name, text, head_chars, tail_chars))
    return True


def evict_tool_result(
    msg: ToolResultMessage,
    settings: ContextPruningSettings,
    context_window: int,
) -> EvictionAction | None:
    """Apply the eviction policy to one tool result, mutating it in place.

    Args:
        msg: An eligible tool result
        settings: Resolved pruning settings
        context_window: Model context window capacity

    Returns:
        The action taken, or None if the message was left unchanged.
    """
    size = tool_result_text_size(msg)

    if settings.hard_clear.enabled and size > resolve_threshold(
        context_window, settings.hard_clear_ratio
    ):
        hard_clear_tool_result(msg, settings.hard_clear.placeholder)
        return "hard_clear"

    soft_trim = settings.soft_trim
    if size > resolve_threshold(context_window, settings.soft_trim_ratio) and (
        size > soft_trim.max_chars
    ):
        if soft_trim_tool_result(msg, soft_trim.head_chars, soft_trim.tail_chars):
            return "soft_trim"

    return None
