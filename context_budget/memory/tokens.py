"""Size and token estimation for transcript messages.

Uses a simple heuristic: ~4 characters per token. Images have no text to
measure and are counted as a fixed character cost.
"""

from __future__ import annotations

import json
import math
from collections.abc import Sequence
from typing import Any

from ..types.messages import ImageContent, TextContent, ThinkingContent, ToolCallContent

CHARS_PER_TOKEN = 4

# Rough cost of one inline image, in characters (~1200 tokens)
IMAGE_CHAR_ESTIMATE = 4_800


def text_size(text: str) -> int:
    """Size of a block of text in characters."""
    return len(text)


def estimate_tokens(text: str) -> int:
    """Estimate token count for a string using the ~4 chars/token heuristic."""
    return math.ceil(len(text) / CHARS_PER_TOKEN)


def estimate_content_chars(content: Any) -> int:
    """Estimate the character size of a message's content.

    Accepts a bare string or a list of content blocks. Unknown content shapes
    are measured by their JSON encoding.
    """
    if content is None:
        return 0
    if isinstance(content, str):
        return len(content)
    if not isinstance(content, list):
        try:
            return len(json.dumps(content))
        except (TypeError, ValueError):
            return 0

    chars = 0
    for block in content:
        if isinstance(block, TextContent):
            chars += len(block.text)
        elif isinstance(block, ThinkingContent):
            chars += len(block.thinking)
        elif isinstance(block, ToolCallContent):
            chars += len(block.name) + len(json.dumps(block.arguments, default=str))
        elif isinstance(block, ImageContent):
            chars += IMAGE_CHAR_ESTIMATE
        else:
            try:
                chars += len(json.dumps(block))
            except (TypeError, ValueError):
                continue
    return chars


def estimate_message_tokens(message: Any) -> int:
    """Estimate token count for a single conversation message.

    Works with typed messages and with plain ``{"role", "content"}`` dicts.
    """
    if isinstance(message, dict):
        content = message.get("content")
    else:
        content = getattr(message, "content", None)
    return math.ceil(estimate_content_chars(content) / CHARS_PER_TOKEN)


def estimate_messages_tokens(messages: Sequence[Any]) -> int:
    """Estimate total token count for a list of conversation messages."""
    total = 0
    for msg in messages:
        total += estimate_message_tokens(msg)
    return total
