"""Text measurement and replacement formats for pruned tool results.

Both replacement formats name the tool, so a reader of the transcript (user
or model) can tell which call's output was shortened.
"""

from __future__ import annotations

import re

from ..memory.tokens import text_size
from ..types.messages import ToolResultMessage, text_blocks

TRIM_MARKER = "\n...\n"


def tool_result_text(msg: ToolResultMessage) -> str:
    """Concatenate the text blocks of a tool result."""
    return "".join(text_blocks(msg.content))


def tool_result_text_size(msg: ToolResultMessage) -> int:
    """Size of a tool result in characters. Non-text blocks count as zero."""
    return sum(text_size(text) for text in text_blocks(msg.content))


def format_hard_clear(tool_name: str, placeholder: str) -> str:
    return f"[{tool_name}: {placeholder}]"


def format_soft_trim(tool_name: str, text: str, head_chars: int, tail_chars: int) -> str:
    """Keep the first ``head_chars`` and last ``tail_chars`` characters of ``text``.

    Callers must ensure ``head_chars + tail_chars < len(text)``.
    """
    size = len(text)
    head = text[:head_chars]
    tail = text[size - tail_chars :] if tail_chars > 0 else ""
    return (
        f"[{tool_name} result trimmed: {head}{TRIM_MARKER}{tail}\n\n"
        f"kept first {head_chars} chars and last {tail_chars} chars of {size} chars.]"
    )


def _soft_trim_pattern(tool_name: str) -> re.Pattern[str]:
    return re.compile(
        rf"\[{re.escape(tool_name)} result trimmed: .*\n\n"
        r"kept first \d+ chars and last \d+ chars of \d+ chars\.\]",
        re.DOTALL,
    )


def is_pruned_text(tool_name: str, text: str, placeholder: str) -> bool:
    """Check whether ``text`` is already a hard-clear or soft-trim replacement."""
    if text == format_hard_clear(tool_name, placeholder):
        return True
    return _soft_trim_pattern(tool_name).fullmatch(text) is not None
