"""Type definitions for transcript messages and their content blocks.

Messages are discriminated on ``role`` and content blocks on ``type``. Field
names are snake_case in Python and camelCase on the wire, so session logs
written by other agent runtimes (``toolCallId``, ``isError``) load directly.
"""

from __future__ import annotations

import time
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic.alias_generators import to_camel


def _now_ms() -> int:
    return int(time.time() * 1000)


class _WireModel(BaseModel):
    # Ignore extra fields that other runtimes may add to their logs
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


# -- Content blocks -----------------------------------------------------------


class TextContent(_WireModel):
    """A block of plain text."""

    type: Literal["text"] = "text"
    text: str


class ImageContent(_WireModel):
    """An inline image (base64 data)."""

    type: Literal["image"] = "image"
    data: str
    mime_type: str


class ThinkingContent(_WireModel):
    """Model reasoning emitted alongside an assistant reply."""

    type: Literal["thinking"] = "thinking"
    thinking: str


class ToolCallContent(_WireModel):
    """A tool invocation requested by the assistant."""

    type: Literal["toolCall"] = "toolCall"
    id: str
    name: str
    arguments: dict[str, Any] = Field(default_factory=dict)


ContentBlock = Annotated[
    TextContent | ImageContent | ThinkingContent | ToolCallContent,
    Field(discriminator="type"),
]


# -- Messages -----------------------------------------------------------------


class Usage(_WireModel):
    """Token usage information from an LLM call."""

    input: int = 0
    output: int = 0
    cache_read: int = 0
    cache_write: int = 0
    total: int = 0


class UserMessage(_WireModel):
    """A user turn. Content is either a bare string or a list of blocks."""

    role: Literal["user"] = "user"
    content: str | list[ContentBlock]
    timestamp: int = Field(default_factory=_now_ms)


class AssistantMessage(_WireModel):
    """An assistant turn, with the model metadata that produced it."""

    role: Literal["assistant"] = "assistant"
    content: list[ContentBlock] = Field(default_factory=list)
    api: str | None = None
    provider: str | None = None
    model: str | None = None
    usage: Usage | None = None
    stop_reason: str | None = None
    timestamp: int = Field(default_factory=_now_ms)


class ToolResultMessage(_WireModel):
    """Output of a single tool call, paired to the call by ``tool_call_id``."""

    role: Literal["toolResult"] = "toolResult"
    tool_call_id: str
    tool_name: str
    content: list[ContentBlock] = Field(default_factory=list)
    is_error: bool = False
    timestamp: int = Field(default_factory=_now_ms)


Message = Annotated[
    UserMessage | AssistantMessage | ToolResultMessage,
    Field(discriminator="role"),
]

_MESSAGE_ADAPTER: TypeAdapter[Message] = TypeAdapter(Message)


def parse_message(data: Any) -> Message:
    """Validate a raw dict (camelCase or snake_case keys) into a Message."""
    if isinstance(data, (UserMessage, AssistantMessage, ToolResultMessage)):
        return data
    return _MESSAGE_ADAPTER.validate_python(data)


def text_blocks(content: str | list[Any]) -> list[str]:
    """Return the text of every text block in ``content``.

    Non-text blocks contribute nothing. A bare string counts as one block.
    """
    if isinstance(content, str):
        return [content]
    texts: list[str] = []
    for block in content:
        if isinstance(block, TextContent):
            texts.append(block.text)
    return texts
