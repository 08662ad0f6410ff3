from .messages import (
    AssistantMessage,
    ContentBlock,
    ImageContent,
    Message,
    TextContent,
    ThinkingContent,
    ToolCallContent,
    ToolResultMessage,
    Usage,
    UserMessage,
    parse_message,
    text_blocks,
)

__all__ = [
    "AssistantMessage",
    "ContentBlock",
    "ImageContent",
    "Message",
    "TextContent",
    "ThinkingContent",
    "ToolCallContent",
    "ToolResultMessage",
    "Usage",
    "UserMessage",
    "parse_message",
    "text_blocks",
]
