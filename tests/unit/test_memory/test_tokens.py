"""Unit tests for context_budget.memory.tokens module."""

import json
import math

from context_budget.memory.tokens import (
    IMAGE_CHAR_ESTIMATE,
    estimate_content_chars,
    estimate_message_tokens,
    estimate_messages_tokens,
    estimate_tokens,
    text_size,
)
from context_budget.types import (
    AssistantMessage,
    ImageContent,
    TextContent,
    ThinkingContent,
    ToolCallContent,
    ToolResultMessage,
    UserMessage,
)


class TestEstimateTokens:
    """Tests for estimate_tokens function."""

    def test_empty_string(self):
        assert estimate_tokens("") == 0

    def test_single_character(self):
        assert estimate_tokens("a") == 1

    def test_ceil_division(self):
        # 'hello world' = 11 chars -> ceil(11/4) = 3
        assert estimate_tokens("hello world") == 3

    def test_exact_divisible_by_4(self):
        assert estimate_tokens("abcd") == 1
        assert estimate_tokens("abcdefgh") == 2


class TestEstimateContentChars:
    """Tests for estimate_content_chars function."""

    def test_string_content(self):
        assert estimate_content_chars("hello") == 5

    def test_none_content(self):
        assert estimate_content_chars(None) == 0

    def test_text_blocks_are_summed(self):
        content = [TextContent(text="abc"), TextContent(text="de")]
        assert estimate_content_chars(content) == 5

    def test_image_block_has_fixed_cost(self):
        content = [ImageContent(data="AAAA", mime_type="image/png")]
        assert estimate_content_chars(content) == IMAGE_CHAR_ESTIMATE

    def test_thinking_and_tool_call_blocks(self):
        content = [
            ThinkingContent(thinking="hmm"),
            ToolCallContent(id="c1", name="read", arguments={"path": "a"}),
        ]
        expected = 3 + len("read") + len(json.dumps({"path": "a"}))
        assert estimate_content_chars(content) == expected

    def test_object_content_via_json(self):
        assert estimate_content_chars({"key": "value"}) == len(json.dumps({"key": "value"}))


class TestEstimateMessageTokens:
    """Tests for estimate_message_tokens function."""

    def test_user_string_content(self):
        assert estimate_message_tokens(UserMessage(content="hello world")) == 3

    def test_tool_result_content(self):
        msg = ToolResultMessage(
            tool_call_id="t1", tool_name="read_file", content=[TextContent(text="x" * 40)]
        )
        assert estimate_message_tokens(msg) == 10

    def test_plain_dict_message(self):
        msg = {"role": "assistant", "content": {"key": "value"}}
        expected = math.ceil(len(json.dumps({"key": "value"})) / 4)
        assert estimate_message_tokens(msg) == expected


class TestEstimateMessagesTokens:
    """Tests for estimate_messages_tokens function."""

    def test_empty_list(self):
        assert estimate_messages_tokens([]) == 0

    def test_sums_tokens(self):
        messages = [
            UserMessage(content="hello world"),  # 3 tokens
            AssistantMessage(content=[TextContent(text="hi")]),  # 1 token
        ]
        assert estimate_messages_tokens(messages) == 3 + 1

    def test_grows_with_transcript(self):
        messages = [UserMessage(content="abcd")]
        before = estimate_messages_tokens(messages)
        messages.append(AssistantMessage(content=[TextContent(text="efgh")]))
        assert estimate_messages_tokens(messages) > before


class TestTextSize:
    """Tests for text_size function."""

    def test_counts_characters(self):
        assert text_size("") == 0
        assert text_size("hello") == 5
        assert text_size("héllo\n") == 6
