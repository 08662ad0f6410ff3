"""Entry types of a JSON-lines session log.

A session file starts with a ``session`` header line. Each following line is
an entry linked to its parent by ``parentId``, so a file holds a tree of
conversation branches.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ..types.messages import Message


class _EntryModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")


class SessionHeader(_EntryModel):
    """First line of a session file."""

    type: Literal["session"] = "session"
    id: str | None = None
    version: int | None = None
    cwd: str | None = None
    timestamp: str | int | None = None


class SessionEntry(_EntryModel):
    """A node in the session tree. Unknown entry kinds load as this base type."""

    type: str
    id: str
    parent_id: str | None = None
    timestamp: str | int | None = None


class MessageEntry(SessionEntry):
    """Wraps one conversational message."""

    type: Literal["message"] = "message"
    message: Message


class CompactionEntry(SessionEntry):
    """Marks a history summarization pass."""

    type: Literal["compaction"] = "compaction"
    summary: str = ""
    first_kept_entry_id: str | None = None
    tokens_before: int | None = None


class ModelChangeEntry(SessionEntry):
    type: Literal["model_change"] = "model_change"
    provider: str | None = None
    model_id: str | None = None


class ThinkingLevelChangeEntry(SessionEntry):
    type: Literal["thinking_level_change"] = "thinking_level_change"
    thinking_level: str | None = None


class CustomEntry(SessionEntry):
    """Extension-defined data carried in the session tree."""

    type: Literal["custom"] = "custom"
    custom_type: str | None = None
    data: Any = None


ENTRY_TYPES: dict[str, type[SessionEntry]] = {
    "message": MessageEntry,
    "compaction": CompactionEntry,
    "model_change": ModelChangeEntry,
    "thinking_level_change": ThinkingLevelChangeEntry,
    "custom": CustomEntry,
}


def parse_entry(data: dict[str, Any]) -> SessionEntry:
    """Validate a raw entry dict into its typed entry model."""
    entry_cls = ENTRY_TYPES.get(data.get("type", ""), SessionEntry)
    return entry_cls.model_validate(data)
