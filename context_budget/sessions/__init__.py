"""Session store - JSON-lines session logs and branch reconstruction."""

from .manager import SessionManager
from .types import (
    CompactionEntry,
    CustomEntry,
    MessageEntry,
    ModelChangeEntry,
    SessionEntry,
    SessionHeader,
    ThinkingLevelChangeEntry,
    parse_entry,
)

__all__ = [
    "CompactionEntry",
    "CustomEntry",
    "MessageEntry",
    "ModelChangeEntry",
    "SessionEntry",
    "SessionHeader",
    "SessionManager",
    "ThinkingLevelChangeEntry",
    "parse_entry",
]
