"""Memory module - context budget sizing and proactive compaction."""

from .budget import resolve_threshold
from .proactive_compaction import (
    EstimateResult,
    estimate_session_tokens,
    resolve_proactive_compaction_threshold,
    should_run_proactive_compaction,
)
from .tokens import (
    estimate_content_chars,
    estimate_message_tokens,
    estimate_messages_tokens,
    estimate_tokens,
    text_size,
)

__all__ = [
    "EstimateResult",
    "estimate_content_chars",
    "estimate_message_tokens",
    "estimate_messages_tokens",
    "estimate_session_tokens",
    "estimate_tokens",
    "resolve_proactive_compaction_threshold",
    "resolve_threshold",
    "should_run_proactive_compaction",
    "text_size",
]
