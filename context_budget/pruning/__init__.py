"""Context pruning - soft-trim and hard-clear of old tool results."""

from .eligibility import collect_prunable_indexes, find_assistant_cutoff_index
from .eviction import evict_tool_result, hard_clear_tool_result, soft_trim_tool_result
from .pruner import PruningContext, prune_context_messages
from .settings import (
    DEFAULT_CONTEXT_PRUNING_SETTINGS,
    ContextPruningSettings,
    HardClearSettings,
    SoftTrimSettings,
    ToolPruningSettings,
    resolve_context_pruning_settings,
)
from .tools import make_tool_prunable_predicate

__all__ = [
    "DEFAULT_CONTEXT_PRUNING_SETTINGS",
    "ContextPruningSettings",
    "HardClearSettings",
    "PruningContext",
    "SoftTrimSettings",
    "ToolPruningSettings",
    "collect_prunable_indexes",
    "evict_tool_result",
    "find_assistant_cutoff_index",
    "hard_clear_tool_result",
    "make_tool_prunable_predicate",
    "prune_context_messages",
    "resolve_context_pruning_settings",
    "soft_trim_tool_result",
]
