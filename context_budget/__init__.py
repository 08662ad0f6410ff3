__version__ = "0.1.0"

from .config import AppConfig, load_config
from .exceptions import (
    ConfigError,
    ContextBudgetError,
    SessionCorruptError,
    SessionError,
    SessionNotFoundError,
    SkillFrontmatterError,
)
from .memory import (
    estimate_messages_tokens,
    resolve_proactive_compaction_threshold,
    resolve_threshold,
    should_run_proactive_compaction,
)
from .pruning import (
    DEFAULT_CONTEXT_PRUNING_SETTINGS,
    ContextPruningSettings,
    HardClearSettings,
    PruningContext,
    SoftTrimSettings,
    ToolPruningSettings,
    prune_context_messages,
    resolve_context_pruning_settings,
)
from .sessions import SessionManager
from .types import (
    AssistantMessage,
    ImageContent,
    Message,
    TextContent,
    ToolResultMessage,
    UserMessage,
)

__all__ = [
    # Config
    "AppConfig",
    "load_config",
    # Errors
    "ConfigError",
    "ContextBudgetError",
    "SessionCorruptError",
    "SessionError",
    "SessionNotFoundError",
    "SkillFrontmatterError",
    # Compaction
    "estimate_messages_tokens",
    "resolve_proactive_compaction_threshold",
    "resolve_threshold",
    "should_run_proactive_compaction",
    # Pruning
    "DEFAULT_CONTEXT_PRUNING_SETTINGS",
    "ContextPruningSettings",
    "HardClearSettings",
    "PruningContext",
    "SoftTrimSettings",
    "ToolPruningSettings",
    "prune_context_messages",
    "resolve_context_pruning_settings",
    # Sessions
    "SessionManager",
    # Types
    "AssistantMessage",
    "ImageContent",
    "Message",
    "TextContent",
    "ToolResultMessage",
    "UserMessage",
]
