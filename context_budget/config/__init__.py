"""Configuration tree and loader."""

from .config import (
    AgentDefaultsConfig,
    AgentsConfig,
    AppConfig,
    CompactionConfig,
    ContextPruningConfig,
    HardClearConfig,
    SoftTrimConfig,
    ToolPruningConfig,
    load_config,
)

__all__ = [
    "AgentDefaultsConfig",
    "AgentsConfig",
    "AppConfig",
    "CompactionConfig",
    "ContextPruningConfig",
    "HardClearConfig",
    "SoftTrimConfig",
    "ToolPruningConfig",
    "load_config",
]
