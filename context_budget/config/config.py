"""Agent configuration tree and loader.

Every level is optional. Leaf values are kept raw (``Any``) so that a bad
value never fails loading; the resolvers that read them decide what is
valid and fall back to defaults otherwise.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from ..defaults import CONFIG_PATH_ENV_VAR
from ..exceptions import ConfigError

logger = logging.getLogger(__name__)


class _ConfigModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class CompactionConfig(_ConfigModel):
    """Compaction options (``agents.defaults.compaction``)."""

    proactive_threshold: Any = None


class SoftTrimConfig(_ConfigModel):
    """Raw soft-trim options."""

    max_chars: Any = None
    head_chars: Any = None
    tail_chars: Any = None


class HardClearConfig(_ConfigModel):
    """Raw hard-clear options."""

    enabled: Any = None
    placeholder: Any = None


class ToolPruningConfig(_ConfigModel):
    """Raw allow/deny glob lists for prunable tools."""

    allow: Any = None
    deny: Any = None


class ContextPruningConfig(_ConfigModel):
    """Context pruning options (``agents.defaults.contextPruning``)."""

    keep_last_assistants: Any = None
    soft_trim_ratio: Any = None
    hard_clear_ratio: Any = None
    min_prunable_tool_chars: Any = None
    tools: ToolPruningConfig | None = None
    soft_trim: SoftTrimConfig | None = None
    hard_clear: HardClearConfig | None = None


class AgentDefaultsConfig(_ConfigModel):
    compaction: CompactionConfig | None = None
    context_pruning: ContextPruningConfig | None = None


class AgentsConfig(_ConfigModel):
    defaults: AgentDefaultsConfig | None = None


class AppConfig(_ConfigModel):
    """Root of the configuration tree."""

    agents: AgentsConfig | None = None

    @classmethod
    def from_dict(cls, data: Any) -> AppConfig:
        """Create AppConfig from a dictionary (camelCase or snake_case keys)."""
        if isinstance(data, AppConfig):
            return data
        if data is None:
            return cls()
        if isinstance(data, dict):
            return cls.model_validate(data)
        raise TypeError(f"Cannot create AppConfig from {type(data)}")


def load_config(path: str | os.PathLike | None = None) -> AppConfig:
    """Load configuration from a JSON file.

    Args:
        path: Config file path. Defaults to the ``CONTEXT_BUDGET_CONFIG``
            environment variable (``.env`` files are honoured).

    Returns:
        The parsed AppConfig, or an empty one when no path is configured

    Raises:
        ConfigError: If the file is missing, is not valid JSON, or has an
            invalid structure
    """
    if path is None:
        load_dotenv()
        path = os.getenv(CONFIG_PATH_ENV_VAR)
    if not path:
        logger.debug("No config path configured, using defaults")
        return AppConfig()

    config_path = Path(path)
    try:
        raw = config_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read config file {config_path}: {e}", str(config_path)) from e

    try:
        data = json.loads(raw) if raw.strip() else {}
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"Invalid JSON in config file {config_path}: {e}", str(config_path)
        ) from e

    try:
        return AppConfig.from_dict(data)
    except (ValidationError, TypeError) as e:
        raise ConfigError(
            f"Invalid config structure in {config_path}: {e}", str(config_path)
        ) from e
