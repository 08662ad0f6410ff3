"""Settings for the context pruning engine.

Two eviction tiers, both expressed as ratios of the model context window:
- Soft trim: keep the head and tail of an oversized tool result
- Hard clear: replace the whole tool result with a placeholder
"""

from __future__ import annotations

import logging
import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..config.config import AppConfig, ContextPruningConfig
from ..defaults import (
    DEFAULT_HARD_CLEAR_PLACEHOLDER,
    DEFAULT_HARD_CLEAR_RATIO,
    DEFAULT_KEEP_LAST_ASSISTANTS,
    DEFAULT_MIN_PRUNABLE_TOOL_CHARS,
    DEFAULT_SOFT_TRIM_HEAD_CHARS,
    DEFAULT_SOFT_TRIM_MAX_CHARS,
    DEFAULT_SOFT_TRIM_RATIO,
    DEFAULT_SOFT_TRIM_TAIL_CHARS,
)

logger = logging.getLogger(__name__)


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class SoftTrimSettings(_FrozenModel):
    """How much of an oversized tool result survives a soft trim."""

    max_chars: int = Field(default=DEFAULT_SOFT_TRIM_MAX_CHARS, ge=0)
    head_chars: int = Field(default=DEFAULT_SOFT_TRIM_HEAD_CHARS, ge=0)
    tail_chars: int = Field(default=DEFAULT_SOFT_TRIM_TAIL_CHARS, ge=0)


class HardClearSettings(_FrozenModel):
    """Whether hard clear is allowed and what replaces the cleared text."""

    enabled: bool = True
    placeholder: str = DEFAULT_HARD_CLEAR_PLACEHOLDER


class ToolPruningSettings(_FrozenModel):
    """Glob patterns selecting which tools may be pruned.

    An empty ``allow`` list allows every tool. ``deny`` wins over ``allow``.
    """

    allow: tuple[str, ...] = ()
    deny: tuple[str, ...] = ()


class ContextPruningSettings(_FrozenModel):
    """Resolved pruning configuration, fixed for one invocation."""

    keep_last_assistants: int = Field(default=DEFAULT_KEEP_LAST_ASSISTANTS, ge=0)
    soft_trim_ratio: float = Field(default=DEFAULT_SOFT_TRIM_RATIO, ge=0)
    hard_clear_ratio: float = Field(default=DEFAULT_HARD_CLEAR_RATIO, ge=0)
    min_prunable_tool_chars: int = Field(default=DEFAULT_MIN_PRUNABLE_TOOL_CHARS, ge=0)
    tools: ToolPruningSettings = Field(default_factory=ToolPruningSettings)
    soft_trim: SoftTrimSettings = Field(default_factory=SoftTrimSettings)
    hard_clear: HardClearSettings = Field(default_factory=HardClearSettings)


DEFAULT_CONTEXT_PRUNING_SETTINGS = ContextPruningSettings()


# -- Resolution from raw config -----------------------------------------------


def _as_number(value: Any) -> float | None:
    # bool is an int subclass but never a valid setting value
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if not math.isfinite(value):
        return None
    return value


def _as_count(value: Any, default: int) -> int:
    number = _as_number(value)
    if number is None:
        return default
    return max(0, math.floor(number))


def _as_ratio(value: Any, default: float) -> float:
    number = _as_number(value)
    if number is None:
        return default
    return min(1.0, max(0.0, float(number)))


def _as_patterns(value: Any) -> tuple[str, ...]:
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, (list, tuple)):
        return ()
    return tuple(p.strip() for p in value if isinstance(p, str) and p.strip())


def resolve_context_pruning_settings(cfg: AppConfig | None = None) -> ContextPruningSettings:
    """Merge ``agents.defaults.contextPruning`` onto the default settings.

    Counts are floored and clamped to be non-negative, ratios are clamped to
    ``[0, 1]``, and values of the wrong type are ignored.
    """
    raw: ContextPruningConfig | None = None
    if cfg is not None and cfg.agents and cfg.agents.defaults:
        raw = cfg.agents.defaults.context_pruning
    if raw is None:
        return DEFAULT_CONTEXT_PRUNING_SETTINGS

    defaults = DEFAULT_CONTEXT_PRUNING_SETTINGS

    soft_trim = defaults.soft_trim
    if raw.soft_trim is not None:
        soft_trim = SoftTrimSettings(
            max_chars=_as_count(raw.soft_trim.max_chars, soft_trim.max_chars),
            head_chars=_as_count(raw.soft_trim.head_chars, soft_trim.head_chars),
            tail_chars=_as_count(raw.soft_trim.tail_chars, soft_trim.tail_chars),
        )

    hard_clear = defaults.hard_clear
    if raw.hard_clear is not None:
        enabled = raw.hard_clear.enabled
        placeholder = raw.hard_clear.placeholder
        hard_clear = HardClearSettings(
            enabled=enabled if isinstance(enabled, bool) else hard_clear.enabled,
            placeholder=(
                placeholder.strip()
                if isinstance(placeholder, str) and placeholder.strip()
                else hard_clear.placeholder
            ),
        )

    tools = defaults.tools
    if raw.tools is not None:
        tools = ToolPruningSettings(
            allow=_as_patterns(raw.tools.allow),
            deny=_as_patterns(raw.tools.deny),
        )

    settings = ContextPruningSettings(
        keep_last_assistants=_as_count(raw.keep_last_assistants, defaults.keep_last_assistants),
        soft_trim_ratio=_as_ratio(raw.soft_trim_ratio, defaults.soft_trim_ratio),
        hard_clear_ratio=_as_ratio(raw.hard_clear_ratio, defaults.hard_clear_ratio),
        min_prunable_tool_chars=_as_count(
            raw.min_prunable_tool_chars, defaults.min_prunable_tool_chars
        ),
        tools=tools,
        soft_trim=soft_trim,
        hard_clear=hard_clear,
    )
    logger.debug("Resolved context pruning settings: %s", settings)
    return settings
