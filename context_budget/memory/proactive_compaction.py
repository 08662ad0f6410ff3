"""Proactive compaction gate.

Decides, before a turn starts, whether the session branch is already large
enough that a full history-summarization pass should run first. A session
that cannot be read never blocks a turn: the gate answers False.
"""

from __future__ import annotations

import logging
import math
import os
from collections.abc import Callable, Sequence
from typing import Any

from pydantic import BaseModel, ValidationError

from ..config.config import AppConfig
from ..defaults import (
    DEFAULT_PROACTIVE_THRESHOLD,
    PROACTIVE_THRESHOLD_MAX,
    PROACTIVE_THRESHOLD_MIN,
)
from ..sessions.manager import SessionManager
from .budget import resolve_threshold
from .tokens import estimate_messages_tokens

logger = logging.getLogger(__name__)

Estimator = Callable[[Sequence[Any]], int]


class EstimateResult(BaseModel):
    """Outcome of estimating a session's size: a token count or an error."""

    tokens: int | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def estimate_session_tokens(
    session_file: str | os.PathLike,
    estimate: Estimator = estimate_messages_tokens,
) -> EstimateResult:
    """Estimate the token count of a session's active branch.

    Opens the session, reconstructs its branch, and runs ``estimate`` over
    the messages of its ``message`` entries. Fractional estimates are
    rounded up. Failures are returned, not raised.
    """
    try:
        session = SessionManager.open(session_file)
        branch_messages = session.get_branch_messages()
        return EstimateResult(tokens=math.ceil(estimate(branch_messages)))
    except Exception as err:
        return EstimateResult(error=f"{type(err).__name__}: {err}")


async def should_run_proactive_compaction(
    session_file: str | os.PathLike,
    context_window_tokens: int,
    threshold: float,
    estimate: Estimator = estimate_messages_tokens,
) -> bool:
    """Check whether the session should be compacted before the next turn.

    Args:
        session_file: Path to the session log
        context_window_tokens: Model context window size in tokens
        threshold: Fraction of the window above which compaction runs
        estimate: Token estimator applied to the branch messages

    Returns:
        True if the estimated branch size exceeds ``context_window_tokens *
        threshold``. False otherwise, including when the session cannot be
        read or estimated.
    """
    result = estimate_session_tokens(session_file, estimate)
    if not result.ok or result.tokens is None:
        logger.debug("Skipping proactive compaction, session unreadable: %s", result.error)
        return False

    budget = resolve_threshold(context_window_tokens, threshold)
    should_compact = result.tokens > budget
    if should_compact:
        logger.debug(
            "Proactive compaction needed: %d estimated tokens > %d budget", result.tokens, budget
        )
    return should_compact


def resolve_proactive_compaction_threshold(cfg: AppConfig | dict | None = None) -> float:
    """Read ``agents.defaults.compaction.proactiveThreshold`` from config.

    A literal 0 is returned as-is. Any other number is accepted only within
    ``[0.5, 0.95]``. Anything else, including a malformed config tree,
    resolves to ``DEFAULT_PROACTIVE_THRESHOLD``.
    """
    if cfg is not None and not isinstance(cfg, AppConfig):
        try:
            cfg = AppConfig.from_dict(cfg)
        except (ValidationError, TypeError) as e:
            logger.debug("Ignoring malformed compaction config: %s", e)
            return DEFAULT_PROACTIVE_THRESHOLD

    value: Any = None
    if cfg is not None and cfg.agents and cfg.agents.defaults and cfg.agents.defaults.compaction:
        value = cfg.agents.defaults.compaction.proactive_threshold

    # bool is an int subclass and must not count as a number here
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return DEFAULT_PROACTIVE_THRESHOLD
    if value == 0:
        return 0
    if PROACTIVE_THRESHOLD_MIN <= value <= PROACTIVE_THRESHOLD_MAX:
        return value
    return DEFAULT_PROACTIVE_THRESHOLD
