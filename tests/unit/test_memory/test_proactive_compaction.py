"""Unit tests for context_budget.memory.proactive_compaction module."""

import pytest

from context_budget.config import AppConfig
from context_budget.defaults import DEFAULT_PROACTIVE_THRESHOLD
from context_budget.memory.proactive_compaction import (
    estimate_session_tokens,
    resolve_proactive_compaction_threshold,
    should_run_proactive_compaction,
)

# -- Helpers ----------------------------------------------------------------


def long_content(tokens: int) -> str:
    """Generate content that estimates to exactly `tokens` tokens (4 chars/token)."""
    return "x" * (tokens * 4)


def user(text: str) -> dict:
    return {"role": "user", "content": text, "timestamp": 1}


def assistant(text: str) -> dict:
    return {
        "role": "assistant",
        "content": [{"type": "text", "text": text}],
        "model": "fake",
        "timestamp": 1,
    }


def config_with(**compaction) -> AppConfig:
    return AppConfig.from_dict({"agents": {"defaults": {"compaction": compaction}}})


# -- resolve_proactive_compaction_threshold -----------------------------------


class TestResolveProactiveCompactionThreshold:
    """Tests for resolve_proactive_compaction_threshold function."""

    def test_default_when_no_config(self):
        assert resolve_proactive_compaction_threshold() == DEFAULT_PROACTIVE_THRESHOLD
        assert resolve_proactive_compaction_threshold(None) == DEFAULT_PROACTIVE_THRESHOLD

    def test_default_is_three_quarters(self):
        assert DEFAULT_PROACTIVE_THRESHOLD == 0.75

    def test_default_when_nested_fields_missing(self):
        assert resolve_proactive_compaction_threshold(AppConfig()) == DEFAULT_PROACTIVE_THRESHOLD
        assert (
            resolve_proactive_compaction_threshold(AppConfig.from_dict({"agents": {}}))
            == DEFAULT_PROACTIVE_THRESHOLD
        )
        assert (
            resolve_proactive_compaction_threshold(
                AppConfig.from_dict({"agents": {"defaults": {}}})
            )
            == DEFAULT_PROACTIVE_THRESHOLD
        )

    def test_default_when_compaction_config_empty(self):
        assert resolve_proactive_compaction_threshold(config_with()) == DEFAULT_PROACTIVE_THRESHOLD

    def test_configured_value_within_range(self):
        assert resolve_proactive_compaction_threshold(config_with(proactiveThreshold=0.8)) == 0.8

    def test_configured_value_at_range_boundaries(self):
        assert resolve_proactive_compaction_threshold(config_with(proactiveThreshold=0.5)) == 0.5
        assert resolve_proactive_compaction_threshold(config_with(proactiveThreshold=0.95)) == 0.95

    def test_zero_is_returned_verbatim(self):
        assert resolve_proactive_compaction_threshold(config_with(proactiveThreshold=0)) == 0
        assert resolve_proactive_compaction_threshold(config_with(proactiveThreshold=0.0)) == 0

    def test_default_below_range(self):
        result = resolve_proactive_compaction_threshold(config_with(proactiveThreshold=0.3))
        assert result == DEFAULT_PROACTIVE_THRESHOLD

    def test_default_above_range(self):
        result = resolve_proactive_compaction_threshold(config_with(proactiveThreshold=0.99))
        assert result == DEFAULT_PROACTIVE_THRESHOLD

    def test_default_for_non_number_values(self):
        for value in ("high", "0.8", None, [0.8], {"v": 0.8}):
            result = resolve_proactive_compaction_threshold(config_with(proactiveThreshold=value))
            assert result == DEFAULT_PROACTIVE_THRESHOLD

    def test_booleans_are_not_numbers(self):
        assert (
            resolve_proactive_compaction_threshold(config_with(proactiveThreshold=False))
            == DEFAULT_PROACTIVE_THRESHOLD
        )
        assert (
            resolve_proactive_compaction_threshold(config_with(proactiveThreshold=True))
            == DEFAULT_PROACTIVE_THRESHOLD
        )

    def test_accepts_plain_dict_and_snake_case(self):
        cfg = {"agents": {"defaults": {"compaction": {"proactive_threshold": 0.6}}}}
        assert resolve_proactive_compaction_threshold(cfg) == 0.6

    def test_default_for_malformed_config_tree(self):
        for cfg in (
            {"agents": 3},
            {"agents": {"defaults": {"compaction": "fast"}}},
            {"agents": {"defaults": ["compaction"]}},
            "not a config",
        ):
            assert resolve_proactive_compaction_threshold(cfg) == DEFAULT_PROACTIVE_THRESHOLD


# -- estimate_session_tokens --------------------------------------------------


class TestEstimateSessionTokens:
    """Tests for estimate_session_tokens function."""

    def test_sums_branch_messages(self, write_session):
        path = write_session([user(long_content(10)), assistant(long_content(5))])
        result = estimate_session_tokens(path)
        assert result.ok is True
        assert result.tokens == 15

    def test_missing_file_is_an_error(self, tmp_path):
        result = estimate_session_tokens(tmp_path / "missing.jsonl")
        assert result.ok is False
        assert "SessionNotFoundError" in result.error

    def test_estimator_failure_is_an_error(self, write_session):
        path = write_session([user("hi")])

        def broken(messages):
            raise RuntimeError("estimator exploded")

        result = estimate_session_tokens(path, broken)
        assert result.ok is False
        assert "estimator exploded" in result.error

    def test_fractional_estimate_rounds_up(self, write_session):
        path = write_session([user("hi")])
        result = estimate_session_tokens(path, lambda m: 12.5)
        assert result.ok is True
        assert result.tokens == 13

    def test_non_numeric_estimate_is_an_error(self, write_session):
        path = write_session([user("hi")])
        result = estimate_session_tokens(path, lambda m: "many")
        assert result.ok is False
        assert result.tokens is None

    def test_ignores_non_message_entries(self, write_session):
        entries = [
            {"type": "message", "id": "a", "parentId": None, "message": user(long_content(4))},
            {"type": "model_change", "id": "b", "parentId": "a", "provider": "x", "modelId": "y"},
            {
                "type": "compaction",
                "id": "c",
                "parentId": "b",
                "summary": long_content(1000),
                "firstKeptEntryId": "a",
            },
        ]
        result = estimate_session_tokens(write_session(entries=entries))
        assert result.tokens == 4


# -- should_run_proactive_compaction ------------------------------------------


class TestShouldRunProactiveCompaction:
    """Tests for should_run_proactive_compaction function."""

    @pytest.mark.asyncio
    async def test_true_when_estimate_exceeds_budget(self, write_session):
        path = write_session([user(long_content(800))])
        assert await should_run_proactive_compaction(path, 1000, 0.75) is True

    @pytest.mark.asyncio
    async def test_false_when_under_budget(self, write_session):
        path = write_session([user(long_content(700))])
        assert await should_run_proactive_compaction(path, 1000, 0.75) is False

    @pytest.mark.asyncio
    async def test_false_when_exactly_at_budget(self, write_session):
        path = write_session([user(long_content(750))])
        assert await should_run_proactive_compaction(path, 1000, 0.75) is False

    @pytest.mark.asyncio
    async def test_false_for_missing_session(self, tmp_path):
        assert await should_run_proactive_compaction(tmp_path / "nope.jsonl", 1000, 0.75) is False

    @pytest.mark.asyncio
    async def test_false_for_corrupt_session(self, tmp_path):
        path = tmp_path / "corrupt.jsonl"
        path.write_text('{"type": "session"}\n{not json\n', encoding="utf-8")
        assert await should_run_proactive_compaction(path, 10, 0.5) is False

    @pytest.mark.asyncio
    async def test_false_when_estimator_raises(self, write_session):
        path = write_session([user(long_content(800))])

        def broken(messages):
            raise ValueError("boom")

        assert await should_run_proactive_compaction(path, 1000, 0.5, estimate=broken) is False

    @pytest.mark.asyncio
    async def test_fractional_estimate_returns_bool(self, write_session):
        path = write_session([user("hi")])
        assert await should_run_proactive_compaction(path, 10, 0.5, estimate=lambda m: 12.5) is True
        assert await should_run_proactive_compaction(path, 10, 0.5, estimate=lambda m: 4.5) is False

    @pytest.mark.asyncio
    async def test_false_when_estimator_returns_non_number(self, write_session):
        path = write_session([user("hi")])
        result = await should_run_proactive_compaction(path, 10, 0.5, estimate=lambda m: None)
        assert result is False

    @pytest.mark.asyncio
    async def test_uses_custom_estimator(self, write_session):
        path = write_session([user("a"), assistant("b")])
        assert await should_run_proactive_compaction(path, 100, 0.5, estimate=lambda m: 51) is True
        assert await should_run_proactive_compaction(path, 100, 0.5, estimate=lambda m: 50) is False

    @pytest.mark.asyncio
    async def test_only_active_branch_counts(self, write_session):
        # "big" sits on an abandoned branch; the leaf "small2" descends from "root"
        entries = [
            {"type": "message", "id": "root", "parentId": None, "message": user("hi")},
            {
                "type": "message",
                "id": "big",
                "parentId": "root",
                "message": assistant(long_content(5000)),
            },
            {"type": "message", "id": "small2", "parentId": "root", "message": assistant("ok")},
        ]
        path = write_session(entries=entries)
        assert await should_run_proactive_compaction(path, 1000, 0.75) is False

    @pytest.mark.asyncio
    async def test_does_not_modify_session_file(self, write_session):
        path = write_session([user(long_content(800))])
        before = path.read_text(encoding="utf-8")
        await should_run_proactive_compaction(path, 1000, 0.75)
        assert path.read_text(encoding="utf-8") == before
