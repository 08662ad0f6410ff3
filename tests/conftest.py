"""Shared pytest configuration and fixtures."""

import json
import uuid

import pytest


@pytest.fixture
def write_session(tmp_path):
    """Write a JSON-lines session file and return its path.

    Messages are chained into a single branch; pass ``entries`` for full
    control over the tree.
    """

    def _write(messages=None, entries=None, header=True, name="session.jsonl"):
        lines = []
        if header:
            lines.append(
                {
                    "type": "session",
                    "version": 3,
                    "id": str(uuid.uuid4()),
                    "timestamp": "2026-01-01T00:00:00.000Z",
                    "cwd": str(tmp_path),
                }
            )
        if entries is not None:
            lines.extend(entries)
        else:
            parent_id = None
            for i, message in enumerate(messages or []):
                entry_id = f"e{i}"
                lines.append(
                    {
                        "type": "message",
                        "id": entry_id,
                        "parentId": parent_id,
                        "timestamp": "2026-01-01T00:00:00.000Z",
                        "message": message,
                    }
                )
                parent_id = entry_id
        path = tmp_path / name
        path.write_text("\n".join(json.dumps(line) for line in lines) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def clean_config_env(monkeypatch):
    """Remove the config path env var so tests don't pick up local settings."""
    monkeypatch.delenv("CONTEXT_BUDGET_CONFIG", raising=False)
    monkeypatch.setattr("context_budget.config.config.load_dotenv", lambda *a, **kw: False)
    return monkeypatch
