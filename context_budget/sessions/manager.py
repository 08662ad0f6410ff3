"""Read-only access to JSON-lines session logs and their branches."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ..exceptions import SessionCorruptError, SessionNotFoundError
from ..types.messages import Message
from .types import MessageEntry, SessionEntry, SessionHeader, parse_entry

logger = logging.getLogger(__name__)


class SessionManager:
    """A loaded session file.

    Use ``SessionManager.open(path)`` to read a session, then ``get_branch()``
    to reconstruct the active conversation branch.
    """

    def __init__(
        self,
        session_file: str,
        header: SessionHeader | None,
        entries: list[SessionEntry],
    ):
        self.session_file = session_file
        self.header = header
        self._entries = entries
        self._by_id = {entry.id: entry for entry in entries}

    @classmethod
    def open(cls, path: str | os.PathLike) -> SessionManager:
        """Load a session file.

        Entries without an ``id`` (older linear logs) get a synthetic id and
        are chained to the previous entry.

        Raises:
            SessionNotFoundError: If the file does not exist
            SessionCorruptError: If a line is not valid JSON or not a valid entry
        """
        session_path = Path(path)
        session_file = str(session_path)
        try:
            raw = session_path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise SessionNotFoundError(
                f"Session file not found: {session_file}", session_file
            ) from e

        header: SessionHeader | None = None
        entries: list[SessionEntry] = []
        previous_id: str | None = None
        for line_no, line in enumerate(raw.splitlines(), start=1):
            if not line.strip():
                continue
            try:
                data = json.loads(line)
            except json.JSONDecodeError as e:
                raise SessionCorruptError(
                    f"Invalid JSON at line {line_no}: {e}", session_file, line_no
                ) from e
            if not isinstance(data, dict):
                raise SessionCorruptError(
                    f"Expected an object at line {line_no}", session_file, line_no
                )

            try:
                if data.get("type") == "session":
                    header = SessionHeader.model_validate(data)
                    continue
                data = _with_linear_ids(data, line_no, previous_id)
                entry = parse_entry(data)
            except ValidationError as e:
                raise SessionCorruptError(
                    f"Invalid entry at line {line_no}: {e}", session_file, line_no
                ) from e

            entries.append(entry)
            previous_id = entry.id

        logger.debug("Loaded session %s with %d entries", session_file, len(entries))
        return cls(session_file, header, entries)

    @property
    def entries(self) -> list[SessionEntry]:
        """All entries in file order."""
        return list(self._entries)

    def get_entry(self, entry_id: str) -> SessionEntry | None:
        return self._by_id.get(entry_id)

    def get_leaf_id(self) -> str | None:
        """Id of the most recently appended entry."""
        if not self._entries:
            return None
        return self._entries[-1].id

    def get_branch(self, from_id: str | None = None) -> list[SessionEntry]:
        """Walk parent links from a leaf back to the root.

        Args:
            from_id: Entry to start from. Defaults to the current leaf.

        Returns:
            Entries on the branch, root first

        Raises:
            SessionCorruptError: If the parent links form a cycle
        """
        entry_id = from_id if from_id is not None else self.get_leaf_id()
        branch: list[SessionEntry] = []
        seen: set[str] = set()
        while entry_id is not None:
            if entry_id in seen:
                raise SessionCorruptError(
                    f"Cycle in session branch at entry {entry_id}", self.session_file
                )
            seen.add(entry_id)
            entry = self._by_id.get(entry_id)
            if entry is None:
                break
            branch.append(entry)
            entry_id = entry.parent_id
        branch.reverse()
        return branch

    def get_branch_messages(self, from_id: str | None = None) -> list[Message]:
        """Messages carried by the ``message`` entries of a branch."""
        return [
            entry.message for entry in self.get_branch(from_id) if isinstance(entry, MessageEntry)
        ]


def _with_linear_ids(data: dict[str, Any], line_no: int, previous_id: str | None) -> dict[str, Any]:
    if data.get("id"):
        return data
    return {**data, "id": f"line-{line_no}", "parentId": previous_id}
