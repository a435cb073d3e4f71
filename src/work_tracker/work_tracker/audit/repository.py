from __future__ import annotations

from typing import Protocol, Sequence

from .model import AuditLog


class AuditRepository(Protocol):
    def append(self, entry: AuditLog) -> str:
        """Store a new entry and return its id. Entries are never updated."""

        raise NotImplementedError

    def list_recent(self, *, limit: int = 100) -> Sequence[dict]:
        """Return UI rows (joined with actor/target names), newest first."""

        raise NotImplementedError
