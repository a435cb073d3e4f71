from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import AuditAction


@dataclass(frozen=True)
class AuditLog:
    """Append-only record of an admin mutation.

    ``audit_id`` is None until the store has accepted the entry.
    """

    audit_id: Optional[str]
    actor_id: Optional[str]
    target_employee_id: Optional[str]
    action: AuditAction
    created_at: datetime
    report_id: Optional[str] = None
    before_data: Optional[dict] = None
    after_data: Optional[dict] = None

    def to_dict(self) -> dict:
        return {
            "id": self.audit_id,
            "actor_id": self.actor_id,
            "target_employee_id": self.target_employee_id,
            "report_id": self.report_id,
            "action": self.action.value,
            "before_data": self.before_data,
            "after_data": self.after_data,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
