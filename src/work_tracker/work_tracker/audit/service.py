from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Callable, Optional, Sequence

from ..common.guards import require_admin
from ..core.constants import DEFAULT_AUDIT_LIST_LIMIT, DEFAULT_AUDIT_RETRY_ATTEMPTS
from ..core.enums import AuditAction, Role
from .model import AuditLog
from .repository import AuditRepository

logger = logging.getLogger(__name__)


class AuditService:
    """Best-effort audit trail.

    The primary mutation has already been committed when ``record`` runs, so a
    failing append (store error or anything else the repository raises) is
    retried and logged; it never propagates.
    """

    def __init__(
        self,
        audit: AuditRepository,
        *,
        retry_attempts: int = DEFAULT_AUDIT_RETRY_ATTEMPTS,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self._audit = audit
        self._attempts = max(1, int(retry_attempts))
        self._clock = clock

    def record(
        self,
        *,
        actor_id: Optional[str],
        target_employee_id: Optional[str],
        action: AuditAction,
        report_id: Optional[str] = None,
        before_data: Optional[dict] = None,
        after_data: Optional[dict] = None,
    ) -> AuditLog:
        entry = AuditLog(
            audit_id=None,
            actor_id=actor_id,
            target_employee_id=target_employee_id,
            report_id=report_id,
            action=action,
            before_data=before_data,
            after_data=after_data,
            created_at=self._clock(),
        )

        for attempt in range(1, self._attempts + 1):
            try:
                audit_id = self._audit.append(entry)
                return replace(entry, audit_id=audit_id)
            except Exception as e:
                logger.warning(
                    "Audit append failed (%s, attempt %d/%d): %s", action.value, attempt, self._attempts, e
                )

        logger.error(
            "Audit entry dropped: action=%s actor=%s target=%s report=%s",
            action.value,
            actor_id,
            target_employee_id,
            report_id,
        )
        return entry

    def list_recent(self, *, current_role: Role, limit: int = DEFAULT_AUDIT_LIST_LIMIT) -> Sequence[dict]:
        require_admin(current_role)
        return self._audit.list_recent(limit=int(limit))
