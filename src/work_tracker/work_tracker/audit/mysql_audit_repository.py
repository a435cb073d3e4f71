from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, dump_json, fetchall, load_json, new_id
from .model import AuditLog
from .repository import AuditRepository


class MySQLAuditRepository(AuditRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def append(self, entry: AuditLog) -> str:
        audit_id = new_id()
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO audit_logs(
                    audit_id, actor_id, target_employee_id, report_id, action, before_data, after_data, created_at
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    audit_id,
                    entry.actor_id,
                    entry.target_employee_id,
                    entry.report_id,
                    entry.action.value,
                    dump_json(entry.before_data),
                    dump_json(entry.after_data),
                    entry.created_at,
                ),
            )
        return audit_id

    def list_recent(self, *, limit: int = 100) -> Sequence[dict]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT a.audit_id, a.actor_id, actor.full_name AS actor_name,
                       a.target_employee_id, target.full_name AS target_name,
                       a.report_id, a.action, a.before_data, a.after_data, a.created_at
                FROM audit_logs a
                LEFT JOIN profiles actor ON actor.profile_id = a.actor_id
                LEFT JOIN profiles target ON target.profile_id = a.target_employee_id
                ORDER BY a.created_at DESC
                LIMIT %s
                """,
                (int(limit),),
            )
            out: list[dict] = []
            for r in fetchall(cur):
                out.append(
                    {
                        "id": r["audit_id"],
                        "actor_id": r.get("actor_id"),
                        "actor_name": r.get("actor_name") or "-",
                        "target_employee_id": r.get("target_employee_id"),
                        "target_name": r.get("target_name") or "-",
                        "report_id": r.get("report_id"),
                        "action": r["action"],
                        "before_data": load_json(r.get("before_data")),
                        "after_data": load_json(r.get("after_data")),
                        "created_at": r["created_at"].strftime("%Y-%m-%d %H:%M"),
                    }
                )
            return out
