from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, new_id
from .model import Credentials, Profile
from .repository import ProfileRepository

_COLUMNS = "profile_id, email, full_name, phone, role, is_active, created_at"


def _to_profile(r: dict) -> Profile:
    return Profile(
        profile_id=str(r["profile_id"]),
        full_name=r["full_name"],
        phone=r.get("phone"),
        role=Role(r["role"]),
        is_active=bool(r["is_active"]),
        created_at=r["created_at"],
        email=r.get("email"),
    )


class MySQLProfileRepository(ProfileRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_profiles(self, *, role: Optional[Role] = None, active_only: bool = False) -> Sequence[Profile]:
        clauses = ["1=1"]
        params: list[object] = []

        if role is not None:
            clauses.append("role=%s")
            params.append(role.value)
        if active_only:
            clauses.append("is_active=1")

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM profiles
                WHERE {where}
                ORDER BY created_at DESC
                """,
                tuple(params),
            )
            return [_to_profile(r) for r in fetchall(cur)]

    def get_by_id(self, profile_id: str) -> Optional[Profile]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM profiles WHERE profile_id=%s", (str(profile_id),))
            r = fetchone(cur)
            return _to_profile(r) if r else None

    def get_by_email(self, email: str) -> Optional[Profile]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM profiles WHERE email=%s", (email,))
            r = fetchone(cur)
            return _to_profile(r) if r else None

    def get_credentials(self, email: str) -> Optional[Credentials]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT profile_id, password_hash FROM profiles WHERE email=%s", (email,))
            r = fetchone(cur)
            if not r:
                return None
            return Credentials(profile_id=str(r["profile_id"]), password_hash=r["password_hash"])

    def create(
        self,
        *,
        email: str,
        password_hash: str,
        full_name: str,
        phone: Optional[str],
        role: Role,
    ) -> Profile:
        profile_id = new_id()
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO profiles(profile_id, email, password_hash, full_name, phone, role, is_active)
                VALUES(%s,%s,%s,%s,%s,%s,1)
                """,
                (profile_id, email, password_hash, full_name, phone, role.value),
            )
            cur.execute(f"SELECT {_COLUMNS} FROM profiles WHERE profile_id=%s", (profile_id,))
            return _to_profile(fetchone(cur))

    def update(
        self,
        profile_id: str,
        *,
        full_name: str,
        phone: Optional[str],
        role: Role,
        is_active: bool,
    ) -> Optional[Profile]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE profiles
                SET full_name=%s, phone=%s, role=%s, is_active=%s
                WHERE profile_id=%s
                """,
                (full_name, phone, role.value, 1 if is_active else 0, str(profile_id)),
            )
            cur.execute(f"SELECT {_COLUMNS} FROM profiles WHERE profile_id=%s", (str(profile_id),))
            r = fetchone(cur)
            return _to_profile(r) if r else None

    def delete_by_id(self, profile_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM profiles WHERE profile_id=%s", (str(profile_id),))
            return cur.rowcount > 0
