from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class Profile:
    """Domain entity: one profile per login identity.

    Plain data object; the password hash is never carried here.
    """

    profile_id: str
    full_name: str
    phone: Optional[str]
    role: Role
    is_active: bool
    created_at: datetime
    email: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.profile_id,
            "full_name": self.full_name,
            "phone": self.phone,
            "role": self.role.value,
            "is_active": self.is_active,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "email": self.email,
        }


@dataclass(frozen=True)
class Credentials:
    profile_id: str
    password_hash: str
