from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import Role
from .model import Credentials, Profile


class ProfileRepository(Protocol):
    """Repository interface for profiles.

    Services depend on this interface, never on a concrete database.
    """

    def list_profiles(self, *, role: Optional[Role] = None, active_only: bool = False) -> Sequence[Profile]:
        """Newest first."""

        raise NotImplementedError

    def get_by_id(self, profile_id: str) -> Optional[Profile]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[Profile]:
        raise NotImplementedError

    def get_credentials(self, email: str) -> Optional[Credentials]:
        raise NotImplementedError

    def create(
        self,
        *,
        email: str,
        password_hash: str,
        full_name: str,
        phone: Optional[str],
        role: Role,
    ) -> Profile:
        raise NotImplementedError

    def update(
        self,
        profile_id: str,
        *,
        full_name: str,
        phone: Optional[str],
        role: Role,
        is_active: bool,
    ) -> Optional[Profile]:
        raise NotImplementedError

    def delete_by_id(self, profile_id: str) -> bool:
        """Delete the profile; its reports go with it (FK cascade)."""

        raise NotImplementedError
