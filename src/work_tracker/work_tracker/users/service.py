from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from werkzeug.security import check_password_hash, generate_password_hash

from ..audit.service import AuditService
from ..common.guards import require_admin
from ..common.validators import clean_optional, require_min_length, require_non_empty
from ..core.constants import MIN_PASSWORD_LENGTH
from ..core.enums import AuditAction, Role
from ..core.exceptions import AuthenticationError, NotFoundError, ValidationError
from .model import Profile
from .repository import ProfileRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionUser:
    """What we store into Flask session after login."""

    profile_id: str
    full_name: str
    role: Role


class AuthService:
    """Use case: authenticate user (login)."""

    def __init__(self, profiles: ProfileRepository):
        self._profiles = profiles

    def authenticate(self, email: str, password: str) -> SessionUser:
        email = (email or "").strip().lower()
        if not email or not password:
            raise AuthenticationError("Email and password are required")

        creds = self._profiles.get_credentials(email)
        profile = self._profiles.get_by_id(creds.profile_id) if creds else None
        if not creds or not profile or not profile.is_active:
            raise AuthenticationError("Invalid email or password")

        try:
            ok = check_password_hash(creds.password_hash, password)
        except ValueError:
            # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
            ok = False

        if not ok:
            raise AuthenticationError("Invalid email or password")

        return SessionUser(profile_id=profile.profile_id, full_name=profile.full_name, role=profile.role)


class ProfileService:
    """Use case: manage employee profiles (admin)."""

    def __init__(self, profiles: ProfileRepository, audit: AuditService):
        self._profiles = profiles
        self._audit = audit

    @staticmethod
    def _parse_role(value) -> Role:
        try:
            return Role(value)
        except ValueError:
            raise ValidationError("Invalid role")

    def create_employee(
        self,
        *,
        current_role: Role,
        actor_id: str,
        email: str,
        password: str,
        full_name: str,
        phone: Optional[str] = None,
        role: Role | str = Role.EMPLOYEE,
    ) -> Profile:
        require_admin(current_role)

        email = require_non_empty(email, "Email").lower()
        if "@" not in email:
            raise ValidationError("Invalid email")
        require_min_length(password, "Password", MIN_PASSWORD_LENGTH)
        full_name = require_non_empty(full_name, "Full name")
        phone = clean_optional(phone)
        role = self._parse_role(role)

        if self._profiles.get_by_email(email):
            raise ValidationError("Email is already registered")

        profile = self._profiles.create(
            email=email,
            password_hash=generate_password_hash(password),
            full_name=full_name,
            phone=phone,
            role=role,
        )
        logger.info("Profile %s created by %s", profile.profile_id, actor_id)

        self._audit.record(
            actor_id=actor_id,
            target_employee_id=profile.profile_id,
            action=AuditAction.CREATE_EMPLOYEE,
            after_data={"full_name": full_name, "phone": phone, "role": role.value},
        )
        return profile

    def update_employee(
        self,
        *,
        current_role: Role,
        actor_id: str,
        employee_id: str,
        full_name: str,
        phone: Optional[str],
        role: Role | str,
        is_active: bool,
    ) -> Profile:
        require_admin(current_role)

        before = self._profiles.get_by_id(employee_id)
        if not before:
            raise NotFoundError("Employee not found")

        full_name = require_non_empty(full_name, "Full name")
        role = self._parse_role(role)

        after = self._profiles.update(
            employee_id,
            full_name=full_name,
            phone=clean_optional(phone),
            role=role,
            is_active=bool(is_active),
        )
        if not after:
            raise NotFoundError("Employee not found")
        logger.info("Profile %s updated by %s", employee_id, actor_id)

        self._audit.record(
            actor_id=actor_id,
            target_employee_id=employee_id,
            action=AuditAction.UPDATE_EMPLOYEE,
            before_data=before.to_dict(),
            after_data=after.to_dict(),
        )
        return after

    def delete_employee(self, *, current_role: Role, actor_id: str, employee_id: str) -> None:
        require_admin(current_role)

        if str(employee_id) == str(actor_id):
            raise ValidationError("You cannot delete your own account")

        profile = self._profiles.get_by_id(employee_id)
        if not profile:
            raise NotFoundError("Employee not found")

        # Written first: the profile row (and its reports) are gone afterwards.
        self._audit.record(
            actor_id=actor_id,
            target_employee_id=employee_id,
            action=AuditAction.DELETE_EMPLOYEE,
            before_data=profile.to_dict(),
        )

        if not self._profiles.delete_by_id(employee_id):
            raise NotFoundError("Employee not found")
        logger.info("Profile %s deleted by %s", employee_id, actor_id)

    def list_employees(self, *, current_role: Role) -> Sequence[Profile]:
        require_admin(current_role)
        return self._profiles.list_profiles()

    def get_employee(self, *, current_role: Role, employee_id: str) -> Profile:
        require_admin(current_role)
        profile = self._profiles.get_by_id(employee_id)
        if not profile:
            raise NotFoundError("Employee not found")
        return profile

    def get_profile(self, profile_id: str) -> Optional[Profile]:
        return self._profiles.get_by_id(profile_id)
