from __future__ import annotations

from typing import Optional, Union

from ..core.enums import Role
from ..core.exceptions import AuthorizationError


def require_admin(current_role: Optional[Union[Role, str]]) -> None:
    """Single authorization check for every admin-only operation.

    Must be called before any read or write the operation performs.
    """

    try:
        role = Role(current_role) if current_role is not None else None
    except ValueError:
        role = None

    if role != Role.ADMIN:
        raise AuthorizationError("You are not allowed to perform this action")
