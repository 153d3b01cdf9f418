"""Repository ports."""

from teamroles.application.ports.repositories.membership_repository import (
    MembershipRepository,
)
from teamroles.application.ports.repositories.role_repository import RoleRepository

__all__ = [
    "MembershipRepository",
    "RoleRepository",
]
