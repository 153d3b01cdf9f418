"""Domain entities."""

from teamroles.domain.entities.membership import Membership
from teamroles.domain.entities.role import Role

__all__ = [
    "Membership",
    "Role",
]
