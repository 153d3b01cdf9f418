"""JSON representations of domain entities."""

from teamroles.domain.entities import Membership, Role


def role_to_dict(role: Role) -> dict:
    return {"id": str(role.id), "name": role.name}


def membership_to_dict(membership: Membership) -> dict:
    return {
        "id": str(membership.id),
        "userId": str(membership.user_id),
        "teamId": str(membership.team_id),
        "roleId": str(membership.role_id),
        "createdAt": (
            membership.created_at.isoformat() if membership.created_at else None
        ),
    }
