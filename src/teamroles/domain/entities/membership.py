"""Membership entity - user on team holding one role."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class Membership:
    """Membership - user holds role_id on team. (user_id, team_id) is unique."""

    id: UUID | None
    user_id: UUID
    team_id: UUID
    role_id: UUID | None
    created_at: datetime | None = None
