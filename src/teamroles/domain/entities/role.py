"""Role entity."""

from dataclasses import dataclass
from uuid import UUID


@dataclass
class Role:
    """Named role assignable to a membership. id is None until stored."""

    id: UUID | None
    name: str
