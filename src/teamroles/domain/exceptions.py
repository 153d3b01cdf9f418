"""Domain exceptions."""


class TeamRolesError(Exception):
    """Base exception for teamroles."""

    pass


class InvalidArgument(TeamRolesError):
    """Required input is missing or blank."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Invalid '{field}' argument")
        self.field = field


class ResourceExists(TeamRolesError):
    """Resource would violate a uniqueness invariant."""

    def __init__(self, resource: str) -> None:
        super().__init__(f"{resource} already exists")
        self.resource = resource


class ResourceNotFound(TeamRolesError):
    """Referenced resource was not found."""

    def __init__(self, resource: str, identifier: object) -> None:
        super().__init__(f"{resource} {identifier} not found")
        self.resource = resource
        self.identifier = identifier


class ConfigurationError(TeamRolesError):
    """Deployment is misconfigured (e.g. default role missing)."""

    pass
