"""Unit tests for domain exceptions."""

from uuid import uuid4

import pytest

from teamroles.domain.exceptions import (
    ConfigurationError,
    InvalidArgument,
    ResourceExists,
    ResourceNotFound,
    TeamRolesError,
)


@pytest.mark.parametrize(
    "exc_type",
    [InvalidArgument, ResourceExists, ResourceNotFound, ConfigurationError],
)
def test_inherits_team_roles_error(exc_type) -> None:
    """Every domain exception is a TeamRolesError."""
    assert issubclass(exc_type, TeamRolesError)


def test_invalid_argument_message() -> None:
    err = InvalidArgument("role")
    assert str(err) == "Invalid 'role' argument"
    assert err.field == "role"


def test_resource_exists_message() -> None:
    assert str(ResourceExists("Membership")) == "Membership already exists"


def test_resource_not_found_message_and_attributes() -> None:
    role_id = uuid4()
    err = ResourceNotFound("Role", role_id)
    assert str(err) == f"Role {role_id} not found"
    assert err.resource == "Role"
    assert err.identifier == role_id


def test_raise_not_found_catchable_as_team_roles_error() -> None:
    """ResourceNotFound can be caught as TeamRolesError."""
    with pytest.raises(TeamRolesError):
        raise ResourceNotFound("Membership", "u/t")
