"""Fixtures for API tests."""

from uuid import uuid4

import pytest
from falcon.testing import TestClient

from teamroles.application.use_cases.membership.membership_registry import (
    MembershipRegistry,
)
from teamroles.application.use_cases.role.role_catalog import RoleCatalog
from teamroles.domain.entities import Role
from teamroles.interfaces.api.app import create_app
from teamroles.interfaces.api.resources.health import HealthResource
from teamroles.interfaces.api.resources.memberships import (
    MembershipSearchResource,
    MembershipsResource,
)
from teamroles.interfaces.api.resources.roles import (
    DefaultRoleResource,
    RoleResource,
    RoleSearchResource,
    RolesResource,
)

from tests.conftest import FakeUnitOfWork, make_uow_factory


@pytest.fixture
def api_uow() -> FakeUnitOfWork:
    """UoW shared by all requests in a test, seeded with the default roles."""
    uow = FakeUnitOfWork()
    for name in ("Developer", "Product Owner", "Tester"):
        uow.roles.add_role(Role(id=uuid4(), name=name))
    return uow


def _build_app(uow: FakeUnitOfWork, default_role_name: str = "Developer"):
    uow_factory = make_uow_factory(uow)
    role_catalog = RoleCatalog(
        unit_of_work_factory=uow_factory, default_role_name=default_role_name
    )
    registry = MembershipRegistry(
        unit_of_work_factory=uow_factory, role_catalog=role_catalog
    )
    return create_app(
        roles_resource=RolesResource(role_catalog),
        role_resource=RoleResource(role_catalog),
        default_role_resource=DefaultRoleResource(role_catalog),
        role_search_resource=RoleSearchResource(registry),
        memberships_resource=MembershipsResource(registry),
        membership_search_resource=MembershipSearchResource(registry),
        health_resource=HealthResource(),
    )


@pytest.fixture
def app(api_uow: FakeUnitOfWork):
    """Falcon ASGI app with API resources for testing."""
    return _build_app(api_uow)


@pytest.fixture
def client(app) -> TestClient:
    """Falcon ASGI test client."""
    return TestClient(app)


@pytest.fixture
def misconfigured_client() -> TestClient:
    """Client whose configured default role does not exist."""
    return TestClient(_build_app(FakeUnitOfWork(), default_role_name="Missing"))


@pytest.fixture
def developer_id(api_uow: FakeUnitOfWork) -> str:
    return str(api_uow.roles._by_name["Developer"].id)
