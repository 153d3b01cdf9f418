"""Pytest fixtures for teamroles tests."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import replace
from datetime import UTC, datetime
from uuid import UUID, uuid4

import pytest

from teamroles.application.use_cases.membership.membership_registry import (
    MembershipRegistry,
)
from teamroles.application.use_cases.role.role_catalog import RoleCatalog
from teamroles.domain.entities import Membership, Role
from teamroles.domain.exceptions import ResourceExists


# --- Fake repositories ---


class FakeRoleRepository:
    """In-memory role repository. Enforces unique names like the DB index."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, Role] = {}
        self._by_name: dict[str, Role] = {}

    async def get_by_id(self, role_id: UUID) -> Role | None:
        return self._by_id.get(role_id)

    async def get_by_name(self, name: str) -> Role | None:
        return self._by_name.get(name)

    async def list_all(self) -> list[Role]:
        return list(self._by_id.values())

    async def create(self, role: Role) -> Role:
        if role.name in self._by_name:
            raise ResourceExists("Role")
        stored = replace(role, id=uuid4())
        self.add_role(stored)
        return replace(stored)

    def add_role(self, role: Role) -> None:
        """Helper to add role for tests."""
        self._by_id[role.id] = role
        self._by_name[role.name] = role


class FakeMembershipRepository:
    """In-memory membership repository. Enforces unique (user, team) pairs."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, Membership] = {}

    async def get_by_user_and_team(
        self, user_id: UUID, team_id: UUID
    ) -> Membership | None:
        for m in self._by_id.values():
            if m.user_id == user_id and m.team_id == team_id:
                return m
        return None

    async def list_by_role(self, role_id: UUID) -> list[Membership]:
        return [m for m in self._by_id.values() if m.role_id == role_id]

    async def create(self, membership: Membership) -> Membership:
        if await self.get_by_user_and_team(membership.user_id, membership.team_id):
            raise ResourceExists("Membership")
        stored = replace(membership, id=uuid4(), created_at=datetime.now(UTC))
        self._by_id[stored.id] = stored
        return replace(stored)


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self) -> None:
        self.roles = FakeRoleRepository()
        self.memberships = FakeMembershipRepository()
        self.commits = 0

    async def commit(self) -> None:
        self.commits += 1

    async def rollback(self) -> None:
        pass


def make_uow_factory(uow: FakeUnitOfWork):
    """Factory yielding the same UoW on every call so state survives between calls."""

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        yield uow

    return _factory


# --- Fixtures ---


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """Fresh in-memory UnitOfWork for each test."""
    return FakeUnitOfWork()


@pytest.fixture
def uow_factory(fake_uow: FakeUnitOfWork):
    """Factory returning async context manager with the test's FakeUnitOfWork."""
    return make_uow_factory(fake_uow)


@pytest.fixture
def developer_role(fake_uow: FakeUnitOfWork) -> Role:
    """Seeded default role."""
    role = Role(id=uuid4(), name="Developer")
    fake_uow.roles.add_role(role)
    return role


@pytest.fixture
def role_catalog(uow_factory) -> RoleCatalog:
    return RoleCatalog(unit_of_work_factory=uow_factory, default_role_name="Developer")


@pytest.fixture
def membership_registry(uow_factory, role_catalog: RoleCatalog) -> MembershipRegistry:
    return MembershipRegistry(unit_of_work_factory=uow_factory, role_catalog=role_catalog)
