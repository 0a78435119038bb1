"""Pytest fixtures for registry tests."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import pytest

from nftroles.domain.entities import RoleAssignment, RoleAssignmentKey, RoleEvent
from nftroles.domain.value_objects import RoleId

NOW = 1_700_000_000

ROLE = RoleId.from_name("UNIQUE_ROLE")
GRANTOR = "0x00000000000000000000000000000000000000a1"
ALICE = "0x00000000000000000000000000000000000000b1"
BOB = "0x00000000000000000000000000000000000000b2"
TOKEN = "0x000000000000000000000000000000000000c0de"


# --- Fake repositories ---


class FakeRoleAssignmentRepository:
    """In-memory role assignment repository."""

    def __init__(self) -> None:
        self._by_key: dict[RoleAssignmentKey, RoleAssignment] = {}
        self._latest: dict[tuple, str] = {}

    async def get(self, key: RoleAssignmentKey) -> RoleAssignment | None:
        return self._by_key.get(key)

    async def upsert(self, assignment: RoleAssignment) -> None:
        self._by_key[assignment.key] = assignment

    async def delete(self, key: RoleAssignmentKey) -> bool:
        return self._by_key.pop(key, None) is not None

    async def get_latest_grantee(
        self, role: RoleId, grantor: str, token_address: str, token_id: int
    ) -> str | None:
        return self._latest.get((role, grantor, token_address, token_id))

    async def set_latest_grantee(self, key: RoleAssignmentKey) -> None:
        self._latest[(key.role, key.grantor, key.token_address, key.token_id)] = key.grantee

    def __len__(self) -> int:
        return len(self._by_key)


class FakeRoleEventRepository:
    """In-memory append-only event log."""

    def __init__(self) -> None:
        self._events: list[RoleEvent] = []

    @property
    def all(self) -> list[RoleEvent]:
        return list(self._events)

    async def append(self, event: RoleEvent) -> RoleEvent:
        event.id = len(self._events) + 1
        self._events.append(event)
        return event

    async def list(
        self,
        *,
        after_id: int | None = None,
        limit: int = 100,
        role: RoleId | None = None,
        token_address: str | None = None,
        token_id: int | None = None,
    ) -> tuple[list[RoleEvent], int | None]:
        items = [
            e
            for e in self._events
            if (after_id is None or e.id > after_id)
            and (role is None or e.role == role)
            and (token_address is None or e.token_address == token_address)
            and (token_id is None or e.token_id == token_id)
        ]
        page = items[: limit + 1]
        next_cursor = page[limit - 1].id if len(page) > limit else None
        return page[:limit], next_cursor


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories.

    begin() snapshots repository state; rollback() restores it.
    """

    def __init__(self) -> None:
        self.assignments = FakeRoleAssignmentRepository()
        self.events = FakeRoleEventRepository()
        self._snapshot: tuple | None = None

    def begin(self) -> None:
        self._snapshot = (
            dict(self.assignments._by_key),
            dict(self.assignments._latest),
            list(self.events._events),
        )

    async def commit(self) -> None:
        self._snapshot = None

    async def rollback(self) -> None:
        if self._snapshot is None:
            return
        by_key, latest, events = self._snapshot
        self.assignments._by_key = by_key
        self.assignments._latest = latest
        self.events._events = events
        self._snapshot = None


class FakeClock:
    """Registry clock under test control."""

    def __init__(self, now: int = NOW) -> None:
        self.current = now

    def now(self) -> int:
        return self.current

    def advance(self, seconds: int) -> None:
        self.current += seconds


# --- Fixtures ---


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """Fresh in-memory UnitOfWork for each test."""
    return FakeUnitOfWork()


@pytest.fixture
def uow_factory(fake_uow: FakeUnitOfWork):
    """Factory yielding the same FakeUnitOfWork; commits on success, rolls back on error."""

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        fake_uow.begin()
        try:
            yield fake_uow
            await fake_uow.commit()
        except BaseException:
            await fake_uow.rollback()
            raise

    return _factory


@pytest.fixture
def clock() -> FakeClock:
    """Clock fixed at NOW; advance() moves it forward."""
    return FakeClock()
