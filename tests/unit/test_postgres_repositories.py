"""Unit tests for PostgreSQL repositories against a mocked connection."""

from datetime import UTC, datetime
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest

from nftroles.domain.entities import RoleAssignment, RoleAssignmentKey, RoleEvent
from nftroles.domain.value_objects import RoleEventType
from nftroles.infrastructure.persistence.postgres.role_assignment_repository import (
    PostgresRoleAssignmentRepository,
)
from nftroles.infrastructure.persistence.postgres.role_event_repository import (
    PostgresRoleEventRepository,
)

from tests.conftest import ALICE, GRANTOR, ROLE, TOKEN

KEY = RoleAssignmentKey.create(ROLE, GRANTOR, ALICE, TOKEN, 2**200)
CREATED = datetime(2026, 1, 1, tzinfo=UTC)


def _conn(fetchone=None, fetchall=None, rowcount=0):
    cursor = MagicMock()
    cursor.fetchone = AsyncMock(return_value=fetchone)
    cursor.fetchall = AsyncMock(return_value=fetchall or [])
    cursor.rowcount = rowcount
    conn = MagicMock()
    conn.execute = AsyncMock(return_value=cursor)
    return conn


@pytest.mark.asyncio
async def test_get_maps_numeric_and_bytea() -> None:
    """NUMERIC comes back as Decimal, BYTEA as memoryview."""
    conn = _conn(fetchone=(Decimal(1234), memoryview(b"\x01"), CREATED))
    repo = PostgresRoleAssignmentRepository(conn)

    assignment = await repo.get(KEY)

    assert assignment.expiration_date == 1234
    assert assignment.data == b"\x01"
    assert assignment.key == KEY
    _, params = conn.execute.call_args.args
    assert params == (ROLE.value, GRANTOR, ALICE, TOKEN, 2**200)


@pytest.mark.asyncio
async def test_get_absent() -> None:
    repo = PostgresRoleAssignmentRepository(_conn(fetchone=None))
    assert await repo.get(KEY) is None


@pytest.mark.asyncio
async def test_upsert_overwrites_on_conflict() -> None:
    conn = _conn()
    repo = PostgresRoleAssignmentRepository(conn)

    await repo.upsert(RoleAssignment(key=KEY, expiration_date=5, data=b"d", granted_at=CREATED))

    sql, params = conn.execute.call_args.args
    assert "ON CONFLICT (role, grantor, grantee, token_address, token_id) DO UPDATE" in sql
    assert params[-3:] == (5, b"d", CREATED)


@pytest.mark.asyncio
async def test_delete_reports_row_existence() -> None:
    assert await PostgresRoleAssignmentRepository(_conn(rowcount=1)).delete(KEY) is True
    assert await PostgresRoleAssignmentRepository(_conn(rowcount=0)).delete(KEY) is False


@pytest.mark.asyncio
async def test_latest_grantee_round_trip_params() -> None:
    conn = _conn(fetchone=(ALICE,))
    repo = PostgresRoleAssignmentRepository(conn)

    await repo.set_latest_grantee(KEY)
    _, params = conn.execute.call_args.args
    assert params == (ROLE.value, GRANTOR, TOKEN, 2**200, ALICE)

    assert await repo.get_latest_grantee(ROLE, GRANTOR, TOKEN, 2**200) == ALICE


@pytest.mark.asyncio
async def test_event_append_assigns_id() -> None:
    conn = _conn(fetchone=(42,))
    repo = PostgresRoleEventRepository(conn)

    event = await repo.append(RoleEvent.revoked(KEY, CREATED))

    assert event.id == 42
    _, params = conn.execute.call_args.args
    assert params[0] == "RoleRevoked"
    assert params[6:8] == (None, None)


@pytest.mark.asyncio
async def test_event_list_filters_and_cursor() -> None:
    row = (
        7, "RoleGranted", memoryview(ROLE.value), TOKEN, Decimal(3), GRANTOR, ALICE,
        Decimal(99), memoryview(b""), CREATED,
    )
    conn = _conn(fetchall=[row, (8,) + row[1:]])
    repo = PostgresRoleEventRepository(conn)

    events, next_cursor = await repo.list(after_id=6, limit=1, role=ROLE, token_id=3)

    sql, params = conn.execute.call_args.args
    assert "WHERE id > %s AND role = %s AND token_id = %s" in sql
    assert params == (6, ROLE.value, 3, 2)
    [event] = events
    assert event.event_type == RoleEventType.GRANTED
    assert event.token_id == 3
    assert event.expiration_date == 99
    assert next_cursor == 7
