"""Unit of Work port - transactional boundary."""

from collections.abc import AsyncIterator
from typing import Protocol

from nftroles.application.ports.repositories.role_assignment_repository import (
    RoleAssignmentRepository,
)
from nftroles.application.ports.repositories.role_event_repository import (
    RoleEventRepository,
)


class UnitOfWork(Protocol):
    """Unit of Work - manages transaction and repository access."""

    @property
    def assignments(self) -> RoleAssignmentRepository: ...

    @property
    def events(self) -> RoleEventRepository: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    """Factory for creating UnitOfWork instances."""

    async def __call__(self) -> AsyncIterator[UnitOfWork]: ...
