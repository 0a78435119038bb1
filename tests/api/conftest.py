"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

from nftroles.application.use_cases.event.list_role_events import ListRoleEventsUseCase
from nftroles.application.use_cases.role.get_role_assignment import GetRoleAssignmentUseCase
from nftroles.application.use_cases.role.grant_role import GrantRoleUseCase
from nftroles.application.use_cases.role.has_role import HasRoleUseCase
from nftroles.application.use_cases.role.revoke_role import RevokeRoleUseCase
from nftroles.application.use_cases.role.role_data import RoleDataUseCase
from nftroles.application.use_cases.role.role_expiration_date import (
    RoleExpirationDateUseCase,
)
from nftroles.interfaces.api.app import create_app
from nftroles.interfaces.api.middleware.auth import AuthMiddleware
from nftroles.interfaces.api.resources.events import EventsResource
from nftroles.interfaces.api.resources.health import HealthResource
from nftroles.interfaces.api.resources.roles import (
    RoleAssignmentResource,
    RoleGrantsResource,
    RoleRevokeResource,
)


@pytest.fixture
def app(uow_factory, clock):
    """Falcon ASGI app wired to in-memory fakes; X-Account names the caller."""
    return create_app(
        role_grants_resource=RoleGrantsResource(
            GrantRoleUseCase(unit_of_work_factory=uow_factory, clock=clock)
        ),
        role_revoke_resource=RoleRevokeResource(
            RevokeRoleUseCase(unit_of_work_factory=uow_factory, clock=clock)
        ),
        role_assignment_resource=RoleAssignmentResource(
            GetRoleAssignmentUseCase(unit_of_work_factory=uow_factory, clock=clock),
            HasRoleUseCase(unit_of_work_factory=uow_factory, clock=clock),
            RoleDataUseCase(unit_of_work_factory=uow_factory),
            RoleExpirationDateUseCase(unit_of_work_factory=uow_factory),
        ),
        events_resource=EventsResource(ListRoleEventsUseCase(unit_of_work_factory=uow_factory)),
        health_resource=HealthResource(),
        middleware=[AuthMiddleware(None, trust_account_header=True)],
    )


@pytest.fixture
def client(app):
    """Falcon ASGI test client."""
    return TestClient(app)
