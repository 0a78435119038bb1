"""Application entry point and composition root."""

import argparse
import logging
from functools import partial

from nftroles import __version__
from nftroles.application.use_cases.event.list_role_events import ListRoleEventsUseCase
from nftroles.application.use_cases.role.get_role_assignment import GetRoleAssignmentUseCase
from nftroles.application.use_cases.role.grant_role import GrantRoleUseCase
from nftroles.application.use_cases.role.has_role import HasRoleUseCase
from nftroles.application.use_cases.role.revoke_role import RevokeRoleUseCase
from nftroles.application.use_cases.role.role_data import RoleDataUseCase
from nftroles.application.use_cases.role.role_expiration_date import (
    RoleExpirationDateUseCase,
)
from nftroles.config import Settings, get_settings
from nftroles.infrastructure.auth.keycloak_provider import KeycloakProvider
from nftroles.infrastructure.clock.system_clock import SystemClock
from nftroles.infrastructure.persistence.postgres.connection import (
    check_connection,
    create_pool,
)
from nftroles.infrastructure.persistence.postgres.unit_of_work import (
    create_uow_factory,
)
from nftroles.interfaces.api.app import create_app
from nftroles.interfaces.api.middleware.auth import AuthMiddleware
from nftroles.interfaces.api.middleware.cors import CORSMiddleware
from nftroles.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware
from nftroles.interfaces.api.resources.events import EventsResource
from nftroles.interfaces.api.resources.health import HealthResource
from nftroles.interfaces.api.resources.roles import (
    RoleAssignmentResource,
    RoleGrantsResource,
    RoleRevokeResource,
)

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    level = "DEBUG" if settings.debug else settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_nftroles_app():
    """Composition root - build Falcon app with all dependencies."""
    settings = get_settings()
    configure_logging(settings)
    pool = create_pool(
        settings.database_url,
        min_size=settings.db_pool_min_size,
        max_size=settings.db_pool_max_size,
    )
    uow_factory = create_uow_factory(pool)
    clock = SystemClock()

    keycloak = (
        KeycloakProvider(
            server_url=settings.keycloak_url,
            realm=settings.keycloak_realm,
            client_id=settings.keycloak_client_id,
            client_secret=settings.keycloak_client_secret,
            account_claim=settings.keycloak_account_claim,
        )
        if settings.keycloak_client_secret
        else None
    )
    if keycloak is None and settings.trust_account_header:
        logger.warning("Keycloak not configured; trusting X-Account header for caller identity")

    grant_role = GrantRoleUseCase(unit_of_work_factory=uow_factory, clock=clock)
    revoke_role = RevokeRoleUseCase(unit_of_work_factory=uow_factory, clock=clock)
    has_role = HasRoleUseCase(unit_of_work_factory=uow_factory, clock=clock)
    role_data = RoleDataUseCase(unit_of_work_factory=uow_factory)
    role_expiration_date = RoleExpirationDateUseCase(unit_of_work_factory=uow_factory)
    get_assignment = GetRoleAssignmentUseCase(unit_of_work_factory=uow_factory, clock=clock)
    list_events = ListRoleEventsUseCase(unit_of_work_factory=uow_factory)

    cors_origins = [
        o.strip() for o in settings.cors_origins.split(",") if o.strip()
    ]
    return create_app(
        role_grants_resource=RoleGrantsResource(grant_role),
        role_revoke_resource=RoleRevokeResource(revoke_role),
        role_assignment_resource=RoleAssignmentResource(
            get_assignment, has_role, role_data, role_expiration_date
        ),
        events_resource=EventsResource(list_events),
        health_resource=HealthResource(partial(check_connection, pool)),
        middleware=[
            CORSMiddleware(cors_origins),
            PoolLifespanMiddleware(pool),
            AuthMiddleware(keycloak, trust_account_header=settings.trust_account_header),
        ],
    )


def main() -> None:
    """CLI entry point - run the API with uvicorn."""
    parser = argparse.ArgumentParser(description=f"NFT Roles Registry v{__version__}")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--version", action="version", version=__version__)
    args = parser.parse_args()

    import uvicorn

    uvicorn.run(
        "nftroles.main:create_nftroles_app",
        factory=True,
        host=args.host,
        port=args.port,
        log_level=get_settings().log_level.lower(),
    )
