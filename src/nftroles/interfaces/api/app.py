"""Falcon ASGI application."""

import logging

import falcon
import falcon.asgi
from falcon.asgi import App

from nftroles.interfaces.api.resources.events import EventsResource
from nftroles.interfaces.api.resources.health import HealthResource
from nftroles.interfaces.api.resources.metadata import RoleIdsResource, RoleMetadataResource
from nftroles.interfaces.api.resources.roles import (
    RoleAssignmentResource,
    RoleGrantsResource,
    RoleRevokeResource,
)

logger = logging.getLogger(__name__)

_ASSIGNMENT_PATH = (
    "/v1/roles/{role}/grantors/{grantor}/tokens/{token_address}/{token_id}"
    "/grantees/{grantee}"
)


async def handle_unexpected_error(req, resp, ex, params) -> None:
    """Log unhandled exception and answer with a generic 500."""
    logger.exception("Unhandled error on %s %s", req.method, req.path, exc_info=ex)
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}


def create_app(
    role_grants_resource: RoleGrantsResource,
    role_revoke_resource: RoleRevokeResource,
    role_assignment_resource: RoleAssignmentResource,
    events_resource: EventsResource,
    health_resource: HealthResource,
    middleware: list | None = None,
) -> App:
    """Create Falcon ASGI app with routes."""
    app = falcon.asgi.App(middleware=middleware or [])
    app.add_error_handler(Exception, handle_unexpected_error)
    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route("/v1/roles/{role}/grants", role_grants_resource)
    app.add_route(
        "/v1/roles/{role}/tokens/{token_address}/{token_id}/grantees/{grantee}",
        role_revoke_resource,
    )
    app.add_route(_ASSIGNMENT_PATH, role_assignment_resource)
    app.add_route(f"{_ASSIGNMENT_PATH}/has-role", role_assignment_resource, suffix="has_role")
    app.add_route(f"{_ASSIGNMENT_PATH}/data", role_assignment_resource, suffix="data")
    app.add_route(
        f"{_ASSIGNMENT_PATH}/expiration-date",
        role_assignment_resource,
        suffix="expiration_date",
    )
    app.add_route("/v1/events", events_resource)
    app.add_route("/v1/metadata/roles", RoleMetadataResource())
    app.add_route("/v1/role-ids", RoleIdsResource())
    return app
