"""Auth middleware - resolves the calling account from a bearer token."""

from dataclasses import dataclass

import falcon.asgi


@dataclass
class RequestUser:
    """Caller from request context. account acts as grantor on mutations."""

    account: str
    email: str | None = None
    username: str | None = None


class AuthMiddleware:
    """Middleware that validates the bearer token and sets req.context.user.

    Read endpoints do not need a caller, so a missing or invalid token leaves
    req.context.user as None instead of failing the request.
    """

    def __init__(self, keycloak_provider=None, trust_account_header: bool = False) -> None:
        self._keycloak = keycloak_provider
        self._trust_account_header = trust_account_header

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        """Extract caller from Authorization header (or X-Account in dev mode)."""
        req.context.user = None
        auth = req.get_header("Authorization")
        if auth and auth.startswith("Bearer "):
            if self._keycloak:
                user = self._keycloak.decode_token(auth[7:])
                if user:
                    req.context.user = RequestUser(
                        account=user.account,
                        email=user.email,
                        username=user.username,
                    )
            return
        if self._trust_account_header and not self._keycloak:
            account = (req.get_header("X-Account") or "").strip()
            if account:
                req.context.user = RequestUser(account=account)
