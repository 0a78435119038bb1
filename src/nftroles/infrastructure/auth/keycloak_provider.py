"""Keycloak OIDC provider for token introspection."""

from dataclasses import dataclass

from keycloak import KeycloakOpenID
from keycloak.exceptions import KeycloakError


@dataclass
class OIDCUser:
    """Authenticated account from OIDC token."""

    account: str
    email: str | None
    username: str | None


class KeycloakProvider:
    """Keycloak OIDC - validates access token and resolves the caller account."""

    def __init__(
        self,
        server_url: str,
        realm: str,
        client_id: str,
        client_secret: str = "",
        account_claim: str = "sub",
    ) -> None:
        self._keycloak = KeycloakOpenID(
            server_url=server_url,
            realm_name=realm,
            client_id=client_id,
            client_secret_key=client_secret,
        )
        self._account_claim = account_claim

    def decode_token(self, token: str) -> OIDCUser | None:
        """Introspect token, return account info or None if inactive/invalid."""
        try:
            token_info = self._keycloak.introspect(token)
        except KeycloakError:
            return None
        if not token_info.get("active"):
            return None
        account = token_info.get(self._account_claim)
        if not account:
            return None
        return OIDCUser(
            account=str(account),
            email=token_info.get("email"),
            username=token_info.get("preferred_username"),
        )
