"""QuickBooks Online (QBO) connection.

Purpose
- Run the OAuth2 authorization-code flow (consent URL, code exchange, refresh)
  through Intuit's `AuthClient`.
- Issue authorized API requests, refreshing an expired access token first.

Token storage is up to the host: read `connection.tokens.to_dict()` (or pass
`on_token_update`) and hand a `TokenPair` back in on the next run.
"""

from __future__ import annotations

import json
import logging
import secrets
import time
from dataclasses import asdict, dataclass
from typing import Any, Callable, Iterable
from urllib.parse import parse_qs, urljoin, urlparse

import requests
from intuitlib.client import AuthClient
from intuitlib.enums import Scopes
from intuitlib.exceptions import AuthClientError

from accounting_integration.config import Configuration, get_configuration
from accounting_integration.errors import AuthError, TransportError

logger = logging.getLogger(__name__)

SANDBOX_DOMAIN = "https://sandbox-quickbooks.api.intuit.com"
PRODUCTION_DOMAIN = "https://quickbooks.api.intuit.com"

DEFAULT_SCOPES = (
    Scopes.ACCOUNTING,
    Scopes.OPENID,
    Scopes.PROFILE,
    Scopes.EMAIL,
    Scopes.PHONE,
    Scopes.ADDRESS,
)


@dataclass(slots=True)
class TokenPair:
    access_token: str
    refresh_token: str | None = None
    expires_at: float | None = None
    refresh_token_expires_at: float | None = None
    id_token: str | None = None

    @property
    def expired(self) -> bool:
        return self.expires_at is not None and time.time() >= self.expires_at

    @classmethod
    def from_auth_client(cls, auth: Any, previous: "TokenPair | None" = None) -> "TokenPair":
        now = time.time()
        expires_in = getattr(auth, "expires_in", None)
        refresh_expires_in = getattr(auth, "x_refresh_token_expires_in", None)
        return cls(
            access_token=auth.access_token,
            # Intuit may keep the same refresh token; fall back to the old one.
            refresh_token=auth.refresh_token or (previous.refresh_token if previous else None),
            expires_at=now + int(expires_in) if expires_in else None,
            refresh_token_expires_at=now + int(refresh_expires_in) if refresh_expires_in else None,
            id_token=getattr(auth, "id_token", None),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "TokenPair":
        return cls(
            access_token=raw["access_token"],
            refresh_token=raw.get("refresh_token"),
            expires_at=raw.get("expires_at"),
            refresh_token_expires_at=raw.get("refresh_token_expires_at"),
            id_token=raw.get("id_token"),
        )


class QuickBooksConnection:
    def __init__(
        self,
        redirect_uri: str | None = None,
        scopes: Iterable[Scopes] = DEFAULT_SCOPES,
        client_id: str | None = None,
        client_secret: str | None = None,
        *,
        config: Configuration | None = None,
        tokens: TokenPair | None = None,
        realm_id: str | None = None,
        on_token_update: Callable[[TokenPair], None] | None = None,
    ) -> None:
        self._config = config or get_configuration()
        self.client_id = client_id or self._config.client_id
        self.client_secret = client_secret or self._config.client_secret
        self.redirect_uri = redirect_uri or self._config.redirect_uri
        self.scopes = tuple(scopes)
        self.realm_id = realm_id
        self.state_token: str | None = None
        self._tokens = tokens
        self._on_token_update = on_token_update

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    @property
    def config(self) -> Configuration:
        return self._config

    @property
    def tokens(self) -> TokenPair | None:
        return self._tokens

    @property
    def access_token(self) -> str | None:
        return self._tokens.access_token if self._tokens else None

    @property
    def refresh_token(self) -> str | None:
        return self._tokens.refresh_token if self._tokens else None

    def resolve_domain(self) -> str:
        return SANDBOX_DOMAIN if self._config.sandbox_mode else PRODUCTION_DOMAIN

    # ------------------------------------------------------------------
    # OAuth2
    # ------------------------------------------------------------------
    def _auth_client(self) -> AuthClient:
        try:
            return AuthClient(
                client_id=self.client_id,
                client_secret=self.client_secret,
                redirect_uri=self.redirect_uri,
                environment=self._config.environment,
                access_token=self.access_token,
                refresh_token=self.refresh_token,
                realm_id=self.realm_id,
            )
        except AuthClientError as exc:
            raise AuthError(f"Intuit OAuth discovery endpoint failed (HTTP {exc.status_code})") from exc
        except requests.RequestException as exc:
            raise TransportError(f"Could not reach Intuit OAuth discovery endpoint: {exc}") from exc

    def build_authorization_url(self) -> str:
        self.state_token = secrets.token_hex(12)
        auth = self._auth_client()
        return auth.get_authorization_url(list(self.scopes), state_token=self.state_token)

    def exchange_code(self, code: str) -> TokenPair:
        if not code:
            raise AuthError("An authorization code is required")

        auth = self._auth_client()
        try:
            auth.get_bearer_token(code, realm_id=self.realm_id)
        except AuthClientError as exc:
            raise AuthError(f"QuickBooks rejected the authorization code (HTTP {exc.status_code})") from exc
        except requests.RequestException as exc:
            raise TransportError(f"QuickBooks token exchange failed: {exc}") from exc

        if not auth.access_token:
            raise AuthError("QuickBooks token exchange returned no access token")
        if getattr(auth, "realm_id", None):
            self.realm_id = auth.realm_id

        logger.info("QuickBooks authorization completed for realm %s", self.realm_id)
        return self._store_tokens(TokenPair.from_auth_client(auth))

    def refresh(self) -> TokenPair:
        if self._tokens is None or not self._tokens.refresh_token:
            raise AuthError("No refresh token available; authorize the connection first")

        auth = self._auth_client()
        try:
            auth.refresh(refresh_token=self._tokens.refresh_token)
        except AuthClientError as exc:
            raise AuthError(f"QuickBooks token refresh failed (HTTP {exc.status_code})") from exc
        except requests.RequestException as exc:
            raise TransportError(f"QuickBooks token refresh failed: {exc}") from exc

        if not auth.access_token:
            raise AuthError("QuickBooks token refresh returned no access token")

        logger.info("QuickBooks access token refreshed for realm %s", self.realm_id)
        return self._store_tokens(TokenPair.from_auth_client(auth, previous=self._tokens))

    def parse_callback_url(self, url: str) -> TokenPair:
        """Complete the flow from the redirect URL Intuit sent the user back to."""

        query = parse_qs(urlparse(url).query)
        if "error" in query:
            raise AuthError(f"Authorization was not granted: {query['error'][0]}")

        code = (query.get("code") or [None])[0]
        if not code:
            raise AuthError("Callback URL carries no authorization code")

        realm_id = (query.get("realmId") or [None])[0]
        if realm_id:
            self.realm_id = realm_id
        return self.exchange_code(code)

    def _store_tokens(self, tokens: TokenPair) -> TokenPair:
        self._tokens = tokens
        if self._on_token_update is not None:
            self._on_token_update(tokens)
        return tokens

    # ------------------------------------------------------------------
    # HTTP
    # ------------------------------------------------------------------
    def request(
        self,
        method: str,
        path: str,
        *,
        body: Any = None,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> requests.Response:
        """Send an authorized API request and return the raw response.

        Non-2xx responses are returned as-is; only network failures raise.
        """

        if self._tokens is None:
            raise AuthError("Connection is not authorized; exchange an authorization code first")
        if self._tokens.expired:
            self.refresh()

        merged_headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "Authorization": f"Bearer {self._tokens.access_token}",
        }
        merged_headers.update(headers or {})

        merged_params: dict[str, Any] = {}
        if self._config.minor_version:
            merged_params["minorversion"] = self._config.minor_version
        merged_params.update(params or {})

        if isinstance(body, (dict, list)):
            body = json.dumps(body)

        method = method.upper()
        url = urljoin(self.resolve_domain(), path)
        logger.debug("QuickBooks %s %s", method, path)
        try:
            return requests.request(
                method,
                url,
                headers=merged_headers,
                params=merged_params or None,
                data=body,
                timeout=self._config.timeout_seconds,
            )
        except requests.RequestException as exc:
            raise TransportError(f"QuickBooks {method} {path} failed: {exc}") from exc

    # ------------------------------------------------------------------
    # Convenience fetchers
    # ------------------------------------------------------------------
    def fetch_customer_by_id(self, id: str):
        from accounting_integration.accounting.quickbooks.customer import Customer

        return Customer.fetch_by_id(id, self)

    fetch_contact_by_id = fetch_customer_by_id

    def fetch_all_customers(self) -> list:
        from accounting_integration.accounting.quickbooks.customer import Customer

        return Customer.fetch_all(self)

    fetch_all_contacts = fetch_all_customers

    def fetch_invoice_by_id(self, id: str):
        from accounting_integration.accounting.quickbooks.invoice import Invoice

        return Invoice.fetch_by_id(id, self)

    def fetch_all_invoices(self) -> list:
        from accounting_integration.accounting.quickbooks.invoice import Invoice

        return Invoice.fetch_all(self)

    def fetch_payment_by_id(self, id: str):
        from accounting_integration.accounting.quickbooks.payment import Payment

        return Payment.fetch_by_id(id, self)

    def fetch_all_payments(self) -> list:
        from accounting_integration.accounting.quickbooks.payment import Payment

        return Payment.fetch_all(self)
