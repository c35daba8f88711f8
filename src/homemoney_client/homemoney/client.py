from __future__ import annotations

import logging
from typing import Awaitable, TypeVar

from pydantic import BaseModel

from ..config import Settings, load_settings
from . import api
from .errors import AuthenticationRequiredError, HomemoneyAuthError
from .models import Account, BalanceList, CategoryList, TransactionList
from .transport import DEFAULT_TIMEOUT, Transport

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class HomemoneyClient:
    """
    Session-scoped client for the Homemoney API.

    Starts unauthenticated; a successful login() stores the token that every
    other call sends as the `Token` query parameter. login() is a yes/no gate
    and never raises, the other calls propagate transport, HTTP and decoding
    errors. Envelopes are returned as decoded, including a nonzero `error`.
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        settings: Settings | None = None,
        transport: Transport | None = None,
        log_bodies: bool | None = None,
    ):
        if transport is not None and (base_url is not None or settings is not None):
            raise ValueError("Pass either transport or base_url/settings, not both")

        if transport is None:
            if base_url is None:
                settings = settings or load_settings()
                base_url = settings.service_uri
            if log_bodies is None:
                log_bodies = settings.log_http_bodies if settings else False
            timeout = settings.timeout_s if settings else DEFAULT_TIMEOUT
            transport = Transport(base_url, timeout=timeout, log_bodies=log_bodies)

        self._transport = transport
        self._token = ""
        self._refresh_token = ""

    @property
    def token(self) -> str:
        return self._token

    @token.setter
    def token(self, value: str) -> None:
        if not value or not value.strip():
            raise ValueError("Token cannot be blank")
        self._token = value

    @property
    def refresh_token(self) -> str:
        # received on login, no refresh flow uses it
        return self._refresh_token

    @property
    def is_authenticated(self) -> bool:
        return bool(self._token.strip())

    async def aclose(self) -> None:
        await self._transport.aclose()

    async def __aenter__(self) -> "HomemoneyClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    def _require_authentication(self) -> None:
        if not self.is_authenticated:
            raise AuthenticationRequiredError("Authentication required. Call login() first.")

    async def _gate(self, op: Awaitable[None], what: str) -> bool:
        try:
            await op
            return True
        except Exception as e:
            logger.exception("%s failed: %s", what, e)
            return False

    async def _call(self, spec: api.RequestSpec[T]) -> T:
        self._require_authentication()
        resp = await self._transport.execute(spec)
        return resp.value

    async def _authenticate(self, username: str, password: str, client_id: str, client_secret: str) -> None:
        resp = await self._transport.execute(api.authenticate(username, password, client_id, client_secret))
        result = resp.value
        if not result.error.is_ok:
            raise HomemoneyAuthError(result.error.code, result.error.message)

        self.token = result.access_token
        self._refresh_token = result.refresh_token

    async def login(self, username: str, password: str, client_id: str, client_secret: str) -> bool:
        ok = await self._gate(
            self._authenticate(username, password, client_id, client_secret),
            "Authentication",
        )
        if ok:
            logger.info("Authenticated against %s", self._transport.base_url)
        return ok

    async def get_account_groups(self) -> BalanceList:
        return await self._call(api.list_account_groups(self._token))

    async def get_accounts(self) -> list[Account]:
        balance = await self.get_account_groups()
        return [acc for group in balance.groups for acc in group.accounts]

    async def get_categories(self) -> CategoryList:
        return await self._call(api.list_categories(self._token))

    async def get_transactions(self, top_count: int | None = None) -> TransactionList:
        return await self._call(api.list_transactions(self._token, top_count))
