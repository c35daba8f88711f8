from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Generic, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from .api import QueryParam, RequestSpec
from .errors import HomemoneyDecodeError, HomemoneyHTTPError, HomemoneyNetworkError

logger = logging.getLogger(__name__)
# request urls carry credentials and tokens, keep them on their own logger
http_logger = logging.getLogger("homemoney_client.http")

T = TypeVar("T", bound=BaseModel)

DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class ApiResponse(Generic[T]):
    value: T
    status_code: int
    reason_phrase: str


def encode_query(params: list[QueryParam]) -> list[tuple[str, str]]:
    """
    Drop absent parameters, keep everything else in order.
    0, negative numbers and empty strings are values, only None is "absent".
    """
    out: list[tuple[str, str]] = []
    for name, value in params:
        if value is None:
            continue
        if isinstance(value, bool):
            out.append((name, "true" if value else "false"))
        else:
            out.append((name, str(value)))
    return out


def decode_body(response: httpx.Response, model: type[T]) -> T:
    raw = response.content
    if not raw or not raw.strip():
        raise HomemoneyDecodeError(f"Empty response body for {response.request.url.path}")

    try:
        # bytes input lets json detect a utf-8 BOM
        data = json.loads(raw)
    except ValueError as e:
        raise HomemoneyDecodeError(f"Response body is not valid JSON: {e}") from e

    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise HomemoneyDecodeError(
            f"Response body does not match {model.__name__}: {e.error_count()} error(s)"
        ) from e


class Transport:
    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        log_bodies: bool = False,
        http_client: httpx.AsyncClient | None = None,
        http_transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._log_bodies = log_bodies
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            timeout=httpx.Timeout(timeout),
            follow_redirects=True,
            transport=http_transport,
            headers={
                "Accept": "application/json",
                "User-Agent": "homemoney-client/0.1.0",
            },
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "Transport":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    def url_for(self, path: str) -> str:
        return f"{self._base_url}/{path.lstrip('/')}"

    async def execute(self, spec: RequestSpec[T]) -> ApiResponse[T]:
        url = self.url_for(spec.path)
        params = encode_query(spec.params)

        try:
            resp = await self._client.request(spec.method, url, params=params)
        except httpx.TransportError as e:
            raise HomemoneyNetworkError(
                f"Homemoney request failed: {spec.method} {spec.path}. Cause: {e!r}"
            ) from e

        logger.debug("%s %s -> %s", spec.method, spec.path, resp.status_code)
        if self._log_bodies:
            http_logger.debug("--> %s %s", spec.method, resp.request.url)
            http_logger.debug("<-- %s %s", resp.status_code, resp.text)

        if not resp.is_success:
            raise HomemoneyHTTPError(
                status_code=resp.status_code,
                reason_phrase=resp.reason_phrase,
                response_body=resp.text,
            )

        value = decode_body(resp, spec.response_model)
        return ApiResponse(value=value, status_code=resp.status_code, reason_phrase=resp.reason_phrase)
