"""
Request templates for the Homemoney endpoints.

Each builder only describes the HTTP call (method, path, query, response
shape). Sending it is the transport's job; judging the envelope is the
client's job.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel

from .models import AuthResult, BalanceList, CategoryList, TransactionList

T = TypeVar("T", bound=BaseModel)

QueryParam = tuple[str, Optional[Any]]


@dataclass(frozen=True)
class RequestSpec(Generic[T]):
    method: str
    path: str
    response_model: type[T]
    params: list[QueryParam] = field(default_factory=list)


def authenticate(
    username: str,
    password: str,
    client_id: str,
    client_secret: str,
    grant_type: str = "password",
) -> RequestSpec[AuthResult]:
    return RequestSpec(
        method="GET",
        path="TokenPassword",
        response_model=AuthResult,
        params=[
            ("username", username),
            ("password", password),
            ("client_id", client_id),
            ("client_secret", client_secret),
            ("grant_type", grant_type),
        ],
    )


def list_account_groups(token: str) -> RequestSpec[BalanceList]:
    return RequestSpec(
        method="GET",
        path="BalanceList",
        response_model=BalanceList,
        params=[("Token", token)],
    )


def list_categories(token: str) -> RequestSpec[CategoryList]:
    return RequestSpec(
        method="GET",
        path="CategoryList",
        response_model=CategoryList,
        params=[("Token", token)],
    )


def list_transactions(token: str, top_count: int | None = None) -> RequestSpec[TransactionList]:
    return RequestSpec(
        method="GET",
        path="TransactionList",
        response_model=TransactionList,
        params=[("Token", token), ("TopCount", top_count)],
    )
