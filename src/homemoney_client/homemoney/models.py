from __future__ import annotations

from enum import IntEnum

from pydantic import BaseModel, ConfigDict, Field


class _Record(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )


class ErrorType(_Record):
    code: int
    message: str = ""

    @property
    def is_ok(self) -> bool:
        return self.code == 0


class AuthResult(_Record):
    error: ErrorType = Field(alias="Error")
    access_token: str
    refresh_token: str


class AccountCurrencyInfo(_Record):
    id: str
    short_name: str = Field(alias="shortName")
    rate: float
    balance: float
    display: bool


class Currency(_Record):
    id: int
    short_name: str = Field(alias="shortName")
    rate: float
    balance: float
    display: bool


class Account(_Record):
    id: str
    name: str
    is_default: bool = Field(alias="isDefault")
    display: bool
    include_balance: bool = Field(alias="includeBalance")
    has_open_currencies: bool = Field(alias="hasOpenCurrencies")
    currencies: list[AccountCurrencyInfo] = Field(alias="ListCurrencyInfo")
    # the service reports the "deleted" flag under this name
    is_show_in_group: bool = Field(alias="isShowInGroup")


class AccountGroup(_Record):
    id: str
    name: str
    has_accounts: bool = Field(alias="hasAccounts")
    has_show_accounts: bool = Field(alias="hasShowAccounts")
    order: int
    accounts: list[Account] = Field(alias="ListAccountInfo")


class CategoryType(IntEnum):
    EXPENSE = 0
    INCOME = 1


class Category(_Record):
    id: str
    type: CategoryType
    name: str = Field(alias="Name")
    full_name: str = Field(alias="FullName")
    is_archive: bool = Field(alias="isArchive")
    is_pinned: bool = Field(alias="isPinned")


class Transaction(_Record):
    id: str = Field(alias="TransactionId")
    date: str = Field(alias="Date")  # "2023-01-01T00:00:00"
    date_unix: str = Field(alias="DateUnix")
    category_id: int = Field(alias="CategoryId")
    category_full_name: str = Field(alias="CategoryFullName")
    description: str = Field(alias="Description")
    is_plan: bool = Field(alias="isPlan")
    type: int
    total: float = Field(alias="Total")
    account_id: str = Field(alias="AccountId")
    currency_id: int = Field(alias="CurrencyId")
    trans_total: float = Field(alias="TransTotal")
    trans_account_id: str = Field(alias="TransAccountId")
    trans_currency_id: int = Field(alias="TransCurrencyId")
    comment: str = Field(alias="GUID")
    create_date: str = Field(alias="CreateDate")
    create_date_unix: str = Field(alias="CreateDateUnix")


class BalanceList(_Record):
    default_currency_id: str = Field(alias="defaultcurrency")
    currency_short_name: str = Field(alias="name")
    groups: list[AccountGroup] = Field(alias="ListGroupInfo")
    error: ErrorType = Field(alias="Error")


class CategoryList(_Record):
    categories: list[Category] = Field(alias="ListCategory")
    error: ErrorType = Field(alias="Error")


class TransactionList(_Record):
    transactions: list[Transaction] = Field(alias="ListTransaction")
    error: ErrorType = Field(alias="Error")
