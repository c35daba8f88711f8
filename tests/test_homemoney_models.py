import pytest
from pydantic import ValidationError

from homemoney_client.homemoney.models import (
    Account,
    AuthResult,
    BalanceList,
    Category,
    CategoryList,
    CategoryType,
    Currency,
    Transaction,
    TransactionList,
)


def _tx(**over) -> dict:
    data = {
        "TransactionId": "trans1",
        "Date": "2024-01-15T10:30:00",
        "DateUnix": "1705318200",
        "CategoryId": 1,
        "CategoryFullName": "Food:Groceries",
        "Description": "Weekly shopping",
        "isPlan": False,
        "type": 0,
        "Total": 125.5,
        "AccountId": "acc1",
        "CurrencyId": 980,
        "TransTotal": 0.0,
        "TransAccountId": "",
        "TransCurrencyId": 0,
        "GUID": "a comment",
        "CreateDate": "2024-01-15T10:35:00",
        "CreateDateUnix": "1705318500",
    }
    data.update(over)
    return data


def test_auth_result_reads_wire_names():
    res = AuthResult.model_validate(
        {"Error": {"code": 0, "message": ""}, "access_token": "tok123", "refresh_token": "r1"}
    )
    assert res.error.is_ok
    assert res.access_token == "tok123"
    assert res.refresh_token == "r1"


def test_transaction_maps_guid_to_comment_and_keeps_negative_total():
    tx = Transaction.model_validate(_tx(Total=-42.75, GUID="refund"))
    assert tx.id == "trans1"
    assert tx.comment == "refund"
    assert tx.total == -42.75
    assert tx.category_full_name == "Food:Groceries"
    assert tx.create_date_unix == "1705318500"


def test_transaction_large_amount_and_unicode():
    tx = Transaction.model_validate(_tx(Total=999999999.99, Description="Кофе ☕ 日本"))
    assert tx.total == 999999999.99
    assert tx.description == "Кофе ☕ 日本"


def test_category_type_enum_and_names():
    env = CategoryList.model_validate(
        {
            "ListCategory": [
                {"id": "c1", "type": 0, "Name": "Food", "FullName": "Food", "isArchive": False, "isPinned": True},
                {"id": "c2", "type": 1, "Name": "Salary", "FullName": "Job:Salary", "isArchive": True, "isPinned": False},
            ],
            "Error": {"code": 0, "message": ""},
        }
    )
    assert [c.type for c in env.categories] == [CategoryType.EXPENSE, CategoryType.INCOME]
    assert env.categories[1].full_name == "Job:Salary"
    assert env.categories[0].is_pinned is True


def test_category_rejects_unknown_type():
    with pytest.raises(ValidationError):
        Category.model_validate(
            {"id": "c1", "type": 7, "Name": "x", "FullName": "x", "isArchive": False, "isPinned": False}
        )


def test_balance_list_nested_accounts_and_currencies():
    env = BalanceList.model_validate(
        {
            "defaultcurrency": "980",
            "name": "UAH",
            "ListGroupInfo": [
                {
                    "id": "g1",
                    "name": "Cash",
                    "hasAccounts": True,
                    "hasShowAccounts": True,
                    "order": 2,
                    "ListAccountInfo": [
                        {
                            "id": "a1",
                            "name": "Wallet",
                            "isDefault": True,
                            "display": True,
                            "includeBalance": True,
                            "hasOpenCurrencies": True,
                            "ListCurrencyInfo": [
                                {"id": "980", "shortName": "UAH", "rate": 1.0, "balance": 150.25, "display": True}
                            ],
                            "isShowInGroup": False,
                        }
                    ],
                }
            ],
            "Error": {"code": 0, "message": ""},
        }
    )
    assert env.default_currency_id == "980"
    assert env.currency_short_name == "UAH"
    acc = env.groups[0].accounts[0]
    assert acc.is_show_in_group is False
    assert acc.currencies[0].short_name == "UAH"
    assert acc.currencies[0].balance == 150.25
    assert env.groups[0].order == 2


def test_extra_fields_are_ignored():
    env = TransactionList.model_validate(
        {"ListTransaction": [], "Error": {"code": 0, "message": ""}, "extraField": "whatever"}
    )
    assert env.transactions == []


def test_missing_required_field_fails():
    with pytest.raises(ValidationError):
        TransactionList.model_validate({"Error": {"code": 0, "message": ""}})


def test_records_are_immutable_and_compare_by_value():
    a = Currency(id=980, shortName="UAH", rate=1.0, balance=10.0, display=True)
    b = Currency.model_validate({"id": 980, "shortName": "UAH", "rate": 1.0, "balance": 10.0, "display": True})
    assert a == b

    with pytest.raises(ValidationError):
        a.balance = 20.0


def test_account_accepts_field_names():
    acc = Account(
        id="a1",
        name="Card",
        is_default=False,
        display=True,
        include_balance=True,
        has_open_currencies=False,
        currencies=[],
        is_show_in_group=True,
    )
    assert acc.model_dump(by_alias=True)["isShowInGroup"] is True


def test_numeric_ids_are_read_as_strings():
    cat = Category.model_validate(
        {"id": 17, "type": 0, "Name": "Food", "FullName": "Food", "isArchive": False, "isPinned": False}
    )
    assert cat.id == "17"

    tx = Transaction.model_validate(_tx(TransactionId=501, DateUnix=1705318200, TransAccountId=3))
    assert tx.id == "501"
    assert tx.date_unix == "1705318200"
    assert tx.trans_account_id == "3"

    env = BalanceList.model_validate(
        {"defaultcurrency": 980, "name": "UAH", "ListGroupInfo": [], "Error": {"code": 0, "message": ""}}
    )
    assert env.default_currency_id == "980"
