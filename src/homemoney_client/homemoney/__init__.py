from .client import HomemoneyClient
from .errors import (
    AuthenticationRequiredError,
    HomemoneyAuthError,
    HomemoneyDecodeError,
    HomemoneyError,
    HomemoneyHTTPError,
    HomemoneyNetworkError,
)
from .models import (
    Account,
    AccountCurrencyInfo,
    AccountGroup,
    AuthResult,
    BalanceList,
    Category,
    CategoryList,
    CategoryType,
    Currency,
    ErrorType,
    Transaction,
    TransactionList,
)
from .transport import ApiResponse, Transport

__all__ = [
    "HomemoneyClient",
    "Transport",
    "ApiResponse",
    "HomemoneyError",
    "HomemoneyNetworkError",
    "HomemoneyHTTPError",
    "HomemoneyDecodeError",
    "HomemoneyAuthError",
    "AuthenticationRequiredError",
    "Account",
    "AccountCurrencyInfo",
    "AccountGroup",
    "AuthResult",
    "BalanceList",
    "Category",
    "CategoryList",
    "CategoryType",
    "Currency",
    "ErrorType",
    "Transaction",
    "TransactionList",
]
