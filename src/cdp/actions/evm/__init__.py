from .list_spend_permissions import list_spend_permissions
from .list_token_balances import list_token_balances
from .request_faucet import request_faucet
from .send_transaction import send_transaction, serialize_transaction
from .transfer import get_erc20_address
from .types import (
    EvmToken,
    EvmTokenAmount,
    EvmTokenBalance,
    ListSpendPermissionsOptions,
    ListSpendPermissionsResult,
    ListTokenBalancesOptions,
    ListTokenBalancesResult,
    RequestFaucetOptions,
    RequestFaucetResult,
    SendTransactionOptions,
    SendTransactionResult,
    SpendPermission,
    SpendPermissionNetwork,
)

__all__ = [
    "EvmToken",
    "EvmTokenAmount",
    "EvmTokenBalance",
    "ListSpendPermissionsOptions",
    "ListSpendPermissionsResult",
    "ListTokenBalancesOptions",
    "ListTokenBalancesResult",
    "RequestFaucetOptions",
    "RequestFaucetResult",
    "SendTransactionOptions",
    "SendTransactionResult",
    "SpendPermission",
    "SpendPermissionNetwork",
    "get_erc20_address",
    "list_spend_permissions",
    "list_token_balances",
    "request_faucet",
    "send_transaction",
    "serialize_transaction",
]
