from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Union

from ...utils import format_int, parse_int

TransactionRequest = dict[str, Any]


# ============ Token balances ============


@dataclass(frozen=True)
class ListTokenBalancesOptions:
    address: str
    network: str
    page_size: Optional[int] = None
    page_token: Optional[str] = None


@dataclass(frozen=True)
class EvmToken:
    network: str
    contract_address: str
    symbol: Optional[str] = None
    name: Optional[str] = None

    @classmethod
    def from_api(cls, payload: dict[str, Any]) -> "EvmToken":
        return cls(
            network=payload["network"],
            contract_address=payload["contractAddress"],
            symbol=payload.get("symbol"),
            name=payload.get("name"),
        )


@dataclass(frozen=True)
class EvmTokenAmount:
    amount: int
    decimals: int

    @classmethod
    def from_api(cls, payload: dict[str, Any]) -> "EvmTokenAmount":
        return cls(amount=parse_int(payload["amount"]), decimals=int(payload["decimals"]))


@dataclass(frozen=True)
class EvmTokenBalance:
    token: EvmToken
    amount: EvmTokenAmount

    @classmethod
    def from_api(cls, payload: dict[str, Any]) -> "EvmTokenBalance":
        return cls(
            token=EvmToken.from_api(payload["token"]),
            amount=EvmTokenAmount.from_api(payload["amount"]),
        )


@dataclass(frozen=True)
class ListTokenBalancesResult:
    balances: list[EvmTokenBalance] = field(default_factory=list)
    next_page_token: Optional[str] = None


# ============ Faucet ============


@dataclass(frozen=True)
class RequestFaucetOptions:
    address: str
    network: str
    token: str
    idempotency_key: Optional[str] = None


@dataclass(frozen=True)
class RequestFaucetResult:
    transaction_hash: str


# ============ Transactions ============


@dataclass(frozen=True)
class SendTransactionOptions:
    """
    Attributes:
        address: Sending account
        transaction: 0x-prefixed serialized transaction, or an EIP-1559
            field mapping (to, value, data, nonce, gas, maxFeePerGas, ...)
        network: Network to broadcast on
        idempotency_key: Optional idempotency key
    """

    address: str
    transaction: Union[str, TransactionRequest]
    network: str
    idempotency_key: Optional[str] = None


@dataclass(frozen=True)
class SendTransactionResult:
    transaction_hash: str


# ============ Spend permissions ============


@dataclass(frozen=True)
class ListSpendPermissionsOptions:
    address: str
    page_size: Optional[int] = None
    page_token: Optional[str] = None


@dataclass(frozen=True)
class SpendPermission:
    account: str
    spender: str
    token: str
    allowance: int
    period: int
    start: int
    end: int
    salt: int
    extra_data: str

    @classmethod
    def from_api(cls, payload: dict[str, Any]) -> "SpendPermission":
        return cls(
            account=payload["account"],
            spender=payload["spender"],
            token=payload["token"],
            allowance=parse_int(payload["allowance"]),
            period=parse_int(payload["period"]),
            start=parse_int(payload["start"]),
            end=parse_int(payload["end"]),
            salt=parse_int(payload["salt"]),
            extra_data=payload.get("extraData") or "0x",
        )

    def to_api_dict(self) -> dict[str, str]:
        """Wire form: numeric fields as decimal strings."""
        return {
            "account": self.account,
            "spender": self.spender,
            "token": self.token,
            "allowance": format_int(self.allowance),
            "period": format_int(self.period),
            "start": format_int(self.start),
            "end": format_int(self.end),
            "salt": format_int(self.salt),
            "extraData": self.extra_data,
        }


@dataclass(frozen=True)
class SpendPermissionNetwork:
    permission_hash: str
    permission: SpendPermission
    network: Optional[str] = None
    created_at: Optional[str] = None
    revoked: bool = False
    revoked_at: Optional[str] = None

    @classmethod
    def from_api(cls, payload: dict[str, Any]) -> "SpendPermissionNetwork":
        return cls(
            permission_hash=payload["permissionHash"],
            permission=SpendPermission.from_api(payload["permission"]),
            network=payload.get("network"),
            created_at=payload.get("createdAt"),
            revoked=bool(payload.get("revoked", False)),
            revoked_at=payload.get("revokedAt"),
        )


@dataclass(frozen=True)
class ListSpendPermissionsResult:
    spend_permissions: list[SpendPermissionNetwork] = field(default_factory=list)
    next_page_token: Optional[str] = None
