"""
Transaction submission.

Accepts either an already-serialized transaction (0x-prefixed hex) or an
EIP-1559 field mapping. Mappings are RLP-serialized unsigned; the platform
signs with the account's key and overwrites the chain id from ``network``,
so the chain id is pinned to 1 before serialization.
"""

from __future__ import annotations

import re
from typing import Any, Optional

import rlp

from ...accounts.evm.network_capabilities import require_method_support
from ...client import CdpApiClient
from ...utils import hex_to_bytes
from .types import SendTransactionOptions, SendTransactionResult, TransactionRequest

EIP1559_TYPE = 0x02
PLACEHOLDER_CHAIN_ID = 1

_ADDRESS_RE = re.compile(r"0x[0-9a-fA-F]{40}")


def _quantity(tx: TransactionRequest, *keys: str) -> int:
    for key in keys:
        value = tx.get(key)
        if value is None:
            continue
        if isinstance(value, str):
            return int(value, 16) if value.startswith("0x") else int(value)
        return int(value)
    return 0


def _address(value: Optional[str], *, required: bool = False) -> bytes:
    """Decode a 20-byte address; empty means contract creation unless required."""
    if not value and not required:
        return b""
    if not isinstance(value, str) or not _ADDRESS_RE.fullmatch(value):
        raise ValueError(f"Invalid address: {value!r}")
    return bytes.fromhex(value[2:])


def _access_list(entries: Any) -> list:
    encoded = []
    for entry in entries or []:
        encoded.append([
            _address(entry["address"], required=True),
            [hex_to_bytes(key) for key in entry.get("storageKeys", [])],
        ])
    return encoded


def serialize_transaction(tx: TransactionRequest) -> str:
    """
    Serialize an unsigned EIP-1559 transaction.

    Args:
        tx: Transaction fields (chainId, nonce, maxPriorityFeePerGas,
            maxFeePerGas, gas, to, value, data, accessList)

    Returns:
        0x-prefixed hex: 0x02 || rlp([...fields])

    Raises:
        ValueError: On a non-EIP-1559 type or a malformed address
    """
    tx_type = tx.get("type", "eip1559")
    if tx_type not in ("eip1559", EIP1559_TYPE, "0x2", "0x02"):
        raise ValueError(f"Only EIP-1559 transactions are supported, got type {tx_type!r}")

    fields = [
        _quantity(tx, "chainId"),
        _quantity(tx, "nonce"),
        _quantity(tx, "maxPriorityFeePerGas"),
        _quantity(tx, "maxFeePerGas"),
        _quantity(tx, "gas", "gasLimit"),
        _address(tx.get("to")),
        _quantity(tx, "value"),
        hex_to_bytes(tx.get("data") or tx.get("input")),
        _access_list(tx.get("accessList")),
    ]
    payload = bytes([EIP1559_TYPE]) + rlp.encode(fields)
    return "0x" + payload.hex()


async def send_transaction(
    client: CdpApiClient,
    options: SendTransactionOptions,
) -> SendTransactionResult:
    """
    Sign and broadcast a transaction from a platform-managed account.

    Args:
        client: Platform API client
        options: Sender, transaction and network

    Returns:
        Hash of the broadcast transaction
    """
    require_method_support("send_transaction", options.network)

    if isinstance(options.transaction, str):
        serialized = options.transaction
    else:
        serialized = serialize_transaction({
            **options.transaction,
            "chainId": PLACEHOLDER_CHAIN_ID,
            "type": "eip1559",
        })

    response = await client.send_evm_transaction(
        options.address,
        {
            "transaction": serialized,
            "network": options.network,
        },
        options.idempotency_key,
    )
    return SendTransactionResult(transaction_hash=response["transactionHash"])
