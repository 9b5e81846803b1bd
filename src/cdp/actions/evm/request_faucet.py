from __future__ import annotations

from ...accounts.evm.network_capabilities import require_method_support
from ...client import CdpApiClient
from .types import RequestFaucetOptions, RequestFaucetResult


async def request_faucet(
    client: CdpApiClient,
    options: RequestFaucetOptions,
) -> RequestFaucetResult:
    """Request testnet funds (eth, usdc, eurc, cbbtc) for an address."""
    require_method_support("request_faucet", options.network)

    response = await client.request_evm_faucet(
        {
            "address": options.address,
            "network": options.network,
            "token": options.token,
        },
        options.idempotency_key,
    )
    return RequestFaucetResult(transaction_hash=response["transactionHash"])
