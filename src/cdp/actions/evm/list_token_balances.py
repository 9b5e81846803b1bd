from __future__ import annotations

from ...accounts.evm.network_capabilities import require_method_support
from ...client import CdpApiClient
from .types import EvmTokenBalance, ListTokenBalancesOptions, ListTokenBalancesResult


async def list_token_balances(
    client: CdpApiClient,
    options: ListTokenBalancesOptions,
) -> ListTokenBalancesResult:
    """
    List ERC-20 and native token balances for an address.

    Args:
        client: Platform API client
        options: Address, network and pagination

    Returns:
        Balances with integer amounts, plus the next page token if any
    """
    require_method_support("list_token_balances", options.network)

    response = await client.list_data_token_balances(
        options.network,
        options.address,
        page_size=options.page_size,
        page_token=options.page_token,
    )

    return ListTokenBalancesResult(
        balances=[EvmTokenBalance.from_api(b) for b in response.get("balances", [])],
        next_page_token=response.get("nextPageToken"),
    )
