"""
Network capability matrix for EVM accounts.

Which high-level operations the platform supports on which network is a
deployment-time property, so it lives here as static data. Lookups are pure
and never raise on unknown input: an unrecognized method or network simply
reports "unsupported".
"""

from __future__ import annotations

import re
from dataclasses import dataclass, fields
from types import MappingProxyType
from typing import Literal, Mapping, Optional

from ...errors import UnsupportedNetworkError

EvmNetwork = Literal[
    "base",
    "base-sepolia",
    "ethereum",
    "ethereum-sepolia",
    "ethereum-hoodi",
    "optimism",
    "optimism-sepolia",
    "arbitrum",
    "arbitrum-sepolia",
    "avalanche",
    "binance",
    "polygon",
    "zora",
]


@dataclass(frozen=True)
class NetworkCapabilities:
    list_token_balances: bool = False
    request_faucet: bool = False
    quote_fund: bool = False
    fund: bool = False
    wait_for_fund_operation_receipt: bool = False
    transfer: bool = False
    send_transaction: bool = True
    quote_swap: bool = False
    swap: bool = False
    use_spend_permission: bool = False


METHODS: tuple[str, ...] = tuple(f.name for f in fields(NetworkCapabilities))

NETWORK_CAPABILITIES: Mapping[str, NetworkCapabilities] = MappingProxyType({
    "base": NetworkCapabilities(
        list_token_balances=True,
        quote_fund=True,
        fund=True,
        wait_for_fund_operation_receipt=True,
        transfer=True,
        quote_swap=True,
        swap=True,
        use_spend_permission=True,
    ),
    "base-sepolia": NetworkCapabilities(
        list_token_balances=True,
        request_faucet=True,
        transfer=True,
        use_spend_permission=True,
    ),
    "ethereum": NetworkCapabilities(
        list_token_balances=True,
        transfer=True,
        quote_swap=True,
        swap=True,
        use_spend_permission=True,
    ),
    "ethereum-sepolia": NetworkCapabilities(
        request_faucet=True,
        transfer=True,
        use_spend_permission=True,
    ),
    "ethereum-hoodi": NetworkCapabilities(
        request_faucet=True,
    ),
    "optimism": NetworkCapabilities(
        quote_swap=True,
        swap=True,
        use_spend_permission=True,
    ),
    "optimism-sepolia": NetworkCapabilities(
        use_spend_permission=True,
    ),
    "arbitrum": NetworkCapabilities(
        quote_swap=True,
        swap=True,
        use_spend_permission=True,
    ),
    "arbitrum-sepolia": NetworkCapabilities(
        use_spend_permission=True,
    ),
    "avalanche": NetworkCapabilities(
        use_spend_permission=True,
    ),
    "binance": NetworkCapabilities(
        use_spend_permission=True,
    ),
    "polygon": NetworkCapabilities(
        use_spend_permission=True,
    ),
    "zora": NetworkCapabilities(),
})

EVM_NETWORKS: tuple[str, ...] = tuple(NETWORK_CAPABILITIES)

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def _normalize_method(method: object) -> Optional[str]:
    """Map "sendTransaction" / "send_transaction" to the flag name, or None."""
    if not isinstance(method, str) or not method[:1].islower():
        return None
    name = _CAMEL_BOUNDARY.sub("_", method).lower()
    return name if name in METHODS else None


def get_networks_supporting_method(method: str) -> list[str]:
    """
    List networks that support a method, in table order.

    Args:
        method: Operation name, snake_case or camelCase

    Returns:
        Network identifiers; empty if the method is unknown
    """
    name = _normalize_method(method)
    if name is None:
        return []
    return [
        network
        for network, capabilities in NETWORK_CAPABILITIES.items()
        if getattr(capabilities, name)
    ]


def is_method_supported_on_network(method: str, network: str) -> bool:
    """Return the capability flag; False for unknown methods or networks."""
    name = _normalize_method(method)
    if name is None:
        return False
    capabilities = NETWORK_CAPABILITIES.get(network) if isinstance(network, str) else None
    if capabilities is None:
        return False
    return getattr(capabilities, name)


def require_method_support(method: str, network: str) -> None:
    """Raise UnsupportedNetworkError unless the method is available on network."""
    if not is_method_supported_on_network(method, network):
        raise UnsupportedNetworkError(
            method, network, get_networks_supporting_method(method)
        )
