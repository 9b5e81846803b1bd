"""
EVM account helpers: network capability lookups and node RPC URL resolution.
"""

from .base_node_rpc_url import get_base_node_rpc_url, resolve_base_node_rpc_url
from .network_capabilities import (
    EVM_NETWORKS,
    NETWORK_CAPABILITIES,
    EvmNetwork,
    NetworkCapabilities,
    get_networks_supporting_method,
    is_method_supported_on_network,
    require_method_support,
)

__all__ = [
    "EVM_NETWORKS",
    "NETWORK_CAPABILITIES",
    "EvmNetwork",
    "NetworkCapabilities",
    "get_base_node_rpc_url",
    "get_networks_supporting_method",
    "is_method_supported_on_network",
    "require_method_support",
    "resolve_base_node_rpc_url",
]
