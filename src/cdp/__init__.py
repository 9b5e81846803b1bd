__all__ = [
    # Config
    "CdpConfig",
    "load_config",
    # Errors
    "ApiError",
    "CdpError",
    "ConfigError",
    "JwtError",
    "RpcUrlResolutionError",
    "UnsupportedNetworkError",
    # Auth
    "JwtOptions",
    "generate_jwt",
    # Client
    "CdpApiClient",
    # Network capabilities
    "EVM_NETWORKS",
    "NETWORK_CAPABILITIES",
    "NetworkCapabilities",
    "get_networks_supporting_method",
    "is_method_supported_on_network",
    # Node RPC
    "get_base_node_rpc_url",
    "resolve_base_node_rpc_url",
    # Actions
    "get_erc20_address",
    "list_spend_permissions",
    "list_token_balances",
    "request_faucet",
    "send_transaction",
]

from .config import CdpConfig, load_config
from .errors import (
    ApiError,
    CdpError,
    ConfigError,
    JwtError,
    RpcUrlResolutionError,
    UnsupportedNetworkError,
)
from .auth.jwt import JwtOptions, generate_jwt
from .client import CdpApiClient
from .accounts.evm.network_capabilities import (
    EVM_NETWORKS,
    NETWORK_CAPABILITIES,
    NetworkCapabilities,
    get_networks_supporting_method,
    is_method_supported_on_network,
)
from .accounts.evm.base_node_rpc_url import get_base_node_rpc_url, resolve_base_node_rpc_url
from .actions.evm import (
    get_erc20_address,
    list_spend_permissions,
    list_token_balances,
    request_faucet,
    send_transaction,
)
