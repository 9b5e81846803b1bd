from __future__ import annotations

# ERC-20 contract addresses by network and lowercase symbol
ERC20_ADDRESSES: dict[str, dict[str, str]] = {
    "base": {
        "usdc": "0x833589fCD6eDb6E08f4c7C32D4f71b54bdA02913",
    },
    "base-sepolia": {
        "usdc": "0x036CbD53842c5426634e7929541eC2318f3dCF7e",
    },
}


def get_erc20_address(token: str, network: str) -> str:
    """
    Resolve a token symbol to its contract address on a network.

    Args:
        token: Symbol (e.g., "usdc") or a contract address
        network: Network name (e.g., "base", "base-sepolia")

    Returns:
        Contract address; the input unchanged if the symbol is not known
    """
    return ERC20_ADDRESSES.get(network, {}).get(token, token)
