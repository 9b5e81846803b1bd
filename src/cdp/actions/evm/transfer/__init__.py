from .utils import ERC20_ADDRESSES, get_erc20_address

__all__ = ["ERC20_ADDRESSES", "get_erc20_address"]
