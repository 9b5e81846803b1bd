"""
CDP CLI

Command-line interface for the CDP EVM APIs.

Credentials come from CDP_API_KEY_ID / CDP_API_KEY_SECRET (environment
or ~/.cdp/.env).

Commands:
  networks   - List networks, optionally filtered by supported method
  supports   - Check whether a method is available on a network
  rpc-url    - Print the node RPC URL for a network
  token      - Resolve an ERC-20 symbol to its contract address
  balances   - List token balances for an address
  faucet     - Request testnet funds
"""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import Optional

import click
import httpx

from .accounts.evm.base_node_rpc_url import resolve_base_node_rpc_url
from .accounts.evm.network_capabilities import (
    EVM_NETWORKS,
    METHODS,
    get_networks_supporting_method,
    is_method_supported_on_network,
)
from .actions.evm import (
    ListTokenBalancesOptions,
    RequestFaucetOptions,
    get_erc20_address,
    list_token_balances,
    request_faucet,
)
from .client import CdpApiClient
from .config import load_config, require_config
from .errors import CdpError, RpcUrlResolutionError

logger = logging.getLogger(__name__)

VERSION = "0.1.0"


def _fail(message: str) -> None:
    click.secho(f"ERROR: {message}", fg="red", err=True)
    sys.exit(1)


def _format_amount(amount: int, decimals: int) -> str:
    if decimals <= 0:
        return str(amount)
    whole, frac = divmod(amount, 10 ** decimals)
    frac_str = str(frac).rjust(decimals, "0").rstrip("0")
    return f"{whole}.{frac_str}" if frac_str else str(whole)


# ============ Main CLI Group ============


@click.group()
@click.version_option(version=VERSION, prog_name="cdp")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """CDP: Coinbase Developer Platform EVM tools."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


# ============ Capabilities ============


@cli.command()
@click.option("--method", default=None, help="Only networks supporting this method")
def networks(method: Optional[str]) -> None:
    """List EVM networks."""
    if method is None:
        names = list(EVM_NETWORKS)
    else:
        names = get_networks_supporting_method(method)
        if not names:
            click.secho(f"No networks support {method!r}.", fg="yellow")
            click.echo(click.style("Known methods: ", dim=True) + ", ".join(METHODS))
            return

    for name in names:
        click.echo(name)


@cli.command()
@click.argument("method")
@click.argument("network")
def supports(method: str, network: str) -> None:
    """Check whether METHOD is available on NETWORK."""
    if is_method_supported_on_network(method, network):
        click.secho(f"{method} is supported on {network}", fg="green")
        return
    click.secho(f"{method} is not supported on {network}", fg="red")
    sys.exit(1)


@cli.command("token")
@click.argument("symbol")
@click.option("--network", default="base", show_default=True, help="Network name")
def token_address(symbol: str, network: str) -> None:
    """Resolve an ERC-20 SYMBOL (e.g. usdc) to its contract address."""
    address = get_erc20_address(symbol, network)
    if address == symbol and not symbol.startswith("0x"):
        _fail(f"Unknown token {symbol!r} on {network}")
    click.echo(address)


# ============ Node RPC ============


@cli.command("rpc-url")
@click.argument("network")
def rpc_url(network: str) -> None:
    """Print the node RPC URL for NETWORK."""
    config = load_config()
    try:
        url = asyncio.run(resolve_base_node_rpc_url(network, config))
    except RpcUrlResolutionError as exc:
        logger.debug("rpc-url failed", exc_info=True)
        _fail(f"{exc} ({exc.reason})")
    click.echo(url)


# ============ API actions ============


@cli.command()
@click.argument("address")
@click.option("--network", default="base", show_default=True, help="Network name")
@click.option("--page-size", default=None, type=int, help="Results per page")
@click.option("--page-token", default=None, help="Continue from a previous page")
def balances(address: str, network: str, page_size: Optional[int], page_token: Optional[str]) -> None:
    """List token balances for ADDRESS."""

    async def _run():
        async with CdpApiClient(require_config()) as client:
            return await list_token_balances(
                client,
                ListTokenBalancesOptions(
                    address=address,
                    network=network,
                    page_size=page_size,
                    page_token=page_token,
                ),
            )

    try:
        result = asyncio.run(_run())
    except (CdpError, httpx.HTTPError) as exc:
        _fail(str(exc))

    if not result.balances:
        click.echo("No balances.")
    for balance in result.balances:
        label = balance.token.symbol or balance.token.contract_address
        click.echo(
            click.style(f"  {label}: ", dim=True)
            + _format_amount(balance.amount.amount, balance.amount.decimals)
        )
    if result.next_page_token:
        click.echo(click.style("Next page token: ", dim=True) + result.next_page_token)


@cli.command()
@click.argument("address")
@click.option("--network", default="base-sepolia", show_default=True, help="Network name")
@click.option(
    "--token",
    default="eth",
    show_default=True,
    type=click.Choice(["eth", "usdc", "eurc", "cbbtc"]),
    help="Token to request",
)
def faucet(address: str, network: str, token: str) -> None:
    """Request testnet funds for ADDRESS."""

    async def _run():
        async with CdpApiClient(require_config()) as client:
            return await request_faucet(
                client,
                RequestFaucetOptions(address=address, network=network, token=token),
            )

    try:
        result = asyncio.run(_run())
    except (CdpError, httpx.HTTPError) as exc:
        _fail(str(exc))

    click.secho("Faucet request sent.", fg="green")
    click.echo(click.style("TX: ", dim=True) + result.transaction_hash)


# ============ Entry Points ============


def main() -> None:
    """CDP CLI entry point."""
    cli()


if __name__ == "__main__":
    main()
