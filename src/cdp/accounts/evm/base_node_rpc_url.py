"""
Node RPC URL resolution.

Exchanges the API key for an active client token id and builds the
per-network node RPC endpoint from it:

    GET https://api.cdp.coinbase.com/apikeys/v1/tokens/active  -> {"id": ...}
    https://api.cdp.coinbase.com/rpc/v1/<network>/<id>

The token endpoint always lives on the canonical API host; a custom
base path in the config does not move it.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

import httpx

from ...auth.jwt import JwtOptions, generate_jwt
from ...config import CDP_API_HOST, CdpConfig
from ...errors import RpcUrlResolutionError

logger = logging.getLogger(__name__)

TOKEN_METHOD = "GET"
TOKEN_PATH = "/apikeys/v1/tokens/active"
TOKEN_URL = f"https://{CDP_API_HOST}{TOKEN_PATH}"
RPC_URL_TEMPLATE = "https://" + CDP_API_HOST + "/rpc/v1/{network}/{token_id}"


async def _fetch_token_id(http_client: httpx.AsyncClient, jwt: str) -> str:
    headers = {
        "Authorization": f"Bearer {jwt}",
        "Content-Type": "application/json",
    }
    try:
        # A closed client raises RuntimeError rather than an httpx error
        response = await http_client.get(TOKEN_URL, headers=headers)
    except (httpx.HTTPError, RuntimeError) as exc:
        raise RpcUrlResolutionError(
            RpcUrlResolutionError.TRANSPORT_FAILED,
            f"Token request failed: {exc}",
        ) from exc

    try:
        body = response.json()
    except ValueError as exc:
        raise RpcUrlResolutionError(
            RpcUrlResolutionError.DECODE_FAILED,
            f"Token response is not JSON (HTTP {response.status_code})",
        ) from exc

    token_id = body.get("id") if isinstance(body, dict) else None
    if not isinstance(token_id, str) or not token_id:
        raise RpcUrlResolutionError(
            RpcUrlResolutionError.DECODE_FAILED,
            f"Token response has no id (HTTP {response.status_code})",
        )
    return token_id


async def resolve_base_node_rpc_url(
    network: str,
    config: Optional[CdpConfig],
    *,
    http_client: Optional[httpx.AsyncClient] = None,
    signer: Callable[[JwtOptions], str] = generate_jwt,
) -> str:
    """
    Build the node RPC URL for a network, raising on failure.

    Args:
        network: Network identifier (e.g., "base", "base-sepolia")
        config: API credentials; None means not configured
        http_client: Optional httpx.AsyncClient to send the token request with
        signer: JWT generator

    Returns:
        https://api.cdp.coinbase.com/rpc/v1/<network>/<token id>

    Raises:
        RpcUrlResolutionError: With reason config_missing, sign_failed,
            transport_failed or decode_failed
    """
    if config is None:
        raise RpcUrlResolutionError(
            RpcUrlResolutionError.CONFIG_MISSING,
            "CDP API key not configured",
        )

    try:
        jwt = signer(
            JwtOptions(
                api_key_id=config.api_key_id,
                api_key_secret=config.api_key_secret,
                request_method=TOKEN_METHOD,
                request_host=CDP_API_HOST,
                request_path=TOKEN_PATH,
            )
        )
    except Exception as exc:
        raise RpcUrlResolutionError(
            RpcUrlResolutionError.SIGN_FAILED,
            f"JWT generation failed: {exc}",
        ) from exc

    if http_client is not None:
        token_id = await _fetch_token_id(http_client, jwt)
    else:
        async with httpx.AsyncClient(timeout=30) as client:
            token_id = await _fetch_token_id(client, jwt)

    return RPC_URL_TEMPLATE.format(network=network, token_id=token_id)


async def get_base_node_rpc_url(
    network: str,
    config: Optional[CdpConfig],
    *,
    http_client: Optional[httpx.AsyncClient] = None,
    signer: Callable[[JwtOptions], str] = generate_jwt,
) -> Optional[str]:
    """
    Build the node RPC URL for a network, or None if it cannot be built.

    Missing config, signing failure, transport failure and an undecodable
    response all yield None. Use resolve_base_node_rpc_url to tell them apart.
    """
    try:
        return await resolve_base_node_rpc_url(
            network, config, http_client=http_client, signer=signer
        )
    except RpcUrlResolutionError as exc:
        logger.debug("No node RPC URL for %s (%s): %s", network, exc.reason, exc)
        return None
