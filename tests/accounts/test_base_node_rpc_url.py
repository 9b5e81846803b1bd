"""Tests for node RPC URL resolution.

The signer and the HTTP transport are both faked: the signer with a Mock,
the transport with httpx.MockTransport.
"""

from __future__ import annotations

import json
from unittest.mock import Mock

import httpx
import pytest

from cdp.accounts.evm.base_node_rpc_url import (
    TOKEN_URL,
    get_base_node_rpc_url,
    resolve_base_node_rpc_url,
)
from cdp.auth.jwt import JwtOptions
from cdp.config import CdpConfig
from cdp.errors import JwtError, RpcUrlResolutionError

API_KEY_ID = "test-api-key-id"
API_KEY_SECRET = "test-api-key-secret"
TOKEN_ID = "token-123-abc"
MOCK_JWT = "mock.jwt.token"


def _config(base_path: str = "https://api.cdp.coinbase.com/platform") -> CdpConfig:
    return CdpConfig(api_key_id=API_KEY_ID, api_key_secret=API_KEY_SECRET, base_path=base_path)


class RecordingTransport:
    """MockTransport handler that records requests and answers with a canned body."""

    def __init__(self, body: bytes = json.dumps({"id": TOKEN_ID}).encode(), status: int = 200) -> None:
        self.body = body
        self.status = status
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status, content=self.body)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))


def _failing_client() -> httpx.AsyncClient:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Network error", request=request)

    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_returns_rpc_url_for_base() -> None:
    signer = Mock(return_value=MOCK_JWT)
    transport = RecordingTransport()

    async with transport.client() as client:
        result = await get_base_node_rpc_url("base", _config(), http_client=client, signer=signer)

    assert result == "https://api.cdp.coinbase.com/rpc/v1/base/token-123-abc"
    signer.assert_called_once_with(
        JwtOptions(
            api_key_id=API_KEY_ID,
            api_key_secret=API_KEY_SECRET,
            request_method="GET",
            request_host="api.cdp.coinbase.com",
            request_path="/apikeys/v1/tokens/active",
        )
    )

    assert len(transport.requests) == 1
    request = transport.requests[0]
    assert request.method == "GET"
    assert str(request.url) == TOKEN_URL == "https://api.cdp.coinbase.com/apikeys/v1/tokens/active"
    assert request.headers["Authorization"] == f"Bearer {MOCK_JWT}"
    assert request.headers["Content-Type"] == "application/json"


@pytest.mark.asyncio
async def test_returns_rpc_url_for_base_sepolia() -> None:
    async with RecordingTransport().client() as client:
        result = await get_base_node_rpc_url(
            "base-sepolia", _config(), http_client=client, signer=Mock(return_value=MOCK_JWT)
        )

    assert result == "https://api.cdp.coinbase.com/rpc/v1/base-sepolia/token-123-abc"


@pytest.mark.asyncio
async def test_minimal_token_body() -> None:
    transport = RecordingTransport(body=b'{"id":"T"}')
    async with transport.client() as client:
        result = await get_base_node_rpc_url("base", _config(), http_client=client, signer=Mock(return_value="J"))

    assert result == "https://api.cdp.coinbase.com/rpc/v1/base/T"


@pytest.mark.asyncio
async def test_returns_none_when_config_missing() -> None:
    signer = Mock(return_value=MOCK_JWT)
    transport = RecordingTransport()

    async with transport.client() as client:
        result = await get_base_node_rpc_url("base", None, http_client=client, signer=signer)

    assert result is None
    signer.assert_not_called()
    assert transport.requests == []


@pytest.mark.asyncio
async def test_returns_none_when_config_missing_without_client() -> None:
    signer = Mock(return_value=MOCK_JWT)
    assert await get_base_node_rpc_url("polygon", None, signer=signer) is None
    signer.assert_not_called()


@pytest.mark.asyncio
async def test_returns_none_when_jwt_generation_fails() -> None:
    signer = Mock(side_effect=JwtError("JWT generation failed"))
    transport = RecordingTransport()

    async with transport.client() as client:
        result = await get_base_node_rpc_url("base", _config(), http_client=client, signer=signer)

    assert result is None
    assert transport.requests == []


@pytest.mark.asyncio
async def test_returns_none_when_fetch_fails() -> None:
    async with _failing_client() as client:
        result = await get_base_node_rpc_url(
            "base", _config(), http_client=client, signer=Mock(return_value=MOCK_JWT)
        )

    assert result is None


@pytest.mark.asyncio
async def test_returns_none_when_json_parsing_fails() -> None:
    async with RecordingTransport(body=b"<html>not json</html>").client() as client:
        result = await get_base_node_rpc_url(
            "base", _config(), http_client=client, signer=Mock(return_value=MOCK_JWT)
        )

    assert result is None


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [b"{}", b'{"id": null}', b'{"id": 7}', b"[]", b'"token"'])
async def test_returns_none_when_id_missing(body: bytes) -> None:
    async with RecordingTransport(body=body).client() as client:
        result = await get_base_node_rpc_url(
            "base", _config(), http_client=client, signer=Mock(return_value=MOCK_JWT)
        )

    assert result is None


@pytest.mark.asyncio
async def test_returns_none_when_client_is_closed() -> None:
    transport = RecordingTransport()
    client = transport.client()
    await client.aclose()

    result = await get_base_node_rpc_url(
        "base", _config(), http_client=client, signer=Mock(return_value=MOCK_JWT)
    )

    assert result is None
    assert transport.requests == []


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "base_path",
    [
        "https://api.cdp.coinbase.com/platform",
        "https://api.cdp.coinbase.com/platform/",
        "https://api.cdp.coinbase.com",
        "https://api.cdp.coinbase.com/",
        "https://staging.example.com/custom/prefix",
    ],
)
async def test_base_path_does_not_affect_url(base_path: str) -> None:
    signer = Mock(return_value=MOCK_JWT)
    transport = RecordingTransport()

    async with transport.client() as client:
        result = await get_base_node_rpc_url("base", _config(base_path), http_client=client, signer=signer)

    assert result == "https://api.cdp.coinbase.com/rpc/v1/base/token-123-abc"
    assert str(transport.requests[0].url) == TOKEN_URL
    assert signer.call_args.args[0].request_host == "api.cdp.coinbase.com"


class TestResolveBaseNodeRpcUrl:
    """The raising variant reports which step failed."""

    @pytest.mark.asyncio
    async def test_config_missing(self) -> None:
        with pytest.raises(RpcUrlResolutionError) as excinfo:
            await resolve_base_node_rpc_url("base", None)
        assert excinfo.value.reason == RpcUrlResolutionError.CONFIG_MISSING

    @pytest.mark.asyncio
    async def test_sign_failed(self) -> None:
        signer = Mock(side_effect=RuntimeError("bad key"))
        with pytest.raises(RpcUrlResolutionError) as excinfo:
            await resolve_base_node_rpc_url("base", _config(), signer=signer)
        assert excinfo.value.reason == RpcUrlResolutionError.SIGN_FAILED
        assert isinstance(excinfo.value.__cause__, RuntimeError)

    @pytest.mark.asyncio
    async def test_transport_failed(self) -> None:
        async with _failing_client() as client:
            with pytest.raises(RpcUrlResolutionError) as excinfo:
                await resolve_base_node_rpc_url(
                    "base", _config(), http_client=client, signer=Mock(return_value=MOCK_JWT)
                )
        assert excinfo.value.reason == RpcUrlResolutionError.TRANSPORT_FAILED

    @pytest.mark.asyncio
    async def test_decode_failed(self) -> None:
        async with RecordingTransport(body=b"garbage").client() as client:
            with pytest.raises(RpcUrlResolutionError) as excinfo:
                await resolve_base_node_rpc_url(
                    "base", _config(), http_client=client, signer=Mock(return_value=MOCK_JWT)
                )
        assert excinfo.value.reason == RpcUrlResolutionError.DECODE_FAILED

    @pytest.mark.asyncio
    async def test_real_signer_with_bad_secret(self) -> None:
        # "test-api-key-secret" is neither PEM nor base64 Ed25519
        with pytest.raises(RpcUrlResolutionError) as excinfo:
            await resolve_base_node_rpc_url("base", _config())
        assert excinfo.value.reason == RpcUrlResolutionError.SIGN_FAILED

    @pytest.mark.asyncio
    async def test_closed_client_is_transport_failure(self) -> None:
        client = RecordingTransport().client()
        await client.aclose()
        with pytest.raises(RpcUrlResolutionError) as excinfo:
            await resolve_base_node_rpc_url(
                "base", _config(), http_client=client, signer=Mock(return_value=MOCK_JWT)
            )
        assert excinfo.value.reason == RpcUrlResolutionError.TRANSPORT_FAILED
