"""
Async REST client for the CDP platform API.

Thin wrapper over httpx: each request gets its own short-lived bearer JWT
scoped to the request's method, host and path. Response bodies are returned
as decoded JSON dicts; field-level conversion lives in cdp.actions.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional
from urllib.parse import quote

import httpx

from .auth.jwt import JwtOptions, generate_jwt
from .config import CdpConfig
from .errors import ApiError
from .utils import drop_none

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


class CdpApiClient:
    """
    Authenticated client for the platform REST endpoints.

    Args:
        config: API credentials and base path
        http_client: Optional pre-built httpx.AsyncClient (not closed by us)
        signer: JWT generator, replaceable for tests
        timeout: Request timeout in seconds when we own the httpx client
    """

    def __init__(
        self,
        config: CdpConfig,
        http_client: Optional[httpx.AsyncClient] = None,
        signer: Callable[[JwtOptions], str] = generate_jwt,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.config = config
        self._signer = signer
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=timeout)

    async def __aenter__(self) -> "CdpApiClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http.aclose()

    # ============ Request plumbing ============

    def _auth_headers(self, method: str, path: str) -> dict[str, str]:
        token = self._signer(
            JwtOptions(
                api_key_id=self.config.api_key_id,
                api_key_secret=self.config.api_key_secret,
                request_method=method,
                request_host=self.config.host,
                request_path=path,
            )
        )
        return {
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
        }

    async def _request(
        self,
        method: str,
        endpoint: str,
        params: Optional[dict[str, Any]] = None,
        json: Optional[dict[str, Any]] = None,
        idempotency_key: Optional[str] = None,
    ) -> dict[str, Any]:
        """
        Send one signed request.

        Args:
            method: HTTP method
            endpoint: Path below the base path (e.g., "/v2/evm/faucet")
            params: Query parameters; None values are dropped
            json: JSON request body
            idempotency_key: Sent as X-Idempotency-Key when set

        Returns:
            Decoded JSON body

        Raises:
            ApiError: If the API answers with a non-2xx status
            httpx.HTTPError: On transport failures
        """
        path = f"{self.config.path_prefix}{endpoint}"
        headers = self._auth_headers(method, path)
        if idempotency_key:
            headers["X-Idempotency-Key"] = idempotency_key

        url = f"https://{self.config.host}{path}"
        logger.debug("%s %s", method, url)
        response = await self._http.request(
            method,
            url,
            params=drop_none(params or {}) or None,
            json=json,
            headers=headers,
        )

        if not response.is_success:
            raise self._api_error(response)

        if not response.content:
            return {}
        return response.json()

    @staticmethod
    def _api_error(response: httpx.Response) -> ApiError:
        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}

        error = ApiError(
            status_code=response.status_code,
            error_type=str(body.get("errorType", "unknown")),
            error_message=str(body.get("errorMessage") or response.text or response.reason_phrase),
            correlation_id=body.get("correlationId") or response.headers.get("x-correlation-id"),
        )
        logger.warning(
            "CDP API error %s (%s), correlation id %s",
            error.status_code,
            error.error_type,
            error.correlation_id,
        )
        return error

    # ============ Endpoints ============

    async def list_data_token_balances(
        self,
        network: str,
        address: str,
        page_size: Optional[int] = None,
        page_token: Optional[str] = None,
    ) -> dict[str, Any]:
        return await self._request(
            "GET",
            f"/v2/data/evm/token-balances/{quote(network, safe='')}/{quote(address, safe='')}",
            params={"pageSize": page_size, "pageToken": page_token},
        )

    async def request_evm_faucet(
        self,
        body: dict[str, Any],
        idempotency_key: Optional[str] = None,
    ) -> dict[str, Any]:
        return await self._request(
            "POST",
            "/v2/evm/faucet",
            json=body,
            idempotency_key=idempotency_key,
        )

    async def send_evm_transaction(
        self,
        address: str,
        body: dict[str, Any],
        idempotency_key: Optional[str] = None,
    ) -> dict[str, Any]:
        return await self._request(
            "POST",
            f"/v2/evm/accounts/{quote(address, safe='')}/send/transaction",
            json=body,
            idempotency_key=idempotency_key,
        )

    async def list_spend_permissions(
        self,
        address: str,
        page_size: Optional[int] = None,
        page_token: Optional[str] = None,
    ) -> dict[str, Any]:
        return await self._request(
            "GET",
            f"/v2/evm/smart-accounts/{quote(address, safe='')}/spend-permissions/list",
            params={"pageSize": page_size, "pageToken": page_token},
        )
