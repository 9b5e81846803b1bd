from __future__ import annotations

from typing import Optional


class CdpError(Exception):
    pass


class ConfigError(CdpError):
    pass


class JwtError(CdpError, ValueError):
    pass


class UnsupportedNetworkError(CdpError, ValueError):
    def __init__(self, method: str, network: str, supported: list[str]) -> None:
        super().__init__(
            f"{method} is not supported on network {network!r}. "
            f"Supported networks: {', '.join(supported) or 'none'}"
        )
        self.method = method
        self.network = network
        self.supported = supported


class ApiError(CdpError):
    """Non-2xx response from the platform REST API."""

    def __init__(
        self,
        status_code: int,
        error_type: str,
        error_message: str,
        correlation_id: Optional[str] = None,
    ) -> None:
        super().__init__(f"{status_code} {error_type}: {error_message}")
        self.status_code = status_code
        self.error_type = error_type
        self.error_message = error_message
        self.correlation_id = correlation_id


class RpcUrlResolutionError(CdpError):
    """Node RPC URL could not be built.

    ``reason`` is one of ``config_missing``, ``sign_failed``,
    ``transport_failed`` or ``decode_failed``.
    """

    CONFIG_MISSING = "config_missing"
    SIGN_FAILED = "sign_failed"
    TRANSPORT_FAILED = "transport_failed"
    DECODE_FAILED = "decode_failed"

    def __init__(self, reason: str, message: str) -> None:
        super().__init__(message)
        self.reason = reason
