"""
Bearer JWT generation for CDP API keys.

Two key formats are accepted as the API key secret:
- PEM-encoded EC (P-256) private key   -> ES256
- base64 Ed25519 key (32-byte seed + 32-byte public key) -> EdDSA

Each token is scoped to a single "METHOD host/path" URI and lives for
two minutes by default.
"""

from __future__ import annotations

import base64
import binascii
import secrets
import time
from dataclasses import dataclass
from typing import Union

import jwt
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec, ed25519

from ..errors import JwtError

JWT_ISSUER = "cdp"
JWT_AUDIENCE = ["cdp_service"]
DEFAULT_EXPIRES_IN = 120

SigningKey = Union[ec.EllipticCurvePrivateKey, ed25519.Ed25519PrivateKey]


@dataclass(frozen=True)
class JwtOptions:
    api_key_id: str
    api_key_secret: str
    request_method: str
    request_host: str
    request_path: str
    expires_in: int = DEFAULT_EXPIRES_IN

    def __repr__(self) -> str:
        return (
            f"JwtOptions(api_key_id={self.api_key_id!r}, "
            f"request_method={self.request_method!r}, "
            f"request_host={self.request_host!r}, "
            f"request_path={self.request_path!r})"
        )

    @property
    def uri(self) -> str:
        return f"{self.request_method.upper()} {self.request_host}{self.request_path}"


def _load_signing_key(secret: str) -> tuple[SigningKey, str]:
    """Parse an API key secret into (private key, JWS algorithm)."""
    if "-----BEGIN" in secret:
        try:
            key = serialization.load_pem_private_key(secret.encode("utf-8"), password=None)
        except (ValueError, TypeError) as exc:
            raise JwtError("Could not parse PEM private key") from exc
        if not isinstance(key, ec.EllipticCurvePrivateKey):
            raise JwtError("PEM key is not an EC private key")
        return key, "ES256"

    try:
        raw = base64.b64decode(secret, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise JwtError("API key secret is neither PEM nor base64 Ed25519") from exc

    if len(raw) != 64:
        raise JwtError(f"Ed25519 key must be 64 bytes, got {len(raw)}")

    # Only the 32-byte seed is needed; the trailing half is the public key
    key = ed25519.Ed25519PrivateKey.from_private_bytes(raw[:32])
    return key, "EdDSA"


def generate_jwt(options: JwtOptions) -> str:
    """
    Generate a signed bearer token for one API request.

    Args:
        options: Key material plus the method/host/path being authorized

    Returns:
        Compact JWS string

    Raises:
        JwtError: If the key cannot be parsed or the request target is incomplete
    """
    if not options.api_key_id:
        raise JwtError("api_key_id is required")
    if not (options.request_method and options.request_host and options.request_path):
        raise JwtError("request_method, request_host and request_path are required")
    if options.expires_in <= 0:
        raise JwtError("expires_in must be positive")

    key, algorithm = _load_signing_key(options.api_key_secret)

    now = int(time.time())
    claims = {
        "sub": options.api_key_id,
        "iss": JWT_ISSUER,
        "aud": JWT_AUDIENCE,
        "nbf": now,
        "iat": now,
        "exp": now + options.expires_in,
        "uris": [options.uri],
    }
    headers = {
        "kid": options.api_key_id,
        "typ": "JWT",
        "nonce": secrets.token_hex(16),
    }

    try:
        return jwt.encode(claims, key, algorithm=algorithm, headers=headers)
    except jwt.PyJWTError as exc:
        raise JwtError(f"JWT signing failed: {exc}") from exc
