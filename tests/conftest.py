"""Shared fixtures: credentials, key material and a clean environment."""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec

from cdp.config import CdpConfig

API_KEY_ID = "test-api-key-id"
BASE_PATH = "https://api.cdp.coinbase.com/platform"


@pytest.fixture()
def clean_env():
    """Isolate os.environ; anything load_dotenv writes is rolled back."""
    with patch.dict(os.environ, {}, clear=False):
        for key in ("CDP_API_KEY_ID", "CDP_API_KEY_SECRET", "CDP_BASE_PATH"):
            os.environ.pop(key, None)
        yield os.environ


@pytest.fixture(scope="session")
def ec_private_key() -> ec.EllipticCurvePrivateKey:
    return ec.generate_private_key(ec.SECP256R1())


@pytest.fixture(scope="session")
def ec_pem(ec_private_key: ec.EllipticCurvePrivateKey) -> str:
    return ec_private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.TraditionalOpenSSL,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode("ascii")


@pytest.fixture()
def config(ec_pem: str) -> CdpConfig:
    return CdpConfig(api_key_id=API_KEY_ID, api_key_secret=ec_pem, base_path=BASE_PATH)
