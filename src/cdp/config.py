"""
Credential configuration for the CDP SDK.

API keys are read from the environment, optionally seeded from
~/.cdp/.env (CDP_API_KEY_ID, CDP_API_KEY_SECRET, CDP_BASE_PATH).

Nothing here is global: callers load a CdpConfig once and pass it to the
client and the RPC URL resolver explicitly.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional
from urllib.parse import urlsplit

from dotenv import load_dotenv

from .errors import ConfigError

# Default config directory
CDP_DIR = Path.home() / ".cdp"
CDP_ENV = CDP_DIR / ".env"

DEFAULT_BASE_PATH = "https://api.cdp.coinbase.com/platform"
CDP_API_HOST = "api.cdp.coinbase.com"


@dataclass(frozen=True)
class CdpConfig:
    api_key_id: str
    api_key_secret: str
    base_path: str = DEFAULT_BASE_PATH

    def __repr__(self) -> str:
        return f"CdpConfig(api_key_id={self.api_key_id!r}, base_path={self.base_path!r})"

    @property
    def base_url(self) -> str:
        """Base path without a trailing slash."""
        return self.base_path.rstrip("/")

    @property
    def host(self) -> str:
        host = urlsplit(self.base_url).netloc
        if not host:
            raise ConfigError(f"Invalid base path: {self.base_path!r}")
        return host

    @property
    def path_prefix(self) -> str:
        return urlsplit(self.base_url).path.rstrip("/")


def load_config(env_path: Optional[Path] = None) -> Optional[CdpConfig]:
    """
    Load API credentials from a .env file and the environment.

    Args:
        env_path: Path to .env file (default: ~/.cdp/.env)

    Returns:
        CdpConfig, or None when the key id or secret is not set
    """
    env_path = env_path or CDP_ENV

    if env_path.exists():
        load_dotenv(env_path, override=False)

    api_key_id = os.environ.get("CDP_API_KEY_ID", "").strip()
    api_key_secret = os.environ.get("CDP_API_KEY_SECRET", "").strip()
    if not api_key_id or not api_key_secret:
        return None

    # Secrets pasted from a JSON key file keep their escaped newlines
    api_key_secret = api_key_secret.replace("\\n", "\n")

    base_path = os.environ.get("CDP_BASE_PATH", "").strip() or DEFAULT_BASE_PATH
    return CdpConfig(
        api_key_id=api_key_id,
        api_key_secret=api_key_secret,
        base_path=base_path,
    )


def require_config(env_path: Optional[Path] = None) -> CdpConfig:
    """Like load_config, but raise ConfigError when credentials are missing."""
    config = load_config(env_path)
    if config is None:
        raise ConfigError(
            "CDP API key not configured. Set CDP_API_KEY_ID and "
            f"CDP_API_KEY_SECRET in the environment or in {env_path or CDP_ENV}."
        )
    return config
