from __future__ import annotations

from typing import Any, Optional


def parse_int(value: Any) -> int:
    """Convert a decimal-string API field to an int.

    Plain ints pass through; bools and floats are rejected so a malformed
    payload never silently truncates an amount.
    """
    if isinstance(value, bool):
        raise ValueError(f"Expected a decimal integer, got {value!r}")
    if isinstance(value, int):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Expected a decimal integer string, got {value!r}")
    text = value.strip()
    if not text or not text.lstrip("-").isdigit():
        raise ValueError(f"Expected a decimal integer string, got {value!r}")
    return int(text, 10)


def format_int(value: int) -> str:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Expected an int, got {value!r}")
    return str(value)


def hex_to_bytes(value: Optional[str]) -> bytes:
    if not value:
        return b""
    raw = value[2:] if value.startswith(("0x", "0X")) else value
    if len(raw) % 2:
        raw = "0" + raw
    return bytes.fromhex(raw)


def drop_none(params: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in params.items() if v is not None}
