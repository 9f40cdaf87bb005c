"""Signing functions for the Coincheck private API."""

from __future__ import annotations

import hashlib
import hmac
from typing import Optional


def build_message(nonce: int, url: str, body: Optional[str] = None) -> str:
    """
    Canonical message: nonce (decimal) + full URL incl. query string + body.
    Body is the empty string for requests without one.
    """
    return str(nonce) + url + (body or "")


def sign(secret: str, message: str) -> str:
    """HMAC-SHA256 of message keyed with secret, lowercase hex."""
    return hmac.new(
        secret.encode("utf-8"), message.encode("utf-8"), hashlib.sha256
    ).hexdigest()
