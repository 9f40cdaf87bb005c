"""Assembles outbound requests. No network I/O happens here."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Optional
from urllib.parse import urlencode

from coincheck_client.auth.credentials import Credentials
from coincheck_client.auth.signing import build_message, sign
from coincheck_client.constants import (
    AUTH_HEADERS,
    HEADER_KEY,
    HEADER_NONCE,
    HEADER_SIGNATURE,
    USER_AGENT,
)
from coincheck_client.resilience.errors import InvariantViolation

SUPPORTED_METHODS = ("GET", "POST", "DELETE")


def _minified_json(obj: Any) -> str:
    """Return JSON string with no spaces between separators."""
    return json.dumps(obj, separators=(",", ":"), ensure_ascii=False)


@dataclass(frozen=True)
class AuthHeaders:
    access_key: str
    nonce: int
    signature: str

    def as_dict(self) -> Dict[str, str]:
        values = (self.access_key, self.nonce, self.signature)
        if not all(values):
            raise InvariantViolation("auth headers must be set all together or not at all")
        return {
            HEADER_KEY: self.access_key,
            HEADER_NONCE: str(self.nonce),
            HEADER_SIGNATURE: self.signature,
        }


@dataclass
class PreparedRequest:
    """
    One outbound request. Signed requests carry a nonce and may be
    dispatched once; rebuild with a fresh nonce to try again.
    """

    method: str
    url: str
    path: str
    headers: Dict[str, str]
    body: Optional[str] = None
    nonce: Optional[int] = None
    consumed: bool = field(default=False, compare=False)

    @property
    def is_signed(self) -> bool:
        return self.nonce is not None

    def mark_consumed(self) -> None:
        if self.is_signed and self.consumed:
            raise InvariantViolation(
                f"signed request {self.method} {self.path} was already dispatched; "
                "build a new one with a fresh nonce"
            )
        self.consumed = True


def encode_target(
    method: str, base_url: str, path: str, params: Optional[Dict[str, Any]] = None
) -> "tuple[str, Optional[str]]":
    """Return (url, body): params go in the query for GET/DELETE, in a JSON body for POST."""
    method = method.upper()
    if method not in SUPPORTED_METHODS:
        raise InvariantViolation(f"unsupported http method type: {method}")

    params = {k: v for k, v in (params or {}).items() if v is not None}
    url = base_url + path
    body = None
    if method == "POST":
        body = _minified_json(params) if params else None
    elif params:
        url = url + "?" + urlencode(params)
    return url, body


def sign_request(credentials: Credentials, nonce: int, url: str, body: Optional[str]) -> AuthHeaders:
    signature = sign(
        credentials.secret_key.get_secret_value(), build_message(nonce, url, body)
    )
    return AuthHeaders(
        access_key=credentials.access_key.get_secret_value(),
        nonce=nonce,
        signature=signature,
    )


def build_request(
    method: str,
    url: str,
    path: str,
    body: Optional[str] = None,
    auth: Optional[AuthHeaders] = None,
    user_agent: str = USER_AGENT,
) -> PreparedRequest:
    headers = {"User-Agent": user_agent, "Accept": "application/json"}
    if body is not None or method.upper() in ("POST", "DELETE"):
        headers["Content-Type"] = "application/json"

    nonce = None
    if auth is not None:
        headers.update(auth.as_dict())
        nonce = auth.nonce

    present = [h for h in AUTH_HEADERS if h in headers]
    if present and len(present) != len(AUTH_HEADERS):
        raise InvariantViolation(f"partial auth header set: {present}")

    return PreparedRequest(
        method=method.upper(),
        url=url,
        path=path,
        headers=headers,
        body=body,
        nonce=nonce,
    )
