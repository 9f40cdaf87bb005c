"""Classifies response bodies into typed values or typed failures."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel, ValidationError

from coincheck_client.result import ApiResult, ErrorKind, Failure, Success

M = TypeVar("M", bound=BaseModel)


@dataclass(frozen=True)
class RawResponse:
    status_code: int
    text: str


def parse_json(text: str) -> Tuple[bool, Any]:
    try:
        return True, json.loads(text)
    except (TypeError, ValueError):
        return False, None


def error_message(payload: Any) -> Optional[str]:
    """
    Message of an error envelope, or None if payload is not one.
    Coincheck errors look like {"success": false, "error": "..."}.
    """
    if not isinstance(payload, dict) or payload.get("success") is not False:
        return None
    message = payload.get("error") or payload.get("message")
    if isinstance(message, (dict, list)):
        return json.dumps(message, ensure_ascii=False)
    return str(message) if message is not None else "unknown error"


def _first_error_field(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return ""
    return ".".join(str(p) for p in errors[0].get("loc", ()))


def decode(raw: RawResponse, model: Type[M]) -> ApiResult[M]:
    ok, payload = parse_json(raw.text)
    if not ok:
        return Failure(
            ErrorKind.PROTOCOL,
            f"response body is not JSON (status {raw.status_code})",
            code=raw.status_code,
        )

    message = error_message(payload)
    if message is not None:
        return Failure(ErrorKind.API, message, code=raw.status_code)

    if not isinstance(payload, dict):
        return Failure(
            ErrorKind.PROTOCOL,
            f"expected a JSON object, got {type(payload).__name__} (status {raw.status_code})",
            code=raw.status_code,
        )

    try:
        return Success(model.model_validate(payload))
    except ValidationError as e:
        field = _first_error_field(e)
        return Failure(
            ErrorKind.DECODE,
            f"{model.__name__}: invalid or missing field '{field}'",
            field=field,
        )
