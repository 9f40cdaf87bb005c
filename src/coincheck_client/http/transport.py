from __future__ import annotations

import time
from typing import Optional

import httpx

from coincheck_client.constants import DEFAULT_TIMEOUT_S
from coincheck_client.http.decoder import RawResponse, error_message, parse_json
from coincheck_client.http.request_builder import PreparedRequest
from coincheck_client.resilience.log import log_event, log_provider_error
from coincheck_client.result import ApiResult, ErrorKind, Failure, Success

EXCHANGE_NAME = "coincheck"


class HttpDispatcher:
    """
    Sends prepared requests over a shared httpx.AsyncClient and classifies
    transport and HTTP-status failures. Never retries.
    """

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        timeout_s: float = DEFAULT_TIMEOUT_S,
    ):
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout_s)
        self.last_request_time: Optional[float] = None
        self.dispatch_count = 0

    async def send(self, request: PreparedRequest) -> ApiResult[RawResponse]:
        operation = f"{request.method} {request.path}"
        # From here on a signed request's nonce is spent, whatever the outcome.
        request.mark_consumed()
        self.dispatch_count += 1
        self.last_request_time = time.monotonic()

        try:
            response = await self._client.request(
                request.method,
                request.url,
                headers=request.headers,
                content=request.body.encode("utf-8") if request.body is not None else None,
            )
        except httpx.TimeoutException as e:
            log_provider_error(EXCHANGE_NAME, operation, "TRANSPORT", f"timeout: {type(e).__name__}")
            return Failure(ErrorKind.TRANSPORT, f"Timeout error: {e}")
        except httpx.TransportError as e:
            log_provider_error(EXCHANGE_NAME, operation, "TRANSPORT", type(e).__name__)
            return Failure(ErrorKind.TRANSPORT, f"Connection error: {e}")
        except httpx.DecodingError as e:
            log_provider_error(EXCHANGE_NAME, operation, "PROTOCOL", f"undecodable body: {e}")
            return Failure(ErrorKind.PROTOCOL, f"Response body could not be decoded: {e}")
        except httpx.RequestError as e:
            log_provider_error(EXCHANGE_NAME, operation, "TRANSPORT", type(e).__name__)
            return Failure(ErrorKind.TRANSPORT, f"Request error: {e}")

        raw = RawResponse(status_code=response.status_code, text=response.text)
        if response.is_success:
            log_event(
                "exchange_success",
                {"exchange": EXCHANGE_NAME, "operation": operation, "status": raw.status_code},
            )
            return Success(raw)

        ok, payload = parse_json(raw.text)
        message = error_message(payload) if ok else None
        if message is None:
            log_provider_error(EXCHANGE_NAME, operation, "PROTOCOL", f"HTTP {raw.status_code}")
            return Failure(
                ErrorKind.PROTOCOL,
                f"HTTP error {raw.status_code} with unrecognised body",
                code=raw.status_code,
            )

        log_provider_error(EXCHANGE_NAME, operation, "API", f"HTTP {raw.status_code}: {message}")
        return Failure(ErrorKind.API, message, code=raw.status_code)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
