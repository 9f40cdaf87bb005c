from __future__ import annotations

from typing import Any, Dict, Optional, Type, TypeVar

from pydantic import BaseModel

from coincheck_client.auth.credentials import Credentials
from coincheck_client.auth.nonce import NonceGenerator
from coincheck_client.core.config import ClientSettings
from coincheck_client.core.rate_limiter import RateLimiter
from coincheck_client.endpoints import Endpoint
from coincheck_client.http.decoder import decode
from coincheck_client.http.request_builder import build_request, encode_target, sign_request
from coincheck_client.http.transport import HttpDispatcher
from coincheck_client.result import ApiResult, ErrorKind, Failure

M = TypeVar("M", bound=BaseModel)


class RestClient:
    """
    Authenticated request pipeline shared by every endpoint group of one
    client: credential check, throttle, nonce, signature, build, dispatch, decode.
    Owns the nonce sequence for its credentials.
    """

    def __init__(
        self,
        settings: ClientSettings,
        dispatcher: HttpDispatcher,
        credentials: Optional[Credentials] = None,
        nonce_generator: Optional[NonceGenerator] = None,
        rate_limiter: Optional[RateLimiter] = None,
    ):
        self.settings = settings
        self.dispatcher = dispatcher
        self.rate_limiter = rate_limiter
        self._credentials = credentials
        self._nonces = nonce_generator or NonceGenerator()

    @property
    def has_credentials(self) -> bool:
        return self._credentials is not None

    @property
    def last_request_time(self) -> Optional[float]:
        return self.dispatcher.last_request_time

    async def request(
        self,
        endpoint: Endpoint,
        model: Type[M],
        params: Optional[Dict[str, Any]] = None,
        path_params: Optional[Dict[str, Any]] = None,
    ) -> ApiResult[M]:
        if endpoint.private and self._credentials is None:
            return Failure(
                ErrorKind.MISSING_CREDENTIALS,
                f"{endpoint.method} {endpoint.path} requires API credentials",
            )

        path = endpoint.format_path(**(path_params or {}))
        url, body = encode_target(endpoint.method, self.settings.base_url, path, params)

        if self.rate_limiter is not None:
            await self.rate_limiter.acquire()

        auth = None
        if endpoint.private:
            auth = sign_request(self._credentials, self._nonces.next(), url, body)

        request = build_request(
            endpoint.method, url, path, body=body, auth=auth,
            user_agent=self.settings.user_agent,
        )
        sent = await self.dispatcher.send(request)
        if isinstance(sent, Failure):
            return sent
        return decode(sent.value, model)
