from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

import httpx

from coincheck_client.api.private import PrivateApi
from coincheck_client.api.public import PublicApi
from coincheck_client.auth.credentials import Credentials, load_credentials
from coincheck_client.auth.nonce import NonceGenerator
from coincheck_client.core.config import ClientSettings, load_settings
from coincheck_client.core.logger import SensitiveDataFilter, logger
from coincheck_client.core.rate_limiter import RateLimiter
from coincheck_client.core.rest import RestClient
from coincheck_client.http.transport import HttpDispatcher


class Coincheck:
    """
    Client for the Coincheck REST API.

    `public` works without credentials. `private` endpoints return a
    MISSING_CREDENTIALS failure unless the client was built with keys.
    Each instance owns its credentials and nonce sequence; run as many
    independently-keyed clients side by side as needed.
    """

    def __init__(
        self,
        credentials: Optional[Credentials] = None,
        settings: Optional[ClientSettings] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        nonce_generator: Optional[NonceGenerator] = None,
        rate_limiter: Optional[RateLimiter] = None,
    ):
        self.settings = settings or load_settings()
        self._dispatcher = HttpDispatcher(
            client=http_client,
            timeout_s=self.settings.timeout_s,
        )
        self._rest = RestClient(
            self.settings, self._dispatcher, credentials=credentials,
            nonce_generator=nonce_generator, rate_limiter=rate_limiter,
        )
        # Masks this client's keys in log output while the client is open.
        self._log_filter = (
            SensitiveDataFilter(credentials.plain_values()) if credentials is not None else None
        )
        self.public = PublicApi(self._rest)
        self.private = PrivateApi(self._rest)

    @classmethod
    def with_keys(cls, access_key: str, secret_key: str, **kwargs) -> "Coincheck":
        return cls(credentials=Credentials.from_values(access_key, secret_key), **kwargs)

    @classmethod
    def from_env(cls, env_file: Optional[Union[str, Path]] = None, **kwargs) -> "Coincheck":
        """Credentials from COINCHECK_ACCESS_KEY / COINCHECK_SECRET_KEY (or a .env file)."""
        settings = kwargs.pop("settings", None) or load_settings()
        credentials = load_credentials(
            env_file,
            access_key_env=settings.access_key_env,
            secret_key_env=settings.secret_key_env,
        )
        return cls(credentials=credentials, settings=settings, **kwargs)

    @classmethod
    def without_keys(cls, **kwargs) -> "Coincheck":
        return cls(credentials=None, **kwargs)

    @property
    def has_credentials(self) -> bool:
        return self._rest.has_credentials

    @property
    def last_request_time(self) -> Optional[float]:
        """time.monotonic() of the last dispatched request, None before the first."""
        return self._rest.last_request_time

    async def aclose(self) -> None:
        if self._log_filter is not None:
            logger.removeFilter(self._log_filter)
        await self._dispatcher.aclose()

    async def __aenter__(self) -> "Coincheck":
        if self._log_filter is not None:
            logger.addFilter(self._log_filter)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        mode = "private+public" if self.has_credentials else "public-only"
        return f"Coincheck(base_url={self.settings.base_url!r}, mode={mode})"
