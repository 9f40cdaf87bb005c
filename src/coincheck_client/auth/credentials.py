"""API key/secret storage. Write-once; values never appear in repr or logs."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping, Optional, Tuple, Union

from dotenv import dotenv_values
from pydantic import BaseModel, ConfigDict, SecretStr, field_validator

from coincheck_client.constants import ENV_ACCESS_KEY, ENV_SECRET_KEY
from coincheck_client.core.logger import logger


class Credentials(BaseModel):
    model_config = ConfigDict(frozen=True)

    access_key: SecretStr
    secret_key: SecretStr

    @field_validator("access_key", "secret_key")
    def not_blank(cls, v: SecretStr) -> SecretStr:
        if not v.get_secret_value().strip():
            raise ValueError("credential values must not be empty")
        return v

    def plain_values(self) -> Tuple[str, str]:
        """Both values in clear text, for log scrubbing."""
        return self.access_key.get_secret_value(), self.secret_key.get_secret_value()

    @classmethod
    def from_values(cls, access_key: str, secret_key: str) -> "Credentials":
        return cls(access_key=SecretStr(access_key), secret_key=SecretStr(secret_key))


def load_credentials(
    env_file: Optional[Union[str, Path]] = None,
    environ: Optional[Mapping[str, str]] = None,
    access_key_env: str = ENV_ACCESS_KEY,
    secret_key_env: str = ENV_SECRET_KEY,
) -> Optional[Credentials]:
    """
    Resolve credentials from the environment, falling back to a .env file.

    The process environment wins over the file, and the file is read without
    touching os.environ. Returns None when either value is missing; the
    caller gets MissingCredentials on the first private call instead.
    """
    env = os.environ if environ is None else environ
    path = Path(env_file) if env_file is not None else Path(".env")
    file_values = dotenv_values(path) if path.exists() else {}

    access_key = env.get(access_key_env) or file_values.get(access_key_env)
    secret_key = env.get(secret_key_env) or file_values.get(secret_key_env)

    if not access_key or not secret_key:
        logger.debug(
            f"{access_key_env}/{secret_key_env} not set; only public endpoints will succeed"
        )
        return None
    return Credentials.from_values(access_key, secret_key)
