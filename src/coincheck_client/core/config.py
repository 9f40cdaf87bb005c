from __future__ import annotations

import os
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, Field, field_validator

from coincheck_client.constants import (
    API_BASE,
    DEFAULT_TIMEOUT_S,
    ENV_ACCESS_KEY,
    ENV_SECRET_KEY,
    USER_AGENT,
)


class ClientSettings(BaseModel):
    base_url: str = API_BASE
    timeout_s: float = Field(default=DEFAULT_TIMEOUT_S, gt=0)
    user_agent: str = USER_AGENT
    access_key_env: str = ENV_ACCESS_KEY
    secret_key_env: str = ENV_SECRET_KEY

    @field_validator("base_url", mode="before")
    def normalize_base_url(cls, v: str) -> str:
        """Strip trailing slashes so paths can be appended verbatim."""
        if not v:
            return API_BASE
        return str(v).rstrip("/")


# Env var -> settings field
_ENV_FIELDS = {
    "COINCHECK_BASE_URL": "base_url",
    "COINCHECK_TIMEOUT_S": "timeout_s",
    "COINCHECK_USER_AGENT": "user_agent",
}


def load_settings(
    overrides: Optional[Dict[str, Any]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> ClientSettings:
    """Load and validate client settings with priority: overrides > environment > defaults."""
    env = os.environ if environ is None else environ
    data: Dict[str, Any] = {}

    # 1. Environment Variables (COINCHECK_ prefix)
    for env_name, field in _ENV_FIELDS.items():
        env_val = env.get(env_name)
        if env_val:
            data[field] = env_val

    # 2. Overrides (CLI flags, explicit kwargs)
    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})

    return ClientSettings(**data)
