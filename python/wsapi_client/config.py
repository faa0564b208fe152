"""Client configuration."""

import os
from collections.abc import Mapping
from datetime import timedelta

from pydantic import BaseModel, ConfigDict, field_validator

DEFAULT_BASE_URL = "http://127.0.0.1:10002"
DEFAULT_TIMEOUT = timedelta(seconds=30)


class ClientConfig(BaseModel):
    """Client configuration.

    Attributes:
        base_url: Scheme and host of the service, prefixed to every request path
        timeout: Total request timeout, None disables it
        user_agent: User-Agent header sent with every request
    """

    model_config = ConfigDict(frozen=True)

    base_url: str = DEFAULT_BASE_URL
    timeout: timedelta | None = DEFAULT_TIMEOUT
    user_agent: str | None = "wsapi-client"

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            msg = "base_url must start with http:// or https://"
            raise ValueError(msg)
        return value.rstrip("/")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] = os.environ) -> "ClientConfig":
        """Read configuration from the environment.

        `WSAPI_BASE_URL` sets the base URL. `WSAPI_TIMEOUT` sets the timeout in seconds, `0` disables it.
        """
        values: dict[str, object] = {"base_url": environ.get("WSAPI_BASE_URL", DEFAULT_BASE_URL)}
        if (timeout := environ.get("WSAPI_TIMEOUT")) is not None:
            values["timeout"] = None if float(timeout) == 0 else timedelta(seconds=float(timeout))
        return cls.model_validate(values)
