"""Client configuration loaded from the environment."""

import math
import os
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from dotenv import load_dotenv


DEFAULT_BASE_URL = "http://localhost:8080"
DEFAULT_TIMEOUT = 10.0


class ConfigError(ValueError):
    """Raised when the client is constructed with an unusable configuration."""


def _default_headers() -> Mapping[str, str]:
    return MappingProxyType({"Content-Type": "application/json"})


@dataclass(frozen=True)
class ClientConfig:
    """Immutable settings shared by every request an `ApiClient` makes.

    `headers` are sent with each request; per-call overrides are merged on top
    without touching this mapping.
    """

    base_url: str = DEFAULT_BASE_URL
    headers: Mapping[str, str] = field(default_factory=_default_headers)
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        base_url = (self.base_url or "").strip()
        if not base_url.startswith(("http://", "https://")):
            raise ConfigError(f"base_url must start with http:// or https://, got {self.base_url!r}")
        if not math.isfinite(self.timeout) or self.timeout <= 0:
            raise ConfigError(f"timeout must be a positive number, got {self.timeout!r}")
        # frozen: normalise through object.__setattr__
        object.__setattr__(self, "base_url", base_url.rstrip("/"))
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    def url_for(self, endpoint: str) -> str:
        return f"{self.base_url}/{endpoint.lstrip('/')}"

    @classmethod
    def from_env(cls) -> "ClientConfig":
        load_dotenv()
        timeout_env = os.getenv("MESSENGER_API_TIMEOUT", "")
        try:
            timeout = float(timeout_env) if timeout_env else DEFAULT_TIMEOUT
        except ValueError as exc:
            raise ConfigError(f"MESSENGER_API_TIMEOUT must be a number, got {timeout_env!r}") from exc
        return cls(
            base_url=os.getenv("MESSENGER_API_URL", DEFAULT_BASE_URL),
            timeout=timeout,
        )
