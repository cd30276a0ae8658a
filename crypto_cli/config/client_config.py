"""
HTTP client configuration for the Crypto CLI.

Defaults point at the public Coinpaprika API. Environment variables may
override the host and the request timeout.
"""

import os
from dataclasses import dataclass, field

from .. import __version__
from ..utilities.constants import DEFAULT_BASE_URL, DEFAULT_TIMEOUT

ENV_BASE_URL = "CRYPTO_CLI_BASE_URL"
ENV_TIMEOUT = "CRYPTO_CLI_TIMEOUT"


def _default_user_agent() -> str:
    return f"crypto-cli/{__version__}"


@dataclass(frozen=True)
class ClientConfig:
    """Immutable settings used to build the API client."""

    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = field(default_factory=_default_user_agent)

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        """
        Validate configuration values.

        Raises:
            ValueError: If the base URL is empty or the timeout is not positive
        """
        if not self.base_url or not self.base_url.strip():
            raise ValueError("Base URL cannot be empty")

        if self.timeout <= 0:
            raise ValueError(f"Timeout must be positive, got: {self.timeout}")

    def endpoint(self, path: str) -> str:
        """Join the base URL and an endpoint path."""
        return f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "ClientConfig":
        """
        Build configuration from environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ`` (used by tests)

        Returns:
            ClientConfig with any overrides applied

        Raises:
            ValueError: If CRYPTO_CLI_TIMEOUT is not a number
        """
        env = os.environ if environ is None else environ

        base_url = env.get(ENV_BASE_URL) or DEFAULT_BASE_URL

        raw_timeout = env.get(ENV_TIMEOUT)
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                raise ValueError(f"{ENV_TIMEOUT} must be a number, got: {raw_timeout!r}") from None
        else:
            timeout = DEFAULT_TIMEOUT

        return cls(base_url=base_url, timeout=timeout)
