"""
Configuration management for the Crypto CLI.

The client configuration replaces hardcoded hosts and timeouts with a
single immutable object that can be overridden from the environment.
"""

from .client_config import ENV_BASE_URL, ENV_TIMEOUT, ClientConfig

__all__ = ["ClientConfig", "ENV_BASE_URL", "ENV_TIMEOUT"]
