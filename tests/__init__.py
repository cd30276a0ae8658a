"""
Test package for the Crypto CLI.

Provides fixtures, mocks and test suites for the client, parser,
commands and CLI entry point.
"""

__all__ = [
    "conftest",  # Pytest configuration and fixtures
    "fixtures",  # Coinpaprika payload fixtures
    "integration",  # Service and router wiring over a fake transport
    "mocks",  # Fake market data client
    "property",  # Hypothesis property tests
    "unit",  # Unit test suite
]
