"""
Property-based testing suite for the Crypto CLI.

Uses Hypothesis to generate payloads and prices and check ordering,
lookup and comparison invariants.
"""
