"""Unit test configuration.

Unit tests use in-memory adapters and mocked motor clients only; they
never contact MongoDB.
"""
