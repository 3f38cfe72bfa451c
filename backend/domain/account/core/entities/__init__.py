"""Entities for account domain."""

from .account import Account

__all__ = ["Account"]
