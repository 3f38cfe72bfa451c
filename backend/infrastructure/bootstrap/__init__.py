"""Startup tasks."""

from .seed import seed_super_admin

__all__ = ["seed_super_admin"]
