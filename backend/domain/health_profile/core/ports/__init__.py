"""Ports for health profile domain."""

from .repository import IHealthProfileRepository

__all__ = ["IHealthProfileRepository"]
