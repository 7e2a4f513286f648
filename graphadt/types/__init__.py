"""Shared enums and type aliases."""

from graphadt.types.base import SearchStrategy

__all__ = ["SearchStrategy"]
