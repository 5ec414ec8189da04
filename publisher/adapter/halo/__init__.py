"""Halo CMS adapter."""

from .client import HaloAPIClient
from .inmemory import InMemoryHaloClient

__all__ = ["HaloAPIClient", "InMemoryHaloClient"]
