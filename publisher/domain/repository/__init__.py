"""Repository interfaces."""

from .halo import HaloRepository

__all__ = ["HaloRepository"]
