"""Mock providers for testing."""

from .halo import MockHaloProvider
from .container import build_test_container

__all__ = [
    "MockHaloProvider",
    "build_test_container",
]
