"""Infrastructure providers."""

# Import bases
from .halo import HaloProvider

# Import implementations (needed for __subclasses__())
from .halo import ProdHaloProvider  # noqa: F401

__all__ = [
    "HaloProvider",
    "ProdHaloProvider",
]
