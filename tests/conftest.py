"""Test configuration and fixtures."""

import httpx
import pytest

from publisher.adapter.halo import InMemoryHaloClient
from publisher.config import HaloSettings
from publisher.domain.model import Category, Metadata, Tag


def make_tag(name: str, display_name: str, slug: str | None = None) -> Tag:
    """Helper to build a tag as the backend would return it."""
    tag = Tag.new(display_name, slug or name)
    return tag.model_copy(update={"metadata": Metadata(name=name)})


def make_category(name: str, display_name: str, description: str = "") -> Category:
    """Helper to build a category as the backend would return it."""
    category = Category.new(display_name, name, description)
    return category.model_copy(update={"metadata": Metadata(name=name)})


@pytest.fixture
def halo_settings() -> HaloSettings:
    """Settings pointing at a local Halo instance, independent of the environment."""
    return HaloSettings(base_url="http://localhost:8090", token="test-token", timeout=5.0)


@pytest.fixture
def halo() -> InMemoryHaloClient:
    """Empty in-memory Halo backend."""
    return InMemoryHaloClient()


EMPTY_LIST = {"items": [], "page": 1, "size": 0, "total": 0}


def route_requests(routes):
    """Build a stand-in for ``httpx.AsyncClient.request`` that answers by route.

    Args:
        routes: Maps ``(method, url suffix)`` to a callable taking the JSON
            payload and returning an ``httpx.Response``

    Returns:
        Async callable; unknown routes get a 404
    """

    async def _request(method, url, headers=None, json=None, timeout=None):
        for (route_method, suffix), respond in routes.items():
            if method == route_method and url.endswith(suffix):
                return respond(json)
        return httpx.Response(404)

    return _request
