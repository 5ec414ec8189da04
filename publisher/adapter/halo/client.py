"""Halo REST client implementation.

Talks to the content.halo.run extension API with a bearer token. Every call
opens its own httpx client; nothing is cached between calls.
"""

from typing import Any, TypeVar

import httpx
import logfire
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from publisher.adapter.error import (
    HaloConnectionError,
    HaloResponseError,
    RemoteAPIError,
)
from publisher.config import HaloSettings
from publisher.domain.error import ValidationError
from publisher.domain.model import Category, Post, ResourceList, Snapshot, Tag
from publisher.domain.repository import HaloRepository

CONTENT_API = "/apis/content.halo.run/v1alpha1"
TAGS_ENDPOINT = f"{CONTENT_API}/tags"
CATEGORIES_ENDPOINT = f"{CONTENT_API}/categories"
POSTS_ENDPOINT = f"{CONTENT_API}/posts"
SNAPSHOTS_ENDPOINT = f"{CONTENT_API}/snapshots"

M = TypeVar("M", bound=BaseModel)


class HaloAPIClient(HaloRepository):
    """Halo API client backed by httpx."""

    def __init__(self, settings: HaloSettings) -> None:
        """Initialize Halo API client.

        Args:
            settings: Backend base URL, bearer token and timeout
        """
        self.settings = settings

    def resolve_url(self, endpoint: str) -> str:
        """Resolve an endpoint to an absolute URL.

        Paths under ``/apis/`` hang off the base URL; anything else is
        relative to the versioned ``/api/v1alpha1`` root.
        """
        if endpoint.startswith("/apis/"):
            return f"{self.settings.base_url}{endpoint}"
        return f"{self.settings.api_url}{endpoint}"

    async def request(
        self, endpoint: str, method: str = "GET", data: dict[str, Any] | None = None
    ) -> Any:
        """Issue an authenticated request and return the parsed JSON body.

        Args:
            endpoint: Resource path
            method: HTTP verb
            data: Optional JSON payload

        Returns:
            Parsed JSON body, or None for an empty response

        Raises:
            RemoteAPIError: If the backend answers with a non-2xx status
            HaloConnectionError: If the request could not be sent
            HaloResponseError: If a successful response body is not JSON
        """
        url = self.resolve_url(endpoint)

        with logfire.span("halo_client.request", method=method, url=url):
            try:
                async with httpx.AsyncClient() as client:
                    response = await client.request(
                        method,
                        url,
                        headers=self.settings.headers(),
                        json=data,
                        timeout=self.settings.timeout,
                    )
            except httpx.HTTPError as e:
                logfire.error("Halo request HTTP error", url=url, error=str(e))
                raise HaloConnectionError(
                    f"HTTP error calling {method} {url}: {e}"
                ) from e

            if not response.is_success:
                logfire.error(
                    "Halo request failed",
                    method=method,
                    url=url,
                    status_code=response.status_code,
                    error=response.text,
                )
                raise RemoteAPIError(
                    response.status_code, response.reason_phrase, method, url
                )

            if not response.content:
                return None
            try:
                return response.json()
            except ValueError as e:
                logfire.error("Halo response is not JSON", method=method, url=url)
                raise HaloResponseError(
                    f"Invalid JSON response from {method} {url}"
                ) from e

    @staticmethod
    def _parse(model: type[M], payload: Any) -> M:
        """Validate a response body into a resource model."""
        try:
            return model.model_validate(payload)
        except PydanticValidationError as e:
            raise ValidationError(
                f"Unexpected {model.__name__} payload from Halo: {e}"
            ) from e

    async def get_tags(self) -> ResourceList[Tag]:
        payload = await self.request(TAGS_ENDPOINT)
        return self._parse(ResourceList[Tag], payload)

    async def get_categories(self) -> ResourceList[Category]:
        payload = await self.request(CATEGORIES_ENDPOINT)
        return self._parse(ResourceList[Category], payload)

    async def create_tag(self, display_name: str, slug: str | None = None) -> Tag:
        tag = Tag.new(display_name, slug)
        payload = await self.request(TAGS_ENDPOINT, "POST", tag.to_payload())
        return self._parse(Tag, payload)

    async def create_category(
        self, display_name: str, slug: str | None = None, description: str = ""
    ) -> Category:
        category = Category.new(display_name, slug, description)
        payload = await self.request(
            CATEGORIES_ENDPOINT, "POST", category.to_payload()
        )
        return self._parse(Category, payload)

    async def create_post(self, post: Post) -> Post:
        payload = await self.request(POSTS_ENDPOINT, "POST", post.to_payload())
        return self._parse(Post, payload)

    async def create_snapshot(self, snapshot: Snapshot) -> Snapshot:
        payload = await self.request(
            SNAPSHOTS_ENDPOINT, "POST", snapshot.to_payload()
        )
        return self._parse(Snapshot, payload)

    async def update_post(self, post: Post) -> Post:
        if not post.name:
            raise ValidationError("Cannot update a post without a name")
        payload = await self.request(
            f"{POSTS_ENDPOINT}/{post.name}", "PUT", post.to_payload()
        )
        return self._parse(Post, payload)
