"""List tags use case."""

import logfire
from pydantic import BaseModel

from publisher.domain.repository import HaloRepository


class TagItem(BaseModel):
    """Tag item in response."""

    name: str
    display_name: str
    slug: str


class ListTagsRequest(BaseModel):
    """List tags request."""


class ListTagsResponse(BaseModel):
    """List tags response."""

    tags: list[TagItem]

    def summary(self) -> str:
        """Render as ``displayName (slug)`` lines."""
        lines = [f"Tags ({len(self.tags)}):"]
        lines.extend(f"- {tag.display_name} ({tag.slug})" for tag in self.tags)
        return "\n".join(lines)


class ListTagsUseCase:
    """Use case for listing existing tags."""

    def __init__(self, halo_repository: HaloRepository) -> None:
        """Initialize list tags use case.

        Args:
            halo_repository: Halo content repository
        """
        self.halo_repository = halo_repository

    async def execute(self, request: ListTagsRequest) -> ListTagsResponse:
        """Execute list tags flow.

        Args:
            request: List tags request

        Returns:
            All tags currently on the backend
        """
        with logfire.span("list_tags.execute"):
            tags = await self.halo_repository.get_tags()

            tag_items = [
                TagItem(
                    name=tag.name,
                    display_name=tag.display_name,
                    slug=tag.spec.slug,
                )
                for tag in tags.items
            ]

            logfire.info("Tags listed", count=len(tag_items))

            return ListTagsResponse(tags=tag_items)
