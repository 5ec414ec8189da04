"""List categories use case."""

import logfire
from pydantic import BaseModel

from publisher.domain.repository import HaloRepository


class CategoryItem(BaseModel):
    """Category item in response."""

    name: str
    display_name: str
    slug: str
    description: str | None = None


class ListCategoriesRequest(BaseModel):
    """List categories request."""


class ListCategoriesResponse(BaseModel):
    """List categories response."""

    categories: list[CategoryItem]

    def summary(self) -> str:
        """Render as ``displayName (slug): description`` lines."""
        lines = [f"Categories ({len(self.categories)}):"]
        lines.extend(
            f"- {category.display_name} ({category.slug}): "
            f"{category.description or 'none'}"
            for category in self.categories
        )
        return "\n".join(lines)


class ListCategoriesUseCase:
    """Use case for listing existing categories."""

    def __init__(self, halo_repository: HaloRepository) -> None:
        """Initialize list categories use case.

        Args:
            halo_repository: Halo content repository
        """
        self.halo_repository = halo_repository

    async def execute(self, request: ListCategoriesRequest) -> ListCategoriesResponse:
        """Execute list categories flow.

        Args:
            request: List categories request

        Returns:
            All categories currently on the backend
        """
        with logfire.span("list_categories.execute"):
            categories = await self.halo_repository.get_categories()

            category_items = [
                CategoryItem(
                    name=category.name,
                    display_name=category.display_name,
                    slug=category.spec.slug,
                    description=category.spec.description,
                )
                for category in categories.items
            ]

            logfire.info("Categories listed", count=len(category_items))

            return ListCategoriesResponse(categories=category_items)
