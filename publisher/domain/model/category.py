"""Category resource."""

from typing import Literal

from pydantic import Field

from publisher.domain.model.common import DomainModel, Metadata, Resource
from publisher.domain.value import CategoryName, derive_slug


class CategorySpec(DomainModel):
    """Category spec."""

    display_name: str = Field(min_length=1)
    slug: str = Field(min_length=1)
    description: str | None = ""
    cover: str = ""
    template: str = ""
    priority: int = 0
    children: list[str] = []


class Category(Resource):
    """Category resource."""

    kind: Literal["Category"] = "Category"
    metadata: Metadata = Field(
        default_factory=lambda: Metadata(generate_name="category-")
    )
    spec: CategorySpec

    @property
    def name(self) -> CategoryName:
        return CategoryName(self.metadata.name or "")

    @property
    def display_name(self) -> str:
        return self.spec.display_name

    @classmethod
    def new(
        cls, display_name: str, slug: str | None = None, description: str = ""
    ) -> "Category":
        """Build a category for creation.

        Args:
            display_name: Human label
            slug: Explicit slug; derived from the display name when omitted
            description: Optional description

        Returns:
            Category whose metadata name equals its slug
        """
        slug = slug or derive_slug(display_name)
        return cls(
            metadata=Metadata(name=slug, generate_name="category-"),
            spec=CategorySpec(
                display_name=display_name, slug=slug, description=description
            ),
        )
