"""Tag resource."""

from typing import Literal

from pydantic import Field

from publisher.domain.model.common import DomainModel, Metadata, Resource
from publisher.domain.value import TagName, derive_slug


class TagSpec(DomainModel):
    """Tag spec."""

    display_name: str = Field(min_length=1)
    slug: str = Field(min_length=1)
    color: str = "#ffffff"
    cover: str = ""


class Tag(Resource):
    """Tag resource.

    Tags are created lazily during reconciliation and never mutated.
    """

    kind: Literal["Tag"] = "Tag"
    metadata: Metadata = Field(
        default_factory=lambda: Metadata(generate_name="tag-")
    )
    spec: TagSpec

    @property
    def name(self) -> TagName:
        return TagName(self.metadata.name or "")

    @property
    def display_name(self) -> str:
        return self.spec.display_name

    @classmethod
    def new(cls, display_name: str, slug: str | None = None) -> "Tag":
        """Build a tag for creation.

        Args:
            display_name: Human label
            slug: Explicit slug; derived from the display name when omitted

        Returns:
            Tag whose metadata name equals its slug
        """
        slug = slug or derive_slug(display_name)
        return cls(
            metadata=Metadata(name=slug, generate_name="tag-"),
            spec=TagSpec(display_name=display_name, slug=slug),
        )
