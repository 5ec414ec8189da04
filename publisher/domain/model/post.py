"""Post resource.

A post is created as a draft, gets its content snapshot attached, and is
then flipped to published in a follow-up update.
"""

from datetime import datetime, timezone
from typing import Literal

from pydantic import Field, field_serializer, field_validator

from publisher.domain.model.common import DomainModel, Metadata, Resource
from publisher.domain.value import PostName, SnapshotName, Visibility


class Excerpt(DomainModel):
    """Post excerpt; Halo generates one from the content when auto_generate is set."""

    auto_generate: bool = True
    raw: str = ""


class PostSpec(DomainModel):
    """Post spec."""

    title: str = Field(min_length=1)
    slug: str = Field(min_length=1)
    template: str = ""
    cover: str = ""
    deleted: bool = False
    publish: bool = False
    publish_time: datetime | None = None
    pinned: bool = False
    allow_comment: bool = True
    visible: Visibility = Visibility.PUBLIC
    priority: int = 0
    excerpt: Excerpt = Excerpt()
    tags: list[str] = []
    categories: list[str] = []
    head_snapshot: str | None = None
    base_snapshot: str | None = None
    release_snapshot: str | None = None
    owner: str = ""

    @field_validator("slug")
    @classmethod
    def validate_slug(cls, v: str) -> str:
        """Reject slugs that cannot appear in a URL path segment."""
        if any(ch.isspace() for ch in v) or "/" in v:
            raise ValueError("Slug must not contain whitespace or slashes")
        return v

    @field_serializer("publish_time")
    def serialize_publish_time(self, value: datetime | None) -> str | None:
        """Halo expects UTC instants with a Z suffix."""
        if value is None:
            return None
        return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ")


class Post(Resource):
    """Post resource."""

    kind: Literal["Post"] = "Post"
    metadata: Metadata = Field(
        default_factory=lambda: Metadata(generate_name="post-")
    )
    spec: PostSpec

    @property
    def name(self) -> PostName:
        return PostName(self.metadata.name or "")

    @classmethod
    def draft(
        cls,
        title: str,
        slug: str,
        tags: list[str],
        categories: list[str],
        excerpt: str | None = None,
        allow_comment: bool = True,
        pinned: bool = False,
    ) -> "Post":
        """Build an unpublished, publicly visible post.

        Tag and category names are de-duplicated, keeping first occurrence.

        Args:
            title: Post title
            slug: URL slug, also used as the requested metadata name
            tags: Tag resource names
            categories: Category resource names
            excerpt: Explicit excerpt; auto-generated by Halo when omitted
            allow_comment: Whether comments are allowed
            pinned: Whether the post is pinned

        Returns:
            Draft post ready for creation
        """
        return cls(
            metadata=Metadata(name=slug, generate_name="post-"),
            spec=PostSpec(
                title=title,
                slug=slug,
                publish=False,
                publish_time=None,
                pinned=pinned,
                allow_comment=allow_comment,
                visible=Visibility.PUBLIC,
                excerpt=Excerpt(auto_generate=not excerpt, raw=excerpt or ""),
                tags=list(dict.fromkeys(tags)),
                categories=list(dict.fromkeys(categories)),
            ),
        )

    def published(self, snapshot_name: SnapshotName, at: datetime) -> "Post":
        """Return a copy pointing at the snapshot and marked as published.

        Args:
            snapshot_name: Content snapshot to release
            at: Publish time

        Returns:
            Updated post; backend-populated fields are carried over unchanged
        """
        spec = self.spec.model_copy(
            update={
                "head_snapshot": snapshot_name,
                "base_snapshot": self.spec.base_snapshot or snapshot_name,
                "release_snapshot": snapshot_name,
                "publish": True,
                "publish_time": at,
            }
        )
        return self.model_copy(update={"spec": spec})
