"""Halo content repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime, timezone

from publisher.domain.model import Category, Post, ResourceList, Snapshot, Tag
from publisher.domain.value import SnapshotName


class HaloRepository(ABC):
    """Port for the Halo content resources the publisher reads and writes.

    Every call goes to the backend; implementations must not cache.
    """

    @abstractmethod
    async def get_tags(self) -> ResourceList[Tag]:
        """List all existing tags."""
        pass

    @abstractmethod
    async def get_categories(self) -> ResourceList[Category]:
        """List all existing categories."""
        pass

    @abstractmethod
    async def create_tag(self, display_name: str, slug: str | None = None) -> Tag:
        """Create a tag.

        Args:
            display_name: Human label
            slug: Explicit slug; derived from the display name when omitted

        Returns:
            Created tag as stored by the backend
        """
        pass

    @abstractmethod
    async def create_category(
        self, display_name: str, slug: str | None = None, description: str = ""
    ) -> Category:
        """Create a category.

        Args:
            display_name: Human label
            slug: Explicit slug; derived from the display name when omitted
            description: Optional description

        Returns:
            Created category as stored by the backend
        """
        pass

    @abstractmethod
    async def create_post(self, post: Post) -> Post:
        """Create a draft post.

        Args:
            post: Post to create

        Returns:
            Created post with its backend-assigned name
        """
        pass

    @abstractmethod
    async def create_snapshot(self, snapshot: Snapshot) -> Snapshot:
        """Create a content snapshot.

        Args:
            snapshot: Snapshot to create

        Returns:
            Created snapshot with its backend-assigned name
        """
        pass

    @abstractmethod
    async def update_post(self, post: Post) -> Post:
        """Replace a post resource.

        Args:
            post: Full post resource, including backend-populated fields

        Returns:
            Updated post
        """
        pass

    async def publish_post(self, post: Post, snapshot_name: SnapshotName) -> Post:
        """Attach a snapshot to a created post and mark it published.

        The post fetched from the backend is round-tripped with only the
        snapshot references, ``publish`` and ``publish_time`` changed.

        Args:
            post: Post as returned by :meth:`create_post`
            snapshot_name: Snapshot to release

        Returns:
            Published post
        """
        return await self.update_post(
            post.published(snapshot_name, datetime.now(timezone.utc))
        )
