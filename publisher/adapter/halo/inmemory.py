"""In-memory implementation of the Halo repository for testing."""

from itertools import count

from publisher.adapter.error import RemoteAPIError
from publisher.domain.model import (
    Category,
    Metadata,
    Post,
    Resource,
    ResourceList,
    Snapshot,
    Tag,
)
from publisher.domain.repository import HaloRepository


class InMemoryHaloClient(HaloRepository):
    """In-memory stand-in for the Halo backend.

    Assigns names from ``generate_name`` when none is requested, rejects
    duplicate names with 409, and lets tests inject failures per operation.
    """

    def __init__(self) -> None:
        """Initialize empty backend."""
        self.tags: dict[str, Tag] = {}
        self.categories: dict[str, Category] = {}
        self.posts: dict[str, Post] = {}
        self.snapshots: dict[str, Snapshot] = {}
        self._failures: dict[tuple[str, str | None], RemoteAPIError] = {}
        self._sequence = count(1)

    def fail(
        self,
        operation: str,
        status_code: int = 500,
        reason: str = "Internal Server Error",
        when: str | None = None,
    ) -> None:
        """Make an operation fail.

        Args:
            operation: Method name, e.g. ``get_tags`` or ``create_tag``
            status_code: Status carried by the raised error
            reason: Status text carried by the raised error
            when: Only fail for this display name (creation calls only)
        """
        self._failures[(operation, when)] = RemoteAPIError(
            status_code, reason, "GET" if operation.startswith("get_") else "POST"
        )

    def _check(self, operation: str, key: str | None = None) -> None:
        error = self._failures.get((operation, key)) or self._failures.get(
            (operation, None)
        )
        if error:
            raise error

    def _assign(self, resource: Resource, store: dict) -> Metadata:
        name = resource.metadata.name or (
            f"{resource.metadata.generate_name or ''}{next(self._sequence)}"
        )
        if name in store:
            raise RemoteAPIError(409, "Conflict", "POST")
        return Metadata(
            name=name, generate_name=resource.metadata.generate_name, version=0
        )

    async def get_tags(self) -> ResourceList[Tag]:
        self._check("get_tags")
        items = list(self.tags.values())
        return ResourceList[Tag](items=items, page=1, size=len(items), total=len(items))

    async def get_categories(self) -> ResourceList[Category]:
        self._check("get_categories")
        items = list(self.categories.values())
        return ResourceList[Category](
            items=items, page=1, size=len(items), total=len(items)
        )

    async def create_tag(self, display_name: str, slug: str | None = None) -> Tag:
        self._check("create_tag", display_name)
        tag = Tag.new(display_name, slug)
        tag = tag.model_copy(update={"metadata": self._assign(tag, self.tags)})
        self.tags[tag.name] = tag
        return tag

    async def create_category(
        self, display_name: str, slug: str | None = None, description: str = ""
    ) -> Category:
        self._check("create_category", display_name)
        category = Category.new(display_name, slug, description)
        category = category.model_copy(
            update={"metadata": self._assign(category, self.categories)}
        )
        self.categories[category.name] = category
        return category

    async def create_post(self, post: Post) -> Post:
        self._check("create_post")
        post = post.model_copy(update={"metadata": self._assign(post, self.posts)})
        self.posts[post.name] = post
        return post

    async def create_snapshot(self, snapshot: Snapshot) -> Snapshot:
        self._check("create_snapshot")
        snapshot = snapshot.model_copy(
            update={"metadata": self._assign(snapshot, self.snapshots)}
        )
        self.snapshots[snapshot.name] = snapshot
        return snapshot

    async def update_post(self, post: Post) -> Post:
        self._check("update_post")
        if post.name not in self.posts:
            raise RemoteAPIError(404, "Not Found", "PUT")
        self.posts[post.name] = post
        return post
