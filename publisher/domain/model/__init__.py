"""Domain model resources for the publisher."""

from publisher.domain.model.category import Category, CategorySpec
from publisher.domain.model.common import Metadata, Resource, ResourceList
from publisher.domain.model.post import Excerpt, Post, PostSpec
from publisher.domain.model.snapshot import Snapshot, SnapshotSpec, SubjectRef
from publisher.domain.model.tag import Tag, TagSpec

__all__ = [
    "Metadata",
    "Resource",
    "ResourceList",
    "Tag",
    "TagSpec",
    "Category",
    "CategorySpec",
    "Post",
    "PostSpec",
    "Excerpt",
    "Snapshot",
    "SnapshotSpec",
    "SubjectRef",
]
