"""Domain value objects for the publisher."""

from publisher.domain.value.identifiers import (
    CategoryName,
    PostName,
    SnapshotName,
    TagName,
)
from publisher.domain.value.slug import derive_post_slug, derive_slug
from publisher.domain.value.types import (
    PUBLISH_TRANSITIONS,
    ErrorKind,
    PublishStage,
    ReconciliationPartialFailure,
    Visibility,
)

__all__ = [
    # Identifiers
    "TagName",
    "CategoryName",
    "PostName",
    "SnapshotName",
    # Slugs
    "derive_slug",
    "derive_post_slug",
    # Types
    "ErrorKind",
    "PublishStage",
    "PUBLISH_TRANSITIONS",
    "ReconciliationPartialFailure",
    "Visibility",
]
