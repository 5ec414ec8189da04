"""Snapshot resource: a versioned revision of a post's content."""

from typing import Literal

from pydantic import Field

from publisher.domain.model.common import API_GROUP, DomainModel, Metadata, Resource
from publisher.domain.value import PostName, SnapshotName


class SubjectRef(DomainModel):
    """Reference from a snapshot to the resource it versions."""

    group: str = API_GROUP
    kind: str = "Post"
    name: str = Field(min_length=1)


class SnapshotSpec(DomainModel):
    """Snapshot spec."""

    subject_ref: SubjectRef
    raw_type: str = "markdown"
    raw_patch: str = ""
    content_patch: str = ""
    parent_snapshot_name: str = ""
    owner: str = ""


class Snapshot(Resource):
    """Snapshot resource."""

    kind: Literal["Snapshot"] = "Snapshot"
    metadata: Metadata = Field(
        default_factory=lambda: Metadata(generate_name="snapshot-")
    )
    spec: SnapshotSpec

    @property
    def name(self) -> SnapshotName:
        return SnapshotName(self.metadata.name or "")

    @classmethod
    def first_revision(
        cls, post_name: PostName, content: str, owner: str = ""
    ) -> "Snapshot":
        """Build the initial snapshot for a freshly created post.

        Content is stored as-is for both the raw and rendered patch.

        Args:
            post_name: Backend-assigned name of the subject post
            content: Post body
            owner: Owner recorded on the post

        Returns:
            Snapshot without a parent
        """
        return cls(
            spec=SnapshotSpec(
                subject_ref=SubjectRef(name=post_name),
                raw_patch=content,
                content_patch=content,
                parent_snapshot_name="",
                owner=owner,
            ),
        )
