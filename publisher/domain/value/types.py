"""Domain value objects for the publisher.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum
from typing import Literal

from publisher.domain.value.common import ValueObject


class Visibility(str, Enum):
    """Post visibility on the Halo site."""

    PUBLIC = "PUBLIC"
    INTERNAL = "INTERNAL"
    PRIVATE = "PRIVATE"


class PublishStage(str, Enum):
    """Stages of the publish workflow.

    DRAFT -> AWAITING_TAXONOMY -> CREATED -> SNAPSHOT_CREATED -> PUBLISHED,
    with FAILED reachable from every stage. AWAITING_TAXONOMY is skipped when
    the caller supplies both tags and categories.
    """

    DRAFT = "draft"
    AWAITING_TAXONOMY = "awaiting_taxonomy"
    CREATED = "created"
    SNAPSHOT_CREATED = "snapshot_created"
    PUBLISHED = "published"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        """Whether the workflow can no longer advance."""
        return self in (PublishStage.PUBLISHED, PublishStage.FAILED)


# Allowed forward transitions; FAILED is set directly by the failure handler
PUBLISH_TRANSITIONS: dict[PublishStage, frozenset[PublishStage]] = {
    PublishStage.DRAFT: frozenset(
        {PublishStage.AWAITING_TAXONOMY, PublishStage.CREATED}
    ),
    PublishStage.AWAITING_TAXONOMY: frozenset({PublishStage.CREATED}),
    PublishStage.CREATED: frozenset({PublishStage.SNAPSHOT_CREATED}),
    PublishStage.SNAPSHOT_CREATED: frozenset({PublishStage.PUBLISHED}),
    PublishStage.PUBLISHED: frozenset(),
    PublishStage.FAILED: frozenset(),
}


class ErrorKind(str, Enum):
    """Classification of a failed operation reported back to the caller."""

    REMOTE_API = "remote_api"
    CONNECTION = "connection"
    VALIDATION = "validation"
    UNEXPECTED = "unexpected"


class ReconciliationPartialFailure(ValueObject):
    """A single tag or category creation that failed during reconciliation.

    Recorded and reported as a warning; never aborts the publish flow.
    """

    kind: Literal["tag", "category"]
    name: str
    message: str

    def __str__(self) -> str:
        return f"failed to create {self.kind} '{self.name}': {self.message}"
