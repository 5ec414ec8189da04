"""Base models for Halo resources."""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

API_VERSION = "content.halo.run/v1alpha1"
API_GROUP = "content.halo.run"


class DomainModel(BaseModel):
    """Base class for all domain models.

    Provides immutability and the camelCase wire aliases Halo uses. Unknown
    fields returned by the backend (status, annotations, version, ...) are
    kept so a fetched resource can be sent back unchanged.
    """

    model_config = ConfigDict(
        frozen=True,  # All domain models are immutable
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )


class Metadata(DomainModel):
    """Resource metadata.

    ``generate_name`` is a prefix hint; the backend assigns a name from it
    when ``name`` is empty.
    """

    name: str | None = None
    generate_name: str | None = None


class Resource(DomainModel):
    """Envelope shared by every Halo extension resource."""

    api_version: str = API_VERSION
    kind: str
    metadata: Metadata = Field(default_factory=Metadata)

    @property
    def name(self) -> str:
        """Backend resource name (empty until assigned)."""
        return self.metadata.name or ""

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the JSON body Halo expects."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


T = TypeVar("T", bound=Resource)


class ResourceList(DomainModel, Generic[T]):
    """Paged listing envelope returned by collection endpoints."""

    items: list[T] = []
    page: int = 0
    size: int = 0
    total: int = 0
