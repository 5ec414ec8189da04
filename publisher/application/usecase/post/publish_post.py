"""Publish post use case.

Turns a title and body into a published Halo post:

    DRAFT -> [AWAITING_TAXONOMY] -> CREATED -> SNAPSHOT_CREATED -> PUBLISHED

Any stage can fail; the failure is returned as data rather than raised so the
tool layer can report it. Resources created before a failure are left on the
backend.
"""

import logfire
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from publisher.adapter.error import AdapterError, HaloConnectionError, RemoteAPIError
from publisher.application.usecase.base import BaseUseCase
from publisher.config import HaloSettings
from publisher.domain.error import DomainError, ValidationError
from publisher.domain.model import Post, Snapshot
from publisher.domain.repository import HaloRepository
from publisher.domain.service import ContentAnalyzer
from publisher.domain.value import (
    PUBLISH_TRANSITIONS,
    ErrorKind,
    PublishStage,
    derive_post_slug,
)


class PublishPostRequest(BaseModel):
    """Publish post request."""

    title: str
    content: str
    excerpt: str | None = None
    slug: str | None = None
    tags: list[str] | None = None  # Inferred when missing or empty
    categories: list[str] | None = None  # Inferred when missing or empty
    allow_comment: bool = True
    pinned: bool = False


class PublishFailure(BaseModel):
    """Why and where a publish attempt stopped."""

    kind: ErrorKind
    message: str
    stage: PublishStage  # Last stage reached before the failure
    status_code: int | None = None


class PublishPostResponse(BaseModel):
    """Publish post response."""

    stage: PublishStage
    title: str
    slug: str | None = None
    tags: list[str] = []
    categories: list[str] = []
    post_name: str | None = None
    snapshot_name: str | None = None
    url: str | None = None
    warnings: list[str] = []
    error: PublishFailure | None = None

    @property
    def success(self) -> bool:
        return self.stage == PublishStage.PUBLISHED

    def summary(self) -> str:
        """Render a human-readable result for the calling agent."""
        if not self.success:
            message = self.error.message if self.error else "unknown error"
            lines = [f"Failed to publish post: {message}"]
            if self.post_name:
                lines.append(f"Post {self.post_name} was left as an unpublished draft.")
            return "\n".join(lines)

        lines = [
            "Post published successfully!",
            f"Title: {self.title}",
            f"Slug: {self.slug}",
            f"Tags: {', '.join(self.tags)}",
            f"Categories: {', '.join(self.categories)}",
            f"Post ID: {self.post_name}",
            f"URL: {self.url}",
        ]
        if self.warnings:
            lines.append("Warnings:")
            lines.extend(f"- {warning}" for warning in self.warnings)
        return "\n".join(lines)


class PublishProgress:
    """Tracks the workflow stage and rejects out-of-order transitions."""

    def __init__(self) -> None:
        self.stage = PublishStage.DRAFT

    def advance(self, to: PublishStage) -> None:
        """Move to the next stage.

        Raises:
            DomainError: If the transition is not allowed from the current stage
        """
        if to not in PUBLISH_TRANSITIONS[self.stage]:
            raise DomainError(
                f"Invalid publish transition: {self.stage.value} -> {to.value}"
            )
        logfire.debug("Publish stage advanced", from_stage=self.stage, to_stage=to)
        self.stage = to


class PublishPostUseCase(BaseUseCase):
    """Use case for publishing a post with inferred taxonomy."""

    def __init__(
        self,
        halo_repository: HaloRepository,
        content_analyzer: ContentAnalyzer,
        halo_settings: HaloSettings,
    ) -> None:
        """Initialize publish post use case.

        Args:
            halo_repository: Halo content repository
            content_analyzer: Taxonomy inference service
            halo_settings: Backend settings (used for the archive URL)
        """
        self.halo_repository = halo_repository
        self.content_analyzer = content_analyzer
        self.halo_settings = halo_settings

    async def execute(self, request: PublishPostRequest) -> PublishPostResponse:
        """Execute publish flow.

        Steps:
        1. Infer tags and/or categories if either is missing
        2. Derive the slug and build the draft post
        3. Create the draft post
        4. Create the content snapshot for the created post
        5. Attach the snapshot and mark the post published

        Args:
            request: Publish post request

        Returns:
            Response in PUBLISHED stage, or carrying the failure
        """
        response = PublishPostResponse(stage=PublishStage.DRAFT, title=request.title)
        progress = PublishProgress()

        with logfire.span("publish_post.execute", title=request.title):
            try:
                await self._run(request, response, progress)
            except RemoteAPIError as e:
                self._fail(response, progress, ErrorKind.REMOTE_API, e, e.status_code)
            except HaloConnectionError as e:
                self._fail(response, progress, ErrorKind.CONNECTION, e)
            except (ValidationError, PydanticValidationError) as e:
                self._fail(response, progress, ErrorKind.VALIDATION, e)
            except (AdapterError, DomainError) as e:
                self._fail(response, progress, ErrorKind.UNEXPECTED, e)

            return response

    async def _run(
        self,
        request: PublishPostRequest,
        response: PublishPostResponse,
        progress: PublishProgress,
    ) -> None:
        tags = list(request.tags or [])
        categories = list(request.categories or [])

        if not tags or not categories:
            progress.advance(PublishStage.AWAITING_TAXONOMY)
            response.stage = progress.stage
            generated = await self.content_analyzer.generate_tags_and_categories(
                request.title, request.content
            )
            # Only the missing field is replaced
            tags = tags or list(generated.tags)
            categories = categories or list(generated.categories)
            response.warnings = [str(failure) for failure in generated.failures]

        slug = request.slug or derive_post_slug(request.title)
        response.slug = slug

        draft = Post.draft(
            title=request.title,
            slug=slug,
            tags=tags,
            categories=categories,
            excerpt=request.excerpt,
            allow_comment=request.allow_comment,
            pinned=request.pinned,
        )
        response.tags = draft.spec.tags
        response.categories = draft.spec.categories

        created = await self.halo_repository.create_post(draft)
        if not created.name:
            raise ValidationError("Halo did not assign a name to the created post")
        progress.advance(PublishStage.CREATED)
        response.stage = progress.stage
        response.post_name = created.name
        logfire.info("Draft post created", post_name=created.name, slug=slug)

        snapshot = await self.halo_repository.create_snapshot(
            Snapshot.first_revision(created.name, request.content, created.spec.owner)
        )
        if not snapshot.name:
            raise ValidationError("Halo did not assign a name to the created snapshot")
        progress.advance(PublishStage.SNAPSHOT_CREATED)
        response.stage = progress.stage
        response.snapshot_name = snapshot.name
        logfire.info(
            "Content snapshot created",
            post_name=created.name,
            snapshot_name=snapshot.name,
        )

        await self.halo_repository.publish_post(created, snapshot.name)
        progress.advance(PublishStage.PUBLISHED)
        response.stage = progress.stage
        response.url = f"{self.halo_settings.base_url}/archives/{slug}"

        logfire.info(
            "Post published successfully",
            post_name=created.name,
            slug=slug,
            tags=response.tags,
            categories=response.categories,
        )

    @staticmethod
    def _fail(
        response: PublishPostResponse,
        progress: PublishProgress,
        kind: ErrorKind,
        error: Exception,
        status_code: int | None = None,
    ) -> None:
        logfire.error(
            "Post publish failed",
            stage=progress.stage,
            kind=kind,
            error=str(error),
            status_code=status_code,
        )
        response.error = PublishFailure(
            kind=kind,
            message=str(error),
            stage=progress.stage,
            status_code=status_code,
        )
        response.stage = PublishStage.FAILED
