"""Unit tests for PublishPostUseCase."""

from unittest.mock import AsyncMock, patch

import httpx
import pytest

from publisher.adapter.error import HaloConnectionError
from publisher.adapter.halo import HaloAPIClient
from publisher.application.usecase.post import (
    PublishPostRequest,
    PublishPostUseCase,
)
from publisher.application.usecase.post.publish_post import PublishProgress
from publisher.domain.error import DomainError
from publisher.domain.service import ContentAnalyzer
from publisher.domain.value import ErrorKind, PublishStage
from tests.conftest import EMPTY_LIST, make_category, make_tag, route_requests


@pytest.fixture
def use_case(halo, halo_settings):
    """Publish use case wired to the in-memory backend."""
    return PublishPostUseCase(
        halo_repository=halo,
        content_analyzer=ContentAnalyzer(halo_repository=halo),
        halo_settings=halo_settings,
    )


class TestPublishPostUseCase:
    """Tests for PublishPostUseCase."""

    @pytest.mark.asyncio
    async def test_publishes_with_inferred_taxonomy(self, use_case, halo):
        """A bare title and body should end up as a published post."""
        # Arrange
        request = PublishPostRequest(
            title="Hello World", content="This is a test post about programming."
        )

        # Act
        response = await use_case.execute(request)

        # Assert
        assert response.success
        assert response.stage == PublishStage.PUBLISHED
        assert response.slug == "hello-world"
        assert response.url == "http://localhost:8090/archives/hello-world"
        assert response.categories == ["technology"]
        assert 0 < len(response.tags) <= 5
        assert all(tag in halo.tags for tag in response.tags)

        post = halo.posts["hello-world"]
        assert post.spec.publish is True
        assert post.spec.publish_time is not None
        assert post.spec.release_snapshot == response.snapshot_name
        assert post.spec.head_snapshot == response.snapshot_name
        assert post.spec.base_snapshot == response.snapshot_name

        snapshot = halo.snapshots[response.snapshot_name]
        assert snapshot.spec.subject_ref.name == "hello-world"
        assert snapshot.spec.raw_patch == "This is a test post about programming."

    @pytest.mark.asyncio
    async def test_html_content_is_not_tagged(self, use_case, halo):
        """Markup in the body should not leak into tags."""
        # Arrange
        request = PublishPostRequest(
            title="Hello World",
            content="<p>test content about javascript and api</p>",
        )

        # Act
        response = await use_case.execute(request)

        # Assert
        assert response.success
        assert response.slug == "hello-world"
        assert response.categories == ["technology"]
        assert "p" not in halo.tags
        assert all(tag.display_name != "p" for tag in halo.tags.values())
        assert "URL: http://localhost:8090/archives/hello-world" in response.summary()

    @pytest.mark.asyncio
    async def test_explicit_taxonomy_skips_inference(self, use_case, halo):
        """Given tags and categories should be used as-is."""
        # Arrange
        request = PublishPostRequest(
            title="Hello World",
            content="This is a test post about programming.",
            tags=["python", "python", "rust"],
            categories=["notes"],
        )

        # Act
        response = await use_case.execute(request)

        # Assert
        assert response.success
        assert response.tags == ["python", "rust"]
        assert response.categories == ["notes"]
        assert halo.posts["hello-world"].spec.tags == ["python", "rust"]
        # No reconciliation happened
        assert halo.tags == {}
        assert halo.categories == {}

    @pytest.mark.asyncio
    async def test_only_missing_field_is_inferred(self, use_case, halo):
        """Explicit tags are kept when only categories are missing."""
        # Arrange
        request = PublishPostRequest(
            title="Hello World",
            content="This is a test post about programming.",
            tags=["python"],
        )

        # Act
        response = await use_case.execute(request)

        # Assert
        assert response.success
        assert response.tags == ["python"]
        assert response.categories == ["technology"]

    @pytest.mark.asyncio
    async def test_empty_list_counts_as_missing(self, use_case, halo):
        """An explicitly empty tag list is inferred like a missing one."""
        # Arrange
        tag = make_tag("programming", "programming")
        halo.tags[tag.name] = tag
        request = PublishPostRequest(
            title="Hello World",
            content="This is a test post about programming.",
            tags=[],
            categories=["notes"],
        )

        # Act
        response = await use_case.execute(request)

        # Assert
        assert response.success
        assert "programming" in response.tags
        assert response.categories == ["notes"]

    @pytest.mark.asyncio
    async def test_reuses_existing_category(self, use_case, halo):
        """An existing category with the inferred name should be reused."""
        # Arrange
        category = make_category("category-tech", "technology")
        halo.categories[category.name] = category
        request = PublishPostRequest(
            title="Hello World", content="This is a test post about programming."
        )

        # Act
        response = await use_case.execute(request)

        # Assert
        assert response.categories == ["category-tech"]
        assert list(halo.categories) == ["category-tech"]

    @pytest.mark.asyncio
    async def test_explicit_slug_is_used(self, use_case, halo):
        """A given slug overrides the derived one."""
        # Arrange
        request = PublishPostRequest(
            title="Hello World",
            content="Body",
            slug="custom-slug",
            tags=["t"],
            categories=["c"],
        )

        # Act
        response = await use_case.execute(request)

        # Assert
        assert response.slug == "custom-slug"
        assert response.url == "http://localhost:8090/archives/custom-slug"
        assert "custom-slug" in halo.posts

    @pytest.mark.asyncio
    async def test_options_are_carried_to_post(self, use_case, halo):
        """Comment, pin and excerpt options should reach the created post."""
        # Arrange
        request = PublishPostRequest(
            title="Hello World",
            content="Body",
            excerpt="Short",
            tags=["t"],
            categories=["c"],
            allow_comment=False,
            pinned=True,
        )

        # Act
        await use_case.execute(request)

        # Assert
        spec = halo.posts["hello-world"].spec
        assert spec.allow_comment is False
        assert spec.pinned is True
        assert spec.excerpt.raw == "Short"
        assert spec.excerpt.auto_generate is False

    @pytest.mark.asyncio
    async def test_reconciliation_failures_become_warnings(self, use_case, halo):
        """Partial reconciliation failures should not stop publishing."""
        # Arrange
        halo.fail("create_category")
        request = PublishPostRequest(
            title="Hello World", content="This is a test post about programming."
        )

        # Act
        response = await use_case.execute(request)

        # Assert
        assert response.success
        assert response.categories == []
        assert response.warnings == [
            "failed to create category 'technology': "
            "API request failed: 500 Internal Server Error"
        ]
        assert "Warnings:" in response.summary()

    @pytest.mark.asyncio
    async def test_listing_failure_creates_nothing(self, use_case, halo):
        """Failing to list tags should fail before any post is created."""
        # Arrange
        halo.fail("get_tags")
        request = PublishPostRequest(title="Hello World", content="Body text")

        # Act
        response = await use_case.execute(request)

        # Assert
        assert not response.success
        assert response.stage == PublishStage.FAILED
        assert response.error.kind == ErrorKind.REMOTE_API
        assert response.error.status_code == 500
        assert response.error.stage == PublishStage.AWAITING_TAXONOMY
        assert halo.posts == {}
        assert halo.snapshots == {}
        assert response.summary() == (
            "Failed to publish post: API request failed: 500 Internal Server Error"
        )

    @pytest.mark.asyncio
    async def test_snapshot_failure_leaves_draft(self, use_case, halo):
        """A failed snapshot leaves the created post unpublished."""
        # Arrange
        halo.fail("create_snapshot", status_code=422, reason="Unprocessable Entity")
        request = PublishPostRequest(
            title="Hello World", content="Body", tags=["t"], categories=["c"]
        )

        # Act
        response = await use_case.execute(request)

        # Assert
        assert response.stage == PublishStage.FAILED
        assert response.error.stage == PublishStage.CREATED
        assert response.error.status_code == 422
        assert response.post_name == "hello-world"
        assert halo.posts["hello-world"].spec.publish is False
        assert "left as an unpublished draft" in response.summary()

    @pytest.mark.asyncio
    async def test_publish_failure_after_snapshot(self, use_case, halo):
        """A failed publish update keeps the snapshot but not the release."""
        # Arrange
        halo.fail("update_post")
        request = PublishPostRequest(
            title="Hello World", content="Body", tags=["t"], categories=["c"]
        )

        # Act
        response = await use_case.execute(request)

        # Assert
        assert response.error.stage == PublishStage.SNAPSHOT_CREATED
        assert len(halo.snapshots) == 1
        assert halo.posts["hello-world"].spec.release_snapshot is None

    @pytest.mark.asyncio
    async def test_connection_error_is_reported(self, use_case, halo):
        """Transport failures should be classified as connection errors."""
        # Arrange
        halo.create_post = AsyncMock(side_effect=HaloConnectionError("refused"))
        request = PublishPostRequest(
            title="Hello World", content="Body", tags=["t"], categories=["c"]
        )

        # Act
        response = await use_case.execute(request)

        # Assert
        assert response.error.kind == ErrorKind.CONNECTION
        assert response.error.stage == PublishStage.DRAFT
        assert response.error.status_code is None

    @pytest.mark.asyncio
    async def test_invalid_post_is_a_validation_failure(self, use_case, halo):
        """Posts that fail model validation are never sent."""
        # Arrange
        request = PublishPostRequest(
            title="", content="Body", tags=["t"], categories=["c"]
        )

        # Act
        response = await use_case.execute(request)

        # Assert
        assert response.error.kind == ErrorKind.VALIDATION
        assert halo.posts == {}

    @pytest.mark.asyncio
    async def test_success_summary(self, use_case):
        """The summary should list everything the caller needs."""
        # Arrange
        request = PublishPostRequest(
            title="Hello World", content="Body", tags=["t"], categories=["c"]
        )

        # Act
        response = await use_case.execute(request)

        # Assert
        assert response.summary() == "\n".join(
            [
                "Post published successfully!",
                "Title: Hello World",
                "Slug: hello-world",
                "Tags: t",
                "Categories: c",
                "Post ID: hello-world",
                "URL: http://localhost:8090/archives/hello-world",
            ]
        )


class TestPublishProgress:
    """Tests for publish stage transitions."""

    def test_follows_happy_path(self):
        """Stages should advance in order."""
        progress = PublishProgress()

        for stage in [
            PublishStage.AWAITING_TAXONOMY,
            PublishStage.CREATED,
            PublishStage.SNAPSHOT_CREATED,
            PublishStage.PUBLISHED,
        ]:
            progress.advance(stage)

        assert progress.stage == PublishStage.PUBLISHED
        assert progress.stage.is_terminal

    def test_rejects_skipping_snapshot(self):
        """A post cannot be published before its snapshot exists."""
        progress = PublishProgress()
        progress.advance(PublishStage.CREATED)

        with pytest.raises(DomainError):
            progress.advance(PublishStage.PUBLISHED)


class TestPublishPostWithHaloClient:
    """Publishing through the HTTP client with misbehaving responses."""

    @pytest.mark.asyncio
    async def test_non_json_listing_returns_failure(self, halo_settings):
        """An HTML tag listing should fail the publish, not raise."""
        # Arrange
        client = HaloAPIClient(settings=halo_settings)
        use_case = PublishPostUseCase(
            halo_repository=client,
            content_analyzer=ContentAnalyzer(halo_repository=client),
            halo_settings=halo_settings,
        )
        routes = {
            ("GET", "/tags"): lambda _: httpx.Response(200, text="<html>proxy</html>"),
            ("GET", "/categories"): lambda _: httpx.Response(200, json=EMPTY_LIST),
        }

        with patch("httpx.AsyncClient") as mock_client:
            mock_request = AsyncMock(side_effect=route_requests(routes))
            mock_client.return_value.__aenter__.return_value.request = mock_request

            # Act
            response = await use_case.execute(
                PublishPostRequest(title="Hello World", content="Body text")
            )

        # Assert
        assert response.stage == PublishStage.FAILED
        assert response.error.kind == ErrorKind.UNEXPECTED
        assert response.error.stage == PublishStage.AWAITING_TAXONOMY
        assert response.summary().startswith(
            "Failed to publish post: Invalid JSON response from GET"
        )
        # Nothing was written
        assert all(call.args[0] == "GET" for call in mock_request.call_args_list)
