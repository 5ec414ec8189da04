"""Tool call dispatch.

Each call runs in its own DI request scope. Every failure, whether reported
by a use case or raised from one, leaves here as a ToolError so the host gets
an error result instead of a crashed server.
"""

from typing import Any, Awaitable, Callable

import logfire
from dishka import AsyncContainer

from publisher.application.usecase.category import (
    ListCategoriesRequest,
    ListCategoriesUseCase,
)
from publisher.application.usecase.post import PublishPostRequest, PublishPostUseCase
from publisher.application.usecase.tag import ListTagsRequest, ListTagsUseCase
from publisher.interface.error import ToolError
from publisher.interface.mcp.tools import LIST_CATEGORIES, LIST_TAGS, PUBLISH_POST

Handler = Callable[[AsyncContainer, dict[str, Any]], Awaitable[str]]


async def handle_publish_post(container: AsyncContainer, arguments: dict[str, Any]) -> str:
    use_case = await container.get(PublishPostUseCase)
    request = PublishPostRequest(
        title=arguments.get("title"),
        content=arguments.get("content"),
        excerpt=arguments.get("excerpt"),
        slug=arguments.get("slug"),
        tags=arguments.get("tags"),
        categories=arguments.get("categories"),
        allow_comment=arguments.get("allowComment", True),
        pinned=arguments.get("pinned", False),
    )

    response = await use_case.execute(request)
    if not response.success:
        raise ToolError(response.summary())
    return response.summary()


async def handle_list_tags(container: AsyncContainer, arguments: dict[str, Any]) -> str:
    use_case = await container.get(ListTagsUseCase)
    response = await use_case.execute(ListTagsRequest())
    return response.summary()


async def handle_list_categories(
    container: AsyncContainer, arguments: dict[str, Any]
) -> str:
    use_case = await container.get(ListCategoriesUseCase)
    response = await use_case.execute(ListCategoriesRequest())
    return response.summary()


# Tool name -> (handler, prefix for error messages)
HANDLERS: dict[str, tuple[Handler, str]] = {
    PUBLISH_POST: (handle_publish_post, "Failed to publish post"),
    LIST_TAGS: (handle_list_tags, "Failed to list tags"),
    LIST_CATEGORIES: (handle_list_categories, "Failed to list categories"),
}


class ToolDispatcher:
    """Routes tool calls to use cases."""

    def __init__(self, container: AsyncContainer) -> None:
        """Initialize dispatcher.

        Args:
            container: Application-scoped DI container
        """
        self.container = container

    async def call(self, name: str, arguments: dict[str, Any] | None) -> str:
        """Run a tool and return its text result.

        Args:
            name: Tool name
            arguments: Tool arguments

        Returns:
            Human-readable result text

        Raises:
            ToolError: If the tool is unknown or the operation failed
        """
        if name not in HANDLERS:
            raise ToolError(f"Unknown tool: {name}")
        handler, error_prefix = HANDLERS[name]

        with logfire.span("tool.call", tool=name):
            try:
                async with self.container() as request_container:
                    return await handler(request_container, arguments or {})
            except ToolError:
                raise
            except Exception as e:
                logfire.exception("Tool call failed", tool=name, error=str(e))
                raise ToolError(f"{error_prefix}: {e}") from e
