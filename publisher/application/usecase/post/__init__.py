"""Post use cases."""

from .publish_post import (
    PublishFailure,
    PublishPostRequest,
    PublishPostResponse,
    PublishPostUseCase,
)

__all__ = [
    "PublishFailure",
    "PublishPostRequest",
    "PublishPostResponse",
    "PublishPostUseCase",
]
