"""Application layer DI providers."""

from dishka import Scope, provide

from publisher.application.usecase.category import ListCategoriesUseCase
from publisher.application.usecase.post import PublishPostUseCase
from publisher.application.usecase.tag import ListTagsUseCase
from publisher.config import HaloSettings
from publisher.domain.repository import HaloRepository
from publisher.domain.service import ContentAnalyzer
from publisher.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_publish_post_use_case(
        self,
        halo_repository: HaloRepository,
        content_analyzer: ContentAnalyzer,
        halo_settings: HaloSettings,
    ) -> PublishPostUseCase:
        """Provide publish post use case."""
        return PublishPostUseCase(
            halo_repository=halo_repository,
            content_analyzer=content_analyzer,
            halo_settings=halo_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_tags_use_case(
        self, halo_repository: HaloRepository
    ) -> ListTagsUseCase:
        """Provide list tags use case."""
        return ListTagsUseCase(halo_repository=halo_repository)

    @provide(scope=Scope.REQUEST)
    def get_list_categories_use_case(
        self, halo_repository: HaloRepository
    ) -> ListCategoriesUseCase:
        """Provide list categories use case."""
        return ListCategoriesUseCase(halo_repository=halo_repository)
