"""Domain layer DI providers."""

from dishka import Scope, provide

from publisher.domain.repository import HaloRepository
from publisher.domain.service import ContentAnalyzer
from publisher.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped: each tool call gets fresh instances.
    """

    scope = Scope.REQUEST

    @provide
    def get_content_analyzer(self, halo_repository: HaloRepository) -> ContentAnalyzer:
        """Provide content analyzer domain service."""
        return ContentAnalyzer(halo_repository=halo_repository)
