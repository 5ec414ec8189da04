"""Halo infrastructure providers."""

from dishka import Scope, provide

from publisher.adapter.halo import HaloAPIClient
from publisher.config import HaloSettings
from publisher.domain.repository import HaloRepository
from publisher.util.di.base import ProviderBase
from publisher.util.error import ConfigurationError


class HaloProvider(ProviderBase):
    """Halo component base."""

    __mock_component__ = "halo"


class ProdHaloProvider(HaloProvider):
    """Production Halo provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_halo_repository(self, halo_settings: HaloSettings) -> HaloRepository:
        """Provide Halo API client.

        Returns:
            httpx-backed Halo client

        Raises:
            ConfigurationError: If the base URL is not an http(s) URL
        """
        if not halo_settings.base_url.startswith(("http://", "https://")):
            raise ConfigurationError(
                f"HALO_BASE_URL must be an http(s) URL, got {halo_settings.base_url!r}"
            )

        return HaloAPIClient(settings=halo_settings)
