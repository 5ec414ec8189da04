"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from publisher.config import HaloSettings, Settings
from publisher.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_halo_settings(self, settings: Settings) -> HaloSettings:
        """Provide Halo backend settings."""
        return settings.halo
