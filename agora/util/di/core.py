"""Configuration providers."""

from dishka import Scope, provide

from agora.config import AuthSettings, KarmaSettings, Settings
from agora.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings read once per container from the environment and ``.env``.

    Sections are exposed separately so services depend only on the part of
    the configuration they use.
    """

    scope = Scope.APP

    @provide
    def settings(self) -> Settings:
        return Settings()

    @provide
    def auth(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide
    def karma(self, settings: Settings) -> KarmaSettings:
        return settings.karma
