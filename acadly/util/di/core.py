"""Configuration provider."""

from dishka import Scope, provide

from acadly.config import AISettings, AuthSettings, PointsSettings, Settings
from acadly.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings read once per process, plus the groups services depend on."""

    scope = Scope.APP

    @provide
    def settings(self) -> Settings:
        return Settings()

    @provide
    def auth(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide
    def points(self, settings: Settings) -> PointsSettings:
        return settings.points

    @provide
    def ai(self, settings: Settings) -> AISettings:
        return settings.ai
