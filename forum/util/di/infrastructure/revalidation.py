"""Cache revalidation infrastructure providers."""

from dishka import Scope, provide

from forum.adapter.revalidation import HttpPathRevalidator
from forum.config import Settings
from forum.domain.service import PathRevalidator
from forum.util.di.base import ProviderBase
from forum.util.error import ConfigurationError

PLACEHOLDER_SECRET = "CHANGE_ME_IN_PRODUCTION"


class RevalidationProvider(ProviderBase):
    """Revalidation component base."""

    __mock_component__ = "revalidation"


class ProdRevalidationProvider(RevalidationProvider):
    """Production provider posting to the frontend revalidation endpoint."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_path_revalidator(self, settings: Settings) -> PathRevalidator:
        """Provide HTTP path revalidator.

        Raises:
            ConfigurationError: If production would send the placeholder secret
        """
        cache = settings.cache
        if (
            settings.environment == "production"
            and cache.enabled
            and cache.revalidate_secret == PLACEHOLDER_SECRET
        ):
            raise ConfigurationError(
                "CACHE__REVALIDATE_SECRET must be set in production"
            )

        return HttpPathRevalidator(
            revalidate_url=cache.revalidate_url,
            secret=cache.revalidate_secret,
            timeout=cache.timeout_seconds,
            enabled=cache.enabled,
        )
