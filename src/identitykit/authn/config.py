from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import AliasChoices, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .providers import DEFAULT, KNOWN_PROVIDERS, TWO_FACTOR_PROVIDERS, ProviderType

logger = logging.getLogger(__name__)


def _options(providers: frozenset[ProviderType]) -> str:
    """Format non-empty providers as a sorted, comma-separated list for error messages."""
    return ", ".join(sorted(p for p in providers if p))


class ProviderConfig(BaseSettings):
    """Configuration for selecting the authentication provider.

    This model reads environment variables automatically and normalizes the
    provider through :func:`~identitykit.authn.providers.normalize`, so
    ``AUTH_PROVIDER=LDAP/AD`` and ``AUTH_PROVIDER=ad`` both select ``ldap``.

    Environment variables:
        - AUTH_PROVIDER
        - AUTH_REQUIRE_2FA
        - AUTH_ALLOW_CUSTOM_PROVIDERS
    """

    model_config = SettingsConfigDict(
        case_sensitive=False,
        extra="ignore",
    )

    # The field name is listed in the alias choices so keyword construction
    # keeps working next to the environment names.

    provider: ProviderType = Field(
        default=DEFAULT,
        validation_alias=AliasChoices("provider", "AUTH_PROVIDER"),
    )
    require_2fa: bool = Field(
        default=False,
        validation_alias=AliasChoices("require_2fa", "AUTH_REQUIRE_2FA"),
    )
    allow_custom: bool = Field(
        default=True,
        validation_alias=AliasChoices("allow_custom", "AUTH_ALLOW_CUSTOM_PROVIDERS"),
    )

    @model_validator(mode="after")
    def _cross_field_validation(self) -> "ProviderConfig":
        """Reject providers the selected policy cannot serve."""
        p = self.provider
        if not self.allow_custom and p.is_custom():
            raise ValueError(
                f"Unknown auth provider: {p}. Valid options: {_options(KNOWN_PROVIDERS)}"
            )
        if self.require_2fa and not p.supports_2fa():
            raise ValueError(
                "two-factor authentication requires one of: "
                f"{_options(TWO_FACTOR_PROVIDERS)} (got {p})."
            )
        return self


@lru_cache()
def get_provider_config() -> ProviderConfig:
    """Get the cached provider configuration.

    Returns:
        ProviderConfig read from the environment.
    """
    cfg = ProviderConfig()
    if cfg.provider.is_custom():
        logger.warning("Using custom auth provider %s", cfg.provider)
    logger.info("Auth provider configured: %s", cfg.provider.pretty())
    return cfg
