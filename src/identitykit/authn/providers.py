"""Authentication provider identifiers.

Raw provider strings from config files, API requests or stored records are
normalized into a :class:`ProviderType`, which then answers capability
questions (remote vs. local, 2FA support, client credential flow) by
membership in fixed sets.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Final, Mapping

from .clean import type_lower_underscore, upper_first

if TYPE_CHECKING:
    from pydantic import GetCoreSchemaHandler
    from pydantic_core import CoreSchema


class ProviderType(str):
    """Authentication provider identifier.

    A thin ``str`` subclass: equality and hashing use the raw value, so
    instances work as storage keys and compare with plain strings. Use
    :func:`normalize` to build one from loosely formatted input; ``str()``
    returns the canonical string form.
    """

    __slots__ = ()

    def __str__(self) -> str:
        return canonical_string(self)

    def __repr__(self) -> str:
        return f"ProviderType({str.__repr__(self)})"

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        from pydantic_core import core_schema

        # None from nullable columns or config values is read as "".
        return core_schema.no_info_before_validator_function(
            lambda v: "" if v is None else v,
            core_schema.no_info_after_validator_function(
                normalize, core_schema.str_schema()
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(
                canonical_string,
                return_schema=core_schema.str_schema(),
                when_used="always",
            ),
        )

    def pretty(self) -> str:
        """Return a human-readable label, e.g. ``"LDAP/AD"``. Display only."""
        match canonical_string(self):
            case "ldap":
                return "LDAP/AD"
            case "client":
                return "Client"
            case "access_token":
                return "Access Token"
            case s:
                return upper_first(s)

    def equal(self, s: str | None) -> bool:
        """Check if the provider matches ``s`` after normalization."""
        return self.is_(normalize(s))

    def not_equal(self, s: str | None) -> bool:
        return not self.equal(s)

    def is_(self, other: str) -> bool:
        """Strict comparison with another provider, no normalization."""
        return str.__eq__(self, other) is True

    def is_not(self, other: str) -> bool:
        return not self.is_(other)

    def is_undefined(self) -> bool:
        """Check for the raw empty value (``"null"`` etc. are not undefined)."""
        return self.is_(UNDEFINED)

    def is_default(self) -> bool:
        """Check if this is the default provider, including the empty value."""
        return canonical_string(self) == canonical_string(DEFAULT)

    def is_remote(self) -> bool:
        """Check if authentication is delegated to an external system."""
        return self in REMOTE_PROVIDERS

    def is_local(self) -> bool:
        return self in LOCAL_PROVIDERS

    def supports_2fa(self) -> bool:
        """Check if the provider supports two-factor authentication with a passcode."""
        return self in TWO_FACTOR_PROVIDERS

    def is_client(self) -> bool:
        """Check if the provider represents a client credential flow."""
        return self in CLIENT_PROVIDERS

    def is_application(self) -> bool:
        return self.is_(APPLICATION)

    def is_custom(self) -> bool:
        """Check if the canonical form is not one of the well-known providers."""
        return canonical_string(self) not in KNOWN_PROVIDERS


UNDEFINED: Final = ProviderType("")
DEFAULT: Final = ProviderType("default")
CLIENT: Final = ProviderType("client")
APPLICATION: Final = ProviderType("application")
ACCESS_TOKEN: Final = ProviderType("access_token")
LOCAL: Final = ProviderType("local")
LDAP: Final = ProviderType("ldap")
LINK: Final = ProviderType("link")
NONE: Final = ProviderType("none")

KNOWN_PROVIDERS: Final[frozenset[ProviderType]] = frozenset(
    {UNDEFINED, DEFAULT, CLIENT, APPLICATION, ACCESS_TOKEN, LOCAL, LDAP, LINK, NONE}
)
REMOTE_PROVIDERS: Final[frozenset[ProviderType]] = frozenset({LDAP})
LOCAL_PROVIDERS: Final[frozenset[ProviderType]] = frozenset({LOCAL})
TWO_FACTOR_PROVIDERS: Final[frozenset[ProviderType]] = frozenset({DEFAULT, LOCAL, LDAP})
CLIENT_PROVIDERS: Final[frozenset[ProviderType]] = frozenset(
    {CLIENT, APPLICATION, ACCESS_TOKEN}
)


def _table(groups: Mapping[ProviderType, tuple[str, ...]]) -> Mapping[str, ProviderType]:
    return MappingProxyType(
        {alias: provider for provider, aliases in groups.items() for alias in aliases}
    )


# Raw input ingestion.
_ALIASES: Final = _table(
    {
        DEFAULT: ("", "_", "-", "null", "nil", "0", "false"),
        LINK: ("token", "url"),
        LOCAL: ("pass", "passwd", "password"),
        APPLICATION: ("app", "application"),
        LDAP: ("ldap", "ad", "ldap/ad", "ldap\\ad"),
        CLIENT: ("client", "client_credentials", "oauth2"),
    }
)

# Re-serialization of values that are expected to be canonical already.
_CANONICAL_FORMS: Final = _table(
    {
        DEFAULT: ("",),
        LINK: ("token",),
        LOCAL: ("password",),
        CLIENT: ("client", "client credentials", "client_credentials", "oauth2"),
    }
)


def normalize(raw: str | None) -> ProviderType:
    """Cast a loosely formatted string to a provider type.

    Known aliases resolve to their well-known provider and empty or
    null-like input falls back to :data:`DEFAULT`. Anything else is kept
    as a custom provider equal to the cleaned token.

    Args:
        raw: Provider string, e.g. ``"Client_Credentials"`` or ``"LDAP/AD"``.
            ``None`` is treated like the empty string.

    Returns:
        The normalized :class:`ProviderType`. Never raises.
    """
    token = type_lower_underscore(raw or "")
    return _ALIASES.get(token) or ProviderType(token)


def canonical_string(provider: str) -> str:
    """Return the string form used when storing or transmitting a provider."""
    raw = str.__str__(provider)
    return str.__str__(_CANONICAL_FORMS.get(raw, raw))
