"""Authentication provider vocabulary.

Public API:
- normalize() → ProviderType (alias resolution with default fallback)
- canonical_string() (storage/transport string form)
- ProviderType (provider identifier with capability predicates)
- UNDEFINED, DEFAULT, CLIENT, APPLICATION, ACCESS_TOKEN, LOCAL, LDAP, LINK, NONE
- REMOTE_PROVIDERS, LOCAL_PROVIDERS, TWO_FACTOR_PROVIDERS, CLIENT_PROVIDERS
- ProviderConfig, get_provider_config() (settings)
"""

from .config import ProviderConfig, get_provider_config
from .providers import (
    ACCESS_TOKEN,
    APPLICATION,
    CLIENT,
    CLIENT_PROVIDERS,
    DEFAULT,
    KNOWN_PROVIDERS,
    LDAP,
    LINK,
    LOCAL,
    LOCAL_PROVIDERS,
    NONE,
    REMOTE_PROVIDERS,
    TWO_FACTOR_PROVIDERS,
    UNDEFINED,
    ProviderType,
    canonical_string,
    normalize,
)

__all__ = [
    "ProviderType",
    "normalize",
    "canonical_string",
    "UNDEFINED",
    "DEFAULT",
    "CLIENT",
    "APPLICATION",
    "ACCESS_TOKEN",
    "LOCAL",
    "LDAP",
    "LINK",
    "NONE",
    "KNOWN_PROVIDERS",
    "REMOTE_PROVIDERS",
    "LOCAL_PROVIDERS",
    "TWO_FACTOR_PROVIDERS",
    "CLIENT_PROVIDERS",
    "ProviderConfig",
    "get_provider_config",
]
