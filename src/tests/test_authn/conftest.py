from __future__ import annotations

import os
from typing import Iterator

import pytest

from identitykit.authn.config import get_provider_config

_FIELD_NAMES = {"PROVIDER", "REQUIRE_2FA", "ALLOW_CUSTOM"}


@pytest.fixture(autouse=True)
def clear_auth_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Remove AUTH_* vars and reset the cached config between tests.

    Yields:
        Iterator[None]: Context manager semantics for pytest.
    """
    to_clear = [
        k
        for k in os.environ.keys()
        if k.upper().startswith("AUTH_") or k.upper() in _FIELD_NAMES
    ]
    for k in to_clear:
        monkeypatch.delenv(k, raising=False)
    get_provider_config.cache_clear()
    yield
    get_provider_config.cache_clear()
