from __future__ import annotations

import re
from typing import Final

_SEPARATORS: Final = re.compile(r"[\s\-]+")


def type_lower_underscore(s: str) -> str:
    """Return ``s`` as a lowercase, underscore-separated type token.

    Non-printable characters are dropped, surrounding whitespace is trimmed
    and every run of whitespace or hyphens becomes a single underscore.
    Slashes and backslashes are kept as-is.

    Args:
        s: Raw input, e.g. ``"Client Credentials"`` or ``"LDAP-AD"``.

    Returns:
        The cleaned token (``"client_credentials"``, ``"ldap_ad"``).
    """
    if not s:
        return ""
    s = "".join(c for c in s if c.isprintable() or c.isspace())
    return _SEPARATORS.sub("_", s.strip().lower())


def upper_first(s: str) -> str:
    """Upper-case the first character only; the rest is left untouched."""
    return s[:1].upper() + s[1:]
