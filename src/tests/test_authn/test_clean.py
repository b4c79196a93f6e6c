from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from identitykit.authn.clean import type_lower_underscore, upper_first


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("", ""),
        ("LDAP", "ldap"),
        ("Client Credentials", "client_credentials"),
        ("  access-token  ", "access_token"),
        ("client \t - credentials", "client_credentials"),
        ("LDAP/AD", "ldap/ad"),
        ("LDAP\\AD", "ldap\\ad"),
        ("-", "_"),
        ("to\x00ken", "token"),
    ],
)
def test_type_lower_underscore__cleans_separators_and_case(raw: str, expected: str) -> None:
    assert type_lower_underscore(raw) == expected


@given(st.text())
def test_type_lower_underscore__idempotent(s: str) -> None:
    """Cleaning an already cleaned token is a no-op."""
    once = type_lower_underscore(s)
    assert type_lower_underscore(once) == once
    assert " " not in once and "-" not in once


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("", ""), ("local", "Local"), ("my_idp", "My_idp"), ("oIDC", "OIDC")],
)
def test_upper_first__only_touches_first_character(raw: str, expected: str) -> None:
    assert upper_first(raw) == expected
