"""
Unit tests for bearer token extraction.
"""

import pytest
from directory_auth.adapters.bearer_header import extract_bearer_token


def test_bearer_token_extracted():
    headers = {"Authorization": "Bearer abc.def.ghi"}

    assert extract_bearer_token(headers) == "abc.def.ghi"


def test_header_name_and_scheme_are_case_insensitive():
    headers = {"authorization": "bearer   abc.def.ghi  "}

    assert extract_bearer_token(headers) == "abc.def.ghi"


@pytest.mark.parametrize("headers", [
    {},
    {"Authorization": ""},
    {"Authorization": "Bearer"},
    {"Authorization": "Bearer    "},
    {"Authorization": "Basic dXNlcjpwYXNz"},
    {"X-Auth-Request-User": "alice"},
])
def test_missing_or_non_bearer_header(headers):
    assert extract_bearer_token(headers) is None
