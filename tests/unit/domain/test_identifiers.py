from __future__ import annotations

import pytest

from domain.value_objects import (
    is_access_token,
    is_account_token,
    is_base64,
    is_pull_zone_name,
    is_storage_token,
    is_storage_zone_name,
)

ACCOUNT_TOKEN = "a1b2c3d4-e5f6-a1b2-c3d4-e5f6a1b2c3d4e5f6a1b2-c3d4-e5f6-a1b2-c3d4e5f6a1b2"
STORAGE_TOKEN = "a1b2c3d4-e5f6-a1b2-c3d4e5f6a1b2-c3d4-e5f6"


def test_account_token_accepts_long_form() -> None:
    assert is_account_token(ACCOUNT_TOKEN)
    assert is_account_token(ACCOUNT_TOKEN.upper())
    assert is_account_token("a1b2c3d4-e5f6-a1b2-c3d4e5f6a1b2c3d4e5f6-a1b2-c3d4-e5f6-a1b2c3d4e5f6")


def test_storage_token_accepts_short_form() -> None:
    assert is_storage_token(STORAGE_TOKEN)
    assert not is_account_token(STORAGE_TOKEN)
    assert not is_storage_token(ACCOUNT_TOKEN)


def test_access_token_accepts_both_token_classes() -> None:
    assert is_access_token(ACCOUNT_TOKEN)
    assert is_access_token(STORAGE_TOKEN)


@pytest.mark.parametrize(
    "value",
    [
        "",
        "a1b2c3d4-e5f6-a1b2-c3d4e5f6a1b-c3d4-e5f6",
        "a1b2c3d4-e5f6-a1b2-c3d4e5f6a1b2-c3d4-e5f",
        "g1b2c3d4-e5f6-a1b2-c3d4e5f6a1b2-c3d4-e5f6",
        "a1b2c3d4e5f6a1b2c3d4e5f6a1b2c3d4e5f6",
        f"{STORAGE_TOKEN}\n",
        " " + STORAGE_TOKEN,
        None,
        12345,
    ],
)
def test_access_token_rejects_malformed_values(value: object) -> None:
    assert not is_access_token(value)


def test_storage_zone_name_allows_hyphen_but_pull_zone_does_not() -> None:
    assert is_storage_zone_name("my-zone-01")
    assert not is_pull_zone_name("my-zone-01")
    assert is_pull_zone_name("myzone01")


@pytest.mark.parametrize("value", ["ab", "a" * 21, "zone_name", "zone name", "zône"])
def test_zone_names_enforce_length_and_alphabet(value: str) -> None:
    assert not is_storage_zone_name(value)
    assert not is_pull_zone_name(value)


def test_zone_names_length_bounds() -> None:
    assert is_storage_zone_name("abc")
    assert is_storage_zone_name("a" * 20)


def test_base64_padding_rules() -> None:
    assert is_base64("aGVsbG8=")
    assert is_base64("aGVsbA==")
    assert is_base64("a+b/c9")
    assert is_base64("")
    assert not is_base64("aGVsbA===")
    assert not is_base64("aGVs-bA==")
    assert not is_base64("aGVs=bA")
