from __future__ import annotations

import doctest

import utils.personal_data as personal_data
from utils.personal_data import (
    mask_email,
    mask_identifier,
    mask_username,
    scrub_sensitive_mapping,
)


def test_personal_data_doctests() -> None:
    results = doctest.testmod(personal_data)
    assert results.failed == 0


def test_masks_are_stable_and_hide_raw_values() -> None:
    assert mask_identifier("abc", prefix="user") == mask_identifier("abc", prefix="user")
    assert "abc" not in mask_identifier("abc", prefix="user")
    assert mask_username("Joao") == mask_username("joao")
    assert mask_username("  ") == "user-anon"
    assert mask_email("joao@lions.com") != mask_email("admin@lions.com")


def test_scrub_sensitive_mapping_handles_nested_payloads() -> None:
    payload = {
        "username": "joao",
        "password": "athlete123",
        "body": {"email": "joao@lions.com", "fullName": "João Silva"},
        "athletes": [{"user_id": "u-1"}, {"user_id": None}],
        "status": 200,
    }

    scrubbed = scrub_sensitive_mapping(payload)

    assert scrubbed is payload
    assert payload["username"] == mask_username("joao")
    assert payload["password"] == "***"
    assert payload["body"]["email"].endswith("@lions.com")
    assert not payload["body"]["email"].startswith("joao")
    assert payload["body"]["fullName"] == "João Silva"
    assert payload["athletes"][0]["user_id"] == mask_identifier("u-1", prefix="user")
    assert payload["athletes"][1]["user_id"] is None
    assert payload["status"] == 200
