"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from home_bar.config import Settings, parse_cors_origins


@pytest.mark.parametrize("limit", [0, -2])
def test_recommendation_limit_must_be_positive(limit: int) -> None:
    with pytest.raises(ValidationError):
        Settings(storage="memory", recommendation_limit=limit)


def test_recommendation_limit_from_environment_is_validated(monkeypatch) -> None:  # type: ignore[no-untyped-def]
    monkeypatch.setenv("HOME_BAR_RECOMMENDATION_LIMIT", "0")

    with pytest.raises(ValidationError):
        Settings(storage="memory")


def test_environment_reads_unprefixed_variable(monkeypatch) -> None:  # type: ignore[no-untyped-def]
    monkeypatch.setenv("ENVIRONMENT", "staging")

    assert Settings(storage="memory").environment == "staging"


def test_environment_can_be_passed_by_name() -> None:
    assert Settings(storage="memory", environment="test").environment == "test"


def test_parse_cors_origins() -> None:
    assert parse_cors_origins(None) == ["*"]
    assert parse_cors_origins(" * ") == ["*"]
    assert parse_cors_origins("https://bar.example, ,http://localhost:5173") == [
        "https://bar.example",
        "http://localhost:5173",
    ]
