"""
Unit tests for environment configuration.
"""

import pytest

from crud_service.handlers.models.env_vars import get_handler_env_vars


def test_values_from_environment():
    env_vars = get_handler_env_vars()

    assert env_vars.ENVIRONMENT == "test"
    assert env_vars.API_BASE_PATH == "/api"
    assert env_vars.QUEUE_NAME == "orders-queue"
    assert env_vars.TIMER_PAST_DUE_SECONDS == 60
    assert env_vars.is_production is False
    assert env_vars.dead_letter_malformed_messages is False


def test_defaults(monkeypatch):
    for name in ("API_BASE_PATH", "QUEUE_NAME", "CORS_ALLOW_ORIGIN", "TIMER_PAST_DUE_SECONDS"):
        monkeypatch.delenv(name, raising=False)

    env_vars = get_handler_env_vars()

    assert env_vars.API_BASE_PATH == "/api"
    assert env_vars.QUEUE_NAME == "orders-queue"
    assert env_vars.CORS_ALLOW_ORIGIN == "*"
    assert env_vars.TIMER_PAST_DUE_SECONDS == 60


def test_empty_base_path_allowed(monkeypatch):
    monkeypatch.setenv("API_BASE_PATH", "")

    assert get_handler_env_vars().API_BASE_PATH == ""


def test_production_flag(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "prod")

    assert get_handler_env_vars().is_production is True


def test_dead_letter_flag(monkeypatch):
    monkeypatch.setenv("DEAD_LETTER_MALFORMED_MESSAGES", "true")

    assert get_handler_env_vars().dead_letter_malformed_messages is True


@pytest.mark.parametrize("name,value", [
    ("ENVIRONMENT", "qa"),
    ("API_BASE_PATH", "api/"),
    ("DEAD_LETTER_MALFORMED_MESSAGES", "yes"),
    ("TIMER_PAST_DUE_SECONDS", "0"),
    ("LOG_LEVEL", "VERBOSE"),
])
def test_invalid_values_rejected(monkeypatch, name, value):
    monkeypatch.setenv(name, value)

    with pytest.raises(ValueError):
        get_handler_env_vars()
