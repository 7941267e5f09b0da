import logging

import pytest
from pydantic import ValidationError

from core.config import APIClientSettings, Settings
from core.logging_config import configure_logging, get_logger
from infrastructure.external.api_clients.codec import JSONCodec


def test_nested_api_client_settings_from_env(monkeypatch):
    monkeypatch.setenv("API_CLIENT__TIMEOUT", "5")
    monkeypatch.setenv("API_CLIENT__DEBUG_MODE", "true")

    s = Settings()

    assert s.api_client.timeout == 5.0
    assert s.api_client.debug_mode is True
    assert s.api_client.verify_ssl is True


def test_timeout_must_be_positive():
    with pytest.raises(ValidationError):
        APIClientSettings(timeout=0)


def test_configure_logging_levels():
    try:
        configure_logging(debug=True)
        assert logging.getLogger().level == logging.DEBUG
        assert logging.getLogger("httpx").level == logging.INFO

        configure_logging(debug=False)
        assert logging.getLogger().level == logging.INFO
        assert logging.getLogger("httpx").level == logging.WARNING
    finally:
        configure_logging()


def test_get_logger_returns_structlog_logger():
    logger = get_logger("tests")
    assert hasattr(logger, "info")


def test_codec_is_compact_and_lenient():
    codec = JSONCodec()

    assert codec.encode({"a": 1, "b": "é"}) == '{"a":1,"b":"é"}'
    assert codec.decode('[1, 2]') == [1, 2]
    assert codec.decode("") is None
    assert codec.decode(None) is None
    assert codec.decode("{broken") is None
