import logging

import pytest

from qr_file_server.utils import logging_config
from qr_file_server.utils.logging_config import LOG_LEVEL_ENV_VAR, resolve_log_level, setup_logging


@pytest.mark.parametrize(
    "value, level",
    [
        (None, logging.INFO),
        ("", logging.INFO),
        ("info", logging.INFO),
        ("DEBUG", logging.DEBUG),
        ("trace", logging.DEBUG),
        ("warn", logging.WARNING),
        (" Error ", logging.ERROR),
        ("off", logging.CRITICAL + 10),
        ("verbose", None),
    ]
)
def test_resolve_log_level(value, level):
    assert resolve_log_level(value) == level


def test_setup_uses_environment(monkeypatch):
    calls: list[dict] = []
    monkeypatch.setattr(logging_config.logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    assert setup_logging({LOG_LEVEL_ENV_VAR: "debug"}) == logging.DEBUG
    assert calls[0]["level"] == logging.DEBUG


def test_setup_defaults_to_info(monkeypatch):
    monkeypatch.setattr(logging_config.logging, "basicConfig", lambda **kwargs: None)

    assert setup_logging({}) == logging.INFO


def test_unknown_level_falls_back_with_warning(monkeypatch, caplog):
    monkeypatch.setattr(logging_config.logging, "basicConfig", lambda **kwargs: None)

    with caplog.at_level(logging.WARNING):
        assert setup_logging({LOG_LEVEL_ENV_VAR: "chatty"}) == logging.INFO

    assert "chatty" in caplog.text
