from __future__ import annotations

import logging

from vault_api.config import Settings
from vault_api.logging_config import configure_logging


def test_settings_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("FETCH_TIMEOUT", "3.5")
    monkeypatch.setenv("ACCEPT_LANGUAGE", "de-DE")

    config = Settings()

    assert config.fetch_timeout == 3.5
    assert config.fetch_headers["Accept-Language"] == "de-DE"
    assert config.fetch_headers["User-Agent"].startswith("Mozilla/5.0")


def test_default_timeout_is_ten_seconds(monkeypatch) -> None:
    monkeypatch.delenv("FETCH_TIMEOUT", raising=False)
    assert Settings().fetch_timeout == 10.0


def test_configure_logging_sets_level() -> None:
    root = logging.getLogger()
    saved_level, saved_handlers = root.level, list(root.handlers)
    try:
        configure_logging(Settings(log_level="debug"))
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
