"""
Unit tests: log path/level resolution.
"""
import logging

from menu_browser.config import LOG_PATH
from menu_browser.logging_setup import get_logger, resolve_log_level, resolve_log_path


def test_log_path_defaults_and_env_override(monkeypatch, tmp_path):
    monkeypatch.delenv("MENU_BROWSER_LOG_PATH", raising=False)
    assert str(resolve_log_path()) == LOG_PATH

    monkeypatch.setenv("MENU_BROWSER_LOG_PATH", str(tmp_path / "x.log"))
    assert resolve_log_path() == tmp_path / "x.log"


def test_log_level_env_override(monkeypatch):
    monkeypatch.setenv("MENU_BROWSER_LOG_LEVEL", "warning")
    assert resolve_log_level() == logging.WARNING

    monkeypatch.setenv("MENU_BROWSER_LOG_LEVEL", "nonsense")
    assert resolve_log_level() == logging.DEBUG


def test_get_logger_writes_to_file(monkeypatch, tmp_path):
    log_file = tmp_path / "nested" / "debug.log"
    monkeypatch.setenv("MENU_BROWSER_LOG_PATH", str(log_file))

    logger = get_logger("menu_browser.tests.file_logger")
    logger.debug("intent_consumed channel=filters seq=4")
    for handler in logger.handlers:
        handler.flush()

    assert "intent_consumed channel=filters seq=4" in log_file.read_text(encoding="utf-8")
    assert logger.propagate is False
    assert get_logger("menu_browser.tests.file_logger").handlers == logger.handlers
