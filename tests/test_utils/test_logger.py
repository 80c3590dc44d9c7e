"""Tests for logging setup and settings defaults."""

import sys

import pytest
from loguru import logger
from pydantic import ValidationError

from config.settings import Settings
from studio_agent.utils.logger import setup_logger


def test_setup_logger_writes_debug_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    try:
        setup_logger(level="WARNING")
        logger.debug("[TEST] debug line reaches the file sink")
        logger.complete()
        log_files = list((tmp_path / "logs").glob("agent_*.log"))
        assert len(log_files) == 1
        assert "debug line reaches the file sink" in log_files[0].read_text()
    finally:
        logger.remove()
        logger.add(sys.stderr)


def test_settings_defaults():
    cfg = Settings(_env_file=None)
    assert cfg.pump_api_base == "https://api.pump.studio"
    assert cfg.market_tab == "all"
    assert cfg.market_limit == 5
    assert cfg.json_logs is False


def test_settings_rejects_unknown_market_tab():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, market_tab="trending")
    assert Settings(_env_file=None, market_tab="graduated").market_tab == "graduated"
