"""Tests for environment-driven settings."""

import importlib

import pytest

from contacts_mcp import config
from contacts_mcp.exceptions import ConfigurationError


@pytest.fixture
def reload_config(monkeypatch):
    yield lambda: importlib.reload(config)
    monkeypatch.undo()
    importlib.reload(config)


def test_defaults(monkeypatch, reload_config):
    for name in ["CONTACTS_MCP_TIMEOUT", "CONTACTS_MCP_MAX_OUTPUT", "CONTACTS_MCP_OSASCRIPT"]:
        monkeypatch.delenv(name, raising=False)
    cfg = reload_config()
    assert cfg.SCRIPT_TIMEOUT == 30
    assert cfg.MAX_OUTPUT_BYTES == 50 * 1024 * 1024
    assert cfg.OSASCRIPT_BIN == "osascript"
    assert cfg.APP_NAME == "Contacts"


def test_env_overrides(monkeypatch, reload_config):
    monkeypatch.setenv("CONTACTS_MCP_TIMEOUT", "5.5")
    monkeypatch.setenv("CONTACTS_MCP_MAX_OUTPUT", "1024")
    monkeypatch.setenv("CONTACTS_MCP_LOG_LEVEL", "debug")
    cfg = reload_config()
    assert cfg.SCRIPT_TIMEOUT == 5.5
    assert cfg.MAX_OUTPUT_BYTES == 1024
    assert cfg.LOG_LEVEL == "DEBUG"


def test_invalid_number_raises(monkeypatch, reload_config):
    monkeypatch.setenv("CONTACTS_MCP_TIMEOUT", "soon")
    with pytest.raises(ConfigurationError, match="CONTACTS_MCP_TIMEOUT"):
        reload_config()
