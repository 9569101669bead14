# ABOUTME: Tests for environment configuration
# ABOUTME: Validates token requirement and default budget resolution

import pytest

from ynab_mcp.config import API_BASE_URL, Settings, resolve_budget_id
from ynab_mcp.exceptions import ConfigurationError


class TestSettings:
    """Test loading Settings from the environment."""

    def test_missing_token_is_fatal(self, monkeypatch):
        monkeypatch.delenv("YNAB_API_TOKEN")
        with pytest.raises(ConfigurationError, match="YNAB_API_TOKEN"):
            Settings.from_env()

    def test_empty_token_is_fatal(self, monkeypatch):
        monkeypatch.setenv("YNAB_API_TOKEN", "")
        with pytest.raises(ConfigurationError):
            Settings.from_env()

    def test_defaults(self):
        settings = Settings.from_env()
        assert settings.api_token == "test-token"
        assert settings.default_budget_id == "last-used"
        assert settings.api_base_url == API_BASE_URL
        assert settings.log_level == "INFO"

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("YNAB_BUDGET_ID", "budget-123")
        monkeypatch.setenv("YNAB_API_URL", "http://localhost:8080/v1/")
        monkeypatch.setenv("YNAB_MCP_LOG_LEVEL", "debug")
        settings = Settings.from_env()
        assert settings.default_budget_id == "budget-123"
        assert settings.api_base_url == "http://localhost:8080/v1"
        assert settings.log_level == "DEBUG"

    def test_invalid_log_level_is_configuration_error(self, monkeypatch):
        monkeypatch.setenv("YNAB_MCP_LOG_LEVEL", "verbose")
        with pytest.raises(ConfigurationError, match="YNAB_MCP_LOG_LEVEL"):
            Settings.from_env()


class TestResolveBudgetId:
    """Test budget ID fallback."""

    def test_explicit_id_wins(self, monkeypatch):
        monkeypatch.setenv("YNAB_BUDGET_ID", "budget-123")
        assert resolve_budget_id("other") == "other"

    def test_uses_configured_default(self, monkeypatch):
        monkeypatch.setenv("YNAB_BUDGET_ID", "budget-123")
        assert resolve_budget_id(None) == "budget-123"

    def test_falls_back_to_last_used(self):
        assert resolve_budget_id() == "last-used"
