"""
Unit Tests for Configuration and Logging
========================================
"""

import httpx
import pytest
import structlog


@pytest.fixture
def coinbase_env(monkeypatch):
    monkeypatch.setenv("COINBASE_API_KEY", "env-key")
    monkeypatch.setenv("COINBASE_API_SECRET", "env-secret")
    monkeypatch.setenv("COINBASE_API_URL", "https://sandbox.example.com/api/v3")
    monkeypatch.setenv("COINBASE_TIMEOUT", "2.5")


class TestClientConfig:
    """Tests for environment-based configuration."""

    def test_defaults(self, monkeypatch):
        """Should fall back to the public API URL."""
        from coinbase_core.config import ClientConfig, API_URL

        for name in ("COINBASE_API_KEY", "COINBASE_API_SECRET", "COINBASE_API_URL", "COINBASE_TIMEOUT"):
            monkeypatch.delenv(name, raising=False)

        config = ClientConfig()

        assert config.api_key == ""
        assert config.api_secret == ""
        assert config.base_url == API_URL
        assert config.timeout == 10.0

    def test_reads_environment(self, coinbase_env):
        from coinbase_core.config import ClientConfig

        config = ClientConfig()

        assert config.api_key == "env-key"
        assert config.api_secret == "env-secret"
        assert config.base_url == "https://sandbox.example.com/api/v3"
        assert config.timeout == 2.5

    def test_secret_not_in_repr(self, coinbase_env):
        from coinbase_core.config import ClientConfig

        assert "env-secret" not in repr(ClientConfig())

    @pytest.mark.asyncio
    async def test_client_from_config(self, coinbase_env):
        """Client built from config signs with the configured key."""
        from coinbase_core import CoinbaseClient

        sent = []

        def handler(request):
            sent.append(request)
            return httpx.Response(200, json={})

        async with CoinbaseClient.from_config(transport=httpx.MockTransport(handler)) as client:
            await client.accounts()

        assert sent[0].url == "https://sandbox.example.com/api/v3/brokerage/accounts"
        assert sent[0].headers["cb-access-key"] == "env-key"

    def test_client_from_config_without_credentials(self, monkeypatch):
        from coinbase_core import CoinbaseClient, ClientConfig, ConfigurationError

        monkeypatch.delenv("COINBASE_API_KEY", raising=False)
        monkeypatch.delenv("COINBASE_API_SECRET", raising=False)

        with pytest.raises(ConfigurationError):
            CoinbaseClient.from_config(ClientConfig())


class TestLogging:
    """Tests for structlog setup."""

    def test_json_output(self, capsys):
        from coinbase_core.log import setup_logging

        try:
            setup_logging(level="INFO", json_output=True)
            structlog.get_logger("test").info("hello", key="value")
        finally:
            structlog.reset_defaults()

        out = capsys.readouterr().out
        assert '"event": "hello"' in out
        assert '"key": "value"' in out
        assert '"level": "info"' in out

    def test_level_filters_debug(self, capsys):
        from coinbase_core.log import setup_logging

        try:
            setup_logging(level="WARNING", json_output=True)
            structlog.get_logger("test").debug("hidden")
        finally:
            structlog.reset_defaults()

        assert "hidden" not in capsys.readouterr().out
