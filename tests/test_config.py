"""
Tests for environment configuration.

Test plan:
- env(): value when set, default plus warning when unset
- TransportConfig.from_env: reads CVT_API_*, overrides win, bad port
- CvtApi.from_env points at the configured node
"""

from __future__ import annotations

import logging

import pytest

from cvt_client import CvtApi, TransportConfig
from cvt_client.config import ENV_HOST, ENV_PORT, ENV_PROTOCOL, env


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in (ENV_PROTOCOL, ENV_HOST, ENV_PORT):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestEnv:
    def test_set_value(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv(ENV_HOST, "node.example.com")
        assert env(ENV_HOST, "localhost") == "node.example.com"

    def test_default_logs_warning(
        self, clean_env: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="cvt_client.config"):
            assert env(ENV_HOST, "localhost") == "localhost"
        assert ENV_HOST in caplog.text
        assert "localhost" in caplog.text


class TestFromEnv:
    def test_defaults(self, clean_env: pytest.MonkeyPatch) -> None:
        assert TransportConfig.from_env().base_url == "http://localhost:14265"

    def test_reads_environment(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv(ENV_PROTOCOL, "https")
        clean_env.setenv(ENV_HOST, "node.example.com")
        clean_env.setenv(ENV_PORT, "443")
        config = TransportConfig.from_env()
        assert config.base_url == "https://node.example.com:443"
        assert config.port == 443

    def test_overrides_win(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv(ENV_HOST, "node.example.com")
        config = TransportConfig.from_env(host="other", read_timeout=10.0)
        assert config.host == "other"
        assert config.read_timeout == 10.0

    def test_bad_port(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv(ENV_PORT, "abc")
        with pytest.raises(ValueError, match=ENV_PORT):
            TransportConfig.from_env()

    def test_gateway_from_env(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv(ENV_HOST, "10.0.0.9")
        with CvtApi.from_env() as api:
            assert api.config.base_url == "http://10.0.0.9:14265"
