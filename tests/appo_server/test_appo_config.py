# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Tests for AppoConfig and appo_config_from_env()."""

from __future__ import annotations

import pytest

from appo_server.appo_config import (
    DEFAULT_APP_INSTANCE_ID_PATTERN,
    DEFAULT_TENANT_ID_PATTERN,
    AppoConfig,
    appo_config_from_env,
)

_ENV_VARS = [
    "APPO_INSTANCE",
    "APPO_PORT",
    "APPO_TENANT_ID_PATTERN",
    "APPO_APP_INSTANCE_ID_PATTERN",
    "APPO_SSL_ENABLED",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestDefaults:
    def test_defaults(self):
        """AppoConfig defaults."""
        config = AppoConfig()

        assert config.instance_name == "appo-server"
        assert config.port == 8000
        assert config.tenant_id_pattern == DEFAULT_TENANT_ID_PATTERN
        assert config.app_instance_id_pattern == DEFAULT_APP_INSTANCE_ID_PATTERN
        assert config.ssl_enabled is False

    def test_no_test_mode_flag(self):
        """Only settings read by the server exist on the config."""
        assert not hasattr(AppoConfig(), "test_mode")

    def test_from_env_without_variables(self):
        """Empty environment yields the defaults."""
        assert appo_config_from_env() == AppoConfig()


class TestFromEnv:
    def test_reads_variables(self, monkeypatch):
        """APPO_* variables populate the config."""
        monkeypatch.setenv("APPO_INSTANCE", "edge-1")
        monkeypatch.setenv("APPO_PORT", "9090")
        monkeypatch.setenv("APPO_TENANT_ID_PATTERN", "[a-z]+")
        monkeypatch.setenv("APPO_APP_INSTANCE_ID_PATTERN", "[0-9]+")

        config = appo_config_from_env()

        assert config.instance_name == "edge-1"
        assert config.port == 9090
        assert config.tenant_id_pattern == "[a-z]+"
        assert config.app_instance_id_pattern == "[0-9]+"

    @pytest.mark.parametrize("value", ["1", "true", "TRUE", "yes"])
    def test_flags_true(self, monkeypatch, value):
        """Boolean variables accept 1/true/yes in any case."""
        monkeypatch.setenv("APPO_SSL_ENABLED", value)

        assert appo_config_from_env().ssl_enabled is True

    @pytest.mark.parametrize("value", ["0", "false", "no", ""])
    def test_flags_false(self, monkeypatch, value):
        monkeypatch.setenv("APPO_SSL_ENABLED", value)

        assert appo_config_from_env().ssl_enabled is False
