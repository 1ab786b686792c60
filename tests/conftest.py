# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Shared pytest fixtures for appo_server tests."""

import pytest

from appo_server import AppoConfig, AppoServer
from appo_server.entities.app_instance_info import AppInstanceInfoDto

TENANT_ID = "e921ce54-82c8-4532-b5c6-8516cf75f7a7"
APP_INSTANCE_ID = "5abe4782-2c70-4e47-9a4e-0ee3a1a0fd1f"
OTHER_APP_INSTANCE_ID = "71ea8b3f-9e42-4c6e-8d7e-1c2b3a4d5e6f"


@pytest.fixture
def tenant_id() -> str:
    """A tenant id matching the default pattern."""
    return TENANT_ID


@pytest.fixture
def app_instance_id() -> str:
    """An application instance id matching the default pattern."""
    return APP_INSTANCE_ID


@pytest.fixture
def other_app_instance_id() -> str:
    """A second valid application instance id."""
    return OTHER_APP_INSTANCE_ID


@pytest.fixture
def make_dto():
    """Factory building a valid transport shape with selected overrides."""

    def _make(**overrides) -> AppInstanceInfoDto:
        data = {
            "app_instance_id": APP_INSTANCE_ID,
            "app_package_id": "f20358433cf8eb4719a62a49ed118c9b",
            "app_name": "face_recognition",
            "app_id": "f20358433cf8eb4719a62a49ed118c9b",
            "mec_host": "192.168.1.10",
            "app_descriptor": "face recognition demo",
            "applcm_host": "192.168.1.20",
            "operational_status": "Instantiated",
            "operation_info": "success",
        }
        data.update(overrides)
        return AppInstanceInfoDto(**data)

    return _make


@pytest.fixture
def dto(make_dto) -> AppInstanceInfoDto:
    """A valid application instance info transport shape."""
    return make_dto()


@pytest.fixture
def config() -> AppoConfig:
    """Default configuration."""
    return AppoConfig()


@pytest.fixture
def server(config) -> AppoServer:
    """Server backed by the in-memory service."""
    return AppoServer(config=config)


# Marker registration
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "network: marks tests requiring network access")
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
