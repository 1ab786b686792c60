# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Configuration dataclass for AppoServer.

This module defines the configuration for appo-server. AppoConfig is the
single entry point for all configuration; appo_config_from_env() builds
it from APPO_* environment variables for container deployments.

Configuration via environment variables:
    APPO_INSTANCE: Instance name for display
    APPO_PORT: Server port (default: 8000)
    APPO_TENANT_ID_PATTERN: Regex a tenant id must fully match
    APPO_APP_INSTANCE_ID_PATTERN: Regex an application instance id must fully match
    APPO_SSL_ENABLED: Use https:// for calls built by ProcessflowTask.from_config()

Usage:
    config = AppoConfig(port=8080, tenant_id_pattern="[a-z0-9]{4,16}")
    server = AppoServer(config=config)

    # Access config
    pattern = server.config.tenant_id_pattern
"""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_TENANT_ID_PATTERN = "[0-9a-f-]{32,36}"
DEFAULT_APP_INSTANCE_ID_PATTERN = "[0-9a-f-]{32,36}"

_TRUE_VALUES = ("1", "true", "yes")


@dataclass
class AppoConfig:
    """Main configuration container for AppoServer.

    Top-Level Settings:
        instance_name: Service identifier for display
        port: Default API server port
        tenant_id_pattern: Full-match regex for tenant ids in paths
        app_instance_id_pattern: Full-match regex for application instance ids
        ssl_enabled: Whether workflow tasks build https:// URLs

    Example:
        config = AppoConfig(
            instance_name="appo-edge-1",
            app_instance_id_pattern="[0-9a-f]{8}(-[0-9a-f]{4}){3}-[0-9a-f]{12}",
        )
        server = AppoServer(config=config)
    """

    instance_name: str = "appo-server"
    """Instance name for display and identification."""

    port: int = 8000
    """Default port for API server."""

    tenant_id_pattern: str = DEFAULT_TENANT_ID_PATTERN
    """Regex a tenant id path parameter must fully match."""

    app_instance_id_pattern: str = DEFAULT_APP_INSTANCE_ID_PATTERN
    """Regex an application instance id path parameter must fully match."""

    ssl_enabled: bool = False
    """Whether workflow tasks address collaborators over https."""


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").lower() in _TRUE_VALUES


def appo_config_from_env() -> AppoConfig:
    """Build AppoConfig from APPO_* environment variables.

    Environment variables:
        APPO_INSTANCE: Instance name (default: "appo-server")
        APPO_PORT: Server port (default: 8000)
        APPO_TENANT_ID_PATTERN: Tenant id regex (default: [0-9a-f-]{32,36})
        APPO_APP_INSTANCE_ID_PATTERN: Instance id regex (default: [0-9a-f-]{32,36})
        APPO_SSL_ENABLED: Enable https for workflow calls (default: false)

    Returns:
        AppoConfig instance populated from environment.
    """
    return AppoConfig(
        instance_name=os.environ.get("APPO_INSTANCE", "appo-server"),
        port=int(os.environ.get("APPO_PORT", "8000")),
        tenant_id_pattern=os.environ.get("APPO_TENANT_ID_PATTERN", DEFAULT_TENANT_ID_PATTERN),
        app_instance_id_pattern=os.environ.get(
            "APPO_APP_INSTANCE_ID_PATTERN", DEFAULT_APP_INSTANCE_ID_PATTERN
        ),
        ssl_enabled=_env_flag("APPO_SSL_ENABLED"),
    )


__all__ = [
    "DEFAULT_APP_INSTANCE_ID_PATTERN",
    "DEFAULT_TENANT_ID_PATTERN",
    "AppoConfig",
    "appo_config_from_env",
]
