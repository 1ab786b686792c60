# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""appo-server: application instance info service and process-flow helpers.

Main components:
    AppoConfig: Configuration dataclass
    AppoServer: Composition root with endpoints, FastAPI app and CLI
    appo_config_from_env: Factory to build config from environment
    ProcessflowTask: Base class for orchestration tasks

Usage:
    from appo_server import AppoServer, AppoConfig

    server = AppoServer(config=AppoConfig(port=8080))
    app = server.api  # FastAPI application
"""

__version__ = "0.1.0"

from .appo_base import AppoServer
from .appo_config import AppoConfig, appo_config_from_env
from .workflow import ProcessflowTask

__all__ = [
    "AppoConfig",
    "AppoServer",
    "ProcessflowTask",
    "appo_config_from_env",
    "main",
]


def main() -> None:
    """CLI entry point. Creates an AppoServer and runs the CLI."""
    server = AppoServer(config=appo_config_from_env())
    server.cli()
