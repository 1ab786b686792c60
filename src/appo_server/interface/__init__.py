# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Interface layer for API and CLI.

This package exposes AppoServer endpoints through FastAPI routes and
Click commands.

Components:
    BaseEndpoint: Base class for all endpoint definitions.
    create_app: FastAPI application factory.
    register_cli_endpoint: Register endpoint as Click commands.

Example:
    Create a FastAPI application::

        from appo_server import AppoServer
        from appo_server.interface import create_app

        app = create_app(AppoServer())
"""

from .api_base import create_app
from .cli_base import register_endpoint as register_cli_endpoint
from .endpoint_base import BaseEndpoint

__all__ = [
    "BaseEndpoint",
    "create_app",
    "register_cli_endpoint",
]
