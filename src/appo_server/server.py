# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""ASGI application entry point for uvicorn.

Configuration via environment variables (see appo_config_from_env):
    APPO_INSTANCE, APPO_PORT, APPO_TENANT_ID_PATTERN,
    APPO_APP_INSTANCE_ID_PATTERN, APPO_SSL_ENABLED

Example:
    Run with uvicorn::

        APPO_PORT=8080 uvicorn appo_server.server:app --host 0.0.0.0 --port 8080

    Or via CLI::

        appo-server serve --port 8080
"""

from .appo_base import AppoServer
from .appo_config import appo_config_from_env

# Create server and expose its FastAPI app (includes lifespan management)
_server = AppoServer(config=appo_config_from_env())
app = _server.api
