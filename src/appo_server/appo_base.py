# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""AppoServer: configuration, services, endpoints, and interface factories.

AppoServer is the composition root of appo-server, providing:

1. Configuration: AppoConfig instance at self.config
2. Services: collaborator objects keyed by endpoint name at self.services
3. Endpoints: Registry at self.endpoints with autodiscovered Endpoint classes
4. Interfaces: Lazy `api` (FastAPI) and `cli` (Click) properties

Discovery Mechanism:
    Endpoints from `appo_server.entities.*/endpoint.py` are instantiated
    with the service registered under their name.

    Discovered entities:
        - app_instance_infos: Tenant-scoped application instance records

Usage (testing without runtime):
    server = AppoServer(config=AppoConfig())
    info = await server.endpoint("app_instance_infos").create(tenant_id, dto)

Usage (production via server.api):
    server = AppoServer(config=appo_config_from_env(), app_instance_info_service=my_service)
    app = server.api  # FastAPI app with auto-start/stop lifespan
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from .appo_config import AppoConfig
from .entities.app_instance_info.service import (
    AppInstanceInfoService,
    InMemoryAppInstanceInfoService,
)
from .interface import BaseEndpoint

if TYPE_CHECKING:
    import click
    from fastapi import FastAPI

logger = logging.getLogger("appo_server")


class AppoServer:
    """Composition root: config, services, endpoints, interface factories.

    Attributes:
        config: AppoConfig instance with all configuration
        services: Dict of service collaborators keyed by endpoint name
        endpoints: Dict of Endpoint instances keyed by name
        remote_service_factory: Optional factory for the services CLI commands use

    Properties:
        api: FastAPI app (lazy, created on first access)
        cli: Click CLI group (lazy, created on first access)
    """

    def __init__(
        self,
        config: AppoConfig | None = None,
        app_instance_info_service: AppInstanceInfoService | None = None,
        remote_service_factory: Callable[[str, str | None], Any] | None = None,
    ):
        """Initialize server with config and service collaborators.

        Args:
            config: AppoConfig instance. If None, creates default.
            app_instance_info_service: Service backing the instance info
                endpoint. If None, uses InMemoryAppInstanceInfoService.
            remote_service_factory: Callable ``(url, token) -> service`` used by
                CLI commands. If None, uses HttpAppInstanceInfoService.connect.
        """
        self.config = config or AppoConfig()
        self._active = False

        self.services: dict[str, Any] = {
            "app_instance_infos": app_instance_info_service or InMemoryAppInstanceInfoService(),
        }

        self.endpoints: dict[str, BaseEndpoint] = {}
        self._discover_endpoints()

        self.remote_service_factory = remote_service_factory

        self._api: FastAPI | None = None
        self._cli: click.Group | None = None

    def _discover_endpoints(self) -> None:
        """Autodiscover Endpoint classes and bind them to their services."""
        for endpoint_class in BaseEndpoint.discover():
            service = self.services.get(endpoint_class.name)
            if service is None:
                logger.warning(f"No service registered for endpoint '{endpoint_class.name}'")
                continue
            self.endpoints[endpoint_class.name] = endpoint_class(service, self.config)

    def endpoint(self, name: str) -> BaseEndpoint:
        """Get endpoint by name."""
        if name not in self.endpoints:
            raise ValueError(f"Endpoint '{name}' not found")
        return self.endpoints[name]

    @property
    def active(self) -> bool:
        """True between start() and stop()."""
        return self._active

    async def start(self) -> None:
        """Start the service and begin accepting requests."""
        self._active = True
        logger.info(f"AppoServer '{self.config.instance_name}' started")

    async def stop(self) -> None:
        """Stop the service."""
        self._active = False
        logger.info(f"AppoServer '{self.config.instance_name}' stopped")

    # -------------------------------------------------------------------------
    # Interface factories (lazy properties)
    # -------------------------------------------------------------------------

    @property
    def api(self) -> FastAPI:
        """FastAPI app with all routes and lifespan.

        Created on first access. Includes default lifespan that calls
        server.start() on startup and server.stop() on shutdown.

        Usage:
            uvicorn appo_server.server:app
        """
        if self._api is None:
            from .interface import create_app

            self._api = create_app(self)
        return self._api

    @property
    def cli(self) -> click.Group:
        """Click CLI group with endpoint commands and service commands.

        Created on first access. Includes:
        - Endpoint commands: app-instance-infos
        - Service commands: serve

        Usage:
            appo-server --help
        """
        if self._cli is None:
            self._cli = self._create_cli()
        return self._cli

    def _create_cli(self) -> click.Group:
        """Build Click CLI: endpoint commands + service commands (serve)."""
        import click

        from .http_client import HttpAppInstanceInfoService
        from .interface import register_cli_endpoint

        service_factory = self.remote_service_factory or HttpAppInstanceInfoService.connect

        @click.group()
        @click.version_option(package_name="appo-server")
        def cli() -> None:
            """Appo-Server: application instance info service."""
            pass

        for endpoint in self.endpoints.values():
            register_cli_endpoint(cli, endpoint, service_factory)

        @cli.command("serve")
        @click.option("--host", default="0.0.0.0", help="Bind host")
        @click.option("--port", "-p", default=self.config.port, help="Bind port")
        @click.option("--reload", is_flag=True, help="Enable auto-reload")
        def serve_cmd(host: str, port: int, reload: bool) -> None:
            """Start the API server."""
            import uvicorn

            uvicorn.run(
                "appo_server.server:app",
                host=host,
                port=port,
                reload=reload,
            )

        return cli


__all__ = ["AppoServer"]
