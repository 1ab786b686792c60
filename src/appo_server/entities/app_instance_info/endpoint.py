# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Application instance info endpoint.

This module provides the AppInstanceInfoEndpoint class exposing CRUD
operations for application instance info records. Each operation
validates its identifiers, converts between transport and entity shapes
and delegates to the service collaborator. Service errors propagate
unchanged.

Example:
    CLI commands auto-generated (run against --url, default http://localhost:<port>)::

        appo-server app-instance-infos list --tenant-id <tenant> --token <token>
        appo-server app-instance-infos get --tenant-id <tenant> --app-instance-id <id>
        appo-server app-instance-infos create --tenant-id <tenant> --body '{"appName": ...}'
        appo-server app-instance-infos delete --tenant-id <tenant> --app-instance-id <id>
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ...interface.endpoint_base import BaseEndpoint
from .models import AppInstanceInfoDto, to_dto, to_entity

if TYPE_CHECKING:
    from ...appo_config import AppoConfig
    from .service import AppInstanceInfoService

logger = logging.getLogger(__name__)

DELETE_SUCCESS = "success"


class AppInstanceInfoEndpoint(BaseEndpoint):
    """Endpoint for application instance info records.

    Attributes:
        name: Endpoint name ("app_instance_infos").
        service: AppInstanceInfoService collaborator.

    Example:
        Using the endpoint programmatically::

            endpoint = AppInstanceInfoEndpoint(InMemoryAppInstanceInfoService(), AppoConfig())
            created = await endpoint.create(tenant_id, AppInstanceInfoDto(...))
            infos = await endpoint.list(tenant_id)
    """

    name = "app_instance_infos"

    def __init__(self, service: AppInstanceInfoService, config: AppoConfig):
        super().__init__(service, config)

    async def get(self, tenant_id: str, app_instance_id: str) -> AppInstanceInfoDto:
        """Retrieve application instance info.

        Args:
            tenant_id: Tenant identifier.
            app_instance_id: Application instance identifier.

        Returns:
            Application instance info transport shape.

        Raises:
            InvalidParameterError: If an identifier fails its pattern.
        """
        self.check_tenant_id(tenant_id)
        self.check_app_instance_id(app_instance_id)

        logger.info(f"Retrieve application instance info: {app_instance_id}")

        info = await self.service.get_app_instance_info(tenant_id, app_instance_id)
        return to_dto(info)

    async def list(self, tenant_id: str) -> list[AppInstanceInfoDto]:
        """Retrieve all application instance infos of a tenant.

        Order is whatever the service returns.
        """
        self.check_tenant_id(tenant_id)

        logger.info("Retrieve application instance infos")

        infos = await self.service.get_all_app_instance_info(tenant_id)
        return [to_dto(info) for info in infos]

    async def create(self, tenant_id: str, body: AppInstanceInfoDto) -> AppInstanceInfoDto:
        """Create application instance info.

        Args:
            tenant_id: Tenant identifier.
            body: Application instance info to create.

        Returns:
            Created application instance info.

        Raises:
            InvalidParameterError: If the tenant id, or an instance id given
                in the body, fails its pattern.
        """
        self.check_tenant_id(tenant_id)
        if body.app_instance_id is not None:
            self.check_app_instance_id(body.app_instance_id)

        logger.info(f"Create application instance info: {body.app_instance_id}")

        info = await self.service.create_app_instance_info(tenant_id, to_entity(body))
        return to_dto(info)

    async def update(
        self, tenant_id: str, app_instance_id: str, body: AppInstanceInfoDto
    ) -> AppInstanceInfoDto:
        """Update application instance info.

        The instance id from the path always replaces the one in the body.

        Args:
            tenant_id: Tenant identifier.
            app_instance_id: Application instance identifier.
            body: New application instance info.

        Returns:
            Updated application instance info.
        """
        self.check_tenant_id(tenant_id)
        self.check_app_instance_id(app_instance_id)

        logger.info(f"Update application instance info: {body.app_instance_id}")

        info = to_entity(body)
        info.app_instance_id = app_instance_id

        info = await self.service.update_app_instance_info(tenant_id, info)
        return to_dto(info)

    async def delete(self, tenant_id: str, app_instance_id: str) -> str:
        """Delete application instance info.

        Returns:
            The literal "success".
        """
        self.check_tenant_id(tenant_id)
        self.check_app_instance_id(app_instance_id)

        logger.info(f"Delete application instance info: {app_instance_id}")
        await self.service.delete_app_instance_info(tenant_id, app_instance_id)

        return DELETE_SUCCESS


__all__ = ["DELETE_SUCCESS", "AppInstanceInfoEndpoint"]
