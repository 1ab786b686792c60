# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Service collaborator contract for application instance info records.

AppInstanceInfoEndpoint delegates all business logic to an object
implementing AppInstanceInfoService. Real deployments plug in their own
persistence-backed service; InMemoryAppInstanceInfoService is the
reference implementation used by the default server, the CLI and tests.

Error contract:
    - NotFoundError: get/update/delete of an unknown record
    - ConflictError: create of an already existing record
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from typing import Protocol, runtime_checkable

from ...errors import ConflictError, NotFoundError
from .models import AppInstanceInfo

logger = logging.getLogger(__name__)


@runtime_checkable
class AppInstanceInfoService(Protocol):
    """Operations the endpoint layer expects from its service collaborator."""

    async def get_app_instance_info(
        self, tenant_id: str, app_instance_id: str
    ) -> AppInstanceInfo: ...

    async def get_all_app_instance_info(self, tenant_id: str) -> list[AppInstanceInfo]: ...

    async def create_app_instance_info(
        self, tenant_id: str, info: AppInstanceInfo
    ) -> AppInstanceInfo: ...

    async def update_app_instance_info(
        self, tenant_id: str, info: AppInstanceInfo
    ) -> AppInstanceInfo: ...

    async def delete_app_instance_info(self, tenant_id: str, app_instance_id: str) -> None: ...


class InMemoryAppInstanceInfoService:
    """Store application instance info records in local memory.

    Records are kept per tenant in insertion order. Data is not persisted
    across process restarts. Returned records are copies, so callers cannot
    mutate stored state.

    Example:
        ::

            service = InMemoryAppInstanceInfoService()
            created = await service.create_app_instance_info("t1", info)
            same = await service.get_app_instance_info("t1", created.app_instance_id)
    """

    def __init__(self) -> None:
        self._records: dict[str, dict[str, AppInstanceInfo]] = {}

    def _tenant_records(self, tenant_id: str) -> dict[str, AppInstanceInfo]:
        return self._records.setdefault(tenant_id, {})

    async def get_app_instance_info(self, tenant_id: str, app_instance_id: str) -> AppInstanceInfo:
        record = self._records.get(tenant_id, {}).get(app_instance_id)
        if record is None:
            raise NotFoundError(f"Application instance '{app_instance_id}' not found")
        return replace(record)

    async def get_all_app_instance_info(self, tenant_id: str) -> list[AppInstanceInfo]:
        return [replace(r) for r in self._records.get(tenant_id, {}).values()]

    async def create_app_instance_info(
        self, tenant_id: str, info: AppInstanceInfo
    ) -> AppInstanceInfo:
        records = self._tenant_records(tenant_id)
        app_instance_id = info.app_instance_id or str(uuid.uuid4())
        if app_instance_id in records:
            raise ConflictError(f"Application instance '{app_instance_id}' already exists")
        record = replace(info, app_instance_id=app_instance_id)
        records[app_instance_id] = record
        logger.debug(f"Stored application instance {app_instance_id} for tenant {tenant_id}")
        return replace(record)

    async def update_app_instance_info(
        self, tenant_id: str, info: AppInstanceInfo
    ) -> AppInstanceInfo:
        records = self._records.get(tenant_id, {})
        if info.app_instance_id not in records:
            raise NotFoundError(f"Application instance '{info.app_instance_id}' not found")
        record = replace(info)
        records[info.app_instance_id] = record
        return replace(record)

    async def delete_app_instance_info(self, tenant_id: str, app_instance_id: str) -> None:
        records = self._records.get(tenant_id, {})
        if records.pop(app_instance_id, None) is None:
            raise NotFoundError(f"Application instance '{app_instance_id}' not found")


__all__ = ["AppInstanceInfoService", "InMemoryAppInstanceInfoService"]
