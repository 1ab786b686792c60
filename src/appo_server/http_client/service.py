# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""AppInstanceInfoService backed by a running appo-server.

HttpAppInstanceInfoService satisfies the same contract as the in-memory
service but forwards every call through AppoClient. The CLI binds the
instance info endpoint to it, so commands share state with the server
they point at instead of a throwaway local store.

HTTP errors are translated back into appo errors:
    - 400 -> InvalidParameterError
    - 404 -> NotFoundError
    - 409 -> ConflictError
    - anything else -> AppoError

Example:
    ::

        service = HttpAppInstanceInfoService.connect("http://localhost:8000", token="secret")
        infos = await service.get_all_app_instance_info(tenant_id)
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import httpx

from ..entities.app_instance_info.models import AppInstanceInfo
from ..errors import AppoError, ConflictError, InvalidParameterError, NotFoundError
from .client import AppInstanceInfo as ClientAppInstanceInfo
from .client import AppoClient, connect

_STATUS_ERRORS: dict[int, type[AppoError]] = {
    400: InvalidParameterError,
    404: NotFoundError,
    409: ConflictError,
}


def _error_from_response(response: httpx.Response) -> AppoError:
    """Build the appo error matching an HTTP error response."""
    try:
        data = response.json()
    except ValueError:
        data = None
    detail = data.get("detail") if isinstance(data, dict) else None
    if not isinstance(detail, str):
        shown = detail if detail is not None else response.text
        detail = f"HTTP {response.status_code}: {shown}"
    return _STATUS_ERRORS.get(response.status_code, AppoError)(detail)


@contextmanager
def _translate_errors(base_url: str) -> Iterator[None]:
    try:
        yield
    except httpx.HTTPStatusError as e:
        raise _error_from_response(e.response) from e
    except httpx.TransportError as e:
        raise AppoError(f"Cannot reach appo-server at {base_url}: {e}") from e


def _to_entity(info: ClientAppInstanceInfo) -> AppInstanceInfo:
    return AppInstanceInfo(
        app_package_id=info.app_package_id,
        app_name=info.app_name,
        app_id=info.app_id,
        mec_host=info.mec_host,
        app_instance_id=info.app_instance_id,
        app_descriptor=info.app_descriptor,
        applcm_host=info.applcm_host,
        operational_status=info.operational_status,
        operation_info=info.operation_info,
    )


def _to_client(entity: AppInstanceInfo) -> ClientAppInstanceInfo:
    return ClientAppInstanceInfo(
        app_instance_id=entity.app_instance_id,
        app_package_id=entity.app_package_id,
        app_name=entity.app_name,
        app_id=entity.app_id,
        mec_host=entity.mec_host,
        app_descriptor=entity.app_descriptor,
        applcm_host=entity.applcm_host,
        operational_status=entity.operational_status,
        operation_info=entity.operation_info,
    )


class HttpAppInstanceInfoService:
    """Forward application instance info operations to a remote server.

    Attributes:
        client: AppoClient used for every call.
    """

    def __init__(self, client: AppoClient):
        self.client = client

    @classmethod
    def connect(cls, url_or_name: str, token: str | None = None) -> HttpAppInstanceInfoService:
        """Create a service for a URL or a registered connection name."""
        return cls(connect(url_or_name, token=token))

    async def get_app_instance_info(self, tenant_id: str, app_instance_id: str) -> AppInstanceInfo:
        with _translate_errors(self.client.base_url):
            info = await self.client.app_instance_infos.get(tenant_id, app_instance_id)
        return _to_entity(info)

    async def get_all_app_instance_info(self, tenant_id: str) -> list[AppInstanceInfo]:
        with _translate_errors(self.client.base_url):
            infos = await self.client.app_instance_infos.list(tenant_id)
        return [_to_entity(info) for info in infos]

    async def create_app_instance_info(
        self, tenant_id: str, info: AppInstanceInfo
    ) -> AppInstanceInfo:
        with _translate_errors(self.client.base_url):
            created = await self.client.app_instance_infos.create(tenant_id, _to_client(info))
        return _to_entity(created)

    async def update_app_instance_info(
        self, tenant_id: str, info: AppInstanceInfo
    ) -> AppInstanceInfo:
        with _translate_errors(self.client.base_url):
            updated = await self.client.app_instance_infos.update(
                tenant_id, info.app_instance_id, _to_client(info)
            )
        return _to_entity(updated)

    async def delete_app_instance_info(self, tenant_id: str, app_instance_id: str) -> None:
        with _translate_errors(self.client.base_url):
            deleted = await self.client.app_instance_infos.delete(tenant_id, app_instance_id)
        if not deleted:
            raise AppoError(
                f"Unexpected delete response for application instance '{app_instance_id}'"
            )


__all__ = ["HttpAppInstanceInfoService"]
