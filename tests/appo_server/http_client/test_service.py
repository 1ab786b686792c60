# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Tests for HttpAppInstanceInfoService against an in-process server."""

from __future__ import annotations

from unittest.mock import AsyncMock, patch

import httpx
import pytest

from appo_server import AppoServer
from appo_server.entities.app_instance_info import AppInstanceInfoService, to_entity
from appo_server.errors import AppoError, ConflictError, InvalidParameterError, NotFoundError
from appo_server.http_client import AppoClient, HttpAppInstanceInfoService
from appo_server.http_client.client import _connections, register_connection


@pytest.fixture
def backend() -> AppoServer:
    return AppoServer()


@pytest.fixture
def service(backend) -> HttpAppInstanceInfoService:
    transport = httpx.ASGITransport(app=backend.api)
    return HttpAppInstanceInfoService(AppoClient("http://appo", token="t", transport=transport))


@pytest.fixture
def entity(dto):
    return to_entity(dto)


class TestContract:
    def test_is_service(self, service):
        """The HTTP service satisfies the service protocol."""
        assert isinstance(service, AppInstanceInfoService)

    def test_connect_uses_registered_connection(self):
        """connect() resolves registered connection names."""
        register_connection("edge", "https://edge.example.com", token="edge-key")
        try:
            service = HttpAppInstanceInfoService.connect("edge")
        finally:
            _connections.clear()

        assert service.client.base_url == "https://edge.example.com"
        assert service.client.token == "edge-key"


class TestOperations:
    async def test_create_then_get(self, service, tenant_id, entity):
        """Created records come back with every field."""
        created = await service.create_app_instance_info(tenant_id, entity)
        fetched = await service.get_app_instance_info(tenant_id, entity.app_instance_id)

        assert created == entity
        assert fetched == entity

    async def test_list(self, service, tenant_id, entity):
        """get_all returns the tenant's records."""
        await service.create_app_instance_info(tenant_id, entity)

        assert await service.get_all_app_instance_info(tenant_id) == [entity]

    async def test_update(self, service, tenant_id, entity):
        """update stores the new field values."""
        await service.create_app_instance_info(tenant_id, entity)
        entity.operational_status = "Terminated"

        updated = await service.update_app_instance_info(tenant_id, entity)

        assert updated.operational_status == "Terminated"

    async def test_delete(self, service, tenant_id, entity):
        """delete removes the record on the server."""
        await service.create_app_instance_info(tenant_id, entity)

        await service.delete_app_instance_info(tenant_id, entity.app_instance_id)

        with pytest.raises(NotFoundError):
            await service.get_app_instance_info(tenant_id, entity.app_instance_id)

    async def test_unexpected_delete_answer(self, service, tenant_id, app_instance_id):
        """A delete the server does not confirm is an error."""
        with patch.object(
            service.client.app_instance_infos, "delete", new=AsyncMock(return_value=False)
        ):
            with pytest.raises(AppoError, match="Unexpected delete response"):
                await service.delete_app_instance_info(tenant_id, app_instance_id)


class TestErrorTranslation:
    """HTTP errors come back as appo errors."""

    async def test_not_found(self, service, tenant_id, app_instance_id):
        with pytest.raises(NotFoundError, match="not found"):
            await service.get_app_instance_info(tenant_id, app_instance_id)

    async def test_conflict(self, service, tenant_id, entity):
        await service.create_app_instance_info(tenant_id, entity)

        with pytest.raises(ConflictError):
            await service.create_app_instance_info(tenant_id, entity)

    async def test_invalid_parameter(self, service, app_instance_id):
        with pytest.raises(InvalidParameterError, match="tenant id"):
            await service.get_app_instance_info("bad", app_instance_id)

    async def test_other_status(self, backend, tenant_id):
        """Statuses without a dedicated error map to AppoError."""
        transport = httpx.ASGITransport(app=backend.api)
        service = HttpAppInstanceInfoService(AppoClient("http://appo", transport=transport))

        with pytest.raises(AppoError, match="HTTP 422") as exc_info:
            await service.get_all_app_instance_info(tenant_id)

        assert type(exc_info.value) is AppoError

    async def test_unreachable_server(self, tenant_id):
        """Transport failures are reported with the server URL."""

        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = AppoClient("http://down:8000", token="t", transport=httpx.MockTransport(refuse))
        service = HttpAppInstanceInfoService(client)

        with pytest.raises(AppoError, match="Cannot reach appo-server at http://down:8000"):
            await service.get_all_app_instance_info(tenant_id)
