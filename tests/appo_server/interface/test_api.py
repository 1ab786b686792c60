# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Tests for the REST API routes.

Runs the FastAPI app from AppoServer against the in-memory service.
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from appo_server import AppoConfig, AppoServer
from appo_server.entities.app_instance_info import AppInstanceInfo

HEADERS = {"access_token": "opaque-token"}


@pytest.fixture
def client(server) -> TestClient:
    return TestClient(server.api)


@pytest.fixture
def body(dto) -> dict:
    return dto.model_dump(by_alias=True)


def _url(tenant_id: str, app_instance_id: str | None = None) -> str:
    url = f"/appo/v1/tenants/{tenant_id}/app_instance_infos"
    if app_instance_id is not None:
        url = f"{url}/{app_instance_id}"
    return url


class TestHealth:
    def test_health_without_token(self, client):
        """/health needs no access token."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


class TestCrudFlow:
    """Create, read, update and delete over HTTP."""

    def test_create_returns_record(self, client, tenant_id, body):
        """POST returns the created record with status 200."""
        response = client.post(_url(tenant_id), json=body, headers=HEADERS)

        assert response.status_code == 200
        assert response.json() == body

    def test_get_one(self, client, tenant_id, app_instance_id, body):
        """GET by id returns the stored record in camelCase."""
        client.post(_url(tenant_id), json=body, headers=HEADERS)

        response = client.get(_url(tenant_id, app_instance_id), headers=HEADERS)

        assert response.status_code == 200
        data = response.json()
        assert data["appInstanceId"] == app_instance_id
        assert data["appName"] == "face_recognition"

    def test_get_all(self, client, tenant_id, body, other_app_instance_id):
        """GET collection returns every record of the tenant."""
        client.post(_url(tenant_id), json=body, headers=HEADERS)
        client.post(
            _url(tenant_id), json={**body, "appInstanceId": other_app_instance_id}, headers=HEADERS
        )

        response = client.get(_url(tenant_id), headers=HEADERS)

        assert response.status_code == 200
        ids = [d["appInstanceId"] for d in response.json()]
        assert ids == [body["appInstanceId"], other_app_instance_id]

    def test_get_all_empty(self, client, tenant_id):
        """Tenant without records returns an empty list."""
        response = client.get(_url(tenant_id), headers=HEADERS)

        assert response.status_code == 200
        assert response.json() == []

    def test_update_uses_path_id(
        self, client, tenant_id, app_instance_id, body, other_app_instance_id
    ):
        """PUT stores the body under the path id, ignoring the body id."""
        client.post(_url(tenant_id), json=body, headers=HEADERS)
        changed = {
            **body,
            "appInstanceId": other_app_instance_id,
            "operationalStatus": "Terminated",
        }

        response = client.put(_url(tenant_id, app_instance_id), json=changed, headers=HEADERS)

        assert response.status_code == 200
        assert response.json()["appInstanceId"] == app_instance_id
        assert response.json()["operationalStatus"] == "Terminated"

    def test_delete_returns_success(self, client, tenant_id, app_instance_id, body):
        """DELETE returns the JSON string 'success'."""
        client.post(_url(tenant_id), json=body, headers=HEADERS)

        response = client.delete(_url(tenant_id, app_instance_id), headers=HEADERS)

        assert response.status_code == 200
        assert response.json() == "success"
        missing = client.get(_url(tenant_id, app_instance_id), headers=HEADERS)
        assert missing.status_code == 404


class TestParameterValidation:
    """Pattern checks on path parameters."""

    def test_bad_tenant_id_is_400(self, client, app_instance_id):
        """Invalid tenant id returns 400."""
        response = client.get(_url("not-a-tenant", app_instance_id), headers=HEADERS)

        assert response.status_code == 400
        assert "tenant id" in response.json()["detail"]

    def test_bad_instance_id_is_400(self, client, tenant_id):
        """Invalid application instance id returns 400."""
        response = client.delete(_url(tenant_id, "XYZ"), headers=HEADERS)

        assert response.status_code == 400
        assert "application instance id" in response.json()["detail"]

    def test_missing_access_token_is_422(self, client, tenant_id):
        """Missing access_token header is rejected."""
        response = client.get(_url(tenant_id))

        assert response.status_code == 422

    def test_hyphenated_header_is_not_accepted(self, client, tenant_id):
        """The header name is access_token with an underscore."""
        response = client.get(_url(tenant_id), headers={"access-token": "t"})

        assert response.status_code == 422

    def test_invalid_body_is_422(self, client, tenant_id, app_instance_id, body):
        """PUT with a structurally invalid body is rejected."""
        del body["appName"]

        response = client.put(_url(tenant_id, app_instance_id), json=body, headers=HEADERS)

        assert response.status_code == 422


class TestServiceErrors:
    """Service errors are rendered with their own status."""

    def test_get_missing_is_404(self, client, tenant_id, app_instance_id):
        """Unknown record returns 404."""
        response = client.get(_url(tenant_id, app_instance_id), headers=HEADERS)

        assert response.status_code == 404
        assert "not found" in response.json()["detail"]

    def test_duplicate_create_is_409(self, client, tenant_id, body):
        """Creating an existing id returns 409."""
        client.post(_url(tenant_id), json=body, headers=HEADERS)

        response = client.post(_url(tenant_id), json=body, headers=HEADERS)

        assert response.status_code == 409


class TestDelegation:
    """Invalid requests never reach the service."""

    def test_bad_ids_do_not_reach_service(self, dto):
        """Service is not called when validation fails."""
        service = MagicMock()
        service.get_app_instance_info = AsyncMock()
        server = AppoServer(config=AppoConfig(), app_instance_info_service=service)
        client = TestClient(server.api)

        response = client.get(_url("bad", "bad"), headers=HEADERS)

        assert response.status_code == 400
        service.get_app_instance_info.assert_not_awaited()


class TestStoredRecordsRendered:
    """Records from the service are returned even when a body could not carry them."""

    @pytest.fixture
    def stored(self, app_instance_id) -> AppInstanceInfo:
        return AppInstanceInfo(
            app_package_id="pkg",
            app_name="",
            app_id="app",
            mec_host="10.0.0.1",
            app_instance_id=app_instance_id,
            app_descriptor="d" * 2000,
            operation_info="x" * 1500,
        )

    @pytest.fixture
    def mocked_client(self, stored) -> TestClient:
        service = MagicMock()
        service.get_app_instance_info = AsyncMock(return_value=stored)
        service.get_all_app_instance_info = AsyncMock(return_value=[stored])
        return TestClient(AppoServer(app_instance_info_service=service).api)

    def test_get_one(self, mocked_client, tenant_id, app_instance_id):
        """GET returns 200 with the stored values."""
        response = mocked_client.get(_url(tenant_id, app_instance_id), headers=HEADERS)

        assert response.status_code == 200
        data = response.json()
        assert data["appName"] == ""
        assert len(data["appDescriptor"]) == 2000
        assert len(data["operationInfo"]) == 1500

    def test_get_all(self, mocked_client, tenant_id):
        """GET collection returns 200 with the stored values."""
        response = mocked_client.get(_url(tenant_id), headers=HEADERS)

        assert response.status_code == 200
        assert [d["appName"] for d in response.json()] == [""]


class TestCreateInstanceIdPattern:
    def test_bad_body_instance_id_is_400(self, client, tenant_id, body):
        """A body instance id that fails its pattern is rejected on create."""
        response = client.post(
            _url(tenant_id), json={**body, "appInstanceId": "abc"}, headers=HEADERS
        )

        assert response.status_code == 400
        assert "application instance id" in response.json()["detail"]
        assert client.get(_url(tenant_id), headers=HEADERS).json() == []

    def test_missing_body_instance_id_is_assigned(self, client, tenant_id, body):
        """Without an instance id the service assigns one."""
        del body["appInstanceId"]

        response = client.post(_url(tenant_id), json=body, headers=HEADERS)

        assert response.status_code == 200
        assert response.json()["appInstanceId"]
