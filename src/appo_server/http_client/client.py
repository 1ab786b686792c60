# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""HTTP client for the appo-server API.

This module provides AppoClient for programmatic access to appo-server
endpoints, with support for both sync and async contexts.

Features:
    - Auto-detects sync/async context (via @smartasync)
    - Persistent connection registration for REPL use
    - Typed AppInstanceInfo dataclass for responses
    - access_token header on every request

Example:
    Async usage::

        client = AppoClient("http://localhost:8000", token="secret")
        infos = await client.app_instance_infos.list(tenant_id)

    Sync usage (in REPL)::

        client = connect("http://localhost:8000", token="secret")
        info = client.app_instance_infos.get(tenant_id, app_instance_id)

    Registered connection::

        register_connection("edge", "https://appo.edge.example.com", token="...")
        client = connect("edge")
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import httpx
from genro_toolbox import smartasync

ACCESS_TOKEN_HEADER = "access_token"
API_PREFIX = "/appo/v1"

# Connection registry for REPL convenience
_connections: dict[str, dict[str, Any]] = {}


def register_connection(name: str, url: str, token: str | None = None) -> None:
    """Register a named connection for easy reuse.

    Args:
        name: Connection name for later reference.
        url: appo-server base URL.
        token: Optional access token.
    """
    _connections[name] = {"url": url, "token": token}


def connect(url_or_name: str, token: str | None = None) -> AppoClient:
    """Create an AppoClient, optionally using a registered connection.

    Args:
        url_or_name: Either a URL or a registered connection name.
        token: Access token (ignored if using registered connection).

    Returns:
        AppoClient instance.
    """
    if url_or_name in _connections:
        conn = _connections[url_or_name]
        return AppoClient(conn["url"], token=conn["token"])
    return AppoClient(url_or_name, token=token)


@dataclass
class AppInstanceInfo:
    """Application instance info response."""

    app_instance_id: str | None
    app_package_id: str
    app_name: str
    app_id: str
    mec_host: str
    app_descriptor: str | None = None
    applcm_host: str | None = None
    operational_status: str | None = None
    operation_info: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    _WIRE_NAMES = {
        "appInstanceId": "app_instance_id",
        "appPackageId": "app_package_id",
        "appName": "app_name",
        "appId": "app_id",
        "mecHost": "mec_host",
        "appDescriptor": "app_descriptor",
        "applcmHost": "applcm_host",
        "operationalStatus": "operational_status",
        "operationInfo": "operation_info",
    }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AppInstanceInfo:
        """Create AppInstanceInfo from API response dict."""
        extra = {k: v for k, v in data.items() if k not in cls._WIRE_NAMES}
        return cls(
            app_instance_id=data.get("appInstanceId"),
            app_package_id=data["appPackageId"],
            app_name=data["appName"],
            app_id=data["appId"],
            mec_host=data["mecHost"],
            app_descriptor=data.get("appDescriptor"),
            applcm_host=data.get("applcmHost"),
            operational_status=data.get("operationalStatus"),
            operation_info=data.get("operationInfo"),
            extra=extra,
        )

    def to_payload(self) -> dict[str, Any]:
        """Build the request body with wire names, omitting unset fields."""
        return {
            wire: getattr(self, attr)
            for wire, attr in self._WIRE_NAMES.items()
            if getattr(self, attr) is not None
        }


class AppInstanceInfosAPI:
    """Application instance infos endpoint API wrapper."""

    def __init__(self, client: AppoClient):
        self._client = client

    @staticmethod
    def _path(tenant_id: str, app_instance_id: str | None = None) -> str:
        path = f"{API_PREFIX}/tenants/{tenant_id}/app_instance_infos"
        if app_instance_id is not None:
            path = f"{path}/{app_instance_id}"
        return path

    @smartasync
    async def list(self, tenant_id: str) -> list[AppInstanceInfo]:
        """List application instance infos of a tenant."""
        data = await self._client._get(self._path(tenant_id))
        return [AppInstanceInfo.from_dict(d) for d in data]

    @smartasync
    async def get(self, tenant_id: str, app_instance_id: str) -> AppInstanceInfo:
        """Get one application instance info."""
        data = await self._client._get(self._path(tenant_id, app_instance_id))
        return AppInstanceInfo.from_dict(data)

    @smartasync
    async def create(self, tenant_id: str, info: AppInstanceInfo) -> AppInstanceInfo:
        """Create an application instance info."""
        data = await self._client._post(self._path(tenant_id), info.to_payload())
        return AppInstanceInfo.from_dict(data)

    @smartasync
    async def update(
        self, tenant_id: str, app_instance_id: str, info: AppInstanceInfo
    ) -> AppInstanceInfo:
        """Update an application instance info."""
        data = await self._client._put(
            self._path(tenant_id, app_instance_id), info.to_payload()
        )
        return AppInstanceInfo.from_dict(data)

    @smartasync
    async def delete(self, tenant_id: str, app_instance_id: str) -> bool:
        """Delete an application instance info."""
        result = await self._client._delete(self._path(tenant_id, app_instance_id))
        return result == "success"


class AppoClient:
    """HTTP client for appo-server API.

    Attributes:
        app_instance_infos: AppInstanceInfosAPI for instance info records

    Example:
        >>> client = AppoClient("http://localhost:8000", token="secret")
        >>> infos = await client.app_instance_infos.list(tenant_id)
    """

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize client.

        Args:
            base_url: appo-server base URL.
            token: Access token sent in the access_token header.
            transport: Optional httpx transport (e.g. ASGITransport for in-process apps).
        """
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.transport = transport

        # Sub-APIs
        self.app_instance_infos = AppInstanceInfosAPI(self)

    def _headers(self) -> dict[str, str]:
        """Build request headers with optional access token."""
        headers: dict[str, str] = {}
        if self.token:
            headers[ACCESS_TOKEN_HEADER] = self.token
        return headers

    async def _request(self, method: str, path: str, payload: dict[str, Any] | None = None) -> Any:
        """Perform a request and return the decoded JSON body."""
        async with httpx.AsyncClient(transport=self.transport) as http:
            resp = await http.request(
                method,
                f"{self.base_url}{path}",
                json=payload,
                headers=self._headers(),
            )
            resp.raise_for_status()
            return resp.json()

    async def _get(self, path: str) -> Any:
        """Perform GET request."""
        return await self._request("GET", path)

    async def _post(self, path: str, payload: dict[str, Any]) -> Any:
        """Perform POST request."""
        return await self._request("POST", path, payload)

    async def _put(self, path: str, payload: dict[str, Any]) -> Any:
        """Perform PUT request."""
        return await self._request("PUT", path, payload)

    async def _delete(self, path: str) -> Any:
        """Perform DELETE request."""
        return await self._request("DELETE", path)

    @smartasync
    async def health(self) -> dict[str, Any]:
        """Health check (no token needed).

        Returns:
            Dict with 'status': 'ok'.
        """
        async with httpx.AsyncClient(transport=self.transport) as http:
            resp = await http.get(f"{self.base_url}/health")
            resp.raise_for_status()
            return resp.json()


__all__ = [
    "AppInstanceInfo",
    "AppInstanceInfosAPI",
    "AppoClient",
    "connect",
    "register_connection",
]
