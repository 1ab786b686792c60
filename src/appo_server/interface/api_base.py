# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""FastAPI application factory and route registration.

This module builds the REST API around the server's endpoints. Routes
are thin: they read path, header and body parameters and hand them to
the endpoint, which validates and delegates.

Components:
    create_app: FastAPI application factory.
    register_app_instance_info_routes: Mount the instance info routes.
    API_PREFIX: Common URL prefix ("/appo/v1").

Example:
    Create and run the API server::

        from appo_server import AppoServer
        from appo_server.interface import create_app

        server = AppoServer()
        app = create_app(server)

        import uvicorn
        uvicorn.run(app, host="0.0.0.0", port=8000)

Note:
    Every instance info route requires the ``access_token`` header. The
    token is passed through unverified; verification belongs to the
    gateway in front of this service.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from typing import TYPE_CHECKING, Any

from fastapi import APIRouter, FastAPI, Header, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..entities.app_instance_info.models import AppInstanceInfoDto
from ..errors import AppoError

if TYPE_CHECKING:
    from ..appo_base import AppoServer
    from ..entities.app_instance_info.endpoint import AppInstanceInfoEndpoint

logger = logging.getLogger(__name__)

API_PREFIX = "/appo/v1"
ACCESS_TOKEN_HEADER_NAME = "access_token"

_INSTANCE_INFOS_PATH = "/tenants/{tenant_id}/app_instance_infos"
_INSTANCE_INFO_PATH = "/tenants/{tenant_id}/app_instance_infos/{appInstance_id}"


def create_app(
    server: AppoServer,
    lifespan: Callable[[FastAPI], AbstractAsyncContextManager[None]] | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        server: AppoServer instance holding config and endpoints.
        lifespan: Optional lifespan context manager. If None, creates
            default that starts/stops the server.

    Returns:
        Configured FastAPI application with all routes registered.
    """
    if lifespan is None:

        @asynccontextmanager
        async def default_lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
            """Default lifespan: start and stop the AppoServer."""
            logger.info("Starting appo-server service...")
            await server.start()
            logger.info("Appo-server service started")
            try:
                yield
            finally:
                logger.info("Stopping appo-server service...")
                await server.stop()
                logger.info("Appo-server service stopped")

        lifespan = default_lifespan

    app = FastAPI(title="Application Orchestrator", lifespan=lifespan)

    @app.exception_handler(AppoError)
    async def appo_exception_handler(request: Request, exc: AppoError) -> JSONResponse:
        """Render appo errors with the status they carry."""
        logger.warning(f"{request.method} {request.url.path} failed: {exc.message}")
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle FastAPI request validation errors with detailed logging."""
        body = await request.body()
        logger.error(f"Validation error on {request.method} {request.url.path}")
        logger.error(f"Request body: {body.decode('utf-8', errors='replace')}")
        logger.error(f"Validation errors: {exc.errors()}")
        return JSONResponse(status_code=422, content={"detail": jsonable_encoder(exc.errors())})

    @app.get("/health")
    async def health() -> dict:
        """Health check endpoint for container orchestration."""
        return {"status": "ok"}

    router = APIRouter(prefix=API_PREFIX)
    register_app_instance_info_routes(router, server.endpoint("app_instance_infos"))
    app.include_router(router)

    return app


def _render(result: Any) -> JSONResponse:
    """Serialize endpoint results with camelCase names, without re-validation."""
    return JSONResponse(content=jsonable_encoder(result, by_alias=True))


def register_app_instance_info_routes(
    router: FastAPI | APIRouter, endpoint: AppInstanceInfoEndpoint
) -> None:
    """Register the application instance info CRUD routes.

    Responses are rendered directly from the endpoint results. The
    documented response models describe the shape; they are not used to
    validate stored records on the way out.

    Args:
        router: FastAPI app or APIRouter to register routes on.
        endpoint: AppInstanceInfoEndpoint handling the operations.
    """
    one = {200: {"model": AppInstanceInfoDto}}
    many = {200: {"model": list[AppInstanceInfoDto]}}

    @router.get(
        _INSTANCE_INFO_PATH,
        response_model=None,
        responses=one,
        summary="Retrieves application instance info",
    )
    async def get_app_instance_info(
        tenant_id: str,
        appInstance_id: str,
        access_token: str = Header(..., convert_underscores=False, description="access token"),
    ) -> JSONResponse:
        return _render(await endpoint.get(tenant_id, appInstance_id))

    @router.get(
        _INSTANCE_INFOS_PATH,
        response_model=None,
        responses=many,
        summary="Retrieves all application instance infos",
    )
    async def get_all_app_instance_info(
        tenant_id: str,
        access_token: str = Header(..., convert_underscores=False, description="access token"),
    ) -> JSONResponse:
        return _render(await endpoint.list(tenant_id))

    @router.post(
        _INSTANCE_INFOS_PATH,
        response_model=None,
        responses=one,
        summary="Creates application instance info",
    )
    async def create_app_instance_info(
        tenant_id: str,
        body: AppInstanceInfoDto,
        access_token: str = Header(..., convert_underscores=False, description="access token"),
    ) -> JSONResponse:
        return _render(await endpoint.create(tenant_id, body))

    @router.put(
        _INSTANCE_INFO_PATH,
        response_model=None,
        responses=one,
        summary="Updates application instance info",
    )
    async def update_app_instance_info(
        tenant_id: str,
        appInstance_id: str,
        body: AppInstanceInfoDto,
        access_token: str = Header(..., convert_underscores=False, description="access token"),
    ) -> JSONResponse:
        return _render(await endpoint.update(tenant_id, appInstance_id, body))

    @router.delete(
        _INSTANCE_INFO_PATH,
        response_model=None,
        responses={200: {"model": str}},
        summary="Deletes application instance info",
    )
    async def delete_app_instance_info(
        tenant_id: str,
        appInstance_id: str,
        access_token: str = Header(..., convert_underscores=False, description="access token"),
    ) -> JSONResponse:
        return _render(await endpoint.delete(tenant_id, appInstance_id))


__all__ = [
    "ACCESS_TOKEN_HEADER_NAME",
    "API_PREFIX",
    "create_app",
    "register_app_instance_info_routes",
]
