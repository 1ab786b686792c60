# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Application instance info entity: models, service contract and endpoint."""

from .endpoint import AppInstanceInfoEndpoint
from .models import AppInstanceInfo, AppInstanceInfoDto, to_dto, to_entity
from .service import AppInstanceInfoService, InMemoryAppInstanceInfoService

__all__ = [
    "AppInstanceInfo",
    "AppInstanceInfoDto",
    "AppInstanceInfoEndpoint",
    "AppInstanceInfoService",
    "InMemoryAppInstanceInfoService",
    "to_dto",
    "to_entity",
]
