# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""appo-server entity modules.

This package contains the entities exposed by the server:
    - app_instance_info: Tenant-scoped application instance records
"""

from .app_instance_info import (
    AppInstanceInfo,
    AppInstanceInfoDto,
    AppInstanceInfoEndpoint,
    AppInstanceInfoService,
    InMemoryAppInstanceInfoService,
)

__all__ = [
    "AppInstanceInfo",
    "AppInstanceInfoDto",
    "AppInstanceInfoEndpoint",
    "AppInstanceInfoService",
    "InMemoryAppInstanceInfoService",
]
