# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""HTTP client for connecting to appo-server instances.

Example:
    >>> from appo_server.http_client import AppoClient, connect
    >>> client = AppoClient("http://localhost:8000", token="secret")
    >>> client.health()
    {'status': 'ok'}
"""

from .client import AppInstanceInfo, AppoClient, connect, register_connection
from .service import HttpAppInstanceInfoService

__all__ = [
    "AppInstanceInfo",
    "AppoClient",
    "HttpAppInstanceInfoService",
    "connect",
    "register_connection",
]
