# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Process-flow task support: execution context contract and task base class."""

from .execution import (
    ERROR_RESPONSE,
    FLOW_EXCEPTION,
    RESPONSE,
    RESPONSE_CODE,
    DelegateExecution,
    VariableBag,
)
from .processflow_task import HTTP_SCHEME, HTTPS_SCHEME, ProcessflowTask

__all__ = [
    "ERROR_RESPONSE",
    "FLOW_EXCEPTION",
    "HTTPS_SCHEME",
    "HTTP_SCHEME",
    "RESPONSE",
    "RESPONSE_CODE",
    "DelegateExecution",
    "ProcessflowTask",
    "VariableBag",
]
