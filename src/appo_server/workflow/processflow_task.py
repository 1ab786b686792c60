# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Base class for process-flow (BPMN service) tasks.

ProcessflowTask gives every orchestration task the same way of reporting
its outcome back to the engine: a response payload (or error payload, or
exception payload) plus a response code, written as execution variables
the process definition branches on.

Example:
    ::

        class QueryHealthTask(ProcessflowTask):
            def execute(self, execution: DelegateExecution) -> None:
                url = self.get_protocol(self.ssl_enabled) + host + "/health"
                try:
                    body, code = call(url)
                except OSError as e:
                    self.set_processflow_exception_response_attributes(execution, str(e), "500")
                    return
                self.set_processflow_response_attributes(execution, body, code)

        task = QueryHealthTask.from_config(appo_config_from_env())
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from .execution import (
    ERROR_RESPONSE,
    FLOW_EXCEPTION,
    RESPONSE,
    RESPONSE_CODE,
    DelegateExecution,
)

if TYPE_CHECKING:
    from ..appo_config import AppoConfig

logger = logging.getLogger(__name__)

HTTPS_SCHEME = "https://"
HTTP_SCHEME = "http://"


class ProcessflowTask(ABC):
    """Abstract orchestration task with response-recording helpers.

    Attributes:
        ssl_enabled: Whether get_protocol() defaults to https.
    """

    def __init__(self, ssl_enabled: bool = False):
        self.ssl_enabled = ssl_enabled

    @classmethod
    def from_config(cls, config: AppoConfig, **kwargs: Any) -> ProcessflowTask:
        """Build a task using the server-wide ssl_enabled setting.

        Extra keyword arguments go to the subclass constructor.
        """
        return cls(ssl_enabled=config.ssl_enabled, **kwargs)

    @abstractmethod
    def execute(self, execution: DelegateExecution) -> None:
        """Run the task against the engine's execution context."""

    def get_protocol(self, ssl_enabled: bool | str) -> str:
        """Return the URL scheme prefix for outbound calls.

        Args:
            ssl_enabled: True, or the exact string "true", selects https.
                Every other value, including "True" and "1", selects http.

        Returns:
            "https://" or "http://".
        """
        if ssl_enabled is True or ssl_enabled == "true":
            return HTTPS_SCHEME
        return HTTP_SCHEME

    def set_processflow_response_attributes(
        self, execution: DelegateExecution, response: str | None, response_code: str
    ) -> None:
        """Record a successful outcome.

        Args:
            execution: Engine execution context.
            response: Response payload.
            response_code: Response code, must not be None.

        Raises:
            ValueError: If response_code is None. Nothing is written.
        """
        _require_response_code(response_code)
        execution.set_variable(RESPONSE, response)
        execution.set_variable(RESPONSE_CODE, response_code)

    def set_processflow_error_response_attributes(
        self, execution: DelegateExecution, response: str | None, response_code: str
    ) -> None:
        """Record an error outcome under ErrResponse."""
        _require_response_code(response_code)
        execution.set_variable(ERROR_RESPONSE, response)
        execution.set_variable(RESPONSE_CODE, response_code)

    def set_processflow_exception_response_attributes(
        self, execution: DelegateExecution, response: str | None, response_code: str
    ) -> None:
        """Record an exception outcome under ProcessflowException."""
        _require_response_code(response_code)
        execution.set_variable(RESPONSE_CODE, response_code)
        execution.set_variable(FLOW_EXCEPTION, response)


def _require_response_code(response_code: str | None) -> None:
    if response_code is None:
        logger.error("Process flow response code is missing")
        raise ValueError("response_code must not be None")


__all__ = ["HTTPS_SCHEME", "HTTP_SCHEME", "ProcessflowTask"]
