# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Execution context seen by process-flow tasks.

The orchestration engine owns one variable bag per running process
instance. Tasks only need to write into it, so the contract is a single
``set_variable(key, value)`` method. Engine adapters implement
DelegateExecution; VariableBag is a dict-backed implementation for
in-process flows and tests.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any, Protocol, runtime_checkable

# Variable names shared with the process definitions
RESPONSE = "Response"
RESPONSE_CODE = "ResponseCode"
ERROR_RESPONSE = "ErrResponse"
FLOW_EXCEPTION = "ProcessflowException"


@runtime_checkable
class DelegateExecution(Protocol):
    """Per-process-instance variable store provided by the engine."""

    def set_variable(self, key: str, value: Any) -> None: ...


class VariableBag(Mapping[str, Any]):
    """Dict-backed DelegateExecution.

    Reads go through the Mapping interface; writes only through
    set_variable(), the same way tasks write into an engine context.

    Example:
        ::

            bag = VariableBag(processInstanceId="42")
            task.execute(bag)
            bag["ResponseCode"]
    """

    def __init__(self, **variables: Any):
        self._variables: dict[str, Any] = dict(variables)

    def set_variable(self, key: str, value: Any) -> None:
        self._variables[key] = value

    def __getitem__(self, key: str) -> Any:
        return self._variables[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._variables)

    def __len__(self) -> int:
        return len(self._variables)

    def __repr__(self) -> str:
        return f"VariableBag({self._variables!r})"


__all__ = [
    "ERROR_RESPONSE",
    "FLOW_EXCEPTION",
    "RESPONSE",
    "RESPONSE_CODE",
    "DelegateExecution",
    "VariableBag",
]
