# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Exception types shared by endpoints, services and the API layer.

Each error carries the HTTP status the API layer renders it with.
Endpoints raise InvalidParameterError themselves; NotFoundError and
ConflictError belong to the service collaborator and pass through the
endpoint layer untouched.
"""

from __future__ import annotations

from fastapi import status


class AppoError(Exception):
    """Base class for appo-server errors.

    Attributes:
        status_code: HTTP status used when the error reaches the API layer.
        message: Human-readable description.
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidParameterError(AppoError, ValueError):
    """A path or header parameter failed its pattern check."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(AppoError):
    """The requested record does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(AppoError):
    """The record being created already exists."""

    status_code = status.HTTP_409_CONFLICT


__all__ = ["AppoError", "ConflictError", "InvalidParameterError", "NotFoundError"]
