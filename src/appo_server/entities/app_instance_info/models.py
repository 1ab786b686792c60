# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Application instance info entity and transport shapes.

AppInstanceInfo is the entity exchanged with the service collaborator.
AppInstanceInfoDto is the JSON transport shape used at the HTTP boundary.
Both carry the same fields; to_entity() and to_dto() copy them one by one.
Only inbound bodies are validated against the field constraints.

Wire format uses camelCase names::

    {
        "appInstanceId": "5abe4782-2c70-4e47-9a4e-0ee3a1a0fd1f",
        "appPackageId": "f20358433cf8eb4719a62a49ed118c9b",
        "appName": "face_recognition",
        "appId": "f20358433cf8eb4719a62a49ed118c9b",
        "mecHost": "192.168.1.10"
    }
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

_ID_MAX_LENGTH = 64
_NAME_MAX_LENGTH = 128
_TEXT_MAX_LENGTH = 1024


@dataclass
class AppInstanceInfo:
    """Application instance record as stored by the service collaborator."""

    app_package_id: str
    app_name: str
    app_id: str
    mec_host: str
    app_instance_id: str | None = None
    app_descriptor: str | None = None
    applcm_host: str | None = None
    operational_status: str | None = None
    operation_info: str | None = None


class AppInstanceInfoDto(BaseModel):
    """Application instance info as sent and received over HTTP.

    Accepts both camelCase wire names and snake_case field names.
    Serialize with ``model_dump(by_alias=True)`` to get the wire format.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    app_package_id: str = Field(min_length=1, max_length=_ID_MAX_LENGTH)
    app_name: str = Field(min_length=1, max_length=_NAME_MAX_LENGTH)
    app_id: str = Field(min_length=1, max_length=_ID_MAX_LENGTH)
    mec_host: str = Field(min_length=1, max_length=_NAME_MAX_LENGTH)
    app_instance_id: str | None = Field(default=None, max_length=_ID_MAX_LENGTH)
    app_descriptor: str | None = Field(default=None, max_length=_TEXT_MAX_LENGTH)
    applcm_host: str | None = Field(default=None, max_length=_NAME_MAX_LENGTH)
    operational_status: str | None = Field(default=None, max_length=_TEXT_MAX_LENGTH)
    operation_info: str | None = Field(default=None, max_length=_TEXT_MAX_LENGTH)


def to_entity(dto: AppInstanceInfoDto) -> AppInstanceInfo:
    """Convert a transport shape to an entity."""
    return AppInstanceInfo(
        app_package_id=dto.app_package_id,
        app_name=dto.app_name,
        app_id=dto.app_id,
        mec_host=dto.mec_host,
        app_instance_id=dto.app_instance_id,
        app_descriptor=dto.app_descriptor,
        applcm_host=dto.applcm_host,
        operational_status=dto.operational_status,
        operation_info=dto.operation_info,
    )


def to_dto(entity: AppInstanceInfo) -> AppInstanceInfoDto:
    """Convert an entity to its transport shape.

    Field constraints apply to request bodies only; records coming back
    from the service are copied as they are.
    """
    return AppInstanceInfoDto.model_construct(
        app_package_id=entity.app_package_id,
        app_name=entity.app_name,
        app_id=entity.app_id,
        mec_host=entity.mec_host,
        app_instance_id=entity.app_instance_id,
        app_descriptor=entity.app_descriptor,
        applcm_host=entity.applcm_host,
        operational_status=entity.operational_status,
        operation_info=entity.operation_info,
    )


__all__ = ["AppInstanceInfo", "AppInstanceInfoDto", "to_dto", "to_entity"]
