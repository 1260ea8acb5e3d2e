"""
ストレージ API 応答本文の Pydantic スキーマ定義。
"""

from __future__ import annotations

from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, TypeAdapter

from domain import DirectoryEntry, ErrorPayload


class DirectoryEntrySchema(BaseModel):
    """一覧取得 API の 1 要素。未知のキーは無視する。"""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    object_name: str = Field(alias="ObjectName")
    path: str = Field(default="", alias="Path")
    is_directory: bool = Field(default=False, alias="IsDirectory")
    length: int = Field(default=0, alias="Length")
    last_changed: datetime | None = Field(default=None, alias="LastChanged")
    date_created: datetime | None = Field(default=None, alias="DateCreated")
    guid: str | None = Field(default=None, alias="Guid")
    storage_zone_name: str | None = Field(default=None, alias="StorageZoneName")
    storage_zone_id: int | None = Field(default=None, alias="StorageZoneId")
    server_id: int | None = Field(default=None, alias="ServerId")
    user_id: str | None = Field(default=None, alias="UserId")
    checksum: str | None = Field(default=None, alias="Checksum")
    content_type: str | None = Field(default=None, alias="ContentType")
    replicated_zones: str | None = Field(default=None, alias="ReplicatedZones")

    def to_domain(self) -> DirectoryEntry:
        return DirectoryEntry(**self.model_dump())


class ErrorPayloadSchema(BaseModel):
    model_config = ConfigDict(extra="ignore")

    message: str | None = Field(default=None, validation_alias=AliasChoices("Message", "message"))
    http_code: int | None = Field(default=None, validation_alias=AliasChoices("HttpCode", "httpCode", "http_code"))

    def to_domain(self) -> ErrorPayload:
        return ErrorPayload(message=self.message, http_code=self.http_code)


DIRECTORY_LISTING_ADAPTER: TypeAdapter[list[DirectoryEntrySchema]] = TypeAdapter(list[DirectoryEntrySchema])
