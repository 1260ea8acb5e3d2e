"""
ストレージゾーンに対するファイル操作を行う HTTP クライアント。
"""

from __future__ import annotations

import logging
import time
from types import TracebackType
from typing import Callable, Protocol
from urllib.parse import quote

import httpx

from domain import DirectoryEntry
from domain.value_objects import is_access_token, is_storage_zone_name

from ..metrics.recorder import MetricsRecorder
from .exceptions import InvalidCredentialError, InvalidZoneError, UnexpectedResponseError
from .response_interpreter import interpret_delete, interpret_listing, interpret_read, interpret_write
from .settings import StorageSettings

LOGGER = logging.getLogger("storage_zone_client.storage")

ACCESS_KEY_HEADER = "AccessKey"

ClientFactory = Callable[[StorageSettings, str], httpx.AsyncClient]


class ObjectStorageClient(Protocol):
    """
    ストレージゾーンの基本操作を定義。
    """

    @property
    def zone(self) -> str:
        ...

    async def read_file(self, path: str) -> bytes:
        ...

    async def list_directory(self, path: str) -> list[DirectoryEntry]:
        ...

    async def write_file(self, content: bytes, path: str) -> bool:
        ...

    async def delete(self, path: str) -> bool:
        ...


class StorageClient(ObjectStorageClient):
    """
    1 つのアクセストークンとゾーンに束縛されたストレージ API クライアント。

    各操作はちょうど 1 回の HTTP リクエストを発行し、再試行は行わない。
    httpx の例外（接続失敗・タイムアウト）とキャンセルはそのまま伝播する。
    """

    def __init__(
        self,
        access_key: str,
        zone: str,
        *,
        settings: StorageSettings | None = None,
        strict: bool | None = None,
        client_factory: ClientFactory | None = None,
    ) -> None:
        self._settings = settings or StorageSettings()
        strict_validation = self._settings.strict_validation if strict is None else strict

        if not isinstance(access_key, str) or not access_key.strip():
            raise InvalidCredentialError("アクセストークンが指定されていません。")
        if not isinstance(zone, str) or not zone.strip():
            raise InvalidZoneError("ゾーン名が指定されていません。")

        if strict_validation:
            if not is_access_token(access_key):
                raise InvalidCredentialError("アクセストークンの書式が不正です。")
            if not is_storage_zone_name(zone):
                raise InvalidZoneError(f"ゾーン名の書式が不正です: {zone!r}")

        self._zone = zone
        factory = client_factory or _default_client_factory
        self._client = factory(self._settings, access_key)

    @property
    def zone(self) -> str:
        return self._zone

    @property
    def settings(self) -> StorageSettings:
        return self._settings

    async def read_file(self, path: str) -> bytes:
        """
        ファイルを取得し、応答本文のバイト列をそのまま返す。

        Raises:
            AuthenticationError: 資格情報が拒否された場合。
            NotFoundError: パスが存在しない場合。
            UnexpectedResponseError: 上記以外のステータスの場合。
        """

        _require_path(path)
        response = await self._send("GET", "read", path)
        try:
            return interpret_read(response.status_code, response.content, path=path)
        except UnexpectedResponseError:
            LOGGER.warning("Unexpected status on read: path=%s status=%s", path, response.status_code)
            raise

    async def list_directory(self, path: str) -> list[DirectoryEntry]:
        """
        ディレクトリ直下のオブジェクト一覧を返す（再帰なし）。

        リモートは末尾の '/' の有無でファイルとディレクトリを区別するため、
        欠けている場合は付与してから要求する。

        Raises:
            BadRequestError: リモートがリクエストを拒否した場合。
            AuthenticationError: 資格情報が拒否された場合。
            NotFoundError: パスが存在しない場合。
            InvalidResponseError: 応答本文を復号できない場合。
            UnexpectedResponseError: 上記以外のステータスの場合。
        """

        directory = path if path.endswith("/") else f"{path}/"
        response = await self._send("GET", "list", directory)
        try:
            return interpret_listing(response.status_code, response.content, path=directory)
        except UnexpectedResponseError:
            LOGGER.warning("Unexpected status on list: path=%s status=%s", directory, response.status_code)
            raise

    async def write_file(self, content: bytes, path: str) -> bool:
        """
        ファイルを作成または上書きする。空のペイロードも許容する。

        Returns:
            bool: 201 を受信した場合のみ True。認証失敗以外の失敗は False。
        """

        _require_path(path)
        response = await self._send("PUT", "write", path, content=bytes(content))
        created = interpret_write(response.status_code, response.content, path=path)
        if not created:
            LOGGER.warning("Write was not confirmed: path=%s status=%s", path, response.status_code)
        return created

    async def delete(self, path: str) -> bool:
        """
        ファイルまたはディレクトリを削除する。

        Returns:
            bool: 200 を受信した場合のみ True。認証失敗以外の失敗は False。
        """

        _require_path(path)
        response = await self._send("DELETE", "delete", path)
        deleted = interpret_delete(response.status_code, response.content, path=path)
        if not deleted:
            LOGGER.warning("Delete was not confirmed: path=%s status=%s", path, response.status_code)
        return deleted

    async def aclose(self) -> None:
        """
        生成した HTTP クライアントをクローズする。
        """

        await self._client.aclose()

    async def __aenter__(self) -> "StorageClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        await self.aclose()

    def _resource_path(self, path: str) -> str:
        return quote(f"{self._zone}/{path.lstrip('/')}", safe="/")

    async def _send(self, method: str, operation: str, path: str, *, content: bytes | None = None) -> httpx.Response:
        url = self._resource_path(path)
        start = time.perf_counter()
        try:
            response = await self._client.request(method, url, content=content)
        except httpx.HTTPError:
            MetricsRecorder.observe_storage_request(operation, "error", time.perf_counter() - start)
            raise

        duration = time.perf_counter() - start
        MetricsRecorder.observe_storage_request(operation, str(response.status_code), duration)
        LOGGER.debug("%s %s -> %s (%.3fs)", method, url, response.status_code, duration)
        return response


def _require_path(path: str) -> None:
    if not isinstance(path, str) or not path.strip():
        raise ValueError("path は空でない文字列で指定してください。")


def _default_client_factory(settings: StorageSettings, access_key: str) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        base_url=settings.base_url,
        timeout=settings.timeout_seconds,
        verify=settings.verify_ssl,
        headers={ACCESS_KEY_HEADER: access_key},
    )
