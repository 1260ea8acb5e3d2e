from __future__ import annotations

import json
from datetime import datetime, timezone

import httpx
import pytest

from infrastructure.storage import (
    ACCESS_KEY_HEADER,
    AuthenticationError,
    NotFoundError,
    StorageClient,
    StorageSettings,
)

ACCESS_KEY = "a1b2c3d4-e5f6-a1b2-c3d4e5f6a1b2-c3d4-e5f6"
ZONE = "assets"


class InMemoryStorageZone:
    """ストレージ API の振る舞いを模したインメモリ実装。"""

    def __init__(self, zone: str, access_key: str) -> None:
        self._zone = zone
        self._access_key = access_key
        self.objects: dict[str, bytes] = {}

    def __call__(self, request: httpx.Request) -> httpx.Response:
        if request.headers.get(ACCESS_KEY_HEADER) != self._access_key:
            return httpx.Response(401)

        prefix = f"/{self._zone}/"
        if not request.url.path.startswith(prefix):
            return httpx.Response(401)
        key = request.url.path[len(prefix):]

        if request.method == "PUT":
            self.objects[key] = request.content
            return httpx.Response(201)
        if request.method == "DELETE":
            matched = [name for name in self.objects if name == key or name.startswith(key.rstrip("/") + "/")]
            if not matched:
                return httpx.Response(404)
            for name in matched:
                del self.objects[name]
            return httpx.Response(200)
        if key == "" or key.endswith("/"):
            return self._listing(key)
        if key not in self.objects:
            return httpx.Response(404)
        return httpx.Response(200, content=self.objects[key])

    def _listing(self, directory: str) -> httpx.Response:
        children: dict[str, dict[str, object]] = {}
        for name, content in self.objects.items():
            if not name.startswith(directory):
                continue
            head, _, rest = name[len(directory):].partition("/")
            children[head] = {
                "ObjectName": head,
                "Path": f"/{self._zone}/{directory}",
                "IsDirectory": bool(rest),
                "Length": 0 if rest else len(content),
                "LastChanged": datetime(2024, 5, 1, tzinfo=timezone.utc).isoformat(),
                "StorageZoneName": self._zone,
            }
        if directory and not children:
            return httpx.Response(404)
        return httpx.Response(200, content=json.dumps(list(children.values())).encode())


def _client(zone: InMemoryStorageZone, access_key: str = ACCESS_KEY) -> StorageClient:
    transport = httpx.MockTransport(zone)
    return StorageClient(
        access_key,
        ZONE,
        settings=StorageSettings(base_url="https://storage.example/"),
        client_factory=lambda cfg, key: httpx.AsyncClient(
            base_url=cfg.base_url,
            headers={ACCESS_KEY_HEADER: key},
            transport=transport,
        ),
    )


@pytest.mark.anyio
async def test_write_list_read_delete_cycle() -> None:
    zone = InMemoryStorageZone(ZONE, ACCESS_KEY)

    async with _client(zone) as client:
        assert await client.write_file(b"<svg/>", "images/logo.svg")
        assert await client.write_file(b"", "images/thumbs/empty.png")

        entries = await client.list_directory("images")
        assert sorted((entry.object_name, entry.is_directory) for entry in entries) == [
            ("logo.svg", False),
            ("thumbs", True),
        ]

        assert await client.read_file("images/logo.svg") == b"<svg/>"
        assert await client.read_file("images/thumbs/empty.png") == b""

        assert await client.delete("images/thumbs/")
        assert await client.delete("images/thumbs/") is False

        with pytest.raises(NotFoundError):
            await client.read_file("images/thumbs/empty.png")

        root = await client.list_directory("")
        assert [entry.object_name for entry in root] == ["images"]


@pytest.mark.anyio
async def test_wrong_access_key_is_rejected_for_every_operation() -> None:
    zone = InMemoryStorageZone(ZONE, ACCESS_KEY)
    zone.objects["a.txt"] = b"a"

    async with _client(zone, access_key="f" * 8 + "-ffff-ffff-ffffffffffff-ffff-ffff") as client:
        with pytest.raises(AuthenticationError):
            await client.read_file("a.txt")
        with pytest.raises(AuthenticationError):
            await client.list_directory("")
        with pytest.raises(AuthenticationError):
            await client.write_file(b"b", "b.txt")
        with pytest.raises(AuthenticationError):
            await client.delete("a.txt")

    assert zone.objects == {"a.txt": b"a"}
