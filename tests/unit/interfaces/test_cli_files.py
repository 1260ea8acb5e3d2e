from __future__ import annotations

import json
from pathlib import Path

import httpx
import pytest
from typer.testing import CliRunner

from infrastructure.storage import ACCESS_KEY_HEADER, StorageClient, StorageSettings
from interfaces.cli.app import create_cli
from interfaces.cli.commands import files

runner = CliRunner()

ACCESS_KEY = "a1b2c3d4-e5f6-a1b2-c3d4e5f6a1b2-c3d4-e5f6"
CREDENTIALS = ["--access-key", ACCESS_KEY, "--zone", "my-zone"]


@pytest.fixture()
def sent_requests(monkeypatch: pytest.MonkeyPatch) -> list[httpx.Request]:
    captured: list[httpx.Request] = []
    responses: dict[tuple[str, str], httpx.Response] = {
        ("GET", "/my-zone/docs/hello.txt"): httpx.Response(200, content=b"hello"),
        ("GET", "/my-zone/docs/"): httpx.Response(
            200,
            json=[
                {"ObjectName": "hello.txt", "Length": 5, "IsDirectory": False, "LastChanged": "2024-05-01T10:00:00"},
                {"ObjectName": "nested", "Length": 0, "IsDirectory": True},
            ],
        ),
        ("GET", "/my-zone/missing.txt"): httpx.Response(404),
        ("PUT", "/my-zone/docs/upload.txt"): httpx.Response(201),
        ("DELETE", "/my-zone/docs/hello.txt"): httpx.Response(200),
        ("DELETE", "/my-zone/docs/gone.txt"): httpx.Response(404),
    }

    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        return responses.get((request.method, request.url.path), httpx.Response(500))

    transport = httpx.MockTransport(handler)

    def open_client(access_key: str, zone: str, *, env: str, base_url: str | None) -> StorageClient:
        return StorageClient(
            access_key,
            zone,
            settings=StorageSettings(base_url="https://storage.example/"),
            client_factory=lambda cfg, key: httpx.AsyncClient(
                base_url=cfg.base_url,
                headers={ACCESS_KEY_HEADER: key},
                transport=transport,
            ),
        )

    monkeypatch.setattr(files, "open_client", open_client)
    return captured


def test_get_writes_output_file(tmp_path: Path, sent_requests: list[httpx.Request]) -> None:
    target = tmp_path / "out" / "hello.txt"

    result = runner.invoke(create_cli(), ["files", "get", "docs/hello.txt", "--output", str(target), *CREDENTIALS])

    assert result.exit_code == 0, result.output
    assert target.read_bytes() == b"hello"
    assert sent_requests[0].headers[ACCESS_KEY_HEADER] == ACCESS_KEY


def test_get_missing_file_exits_with_error(sent_requests: list[httpx.Request]) -> None:
    result = runner.invoke(create_cli(), ["files", "get", "missing.txt", *CREDENTIALS])

    assert result.exit_code == 1
    assert "NotFoundError" in result.output


def test_ls_outputs_json(sent_requests: list[httpx.Request]) -> None:
    result = runner.invoke(create_cli(), ["files", "ls", "docs", "--json", *CREDENTIALS])

    assert result.exit_code == 0, result.output
    rows = json.loads(result.stdout)
    assert [row["name"] for row in rows] == ["hello.txt", "nested"]
    assert rows[1]["is_directory"] is True
    assert sent_requests[0].url.path == "/my-zone/docs/"


def test_put_and_rm(tmp_path: Path, sent_requests: list[httpx.Request]) -> None:
    source = tmp_path / "upload.txt"
    source.write_bytes(b"payload")

    put_result = runner.invoke(create_cli(), ["files", "put", str(source), "docs/upload.txt", *CREDENTIALS])
    rm_result = runner.invoke(create_cli(), ["files", "rm", "docs/hello.txt", *CREDENTIALS])
    soft_fail = runner.invoke(create_cli(), ["files", "rm", "docs/gone.txt", *CREDENTIALS])

    assert put_result.exit_code == 0, put_result.output
    assert sent_requests[0].content == b"payload"
    assert rm_result.exit_code == 0, rm_result.output
    assert soft_fail.exit_code == 1


def test_credentials_from_environment(sent_requests: list[httpx.Request]) -> None:
    result = runner.invoke(
        create_cli(),
        ["files", "get", "docs/hello.txt"],
        env={"STORAGE_ACCESS_KEY": ACCESS_KEY, "STORAGE_ZONE": "my-zone"},
    )

    assert result.exit_code == 0, result.output
    assert result.stdout_bytes == b"hello"


def test_blank_zone_is_reported(sent_requests: list[httpx.Request]) -> None:
    result = runner.invoke(create_cli(), ["files", "get", "docs/hello.txt", "--access-key", ACCESS_KEY, "--zone", " "])

    assert result.exit_code != 0
    assert sent_requests == []


def test_diagnostics_validate() -> None:
    ok = runner.invoke(create_cli(), ["diagnostics", "validate", *CREDENTIALS])
    bad = runner.invoke(create_cli(), ["diagnostics", "validate", "--access-key", "nope", "--zone", "my_zone"])

    assert ok.exit_code == 0, ok.output
    assert "access_key: storage" in ok.output
    assert bad.exit_code == 1
    assert "access_key: invalid" in bad.output


def test_diagnostics_offers_only_offline_validation() -> None:
    result = runner.invoke(create_cli(), ["diagnostics", "ping"])

    assert result.exit_code != 0
    assert "validate" in runner.invoke(create_cli(), ["diagnostics", "--help"]).output
