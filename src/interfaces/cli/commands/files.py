"""
ストレージゾーンのファイル操作 CLI コマンド。
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Awaitable, Callable, TypeVar

import httpx
import typer

from infrastructure.storage import StorageAPIError, StorageClient, StorageSettings
from runtime import build_storage_client

app = typer.Typer(help="ストレージゾーンのファイル操作コマンド")

T = TypeVar("T")

ACCESS_KEY_OPTION = typer.Option(..., "--access-key", envvar="STORAGE_ACCESS_KEY", help="ストレージゾーンのアクセストークン")
ZONE_OPTION = typer.Option(..., "--zone", envvar="STORAGE_ZONE", help="ストレージゾーン名")
ENV_OPTION = typer.Option("dev", "--env", envvar="SERVICE_ENV", help="SERVICE_ENV")
BASE_URL_OPTION = typer.Option(None, "--base-url", help="storage.base_url を明示的に上書き")


def open_client(access_key: str, zone: str, *, env: str, base_url: str | None) -> StorageClient:
    if base_url is not None:
        return StorageClient(access_key, zone, settings=StorageSettings.from_mapping({"base_url": base_url}))
    return build_storage_client(access_key, zone, environment=env)


@app.command("get")
def get_file(
    path: str = typer.Argument(..., help="ゾーン内のファイルパス"),
    *,
    output: Path | None = typer.Option(None, "--output", "-o", help="保存先ファイル（省略時は標準出力）"),
    access_key: str = ACCESS_KEY_OPTION,
    zone: str = ZONE_OPTION,
    env: str = ENV_OPTION,
    base_url: str | None = BASE_URL_OPTION,
) -> None:
    """
    ファイルをダウンロードする。
    """

    content = _run(access_key, zone, env, base_url, lambda client: client.read_file(path))
    if output is None:
        typer.echo(content, nl=False)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_bytes(content)
    typer.secho(f"{len(content)} bytes written to {output}", fg=typer.colors.GREEN, err=True)


@app.command("ls")
def list_directory(
    path: str = typer.Argument("", help="ゾーン内のディレクトリパス（省略時はルート）"),
    *,
    as_json: bool = typer.Option(False, "--json", help="JSON 形式で出力"),
    access_key: str = ACCESS_KEY_OPTION,
    zone: str = ZONE_OPTION,
    env: str = ENV_OPTION,
    base_url: str | None = BASE_URL_OPTION,
) -> None:
    """
    ディレクトリ直下のオブジェクトを一覧表示する。
    """

    entries = _run(access_key, zone, env, base_url, lambda client: client.list_directory(path))
    if as_json:
        rows = [
            {
                "name": entry.object_name,
                "is_directory": entry.is_directory,
                "length": entry.length,
                "last_changed": entry.last_changed.isoformat() if entry.last_changed else None,
            }
            for entry in entries
        ]
        typer.echo(json.dumps(rows, ensure_ascii=False))
        return
    for entry in entries:
        marker = "d" if entry.is_directory else "-"
        typer.echo(f"{marker} {entry.length:>12} {entry.object_name}")


@app.command("put")
def put_file(
    source: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="アップロードするローカルファイル"),
    path: str = typer.Argument(..., help="ゾーン内の保存先パス"),
    *,
    access_key: str = ACCESS_KEY_OPTION,
    zone: str = ZONE_OPTION,
    env: str = ENV_OPTION,
    base_url: str | None = BASE_URL_OPTION,
) -> None:
    """
    ローカルファイルをアップロードする。
    """

    content = source.read_bytes()
    created = _run(access_key, zone, env, base_url, lambda client: client.write_file(content, path))
    if not created:
        typer.secho(f"アップロードが確認できませんでした: {path}", fg=typer.colors.YELLOW, err=True)
        raise typer.Exit(code=1)
    typer.secho(f"Uploaded {source} -> {zone}/{path}", fg=typer.colors.GREEN)


@app.command("rm")
def remove(
    path: str = typer.Argument(..., help="削除するファイルまたはディレクトリ"),
    *,
    access_key: str = ACCESS_KEY_OPTION,
    zone: str = ZONE_OPTION,
    env: str = ENV_OPTION,
    base_url: str | None = BASE_URL_OPTION,
) -> None:
    """
    ファイルまたはディレクトリを削除する。
    """

    deleted = _run(access_key, zone, env, base_url, lambda client: client.delete(path))
    if not deleted:
        typer.secho(f"削除が確認できませんでした: {path}", fg=typer.colors.YELLOW, err=True)
        raise typer.Exit(code=1)
    typer.secho(f"Deleted {zone}/{path}", fg=typer.colors.GREEN)


def _run(
    access_key: str,
    zone: str,
    env: str,
    base_url: str | None,
    operation: Callable[[StorageClient], Awaitable[T]],
) -> T:
    async def _invoke() -> T:
        async with open_client(access_key, zone, env=env, base_url=base_url) as client:
            return await operation(client)

    try:
        return asyncio.run(_invoke())
    except StorageAPIError as exc:
        typer.secho(f"{type(exc).__name__}: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc
    except httpx.HTTPError as exc:
        typer.secho(f"通信に失敗しました: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=2) from exc
